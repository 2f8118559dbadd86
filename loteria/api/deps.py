"""Dependency injection for FastAPI."""

from collections.abc import AsyncGenerator

from fastapi import HTTPException, UploadFile
from sqlalchemy.ext.asyncio import AsyncSession

from loteria.config import settings
from loteria.db.engine import async_session_factory


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """Yield an async database session for request scope."""
    async with async_session_factory() as session:
        try:
            yield session
            await session.commit()
        except Exception:
            await session.rollback()
            raise


async def read_upload_text(file: UploadFile) -> str:
    """Read an uploaded games file as UTF-8 text, enforcing the size limit."""
    content = await file.read(settings.MAX_UPLOAD_BYTES + 1)
    if len(content) > settings.MAX_UPLOAD_BYTES:
        raise HTTPException(
            status_code=413,
            detail=f"File too large. Max: {settings.MAX_UPLOAD_BYTES} bytes",
        )
    try:
        return content.decode("utf-8-sig")
    except UnicodeDecodeError:
        raise HTTPException(status_code=400, detail="File must be UTF-8 text")
