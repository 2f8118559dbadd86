"""CRUD operations for the key-value cache."""

from sqlalchemy import delete, select
from sqlalchemy.dialects.sqlite import insert
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import func

from loteria.db.models.cache_entry import CacheEntry


async def get_value(session: AsyncSession, key: str) -> str | None:
    result = await session.execute(
        select(CacheEntry.value).where(CacheEntry.key == key)
    )
    return result.scalar_one_or_none()


async def set_value(session: AsyncSession, key: str, value: str) -> None:
    """Insert the value, replacing any previous one under the same key."""
    stmt = insert(CacheEntry).values(key=key, value=value)
    stmt = stmt.on_conflict_do_update(
        index_elements=["key"],
        set_={"value": stmt.excluded["value"], "updated_at": func.now()},
    )
    await session.execute(stmt)


async def delete_value(session: AsyncSession, key: str) -> bool:
    """Remove a key. Returns True if something was deleted."""
    result = await session.execute(delete(CacheEntry).where(CacheEntry.key == key))
    return result.rowcount > 0
