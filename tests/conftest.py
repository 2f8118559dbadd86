"""Shared pytest fixtures for loteria tests."""

import asyncio

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from loteria.db.engine import init_db


@pytest.fixture
def db_engine(tmp_path):
    """Async SQLite engine on a temporary file with tables created."""
    engine = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        poolclass=NullPool,
    )
    asyncio.run(init_db(engine))
    yield engine
    asyncio.run(engine.dispose())


@pytest.fixture
def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
def client(session_factory):
    """TestClient whose requests use the temporary database."""
    from loteria.api.deps import get_db
    from loteria.main import app

    async def override_get_db():
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def games_yaml() -> str:
    return (
        "- [1, 2, 3, 4, 5, 6]\n"
        "- [7, 8, 9, 10, 11, 12]\n"
        "- [1, 2, 3, 4, 50, 51, 52]\n"
    )
