"""Infrastructure fixtures: in-memory SQLite session for repository tests."""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

import blog_api.infrastructure.database as db_module
from blog_api.infrastructure.database import enable_sqlite_foreign_keys
import blog_api.models  # noqa: F401
from blog_api.db.base import Base
from blog_api.models.user import User


@pytest.fixture
async def db():
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    enable_sqlite_foreign_keys(engine.sync_engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
async def empty_db():
    """Session on a database with no tables."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    enable_sqlite_foreign_keys(engine.sync_engine)
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    async with factory() as session:
        yield session
    await engine.dispose()


@pytest.fixture
async def author(db):
    user = User(name="Grace Hopper", email="grace@example.com")
    db.add(user)
    await db.commit()
    return user


@pytest.fixture
def fresh_db_handle(monkeypatch):
    """Start with no process-wide database handle and restore afterwards."""
    monkeypatch.setattr(db_module, "db_manager", None)
    yield
