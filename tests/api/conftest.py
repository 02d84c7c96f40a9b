"""API test fixtures: async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use the test DB
    - db_manager patched so readiness probes use the test engine

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
    - broken_client shares the app but points at a database with no tables,
      so every query fails inside SQLAlchemy like a real outage would
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

import blog_api.models  # noqa: F401
from blog_api.db.base import Base
from blog_api.infrastructure.database import (
    get_db, DatabaseSessionManager, enable_sqlite_foreign_keys,
)
import blog_api.infrastructure.database as db_module
from blog_api.main import app
from blog_api.models.comment import Comment
from blog_api.models.post import Post
from blog_api.models.user import User


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    enable_sqlite_foreign_keys(engine.sync_engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


async def _client_for(engine, session_factory):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = engine
    fake_manager._session_factory = session_factory
    db_module.db_manager = fake_manager

    try:
        async with AsyncClient(
            transport=ASGITransport(app=app), base_url="http://test",
        ) as c:
            yield c
    finally:
        app.dependency_overrides.clear()
        db_module.db_manager = original_manager


@pytest.fixture
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async for c in _client_for(test_engine, test_session_factory):
        yield c


@pytest.fixture
async def broken_client():
    """Client whose database has no tables: every query raises."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    enable_sqlite_foreign_keys(engine.sync_engine)
    factory = async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False,
    )
    async for c in _client_for(engine, factory):
        yield c
    await engine.dispose()


@pytest.fixture
async def seed_user(test_db):
    user = User(name="Ada Lovelace", email="ada@example.com")
    test_db.add(user)
    await test_db.commit()
    await test_db.refresh(user)
    return user


@pytest.fixture
async def seed_post(test_db, seed_user):
    post = Post(
        title="First post",
        teaser="A short teaser",
        content="<p>Body</p>",
        creation_date="2022-08-08T19:48:07.653Z",
        author_id=seed_user.id,
    )
    test_db.add(post)
    await test_db.commit()
    await test_db.refresh(post)
    return post


@pytest.fixture
async def seed_comment(test_db, seed_user, seed_post):
    comment = Comment(
        title="Nice",
        content="Great read",
        author_id=seed_user.id,
        post_id=seed_post.id,
    )
    test_db.add(comment)
    await test_db.commit()
    await test_db.refresh(comment)
    return comment
