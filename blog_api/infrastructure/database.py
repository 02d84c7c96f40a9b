"""Database Session Manager: async connection pool with automatic rollback and health checks.

Invariants:
    - At most one DatabaseSessionManager per process (init_db is idempotent)
    - Every session auto-rolls-back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to DatabaseError (core/errors.py)

Design Decisions:
    - Singleton db_manager initialized on startup by the lifespan, or lazily by
      get_db_manager() on first use when the lifespan did not run
    - expire_on_commit=False: prevents lazy-load issues in async context
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, NoReturn

from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy import event, text
from sqlalchemy.engine import Engine

from blog_api.config import get_settings
from blog_api.core.errors import DatabaseError
from blog_api.db.base import Base

logger = logging.getLogger(__name__)


def enable_sqlite_foreign_keys(engine: Engine) -> None:
    """SQLite ships with FK enforcement off; turn it on for every new connection."""

    @event.listens_for(engine, "connect")
    def _set_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


def raise_database_error(exc: SQLAlchemyError) -> NoReturn:
    """Translate a SQLAlchemy exception into DatabaseError."""
    if isinstance(exc, IntegrityError):
        logger.error(f"DB integrity error: {exc}")
        raise DatabaseError("Integrity constraint violated", "commit") from exc
    if isinstance(exc, OperationalError):
        logger.error(f"DB operational error: {exc}")
        raise DatabaseError("Connection or operational error", "execute") from exc
    if isinstance(exc, DBAPIError):
        logger.error(f"DB driver error: {exc}")
        raise DatabaseError("Database driver error", "query") from exc
    logger.error(f"SQLAlchemy error: {exc}")
    raise DatabaseError("Database operation failed", "unknown") from exc


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size,
                max_overflow=max_overflow,
                pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        if database_url.startswith("sqlite"):
            enable_sqlite_foreign_keys(self.engine.sync_engine)
        self._session_factory = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except SQLAlchemyError as e:
            await session.rollback()
            raise_database_error(e)
        finally:
            await session.close()

    async def create_tables(self) -> None:
        """Create any missing tables from the ORM metadata."""
        import blog_api.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        """Check database connectivity (for readiness probes)."""
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
            return True
        except Exception as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()


# Singleton (initialized on startup or on first use)
db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    """Construct the process-wide manager once; later calls return it unchanged."""
    global db_manager
    if db_manager is None:
        db_manager = DatabaseSessionManager(database_url, **kwargs)
        logger.info("Database handle initialized")
    return db_manager


def get_db_manager() -> DatabaseSessionManager:
    """Return the process-wide manager, initializing it from settings if needed."""
    if db_manager is not None:
        return db_manager
    settings = get_settings()
    return init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )


async def close_db() -> None:
    """Dispose the engine and forget the handle."""
    global db_manager
    if db_manager is not None:
        await db_manager.dispose()
        db_manager = None


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions."""
    async with get_db_manager().session() as session:
        yield session
