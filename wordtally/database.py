"""Database configuration and session management."""

from typing import Any

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy.pool import NullPool

from wordtally.config import settings


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


# Created on first use so importing the package never needs DATABASE_URL
_engine: AsyncEngine | None = None
_session_factory: async_sessionmaker[AsyncSession] | None = None


SQLITE_BUSY_TIMEOUT_MS = 30_000


def _set_sqlite_pragma(dbapi_connection: Any, connection_record: Any) -> None:
    """Wait for concurrent writers instead of failing with 'database is locked'."""
    # Let SQLAlchemy emit BEGIN itself; the driver would otherwise defer it
    dbapi_connection.isolation_level = None
    cursor = dbapi_connection.cursor()
    cursor.execute(f"PRAGMA busy_timeout={SQLITE_BUSY_TIMEOUT_MS}")
    cursor.close()


def _begin_immediate(conn: Any) -> None:
    """Take the write lock when a transaction starts.

    A deferred transaction that upgrades from read to write while another
    connection holds the lock fails at once, without honoring busy_timeout.
    """
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def create_engine(url: str) -> AsyncEngine:
    """Create an async engine, adding SQLite connection tweaks where needed."""
    # NullPool opens fresh connections per session, so the CLI can run each
    # command in its own event loop
    engine = create_async_engine(url, echo=False, poolclass=NullPool)
    if engine.dialect.name == "sqlite":
        # Use sync_engine to properly intercept aiosqlite connections
        event.listen(engine.sync_engine, "connect", _set_sqlite_pragma)
        event.listen(engine.sync_engine, "begin", _begin_immediate)
    return engine


def get_engine() -> AsyncEngine:
    """Get or create the application engine."""
    global _engine
    if _engine is None:
        _engine = create_engine(settings.resolved_database_url)
    return _engine


def async_session() -> AsyncSession:
    """Open a new session bound to the application engine."""
    global _session_factory
    if _session_factory is None:
        _session_factory = async_sessionmaker(
            get_engine(),
            class_=AsyncSession,
            expire_on_commit=False,
        )
    return _session_factory()


async def init_db() -> None:
    """Initialize database tables."""
    # Register models on Base.metadata
    import wordtally.models  # noqa: F401

    async with get_engine().begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def dispose_engine() -> None:
    """Close all pooled connections."""
    global _engine, _session_factory
    if _engine is not None:
        await _engine.dispose()
    _engine = None
    _session_factory = None

