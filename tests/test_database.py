"""Tests for database configuration."""

from unittest.mock import patch

import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from wordtally import database
from wordtally.database import SQLITE_BUSY_TIMEOUT_MS, Base


class TestDatabase:
    """Tests for database module."""

    @pytest.mark.asyncio
    async def test_tables_created(self, async_engine):
        """Should create the words table with its indexes."""
        async with async_engine.connect() as conn:
            tables = [
                row[0]
                for row in await conn.execute(
                    text("SELECT name FROM sqlite_master WHERE type='table'")
                )
            ]
            indexes = [
                row[0]
                for row in await conn.execute(
                    text("SELECT name FROM sqlite_master WHERE type='index'")
                )
            ]

        assert "words" in tables
        assert "idx_words_frequency" in indexes
        assert "idx_words_last_fetched_at" in indexes

    @pytest.mark.asyncio
    async def test_session_yields_async_session(self, async_session):
        """Should yield an AsyncSession."""
        assert isinstance(async_session, AsyncSession)

    @pytest.mark.asyncio
    async def test_sqlite_busy_timeout_set(self, async_engine):
        """Should make SQLite connections wait for concurrent writers."""
        async with async_engine.connect() as conn:
            result = await conn.execute(text("PRAGMA busy_timeout"))
            assert result.scalar() == SQLITE_BUSY_TIMEOUT_MS


class TestLazyEngine:
    """Tests for engine creation on first use."""

    @pytest.mark.asyncio
    async def test_init_db_uses_settings_url(self, tmp_path):
        """Should build the engine from settings and create tables."""
        url = f"sqlite+aiosqlite:///{tmp_path / 'app.db'}"
        with patch.object(database.settings, "database_url", url):
            await database.dispose_engine()
            try:
                await database.init_db()
                async with database.async_session() as session:
                    result = await session.execute(text("SELECT count(*) FROM words"))
                    assert result.scalar() == 0
            finally:
                await database.dispose_engine()

        assert (tmp_path / "app.db").exists()

    @pytest.mark.asyncio
    async def test_dispose_resets_engine(self, tmp_path):
        """Should drop the cached engine so the next call builds a new one."""
        url = f"sqlite+aiosqlite:///{tmp_path / 'app.db'}"
        with patch.object(database.settings, "database_url", url):
            first = database.get_engine()
            await database.dispose_engine()
            second = database.get_engine()
            await database.dispose_engine()

        assert first is not second


class TestBase:
    """Tests for Base class."""

    def test_base_is_declarative(self):
        """Should be a valid SQLAlchemy DeclarativeBase."""
        from sqlalchemy.orm import DeclarativeBase

        assert issubclass(Base, DeclarativeBase)
