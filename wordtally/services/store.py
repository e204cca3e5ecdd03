"""Persistence of word counts and cached dictionary details."""

import logging
from collections.abc import Callable
from typing import Any

from sqlalchemy import Insert, func, select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from wordtally.database import async_session
from wordtally.errors import StoreError, WordNotFoundError
from wordtally.models import Word, new_word_id, utc_now

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AsyncSession]


def _upsert_insert(dialect_name: str) -> Callable[..., Insert]:
    """Return the INSERT construct that supports ON CONFLICT for this dialect."""
    if dialect_name == "postgresql":
        return postgresql.insert
    if dialect_name == "sqlite":
        return sqlite.insert
    raise StoreError(f"Unsupported database dialect: {dialect_name}")


class WordStore:
    """
    CRUD facade over the words table.

    Every operation runs in its own short-lived session, so one store can be
    shared by concurrent tasks. Database errors are raised as StoreError.
    """

    def __init__(self, session_factory: SessionFactory | None = None) -> None:
        self._session_factory = session_factory or async_session

    async def upsert_sighting(self, word: str) -> Word:
        """
        Record one sighting of a word.

        Creates the word with frequency 1, or increments an existing word's
        frequency by exactly 1. Both cases are a single INSERT ... ON CONFLICT
        statement, so concurrent sightings of the same word never lose an
        increment.
        """
        normalized = word.lower()

        try:
            async with self._session_factory() as session:
                insert = _upsert_insert(session.get_bind().dialect.name)
                stmt = (
                    insert(Word)
                    .values(
                        id=new_word_id(),
                        word=normalized,
                        frequency=1,
                        created_at=utc_now(),
                    )
                    .on_conflict_do_update(
                        index_elements=["word"],
                        set_={"frequency": Word.frequency + 1},
                    )
                    .returning(Word)
                )
                result = await session.scalars(
                    stmt, execution_options={"populate_existing": True}
                )
                record = result.one()
                await session.commit()
        except SQLAlchemyError as e:
            logger.warning(f"Failed to record sighting of '{normalized}': {e}")
            raise StoreError(f"Failed to record '{normalized}': {e}") from e

        logger.debug(f"Recorded '{record.word}' (frequency {record.frequency})")
        return record

    async def list_all(self) -> list[Word]:
        """Get all words, most frequent first."""
        stmt = select(Word).order_by(Word.frequency.desc(), Word.word)
        return await self._fetch_all(stmt)

    async def list_missing_details(self, limit: int | None = None) -> list[Word]:
        """Get words whose details were never fetched, most frequent first."""
        stmt = (
            select(Word)
            .where(Word.last_fetched_at.is_(None))
            .order_by(Word.frequency.desc(), Word.word)
        )
        if limit:
            stmt = stmt.limit(limit)
        return await self._fetch_all(stmt)

    async def get_by_id(self, word_id: str) -> Word:
        """Get a word by its identifier or raise WordNotFoundError."""
        try:
            async with self._session_factory() as session:
                word = await session.get(Word, word_id)
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load word {word_id}: {e}") from e

        if word is None:
            raise WordNotFoundError(word_id)
        return word

    async def get_by_word(self, word: str) -> Word | None:
        """Get a word by its text, or None if it was never seen."""
        try:
            async with self._session_factory() as session:
                result = await session.execute(select(Word).where(Word.word == word.lower()))
                return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to load '{word}': {e}") from e

    async def update_details(
        self,
        word_id: str,
        *,
        pronunciation: str | None = None,
        pronunciations: list[dict[str, Any]] | None = None,
        definitions: list[dict[str, Any]] | None = None,
        examples: list[str] | None = None,
    ) -> Word:
        """
        Replace a word's dictionary details and stamp the fetch time.

        All four detail fields are written exactly as given; anything not
        passed is cleared rather than kept from the previous fetch.
        """
        try:
            async with self._session_factory() as session:
                word = await session.get(Word, word_id)
                if word is None:
                    raise WordNotFoundError(word_id)

                word.pronunciation = pronunciation
                word.pronunciations = pronunciations
                word.definitions = definitions
                word.examples = examples
                word.last_fetched_at = utc_now()
                await session.commit()
        except SQLAlchemyError as e:
            logger.warning(f"Failed to update details for word {word_id}: {e}")
            raise StoreError(f"Failed to update word {word_id}: {e}") from e

        logger.info(f"Updated details for '{word.word}'")
        return word

    async def count(self) -> tuple[int, int]:
        """Count all words and words with fetched details."""
        try:
            async with self._session_factory() as session:
                total_result = await session.execute(select(func.count(Word.id)))
                total: int = total_result.scalar() or 0

                fetched_result = await session.execute(
                    select(func.count(Word.id)).where(Word.last_fetched_at.isnot(None))
                )
                fetched: int = fetched_result.scalar() or 0
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to count words: {e}") from e

        return total, fetched

    async def _fetch_all(self, stmt: Any) -> list[Word]:
        try:
            async with self._session_factory() as session:
                result = await session.execute(stmt)
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise StoreError(f"Failed to list words: {e}") from e
