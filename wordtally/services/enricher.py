"""Fill stored words with dictionary details on demand."""

import logging
from dataclasses import dataclass
from typing import Literal

from wordtally.config import settings
from wordtally.errors import TransportError, WordNotFoundError
from wordtally.models import Word
from wordtally.services.dictionary import DictionaryService, needs_refresh
from wordtally.services.store import WordStore

logger = logging.getLogger(__name__)

EnrichmentStatus = Literal["updated", "skipped", "not_found", "failed"]


@dataclass
class EnrichmentResult:
    """Outcome of enriching one word."""

    status: EnrichmentStatus
    word: Word  # Updated record when status is "updated", otherwise the input
    error: str | None = None  # Message for "not_found" and "failed"
    retryable: bool = False

    @property
    def ok(self) -> bool:
        return self.status in ("updated", "skipped")


class Enricher:
    """Fetch pronunciation, definitions and examples and store them on a word."""

    def __init__(
        self,
        store: WordStore | None = None,
        dictionary: DictionaryService | None = None,
        max_age_hours: float | None = None,
    ) -> None:
        self.store = store or WordStore()
        self.dictionary = dictionary or DictionaryService()
        self.max_age_hours = (
            max_age_hours if max_age_hours is not None else settings.details_max_age_hours
        )

    def should_fetch(self, word: Word) -> bool:
        """Check whether opening a word should trigger a lookup."""
        if word.has_details:
            return False
        return needs_refresh(word.last_fetched_at, self.max_age_hours)

    async def enrich(self, word: Word, force: bool = False) -> EnrichmentResult:
        """
        Fetch details for a word and write them back.

        Without `force`, words that already have details or were looked up
        recently are returned unchanged. Lookup and storage failures are
        reported in the result rather than raised, so the caller can offer a
        retry.
        """
        if not force and not self.should_fetch(word):
            return EnrichmentResult(status="skipped", word=word)

        try:
            details = await self.dictionary.fetch(word.word)
        except TransportError as e:
            logger.warning(f"Fetching details for '{word.word}' failed: {e}")
            return EnrichmentResult(status="failed", word=word, error=str(e), retryable=True)

        if details is None:
            return EnrichmentResult(
                status="not_found",
                word=word,
                error=f"No details available for '{word.word}'",
            )

        try:
            updated = await self.store.update_details(word.id, **details.to_record())
        except WordNotFoundError as e:
            return EnrichmentResult(status="not_found", word=word, error=str(e))
        except TransportError as e:
            return EnrichmentResult(status="failed", word=word, error=str(e), retryable=True)

        return EnrichmentResult(status="updated", word=updated)

    async def refresh(self, word: Word) -> EnrichmentResult:
        """Fetch details again regardless of what is stored (user-triggered retry)."""
        return await self.enrich(word, force=True)
