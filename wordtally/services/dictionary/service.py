"""Dictionary service facade with batch lookups and staleness checks."""

import asyncio
import logging
from collections.abc import Callable, Iterable
from datetime import datetime, timezone

from wordtally.errors import TransportError
from wordtally.services.dictionary.base import DictionaryBackend, WordDetails
from wordtally.services.dictionary.free_dictionary import FreeDictionaryBackend

logger = logging.getLogger(__name__)

DEFAULT_MAX_AGE_HOURS = 24 * 7


def needs_refresh(
    last_fetched_at: datetime | None,
    max_age_hours: float = DEFAULT_MAX_AGE_HOURS,
    now: datetime | None = None,
) -> bool:
    """
    Decide whether cached word details are old enough to fetch again.

    Args:
        last_fetched_at: When details were last fetched, or None if never
        max_age_hours: Maximum cache age in hours
        now: Reference time (defaults to the current UTC time)

    Returns:
        True if details were never fetched or are older than max_age_hours
    """
    if last_fetched_at is None:
        return True

    now = now or datetime.now(timezone.utc)
    # SQLite hands back naive datetimes; they are stored as UTC
    if last_fetched_at.tzinfo is None:
        last_fetched_at = last_fetched_at.replace(tzinfo=timezone.utc)

    age_hours = (now - last_fetched_at).total_seconds() / 3600
    return age_hours > max_age_hours


class DictionaryService:
    """
    Facade for dictionary lookups.

    Single lookups propagate errors so callers can offer a retry; batch
    lookups log and skip failing words.
    """

    def __init__(self, backend: DictionaryBackend | None = None) -> None:
        """
        Initialize the dictionary service.

        Args:
            backend: Dictionary backend to use. Defaults to FreeDictionaryBackend()
        """
        self.backend = backend or FreeDictionaryBackend()

    async def fetch(self, word: str) -> WordDetails | None:
        """
        Fetch details for one word.

        Returns:
            WordDetails if found, None if the dictionary has no entry

        Raises:
            TransportError: The lookup failed
        """
        return await self.backend.lookup(word)

    async def fetch_many(
        self,
        words: Iterable[str],
        delay: float = 0.1,
        on_progress: Callable[[str], None] | None = None,
    ) -> dict[str, WordDetails]:
        """
        Fetch details for several words one after another.

        Requests are never concurrent; `delay` seconds are waited after each
        one to stay under the service's rate limit. `on_progress` is called with
        each word once its lookup is done.

        Returns:
            Mapping of word to details for every word that was found
        """
        results: dict[str, WordDetails] = {}

        for word in words:
            try:
                details = await self.fetch(word)
                if details is not None:
                    results[word] = details
                else:
                    logger.debug(f"Skipping '{word}': no dictionary entry")
            except TransportError as e:
                logger.warning(f"Error fetching details for '{word}' from {self.backend.name}: {e}")

            if on_progress is not None:
                on_progress(word)

            if delay > 0:
                await asyncio.sleep(delay)

        return results
