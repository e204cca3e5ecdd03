"""Text ingestion pipeline."""

import asyncio
import logging
from dataclasses import dataclass, field

from wordtally.errors import TransportError
from wordtally.models import Word
from wordtally.services.store import WordStore
from wordtally.services.tokenizer import Tokenizer

logger = logging.getLogger(__name__)


@dataclass
class IngestionResult:
    """Words recorded by one submission, split by outcome."""

    succeeded: list[Word] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def words(self) -> list[str]:
        return [record.word for record in self.succeeded]


def unique_words(words: list[str]) -> list[str]:
    """Drop repeats, keeping first-seen order."""
    return list(dict.fromkeys(words))


async def process_text(text: str, store: WordStore | None = None) -> IngestionResult:
    """
    Count every distinct word of a submission once.

    Steps:
    1. Tokenize the text
    2. Collapse repeated words, so each is counted once per submission
    3. Record all words concurrently
    4. Split the outcome into recorded records and failed words
    """
    words = unique_words(Tokenizer().tokenize(text))
    if not words:
        logger.info("No words found in submitted text")
        return IngestionResult()

    store = store or WordStore()
    outcomes = await asyncio.gather(
        *(store.upsert_sighting(word) for word in words),
        return_exceptions=True,
    )

    result = IngestionResult()
    for word, outcome in zip(words, outcomes):
        if isinstance(outcome, Word):
            result.succeeded.append(outcome)
        elif isinstance(outcome, TransportError):
            result.failed.append(word)
        elif isinstance(outcome, Exception):
            # Unexpected errors still only fail their own word
            logger.error(f"Unexpected error recording '{word}': {outcome!r}")
            result.failed.append(word)
        elif isinstance(outcome, BaseException):
            # Cancellation and interrupts stop the whole submission
            raise outcome

    logger.info(
        f"Processed {len(words)} words: {len(result.succeeded)} recorded, "
        f"{len(result.failed)} failed"
    )
    return result
