"""Split pasted text into normalized English words."""

import logging
import re

logger = logging.getLogger(__name__)


class Tokenizer:
    """Turn free text into lowercase, letters-only words."""

    # Anything outside a-z is dropped from a token, including digits and apostrophes
    NON_LETTERS = re.compile(r"[^a-z]")

    # Single letters are rarely meaningful words
    MIN_LENGTH = 2

    def tokenize(self, text: str) -> list[str]:
        """
        Extract candidate words from text.

        Repeats are kept in order; callers deduplicate if they need to.
        """
        words: list[str] = []
        for raw in text.lower().split():
            word = self.NON_LETTERS.sub("", raw)
            if len(word) < self.MIN_LENGTH:
                continue
            words.append(word)

        logger.debug(f"Extracted {len(words)} words from {len(text)} characters")
        return words


def tokenize(text: str) -> list[str]:
    """Tokenize text with the default tokenizer."""
    return Tokenizer().tokenize(text)
