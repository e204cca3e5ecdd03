"""Dictionary service for pronunciations, definitions and examples."""

from wordtally.services.dictionary.base import (
    Definition,
    DictionaryBackend,
    Pronunciation,
    WordDetails,
)
from wordtally.services.dictionary.free_dictionary import FreeDictionaryBackend
from wordtally.services.dictionary.service import DictionaryService, needs_refresh

__all__ = [
    "Definition",
    "DictionaryBackend",
    "DictionaryService",
    "FreeDictionaryBackend",
    "Pronunciation",
    "WordDetails",
    "needs_refresh",
]
