"""Services for word counting and enrichment."""

from wordtally.services.enricher import Enricher, EnrichmentResult
from wordtally.services.store import WordStore
from wordtally.services.tokenizer import Tokenizer

__all__ = ["Enricher", "EnrichmentResult", "Tokenizer", "WordStore"]
