"""Word submission, listing and detail routes."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response

from wordtally.errors import StoreError, WordNotFoundError
from wordtally.models import Word
from wordtally.schemas import EnrichmentOut, IngestionOut, SubmitText, WordListOut, WordOut
from wordtally.services.enricher import Enricher, EnrichmentResult
from wordtally.services.store import WordStore
from wordtally.tasks.processing import process_text

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/words", tags=["words"])


def get_store() -> WordStore:
    """Get the word store for dependency injection."""
    return WordStore()


def get_enricher(store: WordStore = Depends(get_store)) -> Enricher:
    return Enricher(store=store)


async def _load_word(store: WordStore, word_id: str) -> Word:
    try:
        return await store.get_by_id(word_id)
    except WordNotFoundError:
        raise HTTPException(status_code=404, detail=f"Word {word_id} not found") from None
    except StoreError as e:
        logger.error(f"Failed to load word {word_id}: {e}")
        raise HTTPException(status_code=503, detail="Database unavailable") from None


def _enrichment_response(result: EnrichmentResult, response: Response) -> EnrichmentOut:
    if result.status == "failed":
        # Upstream lookup or write failed; the client may retry
        response.status_code = 502
    return EnrichmentOut(
        status=result.status,
        word=WordOut.model_validate(result.word),
        error=result.error,
        retryable=result.retryable,
    )


@router.get("", response_model=WordListOut)
async def list_words(store: WordStore = Depends(get_store)) -> WordListOut:
    """List all words, most frequent first."""
    try:
        words = await store.list_all()
    except StoreError as e:
        logger.error(f"Failed to list words: {e}")
        raise HTTPException(status_code=503, detail="Database unavailable") from None

    return WordListOut(
        total=len(words),
        words=[WordOut.model_validate(word) for word in words],
    )


@router.post("", response_model=IngestionOut)
async def submit_text(
    payload: SubmitText,
    response: Response,
    store: WordStore = Depends(get_store),
) -> IngestionOut:
    """Count the words of a pasted text."""
    result = await process_text(payload.text, store=store)

    if result.failed:
        # Multi-Status for partial success
        response.status_code = 207 if result.succeeded else 503

    return IngestionOut(
        succeeded=[WordOut.model_validate(word) for word in result.succeeded],
        failed=result.failed,
    )


@router.get("/{word_id}", response_model=WordOut)
async def get_word(word_id: str, store: WordStore = Depends(get_store)) -> WordOut:
    """Get one word."""
    word = await _load_word(store, word_id)
    return WordOut.model_validate(word)


@router.get("/{word_id}/details", response_model=EnrichmentOut)
async def word_details(
    word_id: str,
    response: Response,
    store: WordStore = Depends(get_store),
    enricher: Enricher = Depends(get_enricher),
) -> EnrichmentOut:
    """Get a word, fetching its dictionary details first if it has none."""
    word = await _load_word(store, word_id)
    result = await enricher.enrich(word)
    return _enrichment_response(result, response)


@router.post("/{word_id}/refresh", response_model=EnrichmentOut)
async def refresh_word(
    word_id: str,
    response: Response,
    store: WordStore = Depends(get_store),
    enricher: Enricher = Depends(get_enricher),
) -> EnrichmentOut:
    """Fetch a word's dictionary details again."""
    word = await _load_word(store, word_id)
    result = await enricher.refresh(word)
    return _enrichment_response(result, response)
