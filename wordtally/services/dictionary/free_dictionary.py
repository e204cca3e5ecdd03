"""Free Dictionary API backend (https://dictionaryapi.dev/)."""

import logging
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, ValidationError

from wordtally.config import settings
from wordtally.errors import DictionaryLookupError
from wordtally.services.dictionary.base import (
    Definition,
    DictionaryBackend,
    Pronunciation,
    WordDetails,
)

logger = logging.getLogger(__name__)

MAX_DEFINITIONS_PER_MEANING = 3
MAX_DEFINITIONS = 5
MAX_COLLECTED_EXAMPLES = 5
MAX_EXAMPLES = 3


class _ApiModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class ApiPhonetic(_ApiModel):
    text: str | None = None
    audio: str | None = None


class ApiDefinition(_ApiModel):
    definition: str
    example: str | None = None
    synonyms: list[str] = Field(default_factory=list)
    antonyms: list[str] = Field(default_factory=list)


class ApiMeaning(_ApiModel):
    part_of_speech: str = Field(default="", alias="partOfSpeech")
    definitions: list[ApiDefinition] = Field(default_factory=list)


class ApiEntry(_ApiModel):
    """One entry of the API response array."""

    word: str = ""
    phonetic: str | None = None
    phonetics: list[ApiPhonetic] = Field(default_factory=list)
    meanings: list[ApiMeaning] = Field(default_factory=list)


_entries_adapter = TypeAdapter(list[ApiEntry])


def extract_pronunciations(entry: ApiEntry, word: str) -> tuple[str, list[Pronunciation]]:
    """Pick the primary pronunciation and collect all variants.

    Phonetics with text win; then the top-level phonetic field; then a
    "/word/" placeholder so every stored word has something to show.
    """
    variants: list[Pronunciation] = []
    for phonetic in entry.phonetics:
        if not phonetic.text:
            continue
        audio = phonetic.audio.strip() if phonetic.audio else ""
        variants.append(Pronunciation(text=phonetic.text, audio=audio or None))

    if variants:
        return variants[0].text, variants

    if entry.phonetic:
        return entry.phonetic, [Pronunciation(text=entry.phonetic)]

    placeholder = f"/{word}/"
    return placeholder, [Pronunciation(text=placeholder)]


def extract_definitions(entry: ApiEntry) -> list[Definition]:
    """Take up to 3 definitions per part of speech, 5 overall."""
    definitions: list[Definition] = []
    for meaning in entry.meanings:
        for item in meaning.definitions[:MAX_DEFINITIONS_PER_MEANING]:
            definitions.append(
                Definition(part_of_speech=meaning.part_of_speech, definition=item.definition)
            )
    return definitions[:MAX_DEFINITIONS]


def extract_examples(entry: ApiEntry, word: str) -> list[str]:
    """Collect example sentences, falling back to a generic one."""
    examples: list[str] = []
    for meaning in entry.meanings:
        for item in meaning.definitions:
            if item.example and len(examples) < MAX_COLLECTED_EXAMPLES:
                examples.append(item.example)

    if not examples:
        examples.append(f'This is an example sentence with the word "{word}".')

    return examples[:MAX_EXAMPLES]


def parse_entries(word: str, payload: object) -> WordDetails | None:
    """Decode a raw API payload into WordDetails, or None if it holds no entries."""
    if not payload:
        return None

    try:
        entries = _entries_adapter.validate_python(payload)
    except ValidationError as e:
        raise DictionaryLookupError(word, f"unexpected response shape ({e.error_count()} errors)") from e

    if not entries:
        return None

    # The first entry is the most relevant one
    entry = entries[0]
    pronunciation, pronunciations = extract_pronunciations(entry, word)
    return WordDetails(
        pronunciation=pronunciation,
        pronunciations=pronunciations,
        definitions=extract_definitions(entry),
        examples=extract_examples(entry, word),
    )


class FreeDictionaryBackend(DictionaryBackend):
    """Look up English words in the Free Dictionary API."""

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        self.base_url = (base_url or settings.dictionary_api_url).rstrip("/")
        self.timeout = timeout or settings.dictionary_timeout

    @property
    def name(self) -> str:
        return "free_dictionary"

    def url_for(self, word: str) -> str:
        return f"{self.base_url}/{quote(word, safe='')}"

    async def lookup(self, word: str) -> WordDetails | None:
        normalized = word.strip().lower()

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(self.url_for(normalized))
        except httpx.TimeoutException as e:
            raise DictionaryLookupError(normalized, f"timed out after {self.timeout}s") from e
        except httpx.HTTPError as e:
            raise DictionaryLookupError(normalized, f"request failed: {e}") from e

        if response.status_code == 404:
            logger.info(f"No dictionary entry for '{normalized}'")
            return None

        if response.status_code >= 400:
            raise DictionaryLookupError(
                normalized,
                f"HTTP {response.status_code} {response.reason_phrase}",
                status_code=response.status_code,
            )

        try:
            payload = response.json()
        except ValueError as e:
            raise DictionaryLookupError(normalized, "response is not valid JSON") from e

        details = parse_entries(normalized, payload)
        if details is None:
            logger.info(f"Dictionary returned no entries for '{normalized}'")
        return details
