"""Request and response models for the HTTP API."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class PronunciationOut(BaseModel):
    text: str
    audio: str | None = None


class DefinitionOut(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    part_of_speech: str = Field(alias="partOfSpeech")
    definition: str


class WordOut(BaseModel):
    """A stored word as returned by the API."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    word: str
    frequency: int
    tier: str
    created_at: datetime
    pronunciation: str | None = None
    pronunciations: list[PronunciationOut] | None = None
    definitions: list[DefinitionOut] | None = None
    examples: list[str] | None = None
    last_fetched_at: datetime | None = None
    audio_url: str | None = None


class WordListOut(BaseModel):
    total: int
    words: list[WordOut]


class SubmitText(BaseModel):
    text: str = Field(min_length=1)


class IngestionOut(BaseModel):
    succeeded: list[WordOut]
    failed: list[str]


class EnrichmentOut(BaseModel):
    status: str
    word: WordOut
    error: str | None = None
    retryable: bool = False
