"""Base classes and dataclasses for dictionary service."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any


@dataclass
class Pronunciation:
    """One way of pronouncing a word."""

    text: str  # e.g. /həˈloʊ/
    audio: str | None = None  # URL to an audio clip

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"text": self.text}
        if self.audio:
            data["audio"] = self.audio
        return data


@dataclass
class Definition:
    """A definition tagged with its part of speech."""

    part_of_speech: str
    definition: str

    def to_dict(self) -> dict[str, str]:
        return {"partOfSpeech": self.part_of_speech, "definition": self.definition}


@dataclass
class WordDetails:
    """Pronunciation, definitions and examples for a single word."""

    pronunciation: str
    pronunciations: list[Pronunciation] = field(default_factory=list)
    definitions: list[Definition] = field(default_factory=list)
    examples: list[str] = field(default_factory=list)

    def to_record(self) -> dict[str, Any]:
        """Convert to the column layout used by the words table."""
        return {
            "pronunciation": self.pronunciation,
            "pronunciations": [p.to_dict() for p in self.pronunciations],
            "definitions": [d.to_dict() for d in self.definitions],
            "examples": list(self.examples),
        }


class DictionaryBackend(ABC):
    """Abstract base class for dictionary backends."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this dictionary backend."""
        ...  # pragma: no cover

    @abstractmethod
    async def lookup(self, word: str) -> WordDetails | None:
        """
        Look up a word and return its details or None if not found.

        Args:
            word: The word to look up

        Returns:
            WordDetails with available data, or None if the dictionary has no entry

        Raises:
            DictionaryLookupError: The dictionary could not be queried
        """
        ...  # pragma: no cover
