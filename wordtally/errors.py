"""Exception hierarchy for WordTally."""


class WordTallyError(Exception):
    """Base class for all application errors."""


class ConfigurationError(WordTallyError):
    """A required startup value is missing or invalid."""


class WordNotFoundError(WordTallyError, LookupError):
    """No stored word matches the given identifier."""

    def __init__(self, word_id: str) -> None:
        super().__init__(f"Word {word_id} not found")
        self.word_id = word_id


class TransportError(WordTallyError):
    """Talking to the database or the dictionary service failed."""


class StoreError(TransportError):
    """A database operation failed."""


class DictionaryLookupError(TransportError):
    """The dictionary service returned an error or an unreadable payload."""

    def __init__(self, word: str, message: str, status_code: int | None = None) -> None:
        super().__init__(f"Lookup failed for '{word}': {message}")
        self.word = word
        self.status_code = status_code
