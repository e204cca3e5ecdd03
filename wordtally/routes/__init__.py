"""Route handlers for WordTally."""

from wordtally.routes.words import router as words_router

__all__ = ["words_router"]
