"""FastAPI application entry point."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from wordtally import __version__
from wordtally.config import settings
from wordtally.database import dispose_engine, init_db
from wordtally.errors import ConfigurationError
from wordtally.logging_config import setup_logging
from wordtally.routes import words_router

# Configure logging
setup_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler."""
    logger.info("Starting WordTally...")

    try:
        settings.check_required()
    except ConfigurationError as e:
        logger.critical(str(e))
        raise

    await init_db()
    logger.info("Database initialized")

    yield

    logger.info("Shutting down WordTally...")
    await dispose_engine()


app = FastAPI(
    title="WordTally",
    description="Word frequency tracker with dictionary lookups",
    version=__version__,
    lifespan=lifespan,
)

app.include_router(words_router)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {
        "status": "healthy",
        "version": __version__,
    }


def run(host: str = "127.0.0.1", port: int = 8000, reload: bool = False) -> None:
    """Run the application (for use with `wordtally serve`)."""
    import uvicorn

    uvicorn.run(
        "wordtally.main:app",
        host=host,
        port=port,
        reload=reload,
    )


if __name__ == "__main__":
    run()
