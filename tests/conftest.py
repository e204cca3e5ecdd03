"""Pytest configuration and fixtures."""

from collections.abc import AsyncGenerator
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

import wordtally.models  # noqa: F401  # registers tables on Base.metadata
from wordtally.database import Base, create_engine
from wordtally.main import app
from wordtally.routes.words import get_enricher, get_store
from wordtally.services.dictionary import DictionaryService
from wordtally.services.enricher import Enricher
from wordtally.services.store import WordStore


@pytest.fixture
async def async_engine(tmp_path):
    """Create a test database engine.

    A file database (not :memory:) so that concurrent sessions share data.
    """
    engine = create_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(async_engine) -> async_sessionmaker[AsyncSession]:
    """Create a session factory bound to the test engine."""
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest.fixture
async def async_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async with session_factory() as session:
        yield session


@pytest.fixture
def store(session_factory) -> WordStore:
    """Create a word store backed by the test database."""
    return WordStore(session_factory)


@pytest.fixture
def dictionary() -> MagicMock:
    """Create a dictionary service that never touches the network."""
    mock = MagicMock(spec=DictionaryService)
    mock.fetch = AsyncMock(return_value=None)
    return mock


@pytest.fixture
def test_app(store: WordStore, dictionary: MagicMock) -> FastAPI:
    """Create a test FastAPI application."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_enricher] = lambda: Enricher(store=store, dictionary=dictionary)
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
async def async_client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Create an asynchronous test client."""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as client:
        yield client


@pytest.fixture
def api_payload() -> list[dict[str, Any]]:
    """A Free Dictionary API response for 'hello'."""
    return [
        {
            "word": "hello",
            "phonetic": "həˈləʊ",
            "phonetics": [
                {"text": "həˈləʊ", "audio": "//ssl.gstatic.com/dictionary/static/sounds/hello.mp3"},
                {"text": "hɛˈləʊ", "audio": ""},
                {"audio": "https://example.com/hello-us.mp3"},
            ],
            "origin": "early 19th century: variant of earlier hollo.",
            "meanings": [
                {
                    "partOfSpeech": "exclamation",
                    "definitions": [
                        {
                            "definition": "used as a greeting or to begin a phone conversation.",
                            "example": "hello there, Katie!",
                            "synonyms": [],
                            "antonyms": [],
                        }
                    ],
                },
                {
                    "partOfSpeech": "noun",
                    "definitions": [
                        {
                            "definition": "an utterance of 'hello'; a greeting.",
                            "example": "she was getting polite nods and hellos from people",
                        }
                    ],
                },
                {
                    "partOfSpeech": "verb",
                    "definitions": [
                        {
                            "definition": "say or shout 'hello'.",
                            "example": "I pressed the phone button and helloed",
                        }
                    ],
                },
            ],
        }
    ]
