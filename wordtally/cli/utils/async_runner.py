"""Async runner utilities for CLI commands."""

import asyncio
from collections.abc import Coroutine
from typing import Any, TypeVar

from wordtally.database import dispose_engine

T = TypeVar("T")


def run_async(coro: Coroutine[Any, Any, T]) -> T:
    """Run an async coroutine from synchronous CLI code.

    Each call gets its own event loop, so the engine is released before the
    loop closes and recreated by the next command.
    """

    async def _run() -> T:
        try:
            return await coro
        finally:
            await dispose_engine()

    return asyncio.run(_run())
