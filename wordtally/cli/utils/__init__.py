"""CLI utility modules."""

from wordtally.cli.utils.async_runner import run_async
from wordtally.cli.utils.console import console, error_console, tier_markup
from wordtally.cli.utils.progress import create_progress, create_simple_progress

__all__ = [
    "run_async",
    "console",
    "error_console",
    "tier_markup",
    "create_progress",
    "create_simple_progress",
]
