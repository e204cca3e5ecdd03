"""Text submission command."""

import logging
import sys
from pathlib import Path

import typer

from wordtally.cli.utils.async_runner import run_async
from wordtally.cli.utils.console import console, error_console
from wordtally.cli.utils.progress import create_simple_progress
from wordtally.services.store import WordStore
from wordtally.tasks.processing import IngestionResult, process_text

logger = logging.getLogger(__name__)


def _read_text(text: str | None, file_path: Path | None) -> str:
    """Get the text to count from the argument, a file, or stdin."""
    if text and file_path:
        error_console.print("[error]Pass either TEXT or --file, not both.[/]")
        raise typer.Exit(1)

    if file_path is not None:
        if not file_path.exists():
            error_console.print(f"[error]File not found: {file_path}[/]")
            raise typer.Exit(1)
        return file_path.read_text(encoding="utf-8")

    if text:
        return text

    if sys.stdin.isatty():
        error_console.print("[error]No text given. Pass TEXT, --file, or pipe text on stdin.[/]")
        raise typer.Exit(1)
    return sys.stdin.read()


def add_text(
    text: str | None = typer.Argument(None, help="Text to count words in"),
    file_path: Path | None = typer.Option(None, "--file", "-f", help="Read text from a file"),
) -> None:
    """Count the words of a text."""
    content = _read_text(text, file_path)
    if not content.strip():
        error_console.print("[warning]Nothing to process.[/]")
        raise typer.Exit(1)

    result = run_async(_add_text(content))
    if result.failed and not result.succeeded:
        raise typer.Exit(1)


async def _add_text(content: str) -> IngestionResult:
    """Async implementation of add command."""
    with create_simple_progress() as progress:
        progress.add_task("Counting words...", total=None)
        result = await process_text(content, store=WordStore())

    if not result.succeeded and not result.failed:
        console.print("[warning]No words found. Words need at least two letters.[/]")
        return result

    if result.succeeded:
        words = ", ".join(f"[word]{w}[/]" for w in result.words)
        console.print(f"[success]Processed {len(result.succeeded)} words:[/] {words}")

    if result.failed:
        error_console.print(
            f"[error]Processing failed for {len(result.failed)} words:[/] {', '.join(result.failed)}"
        )
        error_console.print("[dim]Run the command again to retry.[/]")

    return result
