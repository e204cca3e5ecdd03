"""Status command for displaying word statistics."""

import typer
from rich.panel import Panel
from rich.table import Table

from wordtally.cli.utils.async_runner import run_async
from wordtally.cli.utils.console import console, error_console
from wordtally.errors import TransportError
from wordtally.services.store import WordStore


def status() -> None:
    """Show word and dictionary detail counts."""
    run_async(_status())


async def _status() -> None:
    """Async implementation of status command."""
    try:
        total, fetched = await WordStore().count()
    except TransportError as e:
        error_console.print(f"[error]Failed to read statistics: {e}[/]")
        raise typer.Exit(1) from None

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Label", style="bold")
    table.add_column("Value", justify="right")

    table.add_row("Words", str(total))
    table.add_row("With details", f"[green]{fetched}[/]")
    table.add_row(
        "Without details", f"[yellow]{total - fetched}[/]" if total > fetched else "0"
    )

    console.print()
    console.print(Panel(table, title="[bold]Words[/]", border_style="blue"))
    console.print()
