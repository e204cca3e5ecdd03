"""Rich progress bar utilities."""

from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

from wordtally.cli.utils.console import console


def create_progress() -> Progress:
    """Create a progress bar for sequential dictionary lookups."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description:<24}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def create_simple_progress() -> Progress:
    """Create a spinner for work without a known size."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    )
