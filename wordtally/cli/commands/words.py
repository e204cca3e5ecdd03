"""Word listing and dictionary detail commands."""

import typer
from rich.panel import Panel
from rich.table import Table

from wordtally.cli.utils.async_runner import run_async
from wordtally.cli.utils.console import console, error_console, tier_markup
from wordtally.cli.utils.progress import create_progress
from wordtally.config import settings
from wordtally.errors import TransportError
from wordtally.models import Word
from wordtally.services.dictionary import DictionaryService
from wordtally.services.enricher import Enricher
from wordtally.services.store import WordStore


def list_words(
    limit: int = typer.Option(0, "--limit", "-n", help="Show only the N most frequent words"),
) -> None:
    """List words by frequency."""
    run_async(_list_words(limit))


async def _list_words(limit: int) -> None:
    """Async implementation of list command."""
    try:
        words = await WordStore().list_all()
    except TransportError as e:
        error_console.print(f"[error]Failed to load words: {e}[/]")
        raise typer.Exit(1) from None

    if not words:
        console.print("[dim]No words yet. Add some with 'wordtally add'.[/]")
        return

    shown = words[:limit] if limit else words

    table = Table(title=f"Words ({len(words)} total)")
    table.add_column("Word", style="word")
    table.add_column("Count", justify="right")
    table.add_column("Tier")
    table.add_column("Pronunciation", style="dim")

    for word in shown:
        table.add_row(
            word.word,
            str(word.frequency),
            tier_markup(word.tier),
            word.pronunciation or "",
        )

    console.print(table)


def show_word(
    word: str = typer.Argument(..., help="Word to show"),
    refresh: bool = typer.Option(
        False, "--refresh", "-r", help="Fetch dictionary details again even if stored"
    ),
) -> None:
    """Show a word with its pronunciation, definitions and examples."""
    run_async(_show_word(word, refresh))


async def _show_word(text: str, refresh: bool) -> None:
    """Async implementation of show command."""
    store = WordStore()

    try:
        word = await store.get_by_word(text)
    except TransportError as e:
        error_console.print(f"[error]Failed to load '{text}': {e}[/]")
        raise typer.Exit(1) from None

    if word is None:
        error_console.print(f"[error]'{text}' has not been counted yet.[/]")
        raise typer.Exit(1)

    enricher = Enricher(store=store)
    with console.status(f"Looking up '{word.word}'..."):
        result = await enricher.enrich(word, force=refresh)

    if result.status == "not_found":
        console.print(f"[warning]{result.error}[/]")
    elif result.status == "failed":
        error_console.print(f"[error]Failed to fetch details: {result.error}[/]")
        error_console.print("[dim]Retry with --refresh.[/]")

    _print_word(result.word)


def _print_word(word: Word) -> None:
    """Print a word's details panel."""
    lines = [f"[bold]{word.word}[/]  [dim]seen {word.frequency}x[/] {tier_markup(word.tier)}"]

    if word.pronunciations:
        for variant in word.pronunciations:
            audio = f"  [dim]{variant['audio']}[/]" if variant.get("audio") else ""
            lines.append(f"[info]{variant['text']}[/]{audio}")
    elif word.pronunciation:
        lines.append(f"[info]{word.pronunciation}[/]")

    if word.definitions:
        lines.append("")
        lines.append("[bold]Definitions[/]")
        for i, item in enumerate(word.definitions, 1):
            lines.append(f"{i}. [pos]{item['partOfSpeech']}[/] {item['definition']}")

    if word.examples:
        lines.append("")
        lines.append("[bold]Examples[/]")
        for example in word.examples:
            lines.append(f"• [italic]{example}[/]")

    if word.last_fetched_at:
        lines.append("")
        lines.append(f"[dim]Details updated {word.last_fetched_at:%Y-%m-%d}[/]")

    console.print(Panel("\n".join(lines), border_style="blue"))


def fetch_details(
    limit: int = typer.Option(0, "--limit", "-n", help="Fetch at most N words"),
    delay: float | None = typer.Option(
        None, "--delay", "-d", help="Seconds to wait between lookups (default from settings)"
    ),
) -> None:
    """Fetch dictionary details for words that have none."""
    run_async(_fetch_details(limit, settings.fetch_delay_seconds if delay is None else delay))


async def _fetch_details(limit: int, delay: float) -> None:
    """Async implementation of fetch command."""
    store = WordStore()

    try:
        words = await store.list_missing_details(limit=limit or None)
    except TransportError as e:
        error_console.print(f"[error]Failed to load words: {e}[/]")
        raise typer.Exit(1) from None

    if not words:
        console.print("[success]All words already have details.[/]")
        return

    console.print(f"[info]Fetching details for {len(words)} words...[/]\n")

    dictionary = DictionaryService()
    by_text = {word.word: word for word in words}

    with create_progress() as progress:
        task = progress.add_task("Fetching...", total=len(words))
        details_by_word = await dictionary.fetch_many(
            by_text,
            delay=delay,
            on_progress=lambda text: progress.update(
                task, advance=1, description=f"[word]{text}[/]"
            ),
        )

    updated = 0
    failed = 0
    for text, details in details_by_word.items():
        try:
            await store.update_details(by_text[text].id, **details.to_record())
            updated += 1
        except TransportError as e:
            error_console.print(f"[error]Failed to save '{text}': {e}[/]")
            failed += 1

    missing = len(words) - len(details_by_word)
    console.print()
    console.print(f"[success]Updated {updated} words.[/]")
    if missing:
        console.print(f"[warning]{missing} words had no dictionary entry or failed to load.[/]")
    if failed:
        raise typer.Exit(1)
