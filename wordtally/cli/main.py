"""Main CLI application entry point."""

import typer

from wordtally.cli.commands import process, status, words
from wordtally.cli.utils.async_runner import run_async
from wordtally.cli.utils.console import error_console
from wordtally.config import settings
from wordtally.database import init_db
from wordtally.errors import ConfigurationError
from wordtally.logging_config import setup_logging

app = typer.Typer(
    name="wordtally",
    help="Count the words you read and look them up",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


@app.callback()
def startup() -> None:
    """Initialize application on startup."""
    setup_logging()

    try:
        settings.check_required()
    except ConfigurationError as e:
        error_console.print(f"[error]{e}[/]")
        error_console.print("[dim]Set them in the environment or in a .env file.[/]")
        raise typer.Exit(1) from None

    try:
        run_async(init_db())
    except Exception as e:
        error_console.print(f"[error]Failed to initialize database: {e}[/]")
        raise typer.Exit(1) from None


app.command(name="add", help="Count the words of a text")(process.add_text)
app.command(name="list", help="List words by frequency")(words.list_words)
app.command(name="show", help="Show a word's pronunciation, definitions and examples")(
    words.show_word
)
app.command(name="fetch", help="Fetch dictionary details for words that have none")(
    words.fetch_details
)
app.command(name="status", help="Show word statistics")(status.status)


@app.command(name="serve", help="Run the HTTP API")
def serve(
    host: str = typer.Option("127.0.0.1", help="Interface to bind"),
    port: int = typer.Option(8000, help="Port to listen on"),
    reload: bool = typer.Option(False, help="Reload on code changes"),
) -> None:
    from wordtally.main import run

    run(host=host, port=port, reload=reload)


if __name__ == "__main__":
    app()
