"""Rich consoles and the WordTally colour theme."""

from rich.console import Console
from rich.theme import Theme

from wordtally.models import FREQUENCY_TIERS

# Frequency labels, matching Word.tier
TIER_STYLES = {
    "mythic": "bold yellow",
    "legendary": "red",
    "epic": "magenta",
    "rare": "blue",
    "common": "dim",
}

custom_theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "word": "magenta",
        "pos": "blue italic",
        "dim": "dim",
        **{f"tier.{label}": style for label, style in TIER_STYLES.items()},
    }
)

console = Console(theme=custom_theme)

# Errors and retry hints go to stderr so `wordtally list > words.txt` stays clean
error_console = Console(theme=custom_theme, stderr=True)


def tier_markup(tier: str) -> str:
    """Wrap a tier label in its theme style."""
    known = {label for _, label in FREQUENCY_TIERS} | {"common"}
    return f"[tier.{tier}]{tier}[/]" if tier in known else tier
