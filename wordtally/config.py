"""Application configuration using Pydantic Settings."""

from pathlib import Path
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

from wordtally.errors import ConfigurationError

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Application settings, configurable via environment variables or .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Paths
    data_dir: Path = Path("data")

    # Logging
    log_level: LogLevel = "INFO"
    log_file_enabled: bool = False
    log_file_path: Path | None = None
    log_file_max_bytes: int = 10 * 1024 * 1024  # 10 MB
    log_file_backup_count: int = 5

    @property
    def resolved_log_file_path(self) -> Path:
        """Return log file path, defaulting to data_dir/wordtally.log if not set."""
        return self.log_file_path or self.data_dir / "wordtally.log"

    # Database (both required at startup)
    database_url: str = ""
    database_key: str = ""

    @property
    def resolved_database_url(self) -> str:
        """Return the database URL with the access key applied as password."""
        url = make_url(self.database_url)
        if url.password is None and self.database_key and not url.drivername.startswith("sqlite"):
            url = url.set(password=self.database_key)
        return url.render_as_string(hide_password=False)

    # Free Dictionary API
    dictionary_api_url: str = "https://api.dictionaryapi.dev/api/v2/entries/en"
    dictionary_timeout: float = 10.0
    fetch_delay_seconds: float = 0.1  # Pause between batch lookups

    # Word details older than this are refetched on view
    details_max_age_hours: int = 24 * 7

    def check_required(self) -> None:
        """Raise ConfigurationError if a required startup value is missing."""
        missing = [
            env_name
            for env_name, value in (
                ("DATABASE_URL", self.database_url),
                ("DATABASE_KEY", self.database_key),
            )
            if not value
        ]
        if missing:
            raise ConfigurationError(f"Missing required configuration: {', '.join(missing)}")


settings = Settings()
