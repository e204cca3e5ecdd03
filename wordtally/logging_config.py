"""Log setup shared by the API server and the CLI."""

import logging
import sys
from logging.handlers import RotatingFileHandler

from wordtally.config import Settings, settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_FORMAT_DETAILED = (
    "%(asctime)s - %(name)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s"
)

# httpx logs every dictionary request at INFO; aiosqlite logs every statement at DEBUG
NOISY_LOGGERS = ("httpx", "httpcore", "aiosqlite")


def _file_handler(config: Settings) -> RotatingFileHandler:
    log_path = config.resolved_log_file_path
    log_path.parent.mkdir(parents=True, exist_ok=True)

    handler = RotatingFileHandler(
        filename=log_path,
        maxBytes=config.log_file_max_bytes,
        backupCount=config.log_file_backup_count,
        encoding="utf-8",
    )
    handler.setFormatter(logging.Formatter(LOG_FORMAT_DETAILED))
    return handler


def setup_logging(config: Settings | None = None) -> None:
    """Route log records to stdout and, when LOG_FILE_ENABLED is set, a rotating file.

    Safe to call more than once: handlers from an earlier call are replaced,
    which happens when uvicorn reloads or the CLI callback runs per command.
    """
    config = config or settings
    root_logger = logging.getLogger()
    root_logger.setLevel(config.log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(stdout_handler)

    if config.log_file_enabled:
        root_logger.addHandler(_file_handler(config))

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
