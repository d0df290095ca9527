"""Logging configuration for dashsearch."""

import logging
import sys

from dashsearch.core.config import Settings, get_settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Driver loggers that are noisy at DEBUG.
_QUIET_LOGGERS = ("aiosqlite", "asyncio")


def setup_logging(settings: Settings | None = None) -> None:
    """Configure application-wide logging on stdout.

    Level is DEBUG when settings.debug is True, otherwise INFO. At DEBUG the
    permission filter logs the actions and uid counts behind each predicate.
    SQL statements are logged only when database_echo is set.
    """
    settings = settings or get_settings()
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.database_echo else logging.WARNING
    )


def get_logger(name: str) -> logging.Logger:
    """Return a logger for the given module name (usually __name__)."""
    return logging.getLogger(name)
