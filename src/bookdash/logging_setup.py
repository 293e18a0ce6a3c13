# ABOUTME: Logging configuration for Bookdash.
# ABOUTME: Routes the bookdash logger hierarchy to a Rich handler on stderr.

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "bookdash"


def setup_logging(log_level: str = "WARNING", *, console: Console | None = None) -> logging.Logger:
    """Configure the ``bookdash`` logger.

    Replaces any handler installed by a previous call, so repeated CLI
    invocations in one process (tests) do not duplicate output.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR).
        console: Console to log to; defaults to a stderr console.

    Returns:
        The configured ``bookdash`` logger.
    """
    level = getattr(logging, log_level.upper(), logging.WARNING)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    logger.handlers.clear()

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_time=False,
        show_path=False,
        rich_tracebacks=True,
    )
    handler.setLevel(level)
    logger.addHandler(handler)
    return logger
