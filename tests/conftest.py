# ABOUTME: Shared pytest fixtures for Bookdash tests.
# ABOUTME: Keeps the bookdash logger free of handlers left behind by CLI invocations.

import logging
from collections.abc import Iterator

import pytest

from bookdash.logging_setup import LOGGER_NAME


@pytest.fixture(autouse=True)
def reset_bookdash_logger() -> Iterator[None]:
    """Drop handlers and level set by setup_logging() during a test."""
    yield
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
