"""Shared pytest fixtures for the full fileslug test suite."""

from __future__ import annotations

from io import StringIO
from typing import Iterator

import pytest
from loguru import logger

from fileslug import configure_logging


@pytest.fixture
def slug_log() -> Iterator[StringIO]:
    """Capture fileslug debug events for the duration of one test."""

    sink = StringIO()
    handler_id = configure_logging(sink, level="DEBUG")
    try:
        yield sink
    finally:
        logger.remove(handler_id)
        logger.disable("fileslug")
