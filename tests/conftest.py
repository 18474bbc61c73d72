"""Shared test fixtures for the textprims test suite."""

from __future__ import annotations

import io
import logging

import pytest

from textprims.config import TextPrimsConfig
from textprims.observability.logger import StructuredFormatter


@pytest.fixture
def small_config() -> TextPrimsConfig:
    """Config with a tiny result limit to exercise the length guard."""
    return TextPrimsConfig(max_result_length=10)


@pytest.fixture
def strings_log():
    """Capture DEBUG output of the ``textprims.strings`` logger as JSON lines."""
    logger = logging.getLogger("textprims.strings")
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(StructuredFormatter())
    old_level = logger.level
    old_handlers = logger.handlers[:]
    # Replace the stderr handler so captured records are not echoed.
    logger.handlers = [handler]
    logger.setLevel(logging.DEBUG)
    try:
        yield stream
    finally:
        logger.handlers = old_handlers
        logger.setLevel(old_level)
