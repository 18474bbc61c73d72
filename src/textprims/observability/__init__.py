"""Observability: structured logging for textprims."""

from __future__ import annotations

from .logger import StructuredFormatter, get_logger

__all__ = [
    "StructuredFormatter",
    "get_logger",
]
