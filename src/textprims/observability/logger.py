"""Structured JSON logger for textprims.

Each log record is emitted as a single-line JSON object::

    {"ts": "2026-10-17T09:30:00.000000+00:00", "level": "DEBUG",
     "logger": "textprims.strings", "message": "surrogate pair kept whole",
     "op": "common_prefix", "index": 3}

Usage::

    from textprims.observability import get_logger

    log = get_logger("textprims.strings", level="DEBUG")
    log.debug("boundary moved", extra={"extra_fields": {"index": 3}})
"""

from __future__ import annotations

import json
import logging
import sys
import threading
from datetime import datetime, timezone
from typing import Any


class StructuredFormatter(logging.Formatter):
    """Format log records as single-line JSON objects.

    Guaranteed keys are ``ts`` (ISO-8601 UTC), ``level``, ``logger`` and
    ``message``.  ``func`` names the function that logged, which for
    :mod:`textprims.strings` is the primitive being run.  Fields passed as
    ``extra={"extra_fields": {...}}`` are merged into the top-level object;
    ``exc_info`` and ``stack_info`` are serialised when present.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_entry: dict[str, Any] = {
            "ts": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        # Records built by hand (or logged at module level) carry no function.
        if record.funcName and record.funcName != "<module>":
            log_entry["func"] = record.funcName

        # Merge caller-supplied structured fields; they win over "func".
        extra_fields: dict[str, Any] | None = getattr(
            record, "extra_fields", None
        )
        if extra_fields is not None:
            log_entry.update(extra_fields)

        # Include exception info when present.
        if record.exc_info and record.exc_info[1] is not None:
            log_entry["exception"] = self.formatException(record.exc_info)

        # Include stack info when present.
        if record.stack_info:
            log_entry["stack_info"] = self.formatStack(record.stack_info)

        return json.dumps(log_entry, default=str)


# One handler per logger name, so repeated ``get_logger`` calls never stack
# handlers.
_configured_loggers: set[str] = set()
_configured_lock = threading.Lock()


def get_logger(
    name: str = "textprims",
    *,
    level: int | str = logging.WARNING,
    stream: Any | None = None,
) -> logging.Logger:
    """Get or create a structured JSON logger.

    Parameters
    ----------
    name:
        Logger name.  Defaults to ``"textprims"``.
    level:
        Minimum log level, as an ``int`` or a case-insensitive level name.
        Only applied the first time *name* is configured.
    stream:
        Output stream for the handler.  Defaults to ``sys.stderr``.

    Returns
    -------
    logging.Logger
        A logger with a single :class:`StructuredFormatter` handler.
    """
    logger = logging.getLogger(name)

    with _configured_lock:
        if name not in _configured_loggers:
            resolved_level = (
                logging.getLevelName(level.upper())
                if isinstance(level, str)
                else level
            )
            logger.setLevel(resolved_level)

            handler = logging.StreamHandler(stream or sys.stderr)
            handler.setFormatter(StructuredFormatter())
            logger.addHandler(handler)

            logger.propagate = False

            _configured_loggers.add(name)

    return logger
