"""textprims — small, pure text primitives with surrogate-pair safety.

Public re-exports
-----------------

* **Functions:** :func:`common_prefix`, :func:`common_suffix`,
  :func:`empty_to_null`, :func:`is_null_or_empty`, :func:`null_to_empty`,
  :func:`pad_end`, :func:`pad_start`, :func:`repeat`
* **Configuration:** :class:`TextPrimsConfig`, :data:`DEFAULT_CONFIG`
* **Errors:** :class:`TextPrimsError`, its subclasses and :class:`ErrorCode`

Usage::

    from textprims import common_prefix, pad_start

    common_prefix("interspecies", "interstellar")   # 'inters'
    pad_start("7", 3, "0")                          # '007'
"""

from __future__ import annotations

# ── Configuration ───────────────────────────────────────────────────────
from textprims.config import DEFAULT_CONFIG, MAX_RESULT_LENGTH, TextPrimsConfig

# ── Errors ──────────────────────────────────────────────────────────────
from textprims.errors import (
    ErrorCode,
    TextPrimsError,
    TextPrimsInvalidArgumentError,
    TextPrimsResultTooLargeError,
)

# ── Functions ───────────────────────────────────────────────────────────
from textprims.strings import (
    common_prefix,
    common_suffix,
    empty_to_null,
    is_null_or_empty,
    null_to_empty,
    pad_end,
    pad_start,
    repeat,
)

# ── Public surface ──────────────────────────────────────────────────────

__all__ = [
    # Functions
    "common_prefix",
    "common_suffix",
    "empty_to_null",
    "is_null_or_empty",
    "null_to_empty",
    "pad_end",
    "pad_start",
    "repeat",
    # Configuration
    "TextPrimsConfig",
    "DEFAULT_CONFIG",
    "MAX_RESULT_LENGTH",
    # Errors
    "TextPrimsError",
    "ErrorCode",
    "TextPrimsInvalidArgumentError",
    "TextPrimsResultTooLargeError",
]
