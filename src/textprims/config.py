"""Library configuration for textprims.

:class:`TextPrimsConfig` is a small dataclass capturing the tuneable knobs of
the text primitives.  Functions that build new text accept an optional
``config`` keyword; when omitted, :data:`DEFAULT_CONFIG` is used.

Logging is not configured here.  The library logs to the
``"textprims.strings"`` logger at ``DEBUG`` only; raise its level with the
standard :mod:`logging` API to see those records.
"""

from __future__ import annotations

from dataclasses import dataclass

MAX_RESULT_LENGTH: int = 2**31 - 1
"""Largest result, in UTF-16 code units, that :func:`repeat` and the pad
functions will build by default.  Matches the array limit of Java and .NET
strings."""


@dataclass(frozen=True)
class TextPrimsConfig:
    """Configuration for the text primitives.

    Parameters
    ----------
    max_result_length:
        Upper bound, in UTF-16 code units, on text built by
        :func:`~textprims.strings.repeat`,
        :func:`~textprims.strings.pad_start` and
        :func:`~textprims.strings.pad_end`.
    """

    # ── Limits ──────────────────────────────────────────────────────────
    max_result_length: int = MAX_RESULT_LENGTH

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        if isinstance(self.max_result_length, bool) or not isinstance(
            self.max_result_length, int
        ):
            raise ValueError(
                f"max_result_length must be an int, got {type(self.max_result_length).__name__}"
            )
        if self.max_result_length < 0:
            raise ValueError(f"max_result_length must be >= 0, got {self.max_result_length}")


DEFAULT_CONFIG = TextPrimsConfig()
