"""Error hierarchy for textprims.

Every public error class inherits from :class:`TextPrimsError`.  Each carries
a machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

Argument errors additionally subclass :class:`ValueError`, so callers that
do not care about the SDK hierarchy can catch them the usual way.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the library can raise."""

    INVALID_ARGUMENT = "INVALID_ARGUMENT"
    RESULT_TOO_LARGE = "RESULT_TOO_LARGE"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class TextPrimsError(Exception):
    """Base exception for all textprims errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Argument errors
# ---------------------------------------------------------------------------

class TextPrimsInvalidArgumentError(TextPrimsError, ValueError):
    """An argument was null where a value is required, had the wrong type,
    or was outside its allowed range.

    Context keys: ``argument``, ``value``, ``constraint``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
        code: str = ErrorCode.INVALID_ARGUMENT,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class TextPrimsResultTooLargeError(TextPrimsInvalidArgumentError):
    """Building the result would exceed the configured maximum length.

    Context keys: ``result_length``, ``limit``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            cause=cause,
            code=ErrorCode.RESULT_TOO_LARGE,
        )
