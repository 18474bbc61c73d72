"""Stateless text primitives.

Common prefix/suffix, null/empty normalisation, padding and repetition.
Every function is pure and safe to call from any thread.

Lengths and cut points are measured in UTF-16 code units (see
:mod:`textprims.utf16`), so ``common_prefix`` and ``common_suffix`` never
return half of a surrogate pair, and ``"\\U0001f600"`` counts as two units
when padding.

Examples
--------
>>> common_prefix("abc", "abd")
'ab'
>>> pad_start("7", 3, "0")
'007'
>>> repeat("hey", 3)
'heyheyhey'
"""

from __future__ import annotations

from typing import Any

from textprims.config import DEFAULT_CONFIG, TextPrimsConfig
from textprims.errors import TextPrimsInvalidArgumentError, TextPrimsResultTooLargeError
from textprims.observability import get_logger
from textprims.utf16 import (
    _valid_surrogate_pair_at,
    code_point_offset,
    to_code_units,
    utf16_length,
)

log = get_logger("textprims.strings")


# ---------------------------------------------------------------------------
# Argument checks
# ---------------------------------------------------------------------------

def _invalid(argument: str, value: Any, constraint: str) -> TextPrimsInvalidArgumentError:
    return TextPrimsInvalidArgumentError(
        f"{argument} {constraint}",
        context={"argument": argument, "value": value, "constraint": constraint},
    )


def _require_text(value: Any, argument: str) -> str:
    if value is None:
        raise _invalid(argument, value, "cannot be None")
    if not isinstance(value, str):
        raise _invalid(argument, value, f"must be a str, got {type(value).__name__}")
    return value


def _require_int(value: Any, argument: str) -> int:
    # bool is an int subclass but never a meaningful length or count.
    if isinstance(value, bool) or not isinstance(value, int):
        raise _invalid(argument, value, f"must be an int, got {type(value).__name__}")
    return value


def _require_pad_char(value: Any) -> str:
    if not isinstance(value, str) or len(value) != 1 or ord(value) > 0xFFFF:
        raise _invalid("pad_char", value, "must be a single UTF-16 code unit")
    return value


def _check_result_length(length: int, config: TextPrimsConfig | None) -> None:
    limit = (config or DEFAULT_CONFIG).max_result_length
    if length > limit:
        raise TextPrimsResultTooLargeError(
            f"result of {length} code units exceeds the limit of {limit}",
            context={"result_length": length, "limit": limit},
        )


# ---------------------------------------------------------------------------
# Common prefix / suffix
# ---------------------------------------------------------------------------

def common_prefix(a: str, b: str) -> str:
    """Return the longest prefix shared by *a* and *b*.

    The prefix is measured in UTF-16 code units and is shortened by one
    unit when it would otherwise end between the two halves of a surrogate
    pair in either string.

    Parameters
    ----------
    a, b:
        The texts to compare.  Neither may be ``None``.

    Returns
    -------
    str
        A slice of *a* that is a prefix of both *a* and *b*; ``""`` if they
        share none.

    Raises
    ------
    TextPrimsInvalidArgumentError
        If *a* or *b* is ``None`` or not a ``str``.

    Examples
    --------
    >>> common_prefix("\\U0001f600x", "\\U0001f600y") == "\\U0001f600"
    True
    >>> common_prefix("\\U0001f600", "\\U0001f601")
    ''
    """
    _require_text(a, "a")
    _require_text(b, "b")

    units_a = to_code_units(a)
    units_b = to_code_units(b)
    max_prefix_length = min(len(units_a), len(units_b))

    p = 0
    while p < max_prefix_length and units_a[p] == units_b[p]:
        p += 1

    if _valid_surrogate_pair_at(units_a, p - 1) or _valid_surrogate_pair_at(units_b, p - 1):
        p -= 1
        log.debug(
            "prefix shortened to keep surrogate pair whole",
            extra={"extra_fields": {"op": "common_prefix", "index": p}},
        )

    return a[: code_point_offset(a, p)]


def common_suffix(a: str, b: str) -> str:
    """Return the longest suffix shared by *a* and *b*.

    Mirror image of :func:`common_prefix`: the suffix is shortened by one
    code unit when it would otherwise start on the low half of a surrogate
    pair in either string.

    Raises
    ------
    TextPrimsInvalidArgumentError
        If *a* or *b* is ``None`` or not a ``str``.
    """
    _require_text(a, "a")
    _require_text(b, "b")

    units_a = to_code_units(a)
    units_b = to_code_units(b)
    len_a = len(units_a)
    len_b = len(units_b)
    max_suffix_length = min(len_a, len_b)

    s = 0
    while s < max_suffix_length and units_a[len_a - s - 1] == units_b[len_b - s - 1]:
        s += 1

    if _valid_surrogate_pair_at(units_a, len_a - s - 1) or _valid_surrogate_pair_at(
        units_b, len_b - s - 1
    ):
        s -= 1
        log.debug(
            "suffix shortened to keep surrogate pair whole",
            extra={"extra_fields": {"op": "common_suffix", "index": len_a - s}},
        )

    return a[code_point_offset(a, len_a - s) :]


# ---------------------------------------------------------------------------
# Null / empty normalisation
# ---------------------------------------------------------------------------

def empty_to_null(text: str | None) -> str | None:
    """Return *text* if it is non-empty; ``None`` if it is ``""`` or ``None``.

    >>> empty_to_null("") is None
    True
    >>> empty_to_null("a")
    'a'
    """
    if text is None or text == "":
        return None
    return text


def is_null_or_empty(text: str | None) -> bool:
    """True if *text* is ``None`` or ``""``."""
    return text is None or text == ""


def null_to_empty(text: str | None) -> str:
    """Return *text* if it is not ``None``; ``""`` otherwise."""
    return "" if text is None else text


# ---------------------------------------------------------------------------
# Padding
# ---------------------------------------------------------------------------

def pad_end(
    text: str,
    min_length: int,
    pad_char: str,
    *,
    config: TextPrimsConfig | None = None,
) -> str:
    """Append *pad_char* to *text* until it is *min_length* code units long.

    Text that is already long enough is returned unchanged, never truncated.

    Parameters
    ----------
    text:
        The text that starts the result.  May not be ``None``.
    min_length:
        Minimum length of the result in UTF-16 code units.  Zero or
        negative values always return *text*.
    pad_char:
        A single UTF-16 code unit (one BMP character).
    config:
        Supplies ``max_result_length``.  Defaults to :data:`DEFAULT_CONFIG`.

    Raises
    ------
    TextPrimsInvalidArgumentError
        If *text* is ``None``, *min_length* is not an int, or *pad_char* is
        not a single code unit.
    TextPrimsResultTooLargeError
        If *min_length* exceeds the configured ``max_result_length``.

    Examples
    --------
    >>> pad_end("4.", 5, "0")
    '4.000'
    >>> pad_end("2010", 3, "!")
    '2010'
    """
    _require_text(text, "text")
    _require_int(min_length, "min_length")
    _require_pad_char(pad_char)

    length = utf16_length(text)
    if length >= min_length:
        return text
    _check_result_length(min_length, config)
    return text + pad_char * (min_length - length)


def pad_start(
    text: str,
    min_length: int,
    pad_char: str,
    *,
    config: TextPrimsConfig | None = None,
) -> str:
    """Prepend *pad_char* to *text* until it is *min_length* code units long.

    Same contract as :func:`pad_end`.

    >>> pad_start("7", 3, "0")
    '007'
    >>> pad_start("2010", 3, "0")
    '2010'
    """
    _require_text(text, "text")
    _require_int(min_length, "min_length")
    _require_pad_char(pad_char)

    length = utf16_length(text)
    if length >= min_length:
        return text
    _check_result_length(min_length, config)
    return pad_char * (min_length - length) + text


# ---------------------------------------------------------------------------
# Repetition
# ---------------------------------------------------------------------------

def repeat(text: str, count: int, *, config: TextPrimsConfig | None = None) -> str:
    """Return *count* copies of *text* concatenated.

    Raises
    ------
    TextPrimsInvalidArgumentError
        If *text* is ``None`` or *count* is negative.
    TextPrimsResultTooLargeError
        If the result would exceed the configured ``max_result_length``.
    """
    _require_text(text, "text")
    _require_int(count, "count")
    if count < 0:
        raise _invalid("count", count, "cannot be negative")

    _check_result_length(utf16_length(text) * count, config)
    return text * count
