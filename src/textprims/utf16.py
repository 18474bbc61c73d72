"""UTF-16 code-unit view of Python strings.

Python ``str`` is a sequence of Unicode code points, but the text primitives
measure and cut text in **UTF-16 code units**: a character above U+FFFF
occupies two units (a high surrogate followed by a low surrogate).  This
module converts between the two views.  The text primitives use it only to
find cut points; they slice the original ``str`` with
:func:`code_point_offset` rather than decoding units back.

Encoding uses the ``surrogatepass`` error handler, so lone surrogate code
points already present in a ``str`` survive the round trip.  A high and a low
surrogate stored as two separate code points come back joined.
"""

from __future__ import annotations

from collections.abc import Sequence

HIGH_SURROGATE_MIN = 0xD800
HIGH_SURROGATE_MAX = 0xDBFF
LOW_SURROGATE_MIN = 0xDC00
LOW_SURROGATE_MAX = 0xDFFF


def to_code_units(text: str) -> list[int]:
    """Return the UTF-16 code units of *text*.

    Examples
    --------
    >>> to_code_units("a\U0001f600")
    [97, 55357, 56832]
    """
    raw = text.encode("utf-16-le", "surrogatepass")
    return [int.from_bytes(raw[i : i + 2], "little") for i in range(0, len(raw), 2)]


def from_code_units(units: Sequence[int]) -> str:
    """Rebuild a ``str`` from UTF-16 code units.

    Adjacent high/low surrogates are joined into one code point; unpaired
    surrogates are kept as-is.
    """
    raw = b"".join(unit.to_bytes(2, "little") for unit in units)
    return raw.decode("utf-16-le", "surrogatepass")


def utf16_length(text: str) -> int:
    """Return the length of *text* in UTF-16 code units."""
    return len(text) + sum(1 for ch in text if ord(ch) > 0xFFFF)


def code_point_offset(text: str, unit_offset: int) -> int:
    """Return the index into *text* that sits *unit_offset* code units in.

    Used to turn a UTF-16 cut point back into a ``str`` slice, so results
    are always real slices of the input.  An offset that falls inside an
    astral character is rounded down to that character.

    >>> code_point_offset("a\U0001f600b", 3)
    2
    """
    units = 0
    for index, ch in enumerate(text):
        units += 2 if ord(ch) > 0xFFFF else 1
        if units > unit_offset:
            return index
    return len(text)


def is_high_surrogate(unit: int) -> bool:
    return HIGH_SURROGATE_MIN <= unit <= HIGH_SURROGATE_MAX


def is_low_surrogate(unit: int) -> bool:
    return LOW_SURROGATE_MIN <= unit <= LOW_SURROGATE_MAX


def _valid_surrogate_pair_at(units: Sequence[int], index: int) -> bool:
    """True if a complete surrogate pair starts at *index*."""
    return (
        0 <= index <= len(units) - 2
        and is_high_surrogate(units[index])
        and is_low_surrogate(units[index + 1])
    )
