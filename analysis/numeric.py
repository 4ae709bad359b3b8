"""Numeric coercion rules shared by the parser and the chart config builder.

A cell counts as numeric when its trimmed text is a plain decimal literal
(optional sign, fraction and exponent). Words, empty strings, `NaN`,
`Infinity` and hex literals stay text, so they can never leak into the
embedded chart JSON as non-standard values.
"""

from __future__ import annotations

import math
import re
from typing import Final

Number = int | float

_INTEGER_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?\d+")
_DECIMAL_RE: Final[re.Pattern[str]] = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def coerce_number(raw_value: str) -> Number | None:
    """Convert a decimal literal to a number.

    Args:
        raw_value: Cell text, possibly padded with whitespace.

    Returns:
        An `int` for integer literals, a `float` for other decimal literals,
        or None when the text is not a finite decimal number.
    """

    text = raw_value.strip()
    if not text:
        return None
    if _INTEGER_RE.fullmatch(text):
        try:
            return int(text)
        except ValueError:
            # Past the interpreter's int digit limit; the float path bounds it.
            pass
    elif not _DECIMAL_RE.fullmatch(text):
        return None
    value = float(text)
    if not math.isfinite(value):
        return None
    return value


def is_number(value: object) -> bool:
    """Return True for finite int/float values (booleans excluded)."""

    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def is_numeric_value(value: object) -> bool:
    """Return True when a record value can feed a numeric dataset."""

    if is_number(value):
        return True
    if isinstance(value, str):
        return coerce_number(value) is not None
    return False


def numeric_or_zero(value: object) -> Number:
    """Return the numeric form of a record value, or 0 when there is none."""

    if is_number(value):
        return value  # type: ignore[return-value]
    if isinstance(value, str):
        coerced = coerce_number(value)
        if coerced is not None:
            return coerced
    return 0
