"""Integer coercion with lodash's rules."""

import math
from decimal import Decimal
from typing import Any

from dashcompat.config import MAX_INTEGER
from dashcompat.predicate.classify import is_nan, is_nil

_RADIX_PREFIXES = frozenset({"0x", "0o", "0b"})
# Spellings float() accepts that are not numbers in JavaScript.
_FLOAT_ONLY_WORDS = frozenset({"inf", "infinity", "nan"})


def to_number(value: Any) -> float:
    """Convert ``value`` to a float, NaN when it has no numeric reading.

    ``None`` reads as 0, `UNDEFINED` as NaN, booleans as 0/1 and strings are
    parsed after stripping whitespace (an empty string is 0).
    """
    if value is None:
        return 0.0
    if is_nil(value) or is_nan(value):
        return math.nan
    if isinstance(value, str):
        return _parse_number(value.strip())
    if isinstance(value, (int, float, Decimal)):
        return float(value)
    return math.nan


def _parse_number(text: str) -> float:
    if not text:
        return 0.0
    if "_" in text or not text.isascii():
        return math.nan
    unsigned = text.lstrip("+-")
    if unsigned.lower() in _FLOAT_ONLY_WORDS and unsigned != "Infinity":
        return math.nan
    try:
        if text[:2].lower() in _RADIX_PREFIXES:
            return float(int(text, 0))
        return float(text)
    except ValueError:
        return math.nan


def to_finite(value: Any) -> float:
    """Convert ``value`` to a finite number, clamping infinities."""
    number = to_number(value)
    if is_nan(number):
        return 0.0
    if math.isinf(number):
        return math.copysign(MAX_INTEGER, number)
    return number


def to_integer(value: Any) -> int:
    """Convert ``value`` to an integer, truncating toward zero.

    Examples:
        >>> to_integer(3.7)
        3
        >>> to_integer("-2.5")
        -2
        >>> to_integer(float("nan"))
        0
    """
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    return int(to_finite(value))
