"""Value classification for ordering.

The sorted-index helpers have to order values that Python cannot compare with
each other (``None``, `UNDEFINED`, symbols, NaN and ordinary comparables). Each
key is tagged once with an `OrderingClass`; the class value doubles as the
rank used by the comparator, so keys of different classes are ordered by rank
alone and only two comparables ever reach ``<`` / ``<=``.

The predicates here are total: they never raise, whatever they are given.
"""

import enum
import numbers
from decimal import Decimal
from typing import Any

from dashcompat._internal.symbol import Symbol
from dashcompat._internal.undefined import UNDEFINED


class OrderingClass(enum.IntEnum):
    """Ordering bucket of a key, valued by its sort rank (lowest first)."""

    COMPARABLE = 0
    UNORDERABLE = 1
    NULL = 2
    UNDEFINED = 3
    NON_REFLEXIVE = 4


def is_nan(value: Any) -> bool:
    """Return True if ``value`` is a number that is not equal to itself.

    Booleans and non-numbers are never NaN. Decimal NaNs, including
    signalling ones, are detected without raising.

    Examples:
        >>> is_nan(float("nan"))
        True
        >>> is_nan("nan")
        False
    """
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, bool) or not isinstance(value, numbers.Complex):
        return False
    return bool(value != value)  # pylint: disable=comparison-with-itself


def is_null(value: Any) -> bool:
    """Return True if ``value`` is ``None``."""
    return value is None


def is_undefined(value: Any) -> bool:
    """Return True if ``value`` is `UNDEFINED`."""
    return value is UNDEFINED


def is_nil(value: Any) -> bool:
    """Return True if ``value`` is ``None`` or `UNDEFINED`."""
    return value is None or value is UNDEFINED


def is_symbol(value: Any) -> bool:
    """Return True if ``value`` is a `Symbol`."""
    return isinstance(value, Symbol)


def classify(value: Any) -> OrderingClass:
    """Assign ``value`` to its ordering class.

    The checks run in a fixed precedence (NaN, undefined, null, symbol) so a
    value matching several predicates still lands in exactly one class.

    Args:
        value: Any key value.

    Returns:
        OrderingClass: The bucket ``value`` sorts in.
    """
    if is_nan(value):
        return OrderingClass.NON_REFLEXIVE
    if is_undefined(value):
        return OrderingClass.UNDEFINED
    if is_null(value):
        return OrderingClass.NULL
    if is_symbol(value):
        return OrderingClass.UNORDERABLE
    return OrderingClass.COMPARABLE
