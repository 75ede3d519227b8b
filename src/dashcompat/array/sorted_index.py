"""Insertion indices for sorted sequences.

``sorted_index`` and ``sorted_last_index`` compare elements directly;
the ``_by`` variants compare the keys produced by an iteratee (a function or
any shorthand accepted by `dashcompat.util.iteratee`). The plain variants
return the lowest index at which the value keeps the order, the ``last``
variants the highest one, i.e. after every element with an equal key.

Mixed keys are ordered as: comparables, symbols, ``None``, `UNDEFINED`, NaN.
"""

import numbers
from collections.abc import Sequence
from typing import Any

from dashcompat._internal.undefined import UNDEFINED
from dashcompat.config import HALF_MAX_ARRAY_LENGTH
from dashcompat.predicate.classify import OrderingClass, classify, is_nan
from dashcompat.util.iteratee import identity
from dashcompat.util.iteratee import iteratee as resolve_iteratee

from ._ordered_search import search


def _is_plain_number(value: Any) -> bool:
    return (
        isinstance(value, numbers.Real)
        and not isinstance(value, bool)
        and not is_nan(value)
    )


def _base_sorted_index(
    array: Sequence[Any] | None, value: Any, ret_highest: bool
) -> int:
    if array is None or array is UNDEFINED:
        return 0
    high = len(array)
    if not _is_plain_number(value) or high > HALF_MAX_ARRAY_LENGTH:
        return search(array, value, identity, ret_highest=ret_highest)

    # Numeric probe: only comparable elements can sort before it.
    low = 0
    while low < high:
        mid = (low + high) // 2
        computed = array[mid]
        if classify(computed) is OrderingClass.COMPARABLE and (
            computed <= value if ret_highest else computed < value
        ):
            low = mid + 1
        else:
            high = mid
    return high


def sorted_index(array: Sequence[Any] | None, value: Any) -> int:
    """Return the lowest index at which ``value`` keeps ``array`` sorted.

    Args:
        array: The sorted sequence to inspect; ``None`` counts as empty.
        value: The value to evaluate.

    Returns:
        int: The index at which ``value`` should be inserted.

    Examples:
        >>> sorted_index([30, 50], 40)
        1
        >>> sorted_index([4, 5, 5, 5, 6], 5)
        1
    """
    return _base_sorted_index(array, value, False)


def sorted_last_index(array: Sequence[Any] | None, value: Any) -> int:
    """Return the highest index at which ``value`` keeps ``array`` sorted.

    Examples:
        >>> sorted_last_index([4, 5, 5, 5, 6], 5)
        4
    """
    return _base_sorted_index(array, value, True)


def sorted_index_by(
    array: Sequence[Any] | None, value: Any, iteratee: Any = None
) -> int:
    """Like `sorted_index`, comparing the keys ``iteratee`` computes.

    The iteratee is invoked with one argument for ``value`` and for each
    probed element.

    Args:
        array: The sorted sequence to inspect; ``None`` counts as empty.
        value: The value to evaluate.
        iteratee: Key function or shorthand (property path, ``[key, value]``
            pair, partial mapping). Defaults to identity.

    Returns:
        int: The index at which ``value`` should be inserted.

    Examples:
        >>> sorted_index_by([{"x": 4}, {"x": 5}], {"x": 4}, "x")
        0
        >>> scores = {"thirty": 30, "forty": 40, "fifty": 50}
        >>> sorted_index_by(["thirty", "fifty"], "forty", scores.get)
        1
    """
    return search(array, value, resolve_iteratee(iteratee), ret_highest=False)


def sorted_last_index_by(
    array: Sequence[Any] | None, value: Any, iteratee: Any = None
) -> int:
    """Like `sorted_last_index`, comparing the keys ``iteratee`` computes.

    Examples:
        >>> sorted_last_index_by([{"x": 4}, {"x": 5}], {"x": 4}, "x")
        1
    """
    return search(array, value, resolve_iteratee(iteratee), ret_highest=True)
