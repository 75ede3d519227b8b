"""Binary search for insertion points over heterogeneous keys.

Keys are ordered in two stages. First by the rank of their `OrderingClass`:

    comparables < symbols < None < UNDEFINED < NaN

then, only when both keys are comparables, by ``<`` / ``<=``. Two keys of the
same non-comparable class are ties, so for them only ``ret_highest`` decides
the side.

The sequence is assumed to be sorted under this ordering; it is neither
checked nor mutated. On an unsorted sequence the search still terminates but
the index means nothing.
"""

from collections.abc import Callable, Sequence
from typing import Any

from dashcompat._internal.undefined import UNDEFINED
from dashcompat.config import MAX_ARRAY_INDEX
from dashcompat.predicate.classify import OrderingClass, classify


def belongs_before(
    computed: Any,
    computed_class: OrderingClass,
    target: Any,
    target_class: OrderingClass,
    ret_highest: bool,
) -> bool:
    """Return True if a key ``computed`` sorts before the insertion point of ``target``.

    Args:
        computed: Key of the element being probed.
        computed_class: Ordering class of ``computed``.
        target: Key of the value being inserted.
        target_class: Ordering class of ``target``.
        ret_highest: Place ``target`` after, rather than before, equal keys.

    Returns:
        bool: True when the search should continue to the right of the element.

    Raises:
        Exception: Whatever ``<`` / ``<=`` raises for two comparables that
            cannot be compared (typically `TypeError`); it is not caught.
    """
    if computed_class is not target_class:
        return computed_class < target_class
    if target_class is not OrderingClass.COMPARABLE:
        return ret_highest
    return computed <= target if ret_highest else computed < target


def search(
    array: Sequence[Any] | None,
    value: Any,
    key: Callable[[Any], Any],
    *,
    ret_highest: bool = False,
) -> int:
    """Find the index at which ``value`` should be inserted into ``array``.

    Args:
        array: Sorted sequence to inspect. ``None`` and `UNDEFINED` count as
            empty.
        value: Value to place.
        key: Key extractor, applied to ``value`` and to each probed element.
            Exceptions it raises propagate.
        ret_highest: Return the index after the last element with an equal key
            instead of the index of the first one.

    Returns:
        int: Insertion index in ``[0, len(array)]``.
    """
    if array is None or array is UNDEFINED:
        return 0
    low, high = 0, len(array)
    if high == 0:
        return 0

    target = key(value)
    target_class = classify(target)

    while low < high:
        mid = (low + high) // 2
        computed = key(array[mid])
        if belongs_before(
            computed, classify(computed), target, target_class, ret_highest
        ):
            low = mid + 1
        else:
            high = mid

    return min(high, MAX_ARRAY_INDEX)
