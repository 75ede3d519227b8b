"""Leading-run slicing."""

from collections.abc import Sequence
from typing import Any

from dashcompat._internal.arity import call_trimmed
from dashcompat.util.iteratee import iteratee


def _is_array_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def take_while(array: Sequence[Any] | None, predicate: Any = None) -> list[Any]:
    """Take elements from the start of ``array`` while ``predicate`` holds.

    The predicate is called as ``predicate(value, index, array)`` with as many
    of those arguments as it accepts. Shorthands resolve through `iteratee`.

    Args:
        array: Sequence to inspect. Anything that is not a non-string
            sequence yields an empty list.
        predicate: Function or shorthand; defaults to identity, so the run
            stops at the first falsy element.

    Returns:
        list: A new list with the leading run.

    Examples:
        >>> users = [
        ...     {"user": "barney", "active": False},
        ...     {"user": "fred", "active": False},
        ...     {"user": "pebbles", "active": True},
        ... ]
        >>> [u["user"] for u in take_while(users, {"user": "barney"})]
        ['barney']
        >>> [u["user"] for u in take_while(users, ["active", False])]
        ['barney', 'fred']
    """
    if not _is_array_like(array):
        return []
    items = list(array)
    func = iteratee(predicate)
    for index, value in enumerate(items):
        if not call_trimmed(func, value, index, array):
            return items[:index]
    return items
