"""In-place reversal."""

from typing import Any, TypeVar

L = TypeVar("L", bound=list[Any])


def reverse(array: L | None) -> L | None:
    """Reverse ``array`` in place and return it.

    ``None`` and `UNDEFINED` are returned unchanged. The argument is mutated,
    so pass a copy to keep the original order.

    Examples:
        >>> items = [1, 2, 3]
        >>> reverse(items)
        [3, 2, 1]
        >>> items
        [3, 2, 1]
    """
    if not array:
        return array
    array.reverse()
    return array
