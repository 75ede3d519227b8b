"""Argument capping."""

import functools
from collections.abc import Callable
from typing import Any, TypeVar

from dashcompat._internal.arity import declared_length
from dashcompat.predicate.classify import is_nil
from dashcompat.util.to_integer import to_integer

R = TypeVar("R")


def ary(
    func: Callable[..., R], n: Any = None, guard: Any = None
) -> Callable[..., R]:
    """Create a function that calls ``func`` with at most ``n`` positional arguments.

    Args:
        func: Function to cap.
        n: Argument cap. ``None`` or `UNDEFINED` mean the number of positional
            parameters of ``func`` that have no default. NaN or negative
            values mean 0.
        guard: When truthy, ``n`` is ignored and the default is used. This
            lets ``ary`` itself be passed as a callback to ``map``-like helpers.

    Returns:
        The capped function. Keyword arguments pass through untouched.

    Examples:
        >>> list(map(ary(int, 1), ["6", "8", "10"], [2, 2, 2]))
        [6, 8, 10]
    """
    if guard or is_nil(n):
        n = declared_length(func)
    count = max(to_integer(n), 0)

    @functools.wraps(func, updated=())
    def capped(*args: Any, **kwargs: Any) -> R:
        return func(*args[:count], **kwargs)

    return capped
