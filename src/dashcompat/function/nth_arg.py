"""Positional argument pickers."""

from collections.abc import Callable
from typing import Any

from dashcompat._internal.undefined import UNDEFINED
from dashcompat.util.to_integer import to_integer


def nth_arg(n: Any = 0) -> Callable[..., Any]:
    """Create a function that returns its ``n``-th positional argument.

    A negative ``n`` counts from the end. Out-of-range positions return
    `UNDEFINED`. ``n`` is converted with `to_integer` once, up front.

    Examples:
        >>> nth_arg(1)("a", "b", "c")
        'b'
        >>> nth_arg(-2)("a", "b", "c")
        'b'
        >>> nth_arg(5)("a")
        UNDEFINED
    """
    index = to_integer(n)

    def picker(*args: Any) -> Any:
        if -len(args) <= index < len(args):
            return args[index]
        return UNDEFINED

    return picker
