"""Positional-arity helpers for callbacks.

Lodash calls its callbacks with extra arguments (index, whole
collection) and relies on the callee ignoring what it does not declare. Python
functions reject surplus arguments, so callbacks are invoked with as many
positional arguments as they accept.
"""

import inspect
from collections.abc import Callable
from typing import Any

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def positional_arity(func: Callable[..., Any]) -> int | None:
    """Return how many positional arguments ``func`` accepts.

    Returns:
        The number of positional parameters, or ``None`` when ``func`` takes
        ``*args`` or its signature cannot be inspected (builtins, some C
        extensions). ``None`` means "pass everything".
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return None
    count = 0
    for parameter in signature.parameters.values():
        if parameter.kind is inspect.Parameter.VAR_POSITIONAL:
            return None
        if parameter.kind in _POSITIONAL:
            count += 1
    return count


def declared_length(func: Callable[..., Any]) -> int:
    """Return the number of positional parameters without a default.

    This mirrors a JavaScript function's ``length``: parameters with default
    values and rest parameters are not counted.
    """
    try:
        signature = inspect.signature(func)
    except (TypeError, ValueError):
        return 0
    return sum(
        1
        for parameter in signature.parameters.values()
        if parameter.kind in _POSITIONAL
        and parameter.default is inspect.Parameter.empty
    )


def call_trimmed(func: Callable[..., Any], *args: Any) -> Any:
    """Call ``func`` with the leading ``args`` it can accept."""
    arity = positional_arity(func)
    if arity is None:
        return func(*args)
    return func(*args[:arity])
