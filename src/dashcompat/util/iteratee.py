"""Iteratee resolution.

Helpers that accept a callback also accept a shorthand for one. `iteratee`
turns any of those shorthands into a plain callable so that callers never
branch on the shape of what they were given:

* ``None`` / `UNDEFINED` → `identity`
* a callable → itself
* a property key (``str``, ``int``, ``float``, `Symbol`) → `property_`
* a ``[key, value]`` pair → `matches_property`
* a mapping or any other object → `matches`
"""

from collections.abc import Callable, Mapping
from typing import Any

from dashcompat._internal.symbol import Symbol
from dashcompat._internal.undefined import UNDEFINED
from dashcompat.predicate.is_match import base_is_match, is_match

from .property import get, property_


def identity(value: Any) -> Any:
    """Return ``value`` unchanged."""
    return value


def matches(source: Any) -> Callable[[Any], bool]:
    """Create a predicate performing a partial deep comparison with ``source``.

    Mapping sources go through `is_match`; other sources (lists, scalars) are
    compared the same way `is_match` compares nested values.

    Examples:
        >>> matches({"a": 1})({"a": 1, "b": 2})
        True
    """

    def predicate(obj: Any) -> bool:
        if isinstance(source, Mapping):
            return is_match(obj, source)
        return base_is_match(obj, source)

    return predicate


def matches_property(path: Any, src_value: Any) -> Callable[[Any], bool]:
    """Create a predicate checking the value at ``path`` against ``src_value``.

    Examples:
        >>> matches_property("a", 1)({"a": 1})
        True
        >>> matches_property("a.b", {"c": 2})({"a": {"b": {"c": 2, "d": 3}}})
        True
    """

    def predicate(obj: Any) -> bool:
        return base_is_match(get(obj, path), src_value)

    return predicate


def iteratee(spec: Any = None) -> Callable[..., Any]:
    """Resolve a callback shorthand into a callable.

    Args:
        spec: Function, property key, ``[key, value]`` pair, mapping of
            properties to match, or ``None`` for identity.

    Returns:
        A callable. For the shorthands it takes exactly one argument.

    Examples:
        >>> iteratee("x")({"x": 4})
        4
        >>> iteratee(["x", 4])({"x": 4})
        True
        >>> iteratee({"x": 4})({"x": 4, "y": 5})
        True
    """
    if spec is None or spec is UNDEFINED:
        return identity
    if callable(spec):
        return spec
    if isinstance(spec, (str, int, float, Symbol)):
        return property_(spec)
    if isinstance(spec, (list, tuple)) and len(spec) == 2:
        return matches_property(spec[0], spec[1])
    return matches(spec)
