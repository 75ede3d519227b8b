"""Predicate-map conformance.

A source maps property names to predicates. An object conforms when it has
every one of those properties and each predicate accepts the property value.
Only the source's own entries count: for a mapping that is its items, for any
other object its instance ``__dict__`` (class attributes and methods are
inherited and ignored).
"""

from collections.abc import Callable, Mapping
from typing import Any

from dashcompat._internal.lookup import has_key, lookup


def _own_predicates(source: Any) -> dict[Any, Callable[[Any], Any]]:
    if isinstance(source, Mapping):
        return dict(source)
    return dict(vars(source))


def conforms_to(obj: Any, source: Any) -> bool:
    """Return True if ``obj`` satisfies every predicate of ``source``.

    A predicate is never called for a property ``obj`` does not have; the
    missing property makes the check fail straight away.

    Args:
        obj: Object to inspect.
        source: Mapping (or object) of property name to predicate.

    Returns:
        bool: Whether ``obj`` conforms.
    """
    predicates = _own_predicates(source)
    if obj is None:
        return not predicates
    for key, predicate in predicates.items():
        if not has_key(obj, key):
            return False
        if not predicate(lookup(obj, key)):
            return False
    return True


def conforms(source: Any) -> Callable[[Any], bool]:
    """Create a predicate that checks objects against ``source``.

    The predicates are captured when ``conforms`` is called, so later changes
    to ``source`` do not affect the returned function.

    Examples:
        >>> rows = [{"a": 1, "b": 8}, {"a": 2, "b": 4}, {"a": 3, "b": 16}]
        >>> [row for row in rows if conforms({"b": lambda n: n > 4})(row)]
        [{'a': 1, 'b': 8}, {'a': 3, 'b': 16}]
    """
    predicates = _own_predicates(source)

    def predicate(obj: Any) -> bool:
        return conforms_to(obj, predicates)

    return predicate
