"""Partial deep comparison.

``is_match(obj, source)`` answers "does ``obj`` contain ``source``?":

* mapping sources: every key of ``source`` must be a property of ``obj`` whose
  value matches the source value;
* list/tuple sources: every source element must match some element of the
  object's sequence (order does not matter, extra elements are fine);
* anything else: SameValueZero equality, so NaN matches NaN and ``True`` does
  not match ``1``.

Empty mapping and list sources match any mapping or sequence respectively.
"""

import numbers
from collections.abc import Mapping, Sequence
from typing import Any

from dashcompat._internal.lookup import has_key, lookup
from dashcompat._internal.symbol import Symbol
from dashcompat._internal.undefined import UNDEFINED

from .classify import is_nan


def same_value_zero(value: Any, other: Any) -> bool:
    """Return True if ``value`` and ``other`` are the same under SameValueZero."""
    if is_nan(value) and is_nan(other):
        return True
    if isinstance(value, bool) is not isinstance(other, bool):
        return False
    return bool(value == other)


def _is_list_like(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _is_object_like(value: Any) -> bool:
    if value is None or value is UNDEFINED:
        return False
    if isinstance(value, (str, bytes, numbers.Number, Symbol)):
        return False
    return not _is_list_like(value)


def base_is_match(value: Any, source: Any) -> bool:
    """Compare ``value`` against ``source`` partially, at any depth."""
    if isinstance(source, Mapping):
        return _is_object_like(value) and is_match(value, source)
    if _is_list_like(source):
        if not _is_list_like(value):
            return False
        if len(value) < len(source):
            return False
        return all(
            any(base_is_match(candidate, wanted) for candidate in value)
            for wanted in source
        )
    return same_value_zero(value, source)


def is_match(obj: Any, source: Mapping[Any, Any]) -> bool:
    """Return True if ``obj`` holds every property of ``source``.

    Args:
        obj: Object to inspect (mapping, sequence or attribute object).
        source: Properties to look for.

    Returns:
        bool: True when each ``source`` property is present on ``obj`` and
        matches partially.

    Examples:
        >>> is_match({"a": 1, "b": 2}, {"b": 2})
        True
        >>> is_match({"a": 1}, {"a": 1, "b": None})
        False
    """
    if obj is None or obj is UNDEFINED:
        return not source
    for key, wanted in source.items():
        if not has_key(obj, key):
            return False
        if not base_is_match(lookup(obj, key), wanted):
            return False
    return True
