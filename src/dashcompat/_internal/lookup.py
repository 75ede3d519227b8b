"""Single-step property lookup.

One key, one object: mapping keys first, then sequence indices, then
attributes. Missing properties resolve to a default instead of raising.

Property names are strings in JavaScript, so an integer key also finds the
mapping entry spelled with its digits, and the other way round:
``lookup({"0": "a"}, 0) == "a"`` and ``lookup({0: "a"}, "0") == "a"``.
"""

from collections.abc import Hashable, Mapping, Sequence
from typing import Any

from .undefined import UNDEFINED

_ABSENT = object()


def _as_index(key: Any) -> int | None:
    if isinstance(key, bool):
        return None
    if isinstance(key, int):
        return key
    if isinstance(key, str) and key.isdecimal() and key.isascii():
        index = int(key)
        # "007" names a property of its own, not index 7.
        return index if str(index) == key else None
    return None


def _mapping_keys(key: Any) -> list[Any]:
    if isinstance(key, int) and not isinstance(key, bool):
        return [key, str(key)]
    index = _as_index(key)
    return [key] if index is None else [key, index]


def lookup(obj: Any, key: Any, default: Any = UNDEFINED) -> Any:
    """Return ``obj``'s property ``key`` or ``default`` when it has none.

    Args:
        obj: Mapping, sequence or any object with attributes.
        key: Mapping key, non-negative index (``int`` or decimal string) or
            attribute name.
        default: Value returned when the property is missing.

    Returns:
        The property value, or ``default``.
    """
    if obj is None or obj is UNDEFINED:
        return default
    if isinstance(obj, Mapping):
        if not isinstance(key, Hashable):
            return default
        for candidate in _mapping_keys(key):
            if candidate in obj:
                return obj[candidate]
        return default
    if isinstance(obj, Sequence):
        index = _as_index(key)
        if index is not None:
            # Negative indices are not properties of an array.
            return obj[index] if 0 <= index < len(obj) else default
    if isinstance(key, str):
        return getattr(obj, key, default)
    return default


def has_key(obj: Any, key: Any) -> bool:
    """Return True if ``obj`` has a property ``key``, whatever its value."""
    return lookup(obj, key, _ABSENT) is not _ABSENT
