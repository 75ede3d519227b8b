"""Weak collection checks."""

import weakref
from typing import Any


def is_weak_map(value: Any) -> bool:
    """Return True if ``value`` is a weakly keyed or weakly valued dictionary."""
    return isinstance(value, (weakref.WeakKeyDictionary, weakref.WeakValueDictionary))


def is_weak_set(value: Any) -> bool:
    """Return True if ``value`` is a `weakref.WeakSet`."""
    return isinstance(value, weakref.WeakSet)
