"""Value predicates.

Type and shape checks used across the library, including the ordering
classification consumed by the sorted-index helpers.
"""

from .classify import (
    OrderingClass,
    classify,
    is_nan,
    is_nil,
    is_null,
    is_symbol,
    is_undefined,
)
from .conforms import conforms, conforms_to
from .is_match import is_match
from .is_plain_object import is_plain_object
from .weak import is_weak_map, is_weak_set

__all__ = [
    "OrderingClass",
    "classify",
    "conforms",
    "conforms_to",
    "is_match",
    "is_nan",
    "is_nil",
    "is_null",
    "is_plain_object",
    "is_symbol",
    "is_undefined",
    "is_weak_map",
    "is_weak_set",
]
