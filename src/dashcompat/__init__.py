"""DASHCOMPAT

Small, independent data-manipulation helpers (array, string, function and
predicate utilities) that reproduce lodash's behaviour in Python, historical
edge cases included.

``None`` stands for ``null``; `UNDEFINED` stands for ``undefined`` and is what
missing properties resolve to. `Symbol` provides unorderable atoms.
"""

from ._internal.symbol import Symbol
from ._internal.undefined import UNDEFINED
from .array import (
    reverse,
    sorted_index,
    sorted_index_by,
    sorted_last_index,
    sorted_last_index_by,
    take_while,
)
from .function import ary, nth_arg
from .predicate import (
    conforms,
    conforms_to,
    is_match,
    is_nan,
    is_nil,
    is_null,
    is_plain_object,
    is_symbol,
    is_undefined,
    is_weak_map,
    is_weak_set,
)
from .string import trim_end
from .util import (
    get,
    identity,
    iteratee,
    matches,
    matches_property,
    property_,
    to_integer,
    to_path,
)

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "UNDEFINED",
    "Symbol",
    "ary",
    "conforms",
    "conforms_to",
    "get",
    "identity",
    "is_match",
    "is_nan",
    "is_nil",
    "is_null",
    "is_plain_object",
    "is_symbol",
    "is_undefined",
    "is_weak_map",
    "is_weak_set",
    "iteratee",
    "matches",
    "matches_property",
    "nth_arg",
    "property_",
    "reverse",
    "sorted_index",
    "sorted_index_by",
    "sorted_last_index",
    "sorted_last_index_by",
    "take_while",
    "to_integer",
    "to_path",
    "trim_end",
]
