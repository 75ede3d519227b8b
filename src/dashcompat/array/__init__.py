"""Array helpers.

The sorted-index family lives in `sorted_index`; the search it shares is in
the private `_ordered_search` module.
"""

from .reverse import reverse
from .sorted_index import (
    sorted_index,
    sorted_index_by,
    sorted_last_index,
    sorted_last_index_by,
)
from .take_while import take_while

__all__ = [
    "reverse",
    "sorted_index",
    "sorted_index_by",
    "sorted_last_index",
    "sorted_last_index_by",
    "take_while",
]
