"""Function wrappers."""

from .ary import ary
from .nth_arg import nth_arg

__all__ = ["ary", "nth_arg"]
