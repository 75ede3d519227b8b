"""String helpers."""

from .trim_end import trim_end

__all__ = ["trim_end"]
