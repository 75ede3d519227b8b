"""CLI helpers: JSON argument types and logger-level parsing."""

from .json_args import JsonArray, JsonValue, KeySpec
from .log_level_parser import parse_log_level

__all__ = ["JsonArray", "JsonValue", "KeySpec", "parse_log_level"]
