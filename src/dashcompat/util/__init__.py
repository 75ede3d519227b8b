"""Utility helpers: callback shorthands, property access and coercion."""

from .iteratee import identity, iteratee, matches, matches_property
from .property import get, property_, to_path
from .to_integer import to_finite, to_integer, to_number

__all__ = [
    "get",
    "identity",
    "iteratee",
    "matches",
    "matches_property",
    "property_",
    "to_finite",
    "to_integer",
    "to_number",
    "to_path",
]
