"""Unit tests for dashcompat.array.sorted_index.

Covers the four public entry points: plain comparisons, iteratee shorthands,
the ordering of mixed key classes, empty/absent input, error propagation and
the insertion-index cap.
"""

import math
from collections.abc import Sequence

import pytest

from dashcompat import (
    UNDEFINED,
    Symbol,
    sorted_index,
    sorted_index_by,
    sorted_last_index,
    sorted_last_index_by,
)
from dashcompat.config import MAX_ARRAY_INDEX, MAX_ARRAY_LENGTH

# pylint: disable=magic-value-comparison

NAN = math.nan
SYMBOL = Symbol("s")

# Keys grouped in the order the comparator induces:
# comparables, symbols, None, UNDEFINED, NaN.
MIXED = [1, 2, 2, 3, SYMBOL, None, UNDEFINED, NAN, NAN]


# ============================================================================
#                               Plain values
# ============================================================================


def test_sorted_index_places_between_neighbours():
    """A value between two elements goes between them."""
    assert sorted_index([30, 50], 40) == 1


@pytest.mark.parametrize(
    "array, value, first, last",
    [
        ([4, 5, 5, 5, 6], 5, 1, 4),
        ([4, 5, 5, 5, 6], 3, 0, 0),
        ([4, 5, 5, 5, 6], 7, 5, 5),
        ([1.5, 2.5], 2, 1, 1),
        (["a", "b", "b", "c"], "b", 1, 3),
        (["a", "c"], "b", 1, 1),
        ((1, 2, 3), 2, 1, 2),
        (range(0, 10, 2), 5, 3, 3),
    ],
)
def test_first_and_last_boundaries(array, value, first, last):
    """`sorted_index` is the lowest and `sorted_last_index` the highest boundary."""
    assert sorted_index(array, value) == first
    assert sorted_last_index(array, value) == last
    assert sorted_index_by(array, value) == first
    assert sorted_last_index_by(array, value) == last


def test_run_length_of_equal_values():
    """The difference between both boundaries is the number of equal elements."""
    array = [1, 2, 2, 2, 2, 3]
    assert sorted_last_index(array, 2) - sorted_index(array, 2) == 4


def test_input_is_not_mutated():
    """The search never modifies the sequence."""
    array = [3, 1, 2]
    sorted_index(array, 2)
    sorted_last_index_by(array, 2, lambda n: -n)
    assert array == [3, 1, 2]


# ============================================================================
#                               Empty / absent input
# ============================================================================


@pytest.mark.parametrize("array", [[], (), None, UNDEFINED])
@pytest.mark.parametrize("value", [1, "a", None, UNDEFINED, NAN, SYMBOL])
def test_empty_or_absent_sequence_returns_zero(array, value):
    """Absent or empty input is a normal case answered with 0."""
    assert sorted_index(array, value) == 0
    assert sorted_last_index(array, value) == 0
    assert sorted_index_by(array, value, "x") == 0
    assert sorted_last_index_by(array, value, "x") == 0


def test_key_is_not_called_for_empty_sequence():
    """The key extractor is not invoked when there is nothing to search."""
    calls = []

    def key(value):
        calls.append(value)
        return value

    assert sorted_index_by([], 1, key) == 0
    assert sorted_last_index_by(None, 1, key) == 0
    assert not calls


# ============================================================================
#                               Mixed key classes
# ============================================================================


@pytest.mark.parametrize(
    "value, first, last",
    [
        (0, 0, 0),
        (2, 1, 3),
        (4, 4, 4),
        (SYMBOL, 4, 5),
        (Symbol("other"), 4, 5),
        (None, 5, 6),
        (UNDEFINED, 6, 7),
        (NAN, 7, 9),
    ],
)
def test_mixed_classes_by_identity(value, first, last):
    """Each class sorts after the previous one; ties inside a class use the flag."""
    assert sorted_index_by(MIXED, value) == first
    assert sorted_last_index_by(MIXED, value) == last


@pytest.mark.parametrize(
    "value, first, last",
    [(2, 1, 3), (None, 5, 6), (UNDEFINED, 6, 7), (NAN, 7, 9), (SYMBOL, 4, 5)],
)
def test_mixed_classes_without_iteratee(value, first, last):
    """The plain entry points agree with the identity-keyed ones."""
    assert sorted_index(MIXED, value) == first
    assert sorted_last_index(MIXED, value) == last


def test_missing_property_sorts_as_undefined():
    """A record without the key property gets an UNDEFINED key."""
    records = [{"x": 1}, {"x": None}, {}, {"x": NAN}]
    assert sorted_index_by(records, {}, "x") == 2
    assert sorted_last_index_by(records, {}, "x") == 3
    assert sorted_index_by(records, {"x": 0}, "x") == 0
    assert sorted_last_index_by(records, {"x": NAN}, "x") == 4


def test_symbol_probe_lands_between_comparables_and_none():
    """Symbols insert after every comparable and before every None."""
    array = [1, 2, None, None]
    assert sorted_index(array, Symbol()) == 2
    assert sorted_last_index(array, Symbol()) == 2


# ============================================================================
#                               Iteratee shorthands
# ============================================================================


def test_iteratee_function():
    """A function computes the key for the value and each element."""
    scores = {"thirty": 30, "forty": 40, "fifty": 50}
    assert sorted_index_by(["thirty", "fifty"], "forty", scores.get) == 1


def test_iteratee_property_name_matches_function():
    """A property name behaves like a function extracting that property."""
    records = [{"x": 4}, {"x": 5}, {"x": 5}, {"x": 6}]
    probe = {"x": 5}
    assert sorted_index_by(records, probe, "x") == sorted_index_by(
        records, probe, lambda r: r["x"]
    )
    assert sorted_index_by(records, probe, "x") == 1
    assert sorted_last_index_by(records, probe, "x") == 3


def test_iteratee_deep_path():
    """Property paths reach into nested records."""
    records = [{"a": {"b": 1}}, {"a": {"b": 3}}]
    assert sorted_index_by(records, {"a": {"b": 2}}, "a.b") == 1


def test_iteratee_matches_property_pair():
    """A [key, value] pair sorts by whether the property equals the value."""
    records = [{"active": False}, {"active": False}, {"active": True}]
    assert sorted_index_by(records, {"active": True}, ["active", True]) == 2
    assert sorted_last_index_by(records, {"active": False}, ["active", True]) == 2


def test_iteratee_matches_mapping():
    """A mapping sorts by whether the element matches it partially."""
    records = [{"a": 1, "b": 1}, {"a": 2, "b": 2}, {"a": 2, "b": 3}]
    assert sorted_index_by(records, {"a": 2}, {"a": 2}) == 1
    assert sorted_last_index_by(records, {"a": 2}, {"a": 2}) == 3


# ============================================================================
#                               Errors
# ============================================================================


def test_key_errors_propagate():
    """Exceptions raised by the key extractor reach the caller unchanged."""

    class Boom(Exception):
        """Raised by the key."""

    def key(value):
        if value == 3:
            raise Boom(value)
        return value

    with pytest.raises(Boom):
        sorted_index_by([1, 2, 3, 4, 5], 4, key)


def test_incomparable_keys_raise_type_error():
    """Comparables that Python cannot order raise TypeError."""
    with pytest.raises(TypeError):
        sorted_index(["a", "b"], 1)
    with pytest.raises(TypeError):
        sorted_last_index_by([1, 2], "a")


# ============================================================================
#                               Index cap
# ============================================================================


class _HugeZeros(Sequence):
    """A sequence of MAX_ARRAY_LENGTH zeros, without the memory."""

    def __len__(self) -> int:
        return MAX_ARRAY_LENGTH

    def __getitem__(self, index):
        return 0


def test_boundary_is_capped_at_max_index():
    """Past-the-end positions of maximum-length sequences are capped."""
    huge = _HugeZeros()
    assert sorted_last_index(huge, 0) == MAX_ARRAY_INDEX
    assert sorted_index_by(huge, 1) == MAX_ARRAY_INDEX
    assert sorted_index(huge, 0) == 0
