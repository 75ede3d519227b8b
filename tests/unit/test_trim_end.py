"""Unit tests for dashcompat.string.trim_end."""

import pytest

from dashcompat import UNDEFINED, trim_end


@pytest.mark.parametrize(
    "args, expected",
    [
        (("  abc  ",), "  abc"),
        (("\t\nabc\r\n",), "\t\nabc"),
        (("-_-abc-_-", "_-"), "-_-abc"),
        (("abcabc", "cb"), "abca"),
        (("123000", 0), "123"),
        ((None,), ""),
        ((), ""),
        ((12.5,), "12.5"),
    ],
)
def test_trim_end(args, expected):
    """Trailing whitespace, or the given characters, are removed."""
    assert trim_end(*args) == expected


def test_trim_end_guard_ignores_chars():
    """With a guard, chars is ignored and whitespace is trimmed."""
    assert trim_end("abc  ", "c", object()) == "abc"


def test_trim_end_as_map_callback():
    """Works as a map callback thanks to the guard argument."""
    values = ["  a  ", "b  "]
    assert list(map(trim_end, values, [0, 1], [values, values])) == ["  a", "b"]


def test_trim_end_undefined_string():
    """UNDEFINED reads as a missing string."""
    assert trim_end(UNDEFINED) == ""


@pytest.mark.parametrize("chars", [None, UNDEFINED])
def test_trim_end_nil_chars_trims_whitespace(chars):
    """Nil chars fall back to whitespace; the letters of the sentinel survive."""
    assert trim_end("FIND  ", chars) == "FIND"


def test_trim_end_undefined_guard_keeps_chars():
    """An UNDEFINED guard counts as no guard."""
    assert trim_end("abcc", "c", UNDEFINED) == "ab"
