"""Trailing trim."""

from typing import Any

from dashcompat.predicate.classify import is_nil


def trim_end(string: Any = None, chars: Any = None, guard: Any = None) -> str:
    """Remove trailing whitespace or the given characters from ``string``.

    Args:
        string: Value to trim; it is converted with ``str``. ``None`` and
            `UNDEFINED` give ``""``.
        chars: Characters to remove; any value, converted with ``str``. Each
            character is removed independently, not as a suffix. ``None`` and
            `UNDEFINED` mean whitespace.
        guard: When given (not nil), ``chars`` is ignored and whitespace is trimmed.
            This lets ``trim_end`` be passed as a callback to ``map``-like
            helpers.

    Returns:
        str: The trimmed string.

    Examples:
        >>> trim_end("  abc  ")
        '  abc'
        >>> trim_end("-_-abc-_-", "_-")
        '-_-abc'
    """
    if is_nil(string):
        return ""
    if not is_nil(guard) or is_nil(chars):
        return str(string).rstrip()
    return str(string).rstrip(str(chars))
