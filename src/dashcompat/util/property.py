"""Property paths and accessors.

A path is either a list of keys or a string such as ``"a.b[0]['c.d']"``.
String paths are parsed with `to_path`; bracketed integers become ``int``
keys, everything else stays a string. A string that is itself a key of the
object wins over its parsed form, so ``get({"a.b": 1}, "a.b") == 1``.
"""

import re
from collections.abc import Callable
from typing import Any

from dashcompat._internal.lookup import has_key, lookup
from dashcompat._internal.undefined import UNDEFINED

_PATH_TOKEN = re.compile(
    r"""\[(?P<index>-?\d+)\]"""
    r"""|\[(?P<quote>["'])(?P<quoted>.*?)(?P=quote)\]"""
    r"""|(?P<name>[^.\[\]]+)"""
)

_ABSENT = object()


def to_path(path: Any) -> list[Any]:
    """Convert ``path`` to a list of keys.

    Examples:
        >>> to_path("a.b[0].c")
        ['a', 'b', 0, 'c']
        >>> to_path(["a", 1])
        ['a', 1]
        >>> to_path(3)
        [3]
    """
    if isinstance(path, (list, tuple)):
        return list(path)
    if not isinstance(path, str):
        return [path]
    keys: list[Any] = []
    for match in _PATH_TOKEN.finditer(path):
        if match["index"] is not None:
            keys.append(int(match["index"]))
        elif match["quote"] is not None:
            keys.append(match["quoted"])
        else:
            keys.append(match["name"])
    return keys


def get(obj: Any, path: Any, default: Any = UNDEFINED) -> Any:
    """Return the value at ``path`` of ``obj``.

    Args:
        obj: Object to query.
        path: Key, key list or path string.
        default: Returned when the path does not resolve or resolves to
            `UNDEFINED`.

    Returns:
        The resolved value or ``default``.
    """
    if not isinstance(path, (list, tuple)) and has_key(obj, path):
        keys = [path]
    else:
        keys = to_path(path)
    if not keys:
        return default
    for key in keys:
        obj = lookup(obj, key, _ABSENT)
        if obj is _ABSENT:
            return default
    return default if obj is UNDEFINED else obj


def property_(path: Any) -> Callable[[Any], Any]:
    """Create a function returning the value at ``path`` of its argument.

    Examples:
        >>> property_("x")({"x": 4})
        4
        >>> property_("x")({})
        UNDEFINED
    """

    def accessor(obj: Any) -> Any:
        return get(obj, path)

    return accessor
