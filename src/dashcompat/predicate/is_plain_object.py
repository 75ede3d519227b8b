"""Plain-object check."""

from typing import Any


def is_plain_object(value: Any) -> bool:
    """Return True if ``value`` is a plain ``dict``.

    Only exact ``dict`` instances qualify. Subclasses (``OrderedDict``,
    ``defaultdict``, user classes) carry behaviour of their own and are not
    plain, and neither are other mappings or arbitrary objects.

    Examples:
        >>> is_plain_object({"a": 1})
        True
        >>> from collections import OrderedDict
        >>> is_plain_object(OrderedDict())
        False
    """
    return type(value) is dict  # pylint: disable=unidiomatic-typecheck
