"""Symbolic atoms.

A `Symbol` has identity but no magnitude: two symbols are equal only when
they are the same object, and they cannot be ordered against anything. They
sort as their own class between ordinary comparables and ``None``.
"""


class Symbol:
    """A unique, unorderable value with an optional description.

    Args:
        description: Label used in ``repr`` only; it plays no part in equality.
    """

    __slots__ = ("description",)

    def __init__(self, description: str | None = None) -> None:
        self.description = description

    def __repr__(self) -> str:
        if self.description is None:
            return "Symbol()"
        return f"Symbol({self.description!r})"
