"""The ``UNDEFINED`` sentinel.

Python has a single "nothing" value, ``None``, which plays the part of
JavaScript's ``null``. Absence (``undefined``) needs its own marker so
that the two can sort differently and so that a missing property can be told
apart from a property explicitly set to ``None``.

* ``UNDEFINED`` — no value at all (missing key, missing argument).
* ``None`` — an explicit null.
"""

from dataclasses import dataclass


def _get_undefined() -> "_UndefinedType":
    # Factory used by pickle to retrieve the one true instance.
    return UNDEFINED


@dataclass(frozen=True)
class _UndefinedType:
    """Sentinel for a value that is absent rather than null."""

    def __bool__(self) -> bool:  # falsy, like the value it stands for
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self):  # keep singleton on pickle
        return (_get_undefined, ())


# Singleton instance
UNDEFINED = _UndefinedType()
