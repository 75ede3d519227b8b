"""Click parameter types for JSON command-line arguments.

Sequences and probe values are passed to the CLI as JSON text. ``null`` maps
to ``None`` and the non-standard ``NaN`` / ``Infinity`` literals are accepted,
so every ordering class except symbols can be expressed from a shell.
"""

import json
from typing import Any

import click


class JsonValue(click.ParamType):
    """Any JSON value. ``-`` reads the text from stdin when ``allow_stdin`` is set."""

    name = "json"

    def __init__(self, allow_stdin: bool = False) -> None:
        self.allow_stdin = allow_stdin

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Any:
        if not isinstance(value, str):  # already converted (defaults, tests)
            return value
        if value == "-" and self.allow_stdin:
            value = click.get_text_stream("stdin").read()
        try:
            return json.loads(value)
        except json.JSONDecodeError as e:
            self.fail(f"{value!r} is not valid JSON: {e.msg}", param, ctx)


class JsonArray(JsonValue):
    """A JSON array, converted to a list."""

    name = "json-array"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Any:
        result = super().convert(value, param, ctx)
        if not isinstance(result, list):
            self.fail(f"expected a JSON array, got {type(result).__name__}", param, ctx)
        return result


class KeySpec(click.ParamType):
    """An iteratee shorthand.

    Text that parses as JSON is used as parsed (``'["active", true]'``,
    ``'{"x": 1}'``, ``0``); anything else is a property path such as ``x`` or
    ``a.b[0]``.
    """

    name = "key-spec"

    def convert(
        self, value: Any, param: click.Parameter | None, ctx: click.Context | None
    ) -> Any:
        if not isinstance(value, str):
            return value
        try:
            return json.loads(value)
        except json.JSONDecodeError:
            return value
