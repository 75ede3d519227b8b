"""``dashcompat sorted-index``: insertion indices from the command line.

Examples
    $ dashcompat sorted-index '[10, 20, 20, 30]' 20
    1
    $ dashcompat sorted-index --last '[10, 20, 20, 30]' 20
    3
    $ echo '[{"x": 4}, {"x": 5}]' | dashcompat sorted-index --by x - '{"x": 5}'
    1

Failure Modes
- ARRAY or VALUE is not valid JSON, or ARRAY is not an array → usage error.
- Keys that cannot be compared (e.g. a string against a number) → error
  naming the offending comparison.
"""

from __future__ import annotations

import logging
from typing import Any

import click

from dashcompat.array import (
    sorted_index,
    sorted_index_by,
    sorted_last_index,
    sorted_last_index_by,
)

from .helpers import JsonArray, JsonValue, KeySpec

logger = logging.getLogger(__name__)


def find_index(array: list[Any], value: Any, key_spec: Any, last: bool) -> int:
    """Dispatch to the sorted-index helper selected by the CLI options.

    Args:
        array: The sorted sequence.
        value: The value to place.
        key_spec: Iteratee shorthand, or ``None`` for plain comparison.
        last: Select the highest insertion index.

    Returns:
        int: The insertion index.
    """
    if key_spec is None:
        return sorted_last_index(array, value) if last else sorted_index(array, value)
    if last:
        return sorted_last_index_by(array, value, key_spec)
    return sorted_index_by(array, value, key_spec)


@click.command("sorted-index")
@click.argument("array", type=JsonArray(allow_stdin=True))
@click.argument("value", type=JsonValue())
@click.option(
    "--by",
    "key_spec",
    type=KeySpec(),
    default=None,
    help=(
        "Sort key: a property path (x, a.b[0]), a JSON [key, value] pair, "
        "or a JSON object to match."
    ),
)
@click.option(
    "--last",
    is_flag=True,
    default=False,
    help="Insert after elements with an equal key instead of before them.",
)
def sorted_index_command(
    array: list[Any], value: Any, key_spec: Any, last: bool
) -> None:
    """Print the index at which VALUE should be inserted into ARRAY.

    ARRAY is a JSON array sorted by the chosen key (use - to read it from
    stdin); VALUE is a JSON value.
    """
    logger.debug(
        "sorted-index: %d elements, value=%r, by=%r, last=%s",
        len(array),
        value,
        key_spec,
        last,
    )
    try:
        index = find_index(array, value, key_spec, last)
    except TypeError as e:
        logger.debug("Key comparison failed", exc_info=True)
        raise click.ClickException(f"Cannot compare sort keys: {e}") from e
    click.echo(index)
