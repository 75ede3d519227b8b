"""Functional tests for the dashcompat CLI.

Each test invokes the real Click group through `CliRunner`. The flight
recorder is disabled and ``--log-path`` points into ``tmp_path`` so nothing
is written to the user's log directory.
"""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner

from dashcompat import __version__
from dashcompat.entrypoints.cli.main import dashcompat

# pylint: disable=magic-value-comparison


@pytest.fixture(name="invoke")
def _invoke(tmp_path: Path):
    runner = CliRunner()
    base = ["--no-flight-recorder", "--log-path", str(tmp_path / "latest.log")]

    def run(*args: str, stdin: str | None = None):
        return runner.invoke(dashcompat, [*base, *args], input=stdin)

    return run


@pytest.mark.parametrize(
    "args, expected",
    [
        (["[10, 20, 20, 30]", "20"], "1"),
        (["--last", "[10, 20, 20, 30]", "20"], "3"),
        (["[10, 20, 20, 30]", "5"], "0"),
        (["[]", "5"], "0"),
        (["[1, 2, null, NaN]", "null"], "2"),
        (["--last", "[1, 2, null, NaN]", "null"], "3"),
        (["[\"a\", \"c\"]", "\"b\""], "1"),
    ],
)
def test_sorted_index_prints_index(invoke, args, expected):
    """The insertion index is printed on its own line."""
    result = invoke("sorted-index", *args)
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected


@pytest.mark.parametrize(
    "extra, expected",
    [([], "1"), (["--last"], "2")],
)
def test_sorted_index_by_property_from_stdin(invoke, extra, expected):
    """ARRAY can be read from stdin and compared by a property path."""
    result = invoke(
        "sorted-index",
        "--by",
        "x",
        *extra,
        "-",
        '{"x": 5}',
        stdin='[{"x": 4}, {"x": 5}]',
    )
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == expected


def test_sorted_index_by_numeric_property(invoke):
    """A numeric --by reads the digit-named property of JSON objects."""
    result = invoke("sorted-index", "--by", "0", '[{"0": 1}, {"0": 3}]', '{"0": 2}')
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "1"


def test_sorted_index_by_matches_property_pair(invoke):
    """A JSON pair is a matches-property shorthand (False sorts before True)."""
    array = '[{"a": 0}, {"a": 1}, {"a": 1}]'
    result = invoke("sorted-index", "--by", '["a", 1]', array, '{"a": 1}')
    assert result.exit_code == 0, result.output
    assert result.stdout.strip() == "1"


@pytest.mark.parametrize(
    "args",
    [
        ["[1, 2", "3"],
        ["{\"a\": 1}", "3"],
        ["[1, 2]", "nope"],
    ],
)
def test_bad_json_is_usage_error(invoke, args):
    """Malformed JSON, or a non-array ARRAY, exits with a usage error."""
    result = invoke("sorted-index", *args)
    assert result.exit_code == 2


def test_incomparable_keys_report_error(invoke):
    """Keys that cannot be compared produce an error message and exit code 1."""
    result = invoke("sorted-index", "[1, 2, 3]", '"a"')
    assert result.exit_code == 1
    assert "Cannot compare sort keys" in result.output


def test_version(invoke):
    """--version reports the package version."""
    result = invoke("--version")
    assert result.exit_code == 0, result.output
    assert __version__ in result.output
