"""Shared pytest configuration.

Tests get a default marker from the top-level folder they live in
(`tests/unit/` → ``unit``, `tests/functional/` → ``functional``) unless they
already carry it.
"""

from pathlib import Path

import pytest

# pylint: disable=unused-argument

TESTS_ROOT = Path(__file__).parent.resolve()
FOLDER_MARKERS = {"unit": pytest.mark.unit, "functional": pytest.mark.functional}


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Add the folder's default mark to each collected item."""
    for item in items:
        path = item.path.resolve()  # pytest>=8: pathlib.Path
        if TESTS_ROOT not in path.parents:
            continue
        marker = FOLDER_MARKERS.get(path.relative_to(TESTS_ROOT).parts[0])
        if marker is not None and item.get_closest_marker(marker.name) is None:
            item.add_marker(marker)
