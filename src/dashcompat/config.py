"""Configuration constants and helpers for dashcompat.

This module centralizes the numeric limits shared by the helpers and the small
amount of environment-driven configuration used by the CLI.
"""

from pathlib import Path

from platformdirs import user_log_dir

ENV_PREFIX = "DASHCOMPAT"  # pragma: no mutate

# JavaScript array length limits.
MAX_ARRAY_LENGTH = 4294967295
MAX_ARRAY_INDEX = MAX_ARRAY_LENGTH - 1
HALF_MAX_ARRAY_LENGTH = MAX_ARRAY_LENGTH >> 1

# Largest finite double; `to_integer` clamps infinities to it.
MAX_INTEGER = 1.7976931348623157e308


def env_var(name: str) -> str:
    """Return the prefixed environment variable name for a setting.

    Args:
        name: Setting name, e.g. ``"LOG_PATH"``.

    Returns:
        The full variable name, e.g. ``"DASHCOMPAT_LOG_PATH"``.
    """
    return f"{ENV_PREFIX}_{name}"


def default_log_path() -> Path:
    """Return the default flight-recorder file location.

    The directory is created if needed so the CLI can open the file lazily.

    Returns:
        ``<user log dir>/dashcompat/latest.log``.
    """
    log_dir = user_log_dir("dashcompat", appauthor=False, ensure_exists=True)
    return Path(log_dir) / "latest.log"
