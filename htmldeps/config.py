"""Environment-driven defaults.

Only the command line reads these; library functions take explicit
arguments and fall back to the constants below. Each getter is read at call
time so nothing here is cached module state.

  HTMLDEPS_SRC_TYPE    comma separated source preference, e.g. ``file,href``
  HTMLDEPS_OUTPUT_DIR  default staging directory for the ``stage`` command
  HTMLDEPS_LOG_LEVEL   log level for the command line, default ``WARNING``
"""

import os
from typing import Optional

# URL first: an href is usable as-is, a file path usually needs staging.
DEFAULT_SRC_TYPE: tuple[str, ...] = ("href", "file")

DEFAULT_LOG_LEVEL = "WARNING"


def parse_src_type(value: str) -> tuple[str, ...]:
    """Split ``"href, file"`` into ``("href", "file")``, dropping blanks."""
    return tuple(part.strip() for part in value.split(",") if part.strip())


def src_type_from_env() -> Optional[tuple[str, ...]]:
    raw = os.environ.get("HTMLDEPS_SRC_TYPE")
    if not raw:
        return None
    return parse_src_type(raw) or None


def output_dir_from_env() -> Optional[str]:
    return os.environ.get("HTMLDEPS_OUTPUT_DIR") or None


def log_level_from_env() -> str:
    return os.environ.get("HTMLDEPS_LOG_LEVEL") or DEFAULT_LOG_LEVEL
