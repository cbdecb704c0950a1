# topmark:header:start
#
#   project      : Classmix
#   file         : constants.py
#   file_relpath : src/classmix/constants.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Classmix Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version
from typing import Final

try:
    CLASSMIX_VERSION: str = get_version("classmix")
except PackageNotFoundError:  # running from a source checkout
    CLASSMIX_VERSION = "0.0.0"

# Reserved static member names.
BASE_KEY: Final[str] = "__base__"
MIXINS_KEY: Final[str] = "__mixins__"

LOG_LEVEL_ENV_VAR: Final[str] = "CLASSMIX_LOG_LEVEL"

# Configuration sources.
CONFIG_FILE_NAME: Final[str] = "classmix.toml"
PYPROJECT_FILE_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_TABLE: Final[tuple[str, str]] = ("tool", "classmix")
