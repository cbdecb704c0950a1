# topmark:header:start
#
#   project      : Classmix
#   file         : loaders.py
#   file_relpath : src/classmix/config/loaders.py
#   license      : MIT
#   copyright    : (c) 2026 The Classmix Authors
#
# topmark:header:end

"""Load composition defaults from TOML.

Two sources are recognized:

- ``classmix.toml``, with top-level ``[inherit]`` / ``[mixin]`` tables;
- ``pyproject.toml``, with ``[tool.classmix.inherit]`` / ``[tool.classmix.mixin]``.

Parsing is done with `tomlkit` and unwrapped to plain `dict` structures before
being validated by [`CompositionDefaults.from_mapping`][classmix.core.options.CompositionDefaults.from_mapping].

Example ``pyproject.toml`` section:

```toml
[tool.classmix.mixin]
override = false
copy_instance_members = true

[tool.classmix.inherit]
copyStaticMembers = true
```

The loaded defaults are returned, never stored: pass them to the composers
(``apply_mixin(t, s, defaults.mixin)``).
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from classmix.config.logging import get_logger
from classmix.constants import CONFIG_FILE_NAME, PYPROJECT_FILE_NAME, PYPROJECT_TOOL_TABLE
from classmix.core.errors import ConfigLoadError
from classmix.core.options import CompositionDefaults

if TYPE_CHECKING:
    from classmix.config.logging import ClassmixLogger

logger: ClassmixLogger = get_logger(__name__)

TomlTable = dict[str, Any]


def load_toml_dict(path: Path) -> TomlTable:
    """Read and parse a TOML file into plain Python containers.

    Args:
        path (Path): File to read.

    Returns:
        TomlTable: The parsed document.

    Raises:
        ConfigLoadError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigLoadError(f"Cannot read config file {path}: {exc}") from exc
    try:
        return tomlkit.parse(text).unwrap()
    except TomlkitParseError as exc:
        raise ConfigLoadError(f"Invalid TOML in {path}: {exc}") from exc


def extract_classmix_table(doc: TomlTable, *, is_pyproject: bool) -> TomlTable | None:
    """Return the classmix settings in ``doc``, or ``None`` if there are none.

    For ``pyproject.toml`` documents the settings live under ``[tool.classmix]``;
    for ``classmix.toml`` the whole document is the settings table.
    """
    if not is_pyproject:
        return doc
    table: Any = doc
    for key in PYPROJECT_TOOL_TABLE:
        if not isinstance(table, dict) or key not in table:
            return None
        table = table[key]
    if not isinstance(table, dict):
        raise ConfigLoadError(f"[{'.'.join(PYPROJECT_TOOL_TABLE)}] must be a table")
    return table


def load_composition_defaults(path: Path) -> CompositionDefaults:
    """Load composition defaults from ``classmix.toml`` or ``pyproject.toml``.

    The file kind is chosen by name: ``pyproject.toml`` is read from
    ``[tool.classmix]``, anything else is read as a standalone config. A
    ``pyproject.toml`` without a classmix table yields plain defaults.

    Args:
        path (Path): Configuration file.

    Returns:
        CompositionDefaults: The loaded defaults.

    Raises:
        ConfigLoadError: If the file cannot be read or parsed.
        OptionsError: If the settings contain unknown keys or non-boolean values.
    """
    doc: TomlTable = load_toml_dict(path)
    table: TomlTable | None = extract_classmix_table(doc, is_pyproject=path.name == PYPROJECT_FILE_NAME)
    if table is None:
        logger.debug("No classmix settings in %s; using defaults", path)
        return CompositionDefaults()
    defaults: CompositionDefaults = CompositionDefaults.from_mapping(table)
    logger.debug("Loaded composition defaults from %s: %s", path, defaults.to_dict())
    return defaults


def discover_config(start: Path) -> Path | None:
    """Find the nearest config file at or above ``start``.

    In each directory, ``classmix.toml`` wins over ``pyproject.toml``; a
    ``pyproject.toml`` only counts if it has a ``[tool.classmix]`` table.
    Unparsable ``pyproject.toml`` files are skipped with a warning.

    Args:
        start (Path): File or directory to start from.

    Returns:
        Path | None: The config file, or ``None`` if none was found.
    """
    directory: Path = start if start.is_dir() else start.parent
    for candidate_dir in (directory, *directory.parents):
        standalone: Path = candidate_dir / CONFIG_FILE_NAME
        if standalone.is_file():
            return standalone
        pyproject: Path = candidate_dir / PYPROJECT_FILE_NAME
        if pyproject.is_file():
            try:
                doc: TomlTable = load_toml_dict(pyproject)
            except ConfigLoadError as exc:
                logger.warning("Skipping %s during config discovery: %s", pyproject, exc)
                continue
            if extract_classmix_table(doc, is_pyproject=True) is not None:
                return pyproject
    return None
