# topmark:header:start
#
#   project      : TextShell
#   file         : io.py
#   file_relpath : src/textshell/config/io.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Load TOML configuration sources and extract typed values.

Configuration is read from ``textshell.toml`` (top-level keys) or from the
``[tool.textshell]`` table of a ``pyproject.toml``. Parsing is done with
`tomlkit` and returned as plain ``dict`` structures.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, cast

import tomlkit
from tomlkit.exceptions import ParseError as TomlkitParseError

from textshell.config.errors import ConfigError
from textshell.config.logging import get_logger
from textshell.constants import PYPROJECT_TOML_NAME, PYPROJECT_TOOL_SECTION

if TYPE_CHECKING:
    from pathlib import Path

    from textshell.config.logging import TextshellLogger

TomlTable = dict[str, Any]

logger: TextshellLogger = get_logger(__name__)


def load_toml_dict(path: Path) -> TomlTable:
    """Load and parse a TOML file from the filesystem.

    Args:
        path (Path): Path to a TOML document.

    Returns:
        TomlTable: The parsed TOML content.

    Raises:
        ConfigError: If the file cannot be read or is not valid TOML.
    """
    try:
        text: str = path.read_text(encoding="utf-8")
        doc: tomlkit.TOMLDocument = tomlkit.parse(text)
    except OSError as e:
        logger.error("Error loading TOML from %s: %s", path, e)
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except TomlkitParseError as e:
        logger.error("Error decoding TOML from %s: %s", path, e)
        raise ConfigError(f"Invalid TOML in {path}: {e}") from e
    data_any: Any = doc.unwrap()
    return cast("TomlTable", data_any) if isinstance(data_any, dict) else {}


def extract_textshell_table(path: Path, data: TomlTable) -> TomlTable | None:
    """Return the TextShell settings held by a parsed config document.

    For ``pyproject.toml`` this is the ``[tool.textshell]`` table (``None`` when
    absent); for any other file it is the whole document.
    """
    if path.name != PYPROJECT_TOML_NAME:
        return data
    tool: Any = data.get("tool", {})
    if not isinstance(tool, dict):
        return None
    table: Any = cast("TomlTable", tool).get(PYPROJECT_TOOL_SECTION)
    return cast("TomlTable", table) if isinstance(table, dict) else None


def get_string_value_or_none(table: TomlTable, key: str) -> str | None:
    """Extract an optional string value from a TOML table.

    Raises:
        ConfigError: If the key is present but not a string.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, str):
        return value
    raise ConfigError(f"Config key {key!r} must be a string, got {type(value).__name__}")


def get_int_value_or_none(table: TomlTable, key: str) -> int | None:
    """Extract an optional integer value from a TOML table.

    Raises:
        ConfigError: If the key is present but not an integer.
    """
    value: Any = table.get(key)
    if value is None:
        return None
    # bool is a subclass of int; reject it explicitly
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    raise ConfigError(f"Config key {key!r} must be an integer, got {type(value).__name__}")


def get_bool_value_or_none(table: TomlTable, key: str) -> bool | None:
    """Extract an optional boolean value from a TOML table."""
    value: Any = table.get(key)
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    raise ConfigError(f"Config key {key!r} must be a boolean, got {type(value).__name__}")

