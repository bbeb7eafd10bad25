# topmark:header:start
#
#   project      : TextShell
#   file         : __init__.py
#   file_relpath : src/textshell/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration handling for TextShell.

This module defines the immutable `Config` snapshot and its mutable builder
`MutableConfig`. Layers are merged with clear precedence (lowest first):

1. Runtime defaults (in code, no I/O).
2. Discovered config files, walking up from the working directory
   (root-most first, nearest last; within a directory ``pyproject.toml``
   then ``textshell.toml``). A file with ``root = true`` stops the walk.
3. An explicit ``--config`` file.
4. CLI overrides.

Example ``textshell.toml``:

```toml
locale = "en_US.UTF-8"   # LC_COLLATE used by `sort` ("" = environment default)
newline = "auto"         # "auto" | "lf" | "crlf"
numeric = true           # compare digit runs by value in `sort`
```
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from enum import Enum
from pathlib import Path
from typing import Any

from textshell.config.errors import ConfigError
from textshell.config.io import (
    TomlTable,
    extract_textshell_table,
    get_bool_value_or_none,
    get_int_value_or_none,
    get_string_value_or_none,
    load_toml_dict,
)
from textshell.config.logging import TextshellLogger, get_logger
from textshell.constants import PYPROJECT_TOML_NAME, TEXTSHELL_TOML_NAME

# ArgsLike: generic mapping accepted by config loaders (CLI namespaces and API dicts).
ArgsLike = Mapping[str, Any]

logger: TextshellLogger = get_logger(__name__)


class NewlineMode(str, Enum):
    """Line break used when lines are joined back into text.

    Attributes:
        AUTO: Reuse the line break detected in the input (``\\n`` if none).
        LF: Always ``\\n``.
        CRLF: Always ``\\r\\n``.
    """

    AUTO = "auto"
    LF = "lf"
    CRLF = "crlf"

    @classmethod
    def parse(cls, value: str) -> NewlineMode:
        """Return the member for ``value`` (case-insensitive).

        Raises:
            ConfigError: If ``value`` names no member.
        """
        try:
            return cls(value.strip().lower())
        except ValueError as exc:
            choices = ", ".join(m.value for m in cls)
            raise ConfigError(f"Invalid newline mode {value!r} (expected: {choices})") from exc


# ------------------ Immutable runtime config ------------------


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable runtime configuration for TextShell.

    Attributes:
        verbosity_level (int | None): None = inherit, 0 = terse, 1+ = verbose.
        locale (str): ``LC_COLLATE`` locale used by ``sort``; ``""`` keeps the
            environment default.
        numeric (bool): Compare digit runs by numeric value in ``sort``.
        newline (NewlineMode): Line break policy when rejoining lines.
        config_files (tuple[Path, ...]): Config files merged into this snapshot.
    """

    verbosity_level: int | None
    locale: str
    numeric: bool
    newline: NewlineMode
    config_files: tuple[Path, ...]


@dataclass
class MutableConfig:
    """Mutable configuration builder; see the module docstring for precedence.

    ``None`` means "not set by this layer" so `merge_with` can tell an explicit
    value from an inherited one.
    """

    verbosity_level: int | None = None
    locale: str | None = None
    numeric: bool | None = None
    newline: NewlineMode | None = None
    config_files: list[Path] = field(default_factory=list)

    def freeze(self) -> Config:
        """Resolve unset values to defaults and return an immutable `Config`."""
        return Config(
            verbosity_level=self.verbosity_level,
            locale=self.locale if self.locale is not None else "",
            numeric=self.numeric if self.numeric is not None else True,
            newline=self.newline or NewlineMode.AUTO,
            config_files=tuple(self.config_files),
        )

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return the runtime defaults (no I/O)."""
        return cls(locale="", numeric=True, newline=NewlineMode.AUTO)

    @classmethod
    def from_toml_dict(cls, data: TomlTable, *, source: Path | None = None) -> MutableConfig:
        """Build a layer from a TOML table of TextShell settings.

        Unknown keys are logged and ignored.

        Raises:
            ConfigError: If a known key has an invalid value.
        """
        known: set[str] = {"locale", "numeric", "newline", "verbosity_level", "root"}
        for key in data:
            if key not in known:
                logger.warning("Ignoring unknown config key %r in %s", key, source or "<dict>")

        newline_raw: str | None = get_string_value_or_none(data, "newline")
        return cls(
            verbosity_level=get_int_value_or_none(data, "verbosity_level"),
            locale=get_string_value_or_none(data, "locale"),
            numeric=get_bool_value_or_none(data, "numeric"),
            newline=NewlineMode.parse(newline_raw) if newline_raw is not None else None,
            config_files=[source] if source is not None else [],
        )

    @classmethod
    def from_toml_file(cls, path: Path) -> MutableConfig | None:
        """Load a layer from ``path``.

        Returns:
            MutableConfig | None: The layer, or ``None`` for a ``pyproject.toml``
            without a ``[tool.textshell]`` table.

        Raises:
            ConfigError: If the file is unreadable or holds invalid values.
        """
        data: TomlTable = load_toml_dict(path)
        table: TomlTable | None = extract_textshell_table(path, data)
        if table is None:
            logger.debug("No TextShell settings in %s", path)
            return None
        return cls.from_toml_dict(table, source=path)

    @classmethod
    def discover_local_config_files(cls, start: Path) -> list[Path]:
        """Return config files found walking upward from ``start``.

        Files are ordered root-most first, nearest last; within a directory
        ``pyproject.toml`` comes before ``textshell.toml``. A file that sets
        ``root = true`` stops the walk after its directory.
        """
        per_dir: list[list[Path]] = []
        cur: Path = start.resolve()
        if cur.is_file():
            cur = cur.parent

        while True:
            root_stop_here = False
            dir_entries: list[Path] = []
            for name in (PYPROJECT_TOML_NAME, TEXTSHELL_TOML_NAME):
                p: Path = cur / name
                if not p.is_file():
                    continue
                try:
                    table: TomlTable | None = extract_textshell_table(p, load_toml_dict(p))
                except ConfigError as e:
                    # Best-effort discovery; a broken file is reported when it is loaded.
                    logger.debug("Ignoring unreadable config %s during discovery: %s", p, e)
                    dir_entries.append(p)
                    continue
                if table is None:
                    continue
                logger.debug("Discovered config file: %s", p)
                dir_entries.append(p)
                if bool(table.get("root", False)):
                    root_stop_here = True
            if dir_entries:
                per_dir.append(dir_entries)

            parent: Path = cur.parent
            if parent == cur or root_stop_here:
                break
            cur = parent

        ordered: list[Path] = []
        for dir_list in reversed(per_dir):
            ordered.extend(dir_list)
        return ordered

    @classmethod
    def load_merged(
        cls,
        *,
        start: Path | None = None,
        config_path: Path | None = None,
        no_config: bool = False,
    ) -> MutableConfig:
        """Merge defaults, discovered files and an explicit config file.

        Args:
            start (Path | None): Directory where discovery starts (default: CWD).
            config_path (Path | None): Explicit config file, merged last.
            no_config (bool): Skip discovery (the explicit file is still used).

        Returns:
            MutableConfig: The merged builder; CLI overrides are applied on top
            with `apply_cli_args`.
        """
        merged: MutableConfig = cls.from_defaults()
        paths: list[Path] = []
        if not no_config:
            paths.extend(cls.discover_local_config_files(start or Path.cwd()))
        if config_path is not None:
            if not config_path.is_file():
                raise ConfigError(f"Config file not found: {config_path}")
            paths.append(config_path)

        for path in paths:
            layer: MutableConfig | None = cls.from_toml_file(path)
            if layer is not None:
                merged = merged.merge_with(layer)
        return merged

    def merge_with(self, other: MutableConfig) -> MutableConfig:
        """Return a new builder where values set in ``other`` win."""
        return replace(
            self,
            verbosity_level=(
                other.verbosity_level
                if other.verbosity_level is not None
                else self.verbosity_level
            ),
            locale=other.locale if other.locale is not None else self.locale,
            numeric=other.numeric if other.numeric is not None else self.numeric,
            newline=other.newline if other.newline is not None else self.newline,
            config_files=[*self.config_files, *other.config_files],
        )

    def apply_cli_args(self, args: ArgsLike) -> MutableConfig:
        """Apply CLI/API overrides in place and return ``self``.

        Recognized keys: ``verbosity_level``, ``locale``, ``numeric``, ``newline``.
        ``None`` values are ignored.
        """
        if args.get("verbosity_level") is not None:
            self.verbosity_level = int(args["verbosity_level"])
        if args.get("locale") is not None:
            self.locale = str(args["locale"])
        if args.get("numeric") is not None:
            self.numeric = bool(args["numeric"])
        newline: Any = args.get("newline")
        if newline is not None:
            self.newline = newline if isinstance(newline, NewlineMode) else NewlineMode.parse(newline)
        return self


__all__ = [
    "ArgsLike",
    "Config",
    "ConfigError",
    "MutableConfig",
    "NewlineMode",
]
