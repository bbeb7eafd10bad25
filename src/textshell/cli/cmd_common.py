# topmark:header:start
#
#   project      : TextShell
#   file         : cmd_common.py
#   file_relpath : src/textshell/cli/cmd_common.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common command utilities for Click-based commands.

This module holds small, focused helpers used by multiple CLI commands:
resolving the configuration, wiring the help sink to the console, and
translating library errors into [`textshell.cli.errors`][] exceptions.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any, cast

import click

from textshell.api import make_stage_env
from textshell.cli.errors import (
    TextshellConfigError,
    TextshellEncodingError,
    TextshellFileNotFoundError,
    TextshellIOError,
    TextshellPermissionDeniedError,
    TextshellUsageError,
)
from textshell.config import ConfigError, MutableConfig
from textshell.config.logging import get_logger
from textshell.pipeline.collation import CollationError
from textshell.pipeline.errors import ParseError
from textshell.pipeline.parser import parse

if TYPE_CHECKING:
    from textshell.cli_shared.console_api import ConsoleLike
    from textshell.config import Config
    from textshell.config.logging import TextshellLogger
    from textshell.pipeline.contracts import HelpSink
    from textshell.pipeline.pipelines import Pipeline
    from textshell.registry import StageEnv

logger: TextshellLogger = get_logger(__name__)

STDIN_DASH: str = "-"


def get_console(ctx: click.Context) -> ConsoleLike:
    """Return the console stored on the root context by the group callback."""
    console: ConsoleLike = ctx.obj["console"]
    return console


def get_effective_verbosity(ctx: click.Context, config: Config | None = None) -> int:
    """Return the effective program-output verbosity for this command.

    Resolution order (tri-state aware):
        1. Config.verbosity_level if set (not None)
        2. ctx.obj["verbosity_level"] if present
        3. 0 (terse)
    """
    cfg_level = getattr(config, "verbosity_level", None) if config else None
    if cfg_level is not None:
        return int(cfg_level)
    return int(ctx.obj.get("verbosity_level", 0))


def resolve_config(ctx: click.Context, **overrides: Any) -> Config:
    """Merge defaults, config files and CLI overrides into a frozen `Config`.

    Args:
        ctx (click.Context): Current context; ``ctx.obj`` carries ``config_path``
            and ``no_config`` from the group options.
        **overrides (Any): CLI overrides (``locale``, ``numeric``, ``newline``, ...);
            ``None`` values are ignored.

    Raises:
        TextshellConfigError: If a config file is missing or invalid.
    """
    config_path_raw: str | None = ctx.obj.get("config_path")
    try:
        draft: MutableConfig = MutableConfig.load_merged(
            config_path=Path(config_path_raw) if config_path_raw else None,
            no_config=bool(ctx.obj.get("no_config", False)),
        )
        draft.apply_cli_args(overrides)
    except ConfigError as exc:
        raise TextshellConfigError(str(exc)) from exc
    config: Config = draft.freeze()
    logger.debug("Effective config: %s", config)
    return config


def make_help_sink(console: ConsoleLike) -> HelpSink:
    """Return a help sink writing the document to the console's stderr channel."""

    def _sink(document: str) -> None:
        console.note(document, nl=False)

    return _sink


def build_stage_env(config: Config, console: ConsoleLike) -> StageEnv:
    """Build the stage collaborators for a CLI run.

    Raises:
        TextshellConfigError: If the configured collation locale is unavailable.
    """
    try:
        return make_stage_env(config, help_sink=make_help_sink(console))
    except CollationError as exc:
        raise TextshellConfigError(str(exc)) from exc


def parse_pipeline_or_fail(text: str, env: StageEnv) -> Pipeline:
    """Parse ``text`` for execution; a parse error becomes a usage error.

    Raises:
        TextshellUsageError: The first parse error, with its message.
    """
    pipeline, error = parse(text, env=env, registry=env.registry)
    if error is not None:
        raise TextshellUsageError(error.message)
    return cast("Pipeline", pipeline)


def check_pipeline(text: str) -> ParseError | None:
    """Validate ``text`` in check mode and return the first error, if any."""
    return parse(text, check=True).error


def read_input_text(path: str | None) -> str:
    """Read the input text from ``path``, or from STDIN when ``path`` is None or ``-``.

    Raises:
        TextshellFileNotFoundError: If the path does not exist or is a directory.
        TextshellPermissionDeniedError: If the file is not readable.
        TextshellEncodingError: If the content is not valid UTF-8.
        TextshellIOError: For any other read error.
    """
    if path is None or path == STDIN_DASH:
        stream = click.get_text_stream("stdin", encoding="utf-8")
        try:
            return stream.read()
        except UnicodeDecodeError as exc:
            raise TextshellEncodingError(f"STDIN is not valid UTF-8: {exc}") from exc

    p = Path(path)
    try:
        # newline="" keeps CRLF line breaks for the buffer to detect
        with p.open(encoding="utf-8", newline="") as fh:
            return fh.read()
    except (FileNotFoundError, IsADirectoryError) as exc:
        raise TextshellFileNotFoundError(f"No such file: {path}") from exc
    except PermissionError as exc:
        raise TextshellPermissionDeniedError(f"Permission denied: {path}") from exc
    except UnicodeDecodeError as exc:
        raise TextshellEncodingError(f"{path} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise TextshellIOError(f"Cannot read {path}: {exc}") from exc


def write_output_text(path: str, text: str) -> None:
    """Write ``text`` to ``path`` (in-place mode).

    Raises:
        TextshellPermissionDeniedError: If the file is not writable.
        TextshellIOError: For any other write error.
    """
    try:
        with Path(path).open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
    except PermissionError as exc:
        raise TextshellPermissionDeniedError(f"Permission denied: {path}") from exc
    except OSError as exc:
        raise TextshellIOError(f"Cannot write {path}: {exc}") from exc
    logger.info("Wrote %d character(s) to %s", len(text), path)
