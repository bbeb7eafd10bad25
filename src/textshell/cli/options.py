# topmark:header:start
#
#   file         : options.py
#   file_relpath : src/textshell/cli/options.py
#   project      : TextShell
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Common CLI option utilities for the Click-based TextShell CLI.

This module centralizes reusable options (verbosity, color, config, output
format) and their resolution logic, so commands and groups can stay thin.
"""

from __future__ import annotations

from typing import Callable, ParamSpec, TypeVar

import click

from textshell.cli.errors import TextshellUsageError
from textshell.cli_shared.color import ColorMode
from textshell.cli_shared.formats import OutputFormat
from textshell.config import NewlineMode

P = ParamSpec("P")
R = TypeVar("R")


def resolve_verbosity(verbose_count: int, quiet_count: int) -> int:
    """Resolve program-output verbosity from ``-v`` / ``-q`` counts.

    Args:
        verbose_count: Number of times the verbose flag (-v) is passed.
        quiet_count: Number of times the quiet flag (-q) is passed.

    Returns:
        ``verbose_count`` when verbose, ``-quiet_count`` when quiet, else 0.

    Raises:
        TextshellUsageError: If both verbose and quiet flags are used simultaneously.
    """
    if verbose_count > 0 and quiet_count > 0:
        raise TextshellUsageError("The '--verbose' and '--quiet' options are mutually exclusive.")
    if quiet_count > 0:
        return -quiet_count
    return verbose_count


def common_verbose_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --verbose and --quiet options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with verbosity options added.
    """
    f = click.option(
        "-v",
        "--verbose",
        count=True,
        help="Increase verbosity. Specify up to twice for more detail.",
    )(f)
    f = click.option(
        "-q",
        "--quiet",
        count=True,
        help="Suppress informational output.",
    )(f)
    return f


def common_color_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --color and --no-color options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with color options added.
    """
    f = click.option(
        "--color",
        "color_mode",
        type=click.Choice([m.value for m in ColorMode]),
        default=None,
        callback=lambda _ctx, _param, value: ColorMode(value) if value else None,
        help="Color output: auto (default), always, or never.",
    )(f)
    f = click.option(
        "--no-color",
        "no_color",
        is_flag=True,
        help="Disable color output (equivalent to --color=never).",
    )(f)
    return f


def common_config_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds --config and --no-config options to a command.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function with config options added.
    """
    f = click.option(
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=str),
        default=None,
        help="Read settings from this TOML file (merged after discovered files).",
    )(f)
    f = click.option(
        "--no-config",
        "no_config",
        is_flag=True,
        help="Do not discover textshell.toml / pyproject.toml files.",
    )(f)
    return f


def collation_options(f: Callable[P, R]) -> Callable[P, R]:
    """Adds options overriding the collation and newline settings.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    f = click.option(
        "--locale",
        "locale_name",
        default=None,
        help="Collation locale for 'sort' (e.g. en_US.UTF-8).",
    )(f)
    f = click.option(
        "--numeric/--no-numeric",
        "numeric",
        default=None,
        help="Compare digit runs by numeric value in 'sort' (default: numeric).",
    )(f)
    f = click.option(
        "--newline",
        type=click.Choice([m.value for m in NewlineMode]),
        default=None,
        help="Line break used in the output (default: auto, same as input).",
    )(f)
    return f


def output_format_option(f: Callable[P, R]) -> Callable[P, R]:
    """Adds a --format option for informational commands.

    Args:
        f: The Click command function to decorate.

    Returns:
        The decorated function.
    """
    return click.option(
        "--format",
        "output_format",
        type=click.Choice([m.value for m in OutputFormat]),
        default=OutputFormat.DEFAULT.value,
        callback=lambda _ctx, _param, value: OutputFormat(value),
        help=f"Output format ({', '.join(v.value for v in OutputFormat)}).",
    )(f)
