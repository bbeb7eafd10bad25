# topmark:header:start
#
#   project      : TextShell
#   file         : main.py
#   file_relpath : src/textshell/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click entry point for the TextShell CLI.

Key ideas:
- Group-level options are initialized once, placed into ``ctx.obj``.
- Subcommands read the console and config options from ``ctx.obj``.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textshell.cli.commands.check import check_command
from textshell.cli.commands.help import help_command
from textshell.cli.commands.list_commands import commands_command
from textshell.cli.commands.run import run_command
from textshell.cli.commands.version import version_command
from textshell.cli.console import ClickConsole
from textshell.cli.options import (
    common_color_options,
    common_config_options,
    common_verbose_options,
    resolve_verbosity,
)
from textshell.cli_shared.color import ColorMode, resolve_color_mode
from textshell.config.logging import get_logger, resolve_env_log_level, setup_logging

if TYPE_CHECKING:
    from textshell.cli_shared.console_api import ConsoleLike

logger = get_logger(__name__)


def init_common_state(
    ctx: click.Context,
    *,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Initialize shared state (verbosity, color, config options) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` and ``color`` set.
        verbose (int): Count of ``-v`` flags.
        quiet (int): Count of ``-q`` flags.
        color_mode (ColorMode | None): Explicit color mode from ``--color`` (or ``None``).
        no_color (bool): Whether ``--no-color`` was passed; forces color off.
        config_path (str | None): Explicit config file from ``--config``.
        no_config (bool): Whether ``--no-config`` was passed.
    """
    ctx.obj = ctx.obj or {}

    # Configure program-output verbosity:
    ctx.obj["verbosity_level"] = resolve_verbosity(verbose, quiet)

    # Configure internal logging via env:
    level_env = resolve_env_log_level()
    setup_logging(level=level_env)

    effective_color_mode = ColorMode.NEVER if no_color else (color_mode or ColorMode.AUTO)
    enable_color = resolve_color_mode(color_mode_override=effective_color_mode, output_format=None)
    ctx.color = enable_color

    ctx.obj["console"] = ClickConsole(enable_color=enable_color)

    ctx.obj["config_path"] = config_path
    ctx.obj["no_config"] = no_config


@click.group(
    cls=click.Group,
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="TextShell: transform text lines with pipelines such as 'sort desc | uniq'.",
)
@common_verbose_options
@common_color_options
@common_config_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: int,
    quiet: int,
    color_mode: ColorMode | None,
    no_color: bool,
    config_path: str | None,
    no_config: bool,
) -> None:
    """Entry point for the TextShell CLI."""
    init_common_state(
        ctx,
        verbose=verbose,
        quiet=quiet,
        color_mode=color_mode,
        no_color=no_color,
        config_path=config_path,
        no_config=no_config,
    )
    console: ConsoleLike = ctx.obj["console"]

    if ctx.invoked_subcommand is None:
        console.print("Hint: use 'textshell run PIPELINE [FILE]' to transform lines.")
        console.print()
        console.print(ctx.get_help())


cli.add_command(run_command)

cli.add_command(check_command)

cli.add_command(commands_command)

cli.add_command(help_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
