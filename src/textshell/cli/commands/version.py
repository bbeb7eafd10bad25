# topmark:header:start
#
#   project      : TextShell
#   file         : version.py
#   file_relpath : src/textshell/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextShell `version` command.

Prints the current TextShell version as installed in the active Python environment.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from textshell.cli.cmd_common import get_console, get_effective_verbosity
from textshell.cli.options import output_format_option
from textshell.cli_shared.formats import OutputFormat
from textshell.constants import TEXTSHELL_VERSION

if TYPE_CHECKING:
    from textshell.cli_shared.console_api import ConsoleLike


@click.command(
    name="version",
    help="Show the current version of TextShell.",
)
@output_format_option
@click.pass_context
def version_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """Show the current version of TextShell.

    Args:
        ctx (click.Context): Click context.
        output_format (OutputFormat): Output format (plain text, markdown or json).
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)

    if output_format is OutputFormat.JSON:
        console.print(json.dumps({"version": TEXTSHELL_VERSION}))
    elif output_format is OutputFormat.MARKDOWN:
        console.print("# TextShell Version\n")
        console.print(f"**TextShell version: {TEXTSHELL_VERSION}**")
    elif vlevel > 0:
        console.print(console.styled("TextShell version:\n", bold=True, underline=True))
        console.print(f"    {console.styled(TEXTSHELL_VERSION, bold=True)}")
    else:
        console.print(console.styled(TEXTSHELL_VERSION, bold=True))
