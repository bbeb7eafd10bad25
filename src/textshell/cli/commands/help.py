# topmark:header:start
#
#   project      : TextShell
#   file         : help.py
#   file_relpath : src/textshell/cli/commands/help.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextShell `help` command: print the pipeline help document (Markdown)."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textshell.cli.cmd_common import get_console
from textshell.registry import default_registry
from textshell.rendering.help import render_help_markdown

if TYPE_CHECKING:
    from textshell.cli_shared.console_api import ConsoleLike


@click.command(
    name="help",
    help="Show the pipeline language help (same text as the 'help' pipeline command).",
)
@click.pass_context
def help_command(ctx: click.Context) -> None:
    """Print the help document to STDOUT."""
    console: ConsoleLike = get_console(ctx)
    console.print(render_help_markdown(default_registry().iter_specs()), nl=False)
