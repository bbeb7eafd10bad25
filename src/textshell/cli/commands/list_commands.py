# topmark:header:start
#
#   project      : TextShell
#   file         : list_commands.py
#   file_relpath : src/textshell/cli/commands/list_commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI command to list the pipeline commands in the registry.

Supports a human-readable listing, a Markdown table, and JSON.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from textshell.cli.cmd_common import get_console, get_effective_verbosity
from textshell.cli.options import output_format_option
from textshell.cli_shared.formats import OutputFormat
from textshell.cli_shared.markdown import render_markdown_table
from textshell.constants import TEXTSHELL_VERSION
from textshell.registry import default_registry

if TYPE_CHECKING:
    from textshell.cli_shared.console_api import ConsoleLike
    from textshell.registry import CommandRegistry


@click.command(
    name="commands",
    help="List the commands available in pipelines.",
)
@output_format_option
@click.pass_context
def commands_command(ctx: click.Context, *, output_format: OutputFormat) -> None:
    """List registered pipeline commands.

    Args:
        ctx (click.Context): Click context.
        output_format (OutputFormat): Output format (``default``, ``markdown`` or ``json``).
    """
    console: ConsoleLike = get_console(ctx)
    registry: CommandRegistry = default_registry()
    vlevel: int = get_effective_verbosity(ctx)

    if output_format is OutputFormat.JSON:
        payload = {"commands": [spec.to_dict() for spec in registry.iter_specs()]}
        console.print(json.dumps(payload, indent=2))
        return

    if output_format is OutputFormat.MARKDOWN:
        console.print("# Pipeline commands\n")
        console.print(f"TextShell version **{TEXTSHELL_VERSION}** supports these commands:\n")
        rows: list[list[str]] = [
            [f"`{spec.name}`", spec.summary, ", ".join(f"`{u}`" for u in spec.usage)]
            for spec in registry.iter_specs()
        ]
        console.print(render_markdown_table(["Command", "Description", "Usage"], rows), nl=False)
        return

    width: int = max((len(name) for name in registry.names()), default=0)
    for spec in registry.iter_specs():
        console.print(f"{console.styled(spec.name.ljust(width), bold=True)}  {spec.summary}")
        if vlevel > 0:
            for form in spec.usage:
                console.print(f"{'':{width}}    {form}")
