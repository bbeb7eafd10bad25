# topmark:header:start
#
#   project      : TextShell
#   file         : check.py
#   file_relpath : src/textshell/cli/commands/check.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextShell `check` command.

Validates a pipeline without running it (check mode). An invalid pipeline is
reported as a warning and the command exits with ``FAILURE`` (1); nothing is
read or written.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import click

from textshell.cli.cmd_common import check_pipeline, get_console, get_effective_verbosity
from textshell.cli.options import output_format_option
from textshell.cli_shared.exit_codes import ExitCode
from textshell.cli_shared.formats import OutputFormat

if TYPE_CHECKING:
    from textshell.cli_shared.console_api import ConsoleLike
    from textshell.pipeline.errors import ParseError


@click.command(
    name="check",
    help="Validate PIPELINE without running it.",
)
@click.argument("pipeline_text", metavar="PIPELINE")
@output_format_option
@click.pass_context
def check_command(
    ctx: click.Context,
    *,
    pipeline_text: str,
    output_format: OutputFormat,
) -> None:
    """Validate a pipeline expression.

    Args:
        ctx (click.Context): Click context.
        pipeline_text (str): Pipeline expression to validate.
        output_format (OutputFormat): Output format.
    """
    console: ConsoleLike = get_console(ctx)
    vlevel: int = get_effective_verbosity(ctx)
    error: ParseError | None = check_pipeline(pipeline_text)

    if output_format is OutputFormat.JSON:
        payload: dict[str, object] = {
            "pipeline": pipeline_text,
            "valid": error is None,
            "error": None if error is None else error.message,
            "kind": None if error is None else type(error).__name__,
        }
        console.print(json.dumps(payload))
    elif error is not None:
        console.warn(f"warning: {error.message}")
    elif vlevel >= 0:
        console.print(console.styled("OK", fg="green"))

    if error is not None:
        ctx.exit(ExitCode.FAILURE)
