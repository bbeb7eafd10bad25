# topmark:header:start
#
#   project      : TextShell
#   file         : run.py
#   file_relpath : src/textshell/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextShell `run` command.

Applies a pipeline to a range of lines of a file (or STDIN) and writes the
result to STDOUT, or back to the file with ``--in-place``.

The pipeline is parsed before any input is read, so an invalid pipeline never
touches the text. Output of the ``help`` command goes to STDERR.

Input examples:
  textshell run "sort desc | uniq" names.txt
  printf 'b\\na\\nb\\n' | textshell run "uniq | sort"
  textshell run sort --lines 3:10 --in-place notes.md
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from textshell.cli.cmd_common import (
    STDIN_DASH,
    build_stage_env,
    get_console,
    parse_pipeline_or_fail,
    read_input_text,
    resolve_config,
    write_output_text,
)
from textshell.cli.errors import TextshellPipelineError, TextshellUsageError
from textshell.cli.options import collation_options
from textshell.config.logging import get_logger
from textshell.host import WHOLE_BUFFER, LineRegion, RegionError, TextBuffer
from textshell.pipeline.errors import StageExecutionError
from textshell.pipeline.runner import execute

if TYPE_CHECKING:
    from textshell.cli_shared.console_api import ConsoleLike
    from textshell.config import Config
    from textshell.config.logging import TextshellLogger
    from textshell.pipeline.pipelines import Pipeline
    from textshell.registry import StageEnv

logger: TextshellLogger = get_logger(__name__)


@click.command(
    name="run",
    help="Apply PIPELINE to the lines of FILE (or STDIN) and print the result.",
)
@click.argument("pipeline_text", metavar="PIPELINE")
@click.argument("path", metavar="[FILE]", required=False)
@click.option(
    "--lines",
    "lines_spec",
    default=None,
    help="Only transform these lines: START:END, 1-based and inclusive (e.g. 3:10, 5:, :8).",
)
@click.option(
    "--in-place",
    "-i",
    "in_place",
    is_flag=True,
    help="Write the result back to FILE instead of STDOUT.",
)
@collation_options
@click.pass_context
def run_command(
    ctx: click.Context,
    *,
    pipeline_text: str,
    path: str | None,
    lines_spec: str | None,
    in_place: bool,
    locale_name: str | None,
    numeric: bool | None,
    newline: str | None,
) -> None:
    """Apply a pipeline to text lines.

    Args:
        ctx (click.Context): Click context (console, config options).
        pipeline_text (str): Pipeline expression.
        path (str | None): Input file; ``None`` or ``-`` reads STDIN.
        lines_spec (str | None): 1-based ``START:END`` line range.
        in_place (bool): Write the result back to ``path``.
        locale_name (str | None): Collation locale override.
        numeric (bool | None): Numeric collation override.
        newline (str | None): Output newline override.
    """
    console: ConsoleLike = get_console(ctx)

    if in_place and (path is None or path == STDIN_DASH):
        raise TextshellUsageError("--in-place requires a FILE argument.")

    try:
        region: LineRegion = LineRegion.parse(lines_spec) if lines_spec else WHOLE_BUFFER
    except RegionError as exc:
        raise TextshellUsageError(str(exc)) from exc

    config: Config = resolve_config(ctx, locale=locale_name, numeric=numeric, newline=newline)
    env: StageEnv = build_stage_env(config, console)
    pipeline: Pipeline = parse_pipeline_or_fail(pipeline_text, env)

    text: str = read_input_text(path)
    buffer: TextBuffer = TextBuffer.from_text(text, newline=config.newline)
    try:
        selected: list[str] = buffer.lines_in(region)
    except RegionError as exc:
        raise TextshellUsageError(str(exc)) from exc

    try:
        out: list[str] = execute(pipeline, selected)
    except StageExecutionError as exc:
        raise TextshellPipelineError(exc.message) from exc

    result: str = buffer.replace(region, out).to_text()
    if in_place and path is not None:
        if result != text:
            write_output_text(path, result)
        else:
            logger.info("%s unchanged", path)
        return

    console.print(result, nl=False)
