# topmark:header:start
#
#   project      : TextShell
#   file         : api.py
#   file_relpath : src/textshell/api.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Public, CLI-free API for TextShell.

This module is the stable surface for integrators (editor plugins, scripts,
tests). It never prints; errors are raised or returned and logged.

Typical usage:
    ```python
    from textshell import api

    api.check("sort -x")            # -> InvalidArgumentsError (returned, not raised)
    api.apply_pipeline("b\\na\\nb\\n", "uniq | sort")  # -> "a\\nb\\n"
    ```
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textshell.config import MutableConfig
from textshell.config.logging import get_logger
from textshell.host import WHOLE_BUFFER, LineRegion, TextBuffer
from textshell.pipeline.collation import Collator, activate_locale
from textshell.pipeline.parser import ParseResult, parse, parse_or_raise
from textshell.pipeline.runner import execute
from textshell.registry import StageEnv, default_registry

if TYPE_CHECKING:
    from collections.abc import Sequence

    from textshell.config import Config
    from textshell.config.logging import TextshellLogger
    from textshell.pipeline.contracts import HelpSink
    from textshell.pipeline.errors import ParseError
    from textshell.pipeline.pipelines import Pipeline
    from textshell.registry import CommandRegistry

logger: TextshellLogger = get_logger(__name__)


def make_stage_env(
    config: Config | None = None,
    *,
    help_sink: HelpSink | None = None,
    registry: CommandRegistry | None = None,
) -> StageEnv:
    """Build the factory collaborators for ``config``.

    A non-empty ``config.locale`` is activated for ``LC_COLLATE`` here, once per
    run, before any stage is built.

    Raises:
        CollationError: If the configured locale is not available.
    """
    config = config or MutableConfig.from_defaults().freeze()
    if config.locale:
        activate_locale(config.locale)
    return StageEnv(
        collator=Collator(numeric=config.numeric),
        help_sink=help_sink,
        registry=registry if registry is not None else default_registry(),
    )


def check(text: str, *, registry: CommandRegistry | None = None) -> ParseError | None:
    """Validate pipeline text without building a runnable pipeline.

    Returns:
        ParseError | None: The first parse error, or ``None`` if ``text`` is valid.
    """
    return parse(text, check=True, registry=registry).error


def run_lines(
    pipeline_text: str,
    lines: Sequence[str],
    *,
    config: Config | None = None,
    help_sink: HelpSink | None = None,
) -> list[str]:
    """Parse ``pipeline_text`` and run it over ``lines``.

    Raises:
        ParseError: If the pipeline text is invalid (nothing is executed).
        StageExecutionError: If a stage fails at run time.
    """
    env: StageEnv = make_stage_env(config, help_sink=help_sink)
    pipeline: Pipeline = parse_or_raise(pipeline_text, env=env, registry=env.registry)
    return execute(pipeline, lines)


def apply_pipeline(
    text: str,
    pipeline_text: str,
    *,
    region: LineRegion = WHOLE_BUFFER,
    config: Config | None = None,
    help_sink: HelpSink | None = None,
) -> str:
    """Run a pipeline over a region of ``text`` and return the updated text.

    The pipeline is parsed before the text is touched, so a parse error leaves
    nothing modified (the caller still holds the original ``text``).

    Args:
        text (str): Full buffer text.
        pipeline_text (str): Pipeline expression, e.g. ``"sort desc | uniq"``.
        region (LineRegion): Lines to transform (default: the whole text).
        config (Config | None): Runtime configuration (locale, newline policy).
        help_sink (HelpSink | None): Display target for the ``help`` command.

    Returns:
        str: The text with the region replaced by the pipeline output.

    Raises:
        ParseError: If the pipeline text is invalid.
        RegionError: If ``region`` lies outside the text.
        StageExecutionError: If a stage fails at run time.
    """
    config = config or MutableConfig.from_defaults().freeze()
    env: StageEnv = make_stage_env(config, help_sink=help_sink)
    pipeline: Pipeline = parse_or_raise(pipeline_text, env=env, registry=env.registry)

    buffer: TextBuffer = TextBuffer.from_text(text, newline=config.newline)
    out: list[str] = execute(pipeline, buffer.lines_in(region))
    return buffer.replace(region, out).to_text()


__all__ = [
    "ParseResult",
    "apply_pipeline",
    "check",
    "execute",
    "make_stage_env",
    "parse",
    "parse_or_raise",
    "run_lines",
]
