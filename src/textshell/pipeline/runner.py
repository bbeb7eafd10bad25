# topmark:header:start
#
#   project      : TextShell
#   file         : runner.py
#   file_relpath : src/textshell/pipeline/runner.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run a pipeline over a line sequence.

Execution is a left fold: each stage receives the previous stage's output.
There is no short-circuiting. Stages are expected not to fail once built; if
one does, the failure is wrapped in
[`StageExecutionError`][textshell.pipeline.errors.StageExecutionError] and no
partial result is returned.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from textshell.config.logging import get_logger
from textshell.pipeline.errors import PipelineError, StageExecutionError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from textshell.config.logging import TextshellLogger
    from textshell.pipeline.pipelines import Pipeline

logger: TextshellLogger = get_logger(__name__)


def execute(pipeline: Pipeline, lines: Sequence[str]) -> list[str]:
    """Apply ``pipeline`` to ``lines`` and return the result.

    Args:
        pipeline (Pipeline): The pipeline to run (possibly the identity pipeline).
        lines (Sequence[str]): Input lines; never mutated.

    Returns:
        list[str]: The output of the last stage (a copy of ``lines`` for the identity pipeline).

    Raises:
        StageExecutionError: If a stage raises while transforming lines.
    """
    current: list[str] = list(lines)
    logger.info("running %s on %d line(s)", pipeline.describe(), len(current))
    for index, stage in enumerate(pipeline.stages):
        try:
            current = stage(current)
        except PipelineError:
            raise
        except Exception as exc:
            logger.exception("stage %d (%s) failed", index + 1, stage.name)
            raise StageExecutionError(stage.name, index, exc) from exc
        logger.trace("after stage %d (%s): %d line(s)", index + 1, stage.name, len(current))
    return current
