# topmark:header:start
#
#   project      : TextShell
#   file         : pipelines.py
#   file_relpath : src/textshell/pipeline/pipelines.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pipeline model: an immutable, ordered tuple of stages.

Running a pipeline is a left fold of its stages over a line sequence (see
[`textshell.pipeline.runner`][]). A pipeline without stages is the identity
pipeline; the parser returns it for empty input and in check mode.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final, Iterator

from textshell.constants import PIPE_SEPARATOR

if TYPE_CHECKING:
    from textshell.pipeline.contracts import Stage


@dataclass(frozen=True)
class Pipeline:
    """Ordered stages applied left to right.

    Attributes:
        stages (tuple[Stage, ...]): The resolved stages. Empty for the identity pipeline.
    """

    stages: tuple[Stage, ...] = ()

    def __len__(self) -> int:
        return len(self.stages)

    def __iter__(self) -> Iterator[Stage]:
        return iter(self.stages)

    @property
    def is_identity(self) -> bool:
        """True if running the pipeline returns its input unchanged."""
        return not self.stages

    def names(self) -> tuple[str, ...]:
        """Return the command names of the stages, in order."""
        return tuple(stage.name for stage in self.stages)

    def describe(self) -> str:
        """Return a canonical text form, e.g. ``"uniq | sort desc"``."""
        if not self.stages:
            return "<identity>"
        return f" {PIPE_SEPARATOR} ".join(
            " ".join((stage.name, *stage.args)) for stage in self.stages
        )


IDENTITY_PIPELINE: Final[Pipeline] = Pipeline()
