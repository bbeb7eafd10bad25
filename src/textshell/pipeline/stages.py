# topmark:header:start
#
#   project      : TextShell
#   file         : stages.py
#   file_relpath : src/textshell/pipeline/stages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Concrete pipeline stages.

Each stage is a frozen dataclass implementing the
[`Stage`][textshell.pipeline.contracts.Stage] protocol. Stages are built by
the command factories in [`textshell.registry.commands`][] once their
arguments have been validated, so calling a stage never re-checks arguments.

- `SortStage`: sorted copy of the input (numeric-aware, locale-aware).
- `UniqStage`: distinct lines in first-occurrence order.
- `HelpStage`: identity on the data path; emits the help document through a
  `HelpSink` as a fire-and-forget side effect.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, ClassVar

from textshell.config.logging import get_logger
from textshell.pipeline.collation import Collator

if TYPE_CHECKING:
    from collections.abc import Sequence

    from textshell.config.logging import TextshellLogger
    from textshell.pipeline.contracts import HelpSink

logger: TextshellLogger = get_logger(__name__)


@dataclass(frozen=True)
class SortStage:
    """Sort lines with a [`Collator`][textshell.pipeline.collation.Collator].

    Attributes:
        descending (bool): Reverse the comparator. Lines with equal keys keep
            their input order in both directions.
        collator (Collator): Ordering used for comparisons.
    """

    name: ClassVar[str] = "sort"

    descending: bool = False
    collator: Collator = field(default_factory=Collator)

    @property
    def args(self) -> tuple[str, ...]:
        """Canonical argument tokens for this stage."""
        return ("desc",) if self.descending else ()

    def __call__(self, lines: Sequence[str]) -> list[str]:
        return sorted(lines, key=self.collator.sort_key, reverse=self.descending)


@dataclass(frozen=True)
class UniqStage:
    """Drop repeated lines, keeping the first occurrence of each."""

    name: ClassVar[str] = "uniq"

    @property
    def args(self) -> tuple[str, ...]:
        """Canonical argument tokens for this stage."""
        return ()

    def __call__(self, lines: Sequence[str]) -> list[str]:
        return list(dict.fromkeys(lines))


@dataclass(frozen=True)
class HelpStage:
    """Show the help document and pass the input through unchanged.

    Attributes:
        document (str): Markdown help text, rendered when the stage was built.
        sink (HelpSink | None): Where to send the document. ``None`` drops it
            (the data path is unaffected either way).
    """

    name: ClassVar[str] = "help"

    document: str
    sink: HelpSink | None = None

    @property
    def args(self) -> tuple[str, ...]:
        """Canonical argument tokens for this stage."""
        return ()

    def emit(self) -> None:
        """Send the document to the sink; sink failures are logged, never raised."""
        if self.sink is None:
            logger.debug("help: no sink configured, document dropped")
            return
        try:
            self.sink(self.document)
        except Exception as exc:
            logger.warning("help: failed to display help document: %s", exc)

    def __call__(self, lines: Sequence[str]) -> list[str]:
        self.emit()
        return list(lines)
