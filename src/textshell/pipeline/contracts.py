# topmark:header:start
#
#   project      : TextShell
#   file         : contracts.py
#   file_relpath : src/textshell/pipeline/contracts.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Type contracts for pipeline stages (engine-facing).

A stage is an instantiated, *callable* object bound to its arguments; the
runner invokes it as ``stage(lines)`` and feeds the result to the next stage.

Stages are pure transforms of a line sequence. The one stage with an external
effect (``help``) performs it through an injected `HelpSink`, so the
composition stays a plain fold over line sequences.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence


class Stage(Protocol):
    """Protocol for a single pipeline stage.

    Attributes:
        name (str): Command name the stage was built from (e.g. ``"sort"``).
        args (tuple[str, ...]): Argument tokens the stage was built with.
    """

    @property
    def name(self) -> str:
        """Command name of the stage."""
        ...

    @property
    def args(self) -> tuple[str, ...]:
        """Argument tokens of the stage."""
        ...

    def __call__(self, lines: Sequence[str]) -> list[str]:
        """Transform ``lines`` and return a new list.

        Implementations must not mutate ``lines``.

        Args:
            lines (Sequence[str]): Input line sequence.

        Returns:
            list[str]: Output line sequence.
        """
        ...


class HelpSink(Protocol):
    """Collaborator that displays the help document (e.g., writes it to STDERR)."""

    def __call__(self, document: str) -> None:
        """Display ``document`` (Markdown text)."""
        ...
