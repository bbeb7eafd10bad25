# topmark:header:start
#
#   project      : TextShell
#   file         : errors.py
#   file_relpath : src/textshell/pipeline/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Error taxonomy for parsing and executing pipelines.

These exceptions are framework-agnostic. The CLI maps them onto Click
exceptions and exit codes in [`textshell.cli.errors`][textshell.cli.errors].

Hierarchy:

    PipelineError
    ├── ParseError
    │   ├── UnknownCommandError
    │   │   └── EmptyCommandError
    │   └── InvalidArgumentsError
    └── StageExecutionError

Parse errors are raised by command factories and by the parser; the first one
aborts the whole parse. `StageExecutionError` wraps an unexpected failure of
an already-built stage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


class PipelineError(Exception):
    """Base class for all pipeline errors.

    Attributes:
        message (str): Human-readable message, suitable for showing to the user.
    """

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message: str = message

    def __str__(self) -> str:
        return self.message


class ParseError(PipelineError):
    """Raised when pipeline text cannot be turned into a pipeline."""


class UnknownCommandError(ParseError):
    """A stage names a command that is not in the registry.

    Attributes:
        name (str): The offending command name.
        position (int | None): 1-based stage position in the pipeline, if known.
    """

    def __init__(self, name: str, *, position: int | None = None) -> None:
        super().__init__(f"Unknown command: {name!r}")
        self.name: str = name
        self.position: int | None = position


class EmptyCommandError(UnknownCommandError):
    """A stage is empty (leading, trailing or doubled ``|``)."""

    def __init__(self, *, position: int) -> None:
        super().__init__("", position=position)
        self.message = f"Empty command at stage {position} (stray '|'?)"
        self.args = (self.message,)


class InvalidArgumentsError(ParseError):
    """A known command rejected its argument tokens.

    Attributes:
        command (str): The command name.
        arguments (tuple[str, ...]): The rejected argument tokens.
        allowed (tuple[str, ...]): Accepted argument forms, rendered for display.
    """

    def __init__(
        self,
        command: str,
        arguments: Sequence[str],
        *,
        allowed: Sequence[str] = (),
    ) -> None:
        self.command: str = command
        self.arguments: tuple[str, ...] = tuple(arguments)
        self.allowed: tuple[str, ...] = tuple(allowed)
        got: str = " ".join(self.arguments) or "<none>"
        message: str = f"Invalid arguments for {command!r}: {got}"
        if self.allowed:
            message += f" (expected one of: {', '.join(self.allowed)})"
        super().__init__(message)


class StageExecutionError(PipelineError):
    """A built stage failed while transforming lines.

    Attributes:
        stage_name (str): Command name of the failing stage.
        index (int): 0-based index of the stage in the pipeline.
    """

    def __init__(self, stage_name: str, index: int, cause: BaseException) -> None:
        super().__init__(f"Stage {index + 1} ({stage_name!r}) failed: {cause}")
        self.stage_name: str = stage_name
        self.index: int = index
