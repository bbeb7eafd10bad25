# topmark:header:start
#
#   file         : registry.py
#   file_relpath : src/textshell/registry/registry.py
#   project      : TextShell
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end


"""Command registry: a fixed table of command name → stage factory.

The registry is a closed set. Each entry is a `CommandSpec` bundling the
factory with serializable metadata (summary and accepted argument forms) that
the help document and the ``commands`` CLI listing are rendered from.

Lookups are plain mapping lookups: an unknown command is a lookup miss that
surfaces as [`UnknownCommandError`][textshell.pipeline.errors.UnknownCommandError],
never as a dispatch failure.

Typical usage:
    ```python
    from textshell.registry import default_registry

    registry = default_registry()
    registry.names()  # ("sort", "uniq", "help")
    stage = registry.build("sort", ("desc",), env=StageEnv())
    stage(["a", "c", "b"])  # ["c", "b", "a"]
    ```
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Callable, Iterator, Mapping

from textshell.config.logging import get_logger
from textshell.pipeline.collation import Collator
from textshell.pipeline.errors import UnknownCommandError

if TYPE_CHECKING:
    from collections.abc import Iterable, Sequence

    from textshell.config.logging import TextshellLogger
    from textshell.pipeline.contracts import HelpSink, Stage

logger: TextshellLogger = get_logger(__name__)


@dataclass(frozen=True)
class StageEnv:
    """Collaborators handed to every factory when a stage is built.

    Attributes:
        collator (Collator): Ordering used by ``sort``.
        help_sink (HelpSink | None): Display target for the ``help`` document.
        registry (CommandRegistry | None): Registry the stage is built from, so
            ``help`` can describe the commands that are actually available.
    """

    collator: Collator = field(default_factory=Collator)
    help_sink: HelpSink | None = None
    registry: CommandRegistry | None = None


CommandFactory = Callable[[tuple[str, ...], StageEnv], "Stage"]


@dataclass(frozen=True)
class CommandSpec:
    """A registered command.

    Attributes:
        name (str): Command name (case-sensitive).
        factory (CommandFactory): Validates argument tokens and returns a stage,
            or raises [`InvalidArgumentsError`][textshell.pipeline.errors.InvalidArgumentsError].
        summary (str): One-line description for help output.
        usage (tuple[str, ...]): Accepted invocation forms, e.g. ``("sort", "sort desc")``.
    """

    name: str
    factory: CommandFactory
    summary: str
    usage: tuple[str, ...] = ()

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly view of the metadata (factory excluded)."""
        return {"name": self.name, "summary": self.summary, "usage": list(self.usage)}


class CommandRegistry:
    """Read-only table of `CommandSpec` entries keyed by name."""

    def __init__(self, specs: Iterable[CommandSpec]) -> None:
        table: dict[str, CommandSpec] = {}
        for spec in specs:
            if spec.name in table:
                raise ValueError(f"Duplicate command name: {spec.name!r}")
            table[spec.name] = spec
        self._specs: Mapping[str, CommandSpec] = MappingProxyType(table)

    def __contains__(self, name: object) -> bool:
        return name in self._specs

    def __len__(self) -> int:
        return len(self._specs)

    def names(self) -> tuple[str, ...]:
        """Return registered command names in registration order."""
        return tuple(self._specs)

    def iter_specs(self) -> Iterator[CommandSpec]:
        """Iterate registered command specs in registration order."""
        yield from self._specs.values()

    def as_mapping(self) -> Mapping[str, CommandSpec]:
        """Return the **read-only** name → spec mapping."""
        return self._specs

    def is_registered(self, name: str) -> bool:
        """Return True if ``name`` is a registered command."""
        return name in self._specs

    def get(self, name: str) -> CommandSpec | None:
        """Return the spec for ``name``, or ``None`` when unknown."""
        return self._specs.get(name)

    def build(
        self,
        name: str,
        args: Sequence[str],
        *,
        env: StageEnv | None = None,
        position: int | None = None,
    ) -> Stage:
        """Resolve ``name`` and build a stage bound to ``args``.

        Args:
            name (str): Command name.
            args (Sequence[str]): Argument tokens.
            env (StageEnv | None): Collaborators for the factory; defaults to a
                fresh `StageEnv` bound to this registry.
            position (int | None): 1-based stage position, for error reporting.

        Returns:
            Stage: A ready-to-run stage.

        Raises:
            UnknownCommandError: If ``name`` is not registered.
            InvalidArgumentsError: If the factory rejects ``args``.
        """
        spec: CommandSpec | None = self.get(name)
        if spec is None:
            raise UnknownCommandError(name, position=position)
        if env is None:
            env = StageEnv(registry=self)
        elif env.registry is None:
            env = StageEnv(collator=env.collator, help_sink=env.help_sink, registry=self)
        stage: Stage = spec.factory(tuple(args), env)
        logger.trace("built stage %s%r", name, tuple(args))
        return stage
