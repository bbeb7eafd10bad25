# topmark:header:start
#
#   project      : TextShell
#   file         : commands.py
#   file_relpath : src/textshell/registry/commands.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Built-in commands and their factories.

Every factory receives the argument tokens as a tuple and matches them
against an explicit table of accepted forms. Anything not in the table
raises [`InvalidArgumentsError`][textshell.pipeline.errors.InvalidArgumentsError]
before a stage exists.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Final, Mapping

from textshell.pipeline.errors import InvalidArgumentsError
from textshell.pipeline.stages import HelpStage, SortStage, UniqStage
from textshell.registry.registry import CommandRegistry, CommandSpec
from textshell.rendering.help import render_help_markdown

if TYPE_CHECKING:
    from textshell.registry.registry import StageEnv

# Accepted argument sequences for `sort`, mapped to "descending".
SORT_ARGUMENT_FORMS: Final[Mapping[tuple[str, ...], bool]] = {
    (): False,
    ("asc",): False,
    ("-d",): True,
    ("desc",): True,
}


def make_sort(args: tuple[str, ...], env: StageEnv) -> SortStage:
    """Build a `sort` stage (``sort``, ``sort asc``, ``sort -d``, ``sort desc``)."""
    descending: bool | None = SORT_ARGUMENT_FORMS.get(args)
    if descending is None:
        raise InvalidArgumentsError(
            "sort",
            args,
            allowed=tuple(" ".join(form) or "(none)" for form in SORT_ARGUMENT_FORMS),
        )
    return SortStage(descending=descending, collator=env.collator)


def make_uniq(args: tuple[str, ...], env: StageEnv) -> UniqStage:
    """Build a `uniq` stage; it takes no arguments."""
    if args:
        raise InvalidArgumentsError("uniq", args, allowed=("(none)",))
    return UniqStage()


def make_help(args: tuple[str, ...], env: StageEnv) -> HelpStage:
    """Build a `help` stage; arguments are ignored."""
    specs = env.registry.iter_specs() if env.registry is not None else BUILTIN_COMMANDS
    return HelpStage(document=render_help_markdown(specs), sink=env.help_sink)


BUILTIN_COMMANDS: Final[tuple[CommandSpec, ...]] = (
    CommandSpec(
        name="sort",
        factory=make_sort,
        summary="Sort the lines (numbers inside lines compare by value).",
        usage=("sort", "sort asc", "sort -d", "sort desc"),
    ),
    CommandSpec(
        name="uniq",
        factory=make_uniq,
        summary="Drop repeated lines, keeping the first occurrence.",
        usage=("uniq",),
    ),
    CommandSpec(
        name="help",
        factory=make_help,
        summary="Show this help; the lines pass through unchanged.",
        usage=("help",),
    ),
)


@lru_cache(maxsize=1)
def default_registry() -> CommandRegistry:
    """Return the shared registry of built-in commands."""
    return CommandRegistry(BUILTIN_COMMANDS)
