# topmark:header:start
#
#   project      : TextShell
#   file         : parser.py
#   file_relpath : src/textshell/pipeline/parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parse pipeline text into a [`Pipeline`][textshell.pipeline.pipelines.Pipeline].

Grammar (informal):

    pipeline := stage ( "|" stage )*
    stage    := name ( WS arg )*

Each stage is trimmed and split on whitespace runs; the first token is the
command name, the remaining tokens are its arguments. Names are resolved
through a [`CommandRegistry`][textshell.registry.CommandRegistry] and the
factory validates the arguments.

Parsing is all-or-nothing: the first failing stage aborts the parse and no
later stage is looked at.

Typical usage:

    pipeline, error = parse("sort desc | uniq")
    if error is not None:
        # show error.message, leave the text alone
        ...
    lines = execute(pipeline, lines)

Check mode (``check=True``) validates the whole text but always returns the
identity pipeline, so a caller can validate as the user types without ever
running a stage.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple, cast

from textshell.config.logging import get_logger
from textshell.constants import PIPE_SEPARATOR
from textshell.pipeline.errors import EmptyCommandError, ParseError
from textshell.pipeline.pipelines import IDENTITY_PIPELINE, Pipeline
from textshell.registry import StageEnv, default_registry

if TYPE_CHECKING:
    from textshell.config.logging import TextshellLogger
    from textshell.pipeline.contracts import Stage
    from textshell.registry import CommandRegistry

logger: TextshellLogger = get_logger(__name__)


class StageToken(NamedTuple):
    """One pipeline segment, tokenized but not yet resolved.

    Attributes:
        position (int): 1-based stage position.
        name (str): Command name (empty for an empty segment).
        args (tuple[str, ...]): Argument tokens.
    """

    position: int
    name: str
    args: tuple[str, ...]


class ParseResult(NamedTuple):
    """Outcome of `parse`: exactly one of ``pipeline`` / ``error`` is set."""

    pipeline: Pipeline | None
    error: ParseError | None

    @property
    def ok(self) -> bool:
        """True if parsing succeeded."""
        return self.error is None


def tokenize(text: str) -> list[StageToken]:
    """Split pipeline text into stage tokens.

    Empty or whitespace-only text yields no tokens. Otherwise every segment
    between separators yields a token, including empty ones (``name == ""``).

    Args:
        text (str): Raw pipeline text.

    Returns:
        list[StageToken]: Tokens in pipeline order.
    """
    if not text.strip():
        return []
    tokens: list[StageToken] = []
    for position, segment in enumerate(text.split(PIPE_SEPARATOR), start=1):
        words: list[str] = segment.split()
        if words:
            tokens.append(StageToken(position, words[0], tuple(words[1:])))
        else:
            tokens.append(StageToken(position, "", ()))
    return tokens


def build_stages(
    tokens: list[StageToken],
    *,
    registry: CommandRegistry,
    env: StageEnv,
) -> tuple[Stage, ...]:
    """Resolve tokens into stages, raising on the first failure.

    Raises:
        EmptyCommandError: For an empty segment.
        UnknownCommandError: For a name missing from the registry.
        InvalidArgumentsError: When a factory rejects its arguments.
    """
    stages: list[Stage] = []
    for token in tokens:
        if not token.name:
            raise EmptyCommandError(position=token.position)
        stages.append(registry.build(token.name, token.args, env=env, position=token.position))
    return tuple(stages)


def parse(
    text: str,
    *,
    check: bool = False,
    registry: CommandRegistry | None = None,
    env: StageEnv | None = None,
) -> ParseResult:
    """Parse ``text`` into a pipeline, returning the error instead of raising.

    Args:
        text (str): Raw pipeline text, e.g. ``"sort desc | uniq"``.
        check (bool): Validate only; on success return the identity pipeline.
        registry (CommandRegistry | None): Command table; defaults to the built-ins.
        env (StageEnv | None): Collaborators for the factories (collator, help sink).

    Returns:
        ParseResult: ``(pipeline, None)`` on success, ``(None, error)`` on failure.
    """
    if registry is None:
        registry = default_registry()
    if env is None:
        env = StageEnv(registry=registry)

    try:
        stages: tuple[Stage, ...] = build_stages(tokenize(text), registry=registry, env=env)
    except ParseError as exc:
        logger.debug("parse failed for %r: %s", text, exc)
        return ParseResult(None, exc)

    if check or not stages:
        logger.trace("parse(%r, check=%s) -> identity", text, check)
        return ParseResult(IDENTITY_PIPELINE, None)

    pipeline = Pipeline(stages=stages)
    logger.debug("parsed %r -> %s", text, pipeline.describe())
    return ParseResult(pipeline, None)


def parse_or_raise(
    text: str,
    *,
    check: bool = False,
    registry: CommandRegistry | None = None,
    env: StageEnv | None = None,
) -> Pipeline:
    """Like `parse`, but raise the parse error.

    Raises:
        ParseError: The first parse failure.
    """
    pipeline, error = parse(text, check=check, registry=registry, env=env)
    if error is not None:
        raise error
    return cast("Pipeline", pipeline)
