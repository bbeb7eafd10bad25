# topmark:header:start
#
#   project      : TextShell
#   file         : test_parser.py
#   file_relpath : tests/pipeline/test_parser.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Parser tests: tokenizing, resolution through the registry and error reporting."""

from __future__ import annotations

import pytest

from textshell.pipeline.errors import (
    EmptyCommandError,
    InvalidArgumentsError,
    ParseError,
    UnknownCommandError,
)
from textshell.pipeline.parser import StageToken, parse, parse_or_raise, tokenize
from textshell.pipeline.pipelines import IDENTITY_PIPELINE
from textshell.pipeline.stages import HelpStage, SortStage, UniqStage
from textshell.registry import CommandRegistry, CommandSpec, StageEnv

pytestmark: list[pytest.MarkDecorator] = [pytest.mark.pipeline]


def test_tokenize_splits_on_pipes_and_whitespace() -> None:
    """Segments are trimmed and split on whitespace runs."""
    assert tokenize("  sort   desc |uniq  ") == [
        StageToken(1, "sort", ("desc",)),
        StageToken(2, "uniq", ()),
    ]


@pytest.mark.parametrize("text", ["", "   ", "\t \n"])
def test_tokenize_blank_text_has_no_tokens(text: str) -> None:
    """Blank pipeline text yields no stages at all."""
    assert tokenize(text) == []


def test_tokenize_keeps_empty_segments() -> None:
    """A stray separator yields an empty token at its position."""
    assert tokenize("sort ||uniq") == [
        StageToken(1, "sort", ()),
        StageToken(2, "", ()),
        StageToken(3, "uniq", ()),
    ]


def test_parse_builds_stages_in_order() -> None:
    """Stages come out in pipeline order with their arguments bound."""
    pipeline, error = parse("sort desc | uniq")
    assert error is None
    assert pipeline is not None
    assert pipeline.names() == ("sort", "uniq")
    first, second = pipeline.stages
    assert isinstance(first, SortStage) and first.descending
    assert isinstance(second, UniqStage)
    assert pipeline.describe() == "sort desc | uniq"


@pytest.mark.parametrize("text", ["", "   "])
def test_parse_empty_text_is_identity(text: str) -> None:
    """Empty input parses to the identity pipeline without error."""
    result = parse(text)
    assert result.ok
    assert result.pipeline is IDENTITY_PIPELINE


def test_parse_check_mode_returns_identity_for_valid_text() -> None:
    """Check mode validates but never hands back runnable stages."""
    result = parse("sort desc | uniq", check=True)
    assert result.ok
    assert result.pipeline is not None
    assert result.pipeline.is_identity


def test_parse_check_mode_still_reports_errors() -> None:
    """Check mode reports the same error as a normal parse."""
    result = parse("sort | frobnicate", check=True)
    assert result.pipeline is None
    assert isinstance(result.error, UnknownCommandError)


def test_parse_unknown_command() -> None:
    """An unregistered name fails with its name and position."""
    result = parse("sort | frobnicate | uniq")
    assert result.pipeline is None
    err = result.error
    assert isinstance(err, UnknownCommandError)
    assert err.name == "frobnicate"
    assert err.position == 2
    assert err.message == "Unknown command: 'frobnicate'"


def test_parse_is_case_sensitive() -> None:
    """Command names are matched exactly."""
    assert isinstance(parse("SORT").error, UnknownCommandError)


def test_parse_invalid_sort_argument() -> None:
    """Arguments outside the accepted forms are rejected before execution."""
    err = parse("sort -x").error
    assert isinstance(err, InvalidArgumentsError)
    assert err.command == "sort"
    assert err.arguments == ("-x",)
    assert "-x" in err.message


@pytest.mark.parametrize("text", ["sort desc asc", "sort DESC", "sort --desc"])
def test_parse_rejects_other_sort_forms(text: str) -> None:
    """Only '', 'asc', '-d' and 'desc' are accepted by sort."""
    assert isinstance(parse(text).error, InvalidArgumentsError)


def test_parse_uniq_rejects_arguments() -> None:
    """uniq accepts no arguments."""
    err = parse("uniq -c").error
    assert isinstance(err, InvalidArgumentsError)
    assert err.command == "uniq"


@pytest.mark.parametrize(
    ("text", "position"),
    [("| sort", 1), ("sort |", 2), ("sort || uniq", 2), ("|", 1)],
)
def test_parse_empty_stage_is_an_error(text: str, position: int) -> None:
    """Empty segments are unknown (empty) commands, not silently dropped."""
    err = parse(text).error
    assert isinstance(err, EmptyCommandError)
    assert isinstance(err, UnknownCommandError)
    assert err.position == position


def test_parse_stops_at_first_error() -> None:
    """A later stage is never examined once an earlier one fails."""
    calls: list[str] = []

    def make_probe(args: tuple[str, ...], env: StageEnv) -> UniqStage:
        calls.append("probe")
        return UniqStage()

    registry = CommandRegistry([CommandSpec("probe", make_probe, "probe")])
    result = parse("nope | probe", registry=registry)
    assert isinstance(result.error, UnknownCommandError)
    assert calls == []


def test_parse_help_ignores_arguments() -> None:
    """help builds with any arguments."""
    pipeline = parse_or_raise("help me please")
    assert isinstance(pipeline.stages[0], HelpStage)


def test_parse_or_raise_raises_parse_error() -> None:
    """parse_or_raise surfaces the error as an exception."""
    with pytest.raises(ParseError, match="Unknown command"):
        parse_or_raise("bogus")


def test_parse_uses_env_collator() -> None:
    """The sort stage is bound to the collator from the environment."""
    from textshell.pipeline.collation import Collator

    collator = Collator(numeric=False)
    pipeline = parse_or_raise("sort", env=StageEnv(collator=collator))
    stage = pipeline.stages[0]
    assert isinstance(stage, SortStage)
    assert stage.collator is collator


def test_module_tests_carry_pipeline_marker(request: pytest.FixtureRequest) -> None:
    """`-m pipeline` selects this module."""
    assert request.node.get_closest_marker("pipeline") is not None


def test_empty_registry_is_not_replaced_by_builtins() -> None:
    """An injected registry without commands knows no commands."""
    empty = CommandRegistry([])
    pipeline, error = parse("sort", registry=empty)
    assert pipeline is None
    assert isinstance(error, UnknownCommandError)
    assert parse("", registry=empty) == (IDENTITY_PIPELINE, None)
