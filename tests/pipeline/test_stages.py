# topmark:header:start
#
#   project      : TextShell
#   file         : test_stages.py
#   file_relpath : tests/pipeline/test_stages.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Stage tests: sort, uniq and help behavior in isolation."""

from __future__ import annotations

import logging

import pytest

from textshell.pipeline.collation import Collator
from textshell.pipeline.pipelines import IDENTITY_PIPELINE, Pipeline
from textshell.pipeline.stages import HelpStage, SortStage, UniqStage

pytestmark: list[pytest.MarkDecorator] = [pytest.mark.pipeline]


def test_sort_ascending_and_descending() -> None:
    """Ascending and descending are mirror images for distinct lines."""
    lines = ["pear", "apple", "fig"]
    assert SortStage()(lines) == ["apple", "fig", "pear"]
    assert SortStage(descending=True)(lines) == ["pear", "fig", "apple"]


def test_sort_is_numeric_aware() -> None:
    """Digit runs compare by value."""
    assert SortStage()(["item10", "item2", "item1"]) == ["item1", "item2", "item10"]
    assert SortStage(descending=True)(["2", "10", "1"]) == ["10", "2", "1"]


def test_sort_without_numeric_compares_digits_as_text() -> None:
    """With numeric collation off, '10' sorts before '2'."""
    assert SortStage(collator=Collator(numeric=False))(["2", "10"]) == ["10", "2"]


def test_sort_keeps_duplicates() -> None:
    """Sorting is a permutation; repeated lines are all kept."""
    assert SortStage()(["b", "a", "b"]) == ["a", "b", "b"]


def test_sort_does_not_mutate_input() -> None:
    """The stage returns a new list."""
    lines = ["b", "a"]
    out = SortStage()(lines)
    assert lines == ["b", "a"]
    assert out is not lines


def test_sort_args_round_trip() -> None:
    """Canonical arguments reflect the direction."""
    assert SortStage().args == ()
    assert SortStage(descending=True).args == ("desc",)


def test_uniq_keeps_first_occurrence_order() -> None:
    """Each distinct line appears once, at its first position."""
    assert UniqStage()(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_uniq_is_exact_match() -> None:
    """Lines differing in case or whitespace are distinct."""
    assert UniqStage()(["a", "A", "a ", "a"]) == ["a", "A", "a "]


def test_help_passes_lines_through_and_emits_document() -> None:
    """help is an identity on the data path and sends its document to the sink."""
    shown: list[str] = []
    stage = HelpStage(document="# Help\n", sink=shown.append)
    assert stage(["b", "a"]) == ["b", "a"]
    assert shown == ["# Help\n"]


def test_help_without_sink_is_identity() -> None:
    """Without a sink the document is dropped."""
    assert HelpStage(document="doc")(["x"]) == ["x"]


def test_help_sink_failure_is_logged_not_raised(caplog: pytest.LogCaptureFixture) -> None:
    """A failing sink never affects the data path."""

    def broken_sink(document: str) -> None:
        raise OSError("no display")

    stage = HelpStage(document="doc", sink=broken_sink)
    with caplog.at_level(logging.WARNING):
        assert stage(["x"]) == ["x"]
    assert "no display" in caplog.text


def test_pipeline_describe() -> None:
    """describe() renders the canonical pipeline text."""
    assert IDENTITY_PIPELINE.describe() == "<identity>"
    pipeline = Pipeline(stages=(UniqStage(), SortStage(descending=True)))
    assert pipeline.describe() == "uniq | sort desc"
    assert len(pipeline) == 2
    assert [s.name for s in pipeline] == ["uniq", "sort"]
