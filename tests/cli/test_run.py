# topmark:header:start
#
#   project      : TextShell
#   file         : test_run.py
#   file_relpath : tests/cli/test_run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: the `run` command over files, STDIN and line ranges."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli, run_cli_in
from textshell.cli_shared.exit_codes import ExitCode

if TYPE_CHECKING:
    from pathlib import Path

pytestmark: list[pytest.MarkDecorator] = [pytest.mark.cli]


def test_run_stdin_to_stdout() -> None:
    """Lines from STDIN are transformed and printed."""
    result = run_cli(
        ["--no-color", "--no-config", "run", "sort desc | uniq"], input_text="b\na\nc\na\nb\n"
    )
    assert_SUCCESS(result)
    assert result.stdout == "c\nb\na\n"


def test_run_file_argument(isolation: Path) -> None:
    """A relative FILE is read from the working directory."""
    (isolation / "names.txt").write_text("bob\nalice\nbob\n", encoding="utf-8")
    result = run_cli_in(isolation, ["--no-color", "run", "uniq | sort", "names.txt"])
    assert_SUCCESS(result)
    assert result.stdout == "alice\nbob\n"


def test_run_empty_pipeline_echoes_input() -> None:
    """The empty pipeline is the identity."""
    result = run_cli(["--no-config", "run", ""], input_text="x\ny")
    assert_SUCCESS(result)
    assert result.stdout == "x\ny"


def test_run_invalid_pipeline_is_usage_error(isolation: Path) -> None:
    """An invalid pipeline is reported and the file is not touched."""
    target = isolation / "data.txt"
    target.write_text("b\na\n", encoding="utf-8")
    result = run_cli_in(isolation, ["--no-color", "run", "sort | rev", "-i", "data.txt"])
    assert_USAGE_ERROR(result)
    assert "Unknown command: 'rev'" in result.stderr
    assert result.stdout == ""
    assert target.read_text(encoding="utf-8") == "b\na\n"


def test_run_invalid_arguments_message() -> None:
    """Argument errors name the command and the accepted forms."""
    result = run_cli(["--no-color", "--no-config", "run", "sort -x"], input_text="a\n")
    assert_USAGE_ERROR(result)
    assert "Invalid arguments for 'sort': -x" in result.stderr


def test_run_in_place(isolation: Path) -> None:
    """--in-place writes the result back and prints nothing."""
    target = isolation / "data.txt"
    target.write_text("b\r\na\r\nb\r\n", encoding="utf-8")
    result = run_cli_in(isolation, ["run", "uniq | sort", "--in-place", "data.txt"])
    assert_SUCCESS(result)
    assert result.stdout == ""
    assert target.read_bytes() == b"a\r\nb\r\n"


def test_run_in_place_requires_file() -> None:
    """--in-place cannot write to STDIN."""
    result = run_cli(["--no-config", "run", "sort", "-i"], input_text="a\n")
    assert_USAGE_ERROR(result)
    assert "--in-place requires a FILE" in result.stderr


def test_run_line_range(isolation: Path) -> None:
    """--lines restricts the transformation to a region."""
    (isolation / "notes.md").write_text("# Title\nc\na\nb\n# End\n", encoding="utf-8")
    result = run_cli_in(isolation, ["run", "sort", "notes.md", "--lines", "2:4"])
    assert_SUCCESS(result)
    assert result.stdout == "# Title\na\nb\nc\n# End\n"


def test_run_line_range_invalid() -> None:
    """Malformed or out-of-range regions are usage errors."""
    assert_USAGE_ERROR(run_cli(["--no-config", "run", "sort", "--lines", "x"], input_text="a\n"))
    assert_USAGE_ERROR(run_cli(["--no-config", "run", "sort", "--lines", "5:"], input_text="a\n"))


def test_run_missing_file(isolation: Path) -> None:
    """A missing input file maps to FILE_NOT_FOUND."""
    result = run_cli_in(isolation, ["run", "sort", "missing.txt"])
    assert result.exit_code == ExitCode.FILE_NOT_FOUND, result.output


def test_run_help_stage_goes_to_stderr() -> None:
    """The help document never mixes with the transformed lines."""
    result = run_cli(["--no-color", "--no-config", "run", "help | sort"], input_text="b\na\n")
    assert_SUCCESS(result)
    assert result.stdout == "a\nb\n"
    assert "# Available commands" in result.stderr


def test_run_newline_and_numeric_options() -> None:
    """Collation and newline options override the config."""
    result = run_cli(
        ["--no-config", "run", "sort", "--no-numeric", "--newline", "crlf"],
        input_text="2\n10\n",
    )
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"10\r\n2\r\n"


def test_run_reads_config_file(isolation: Path) -> None:
    """Settings from a discovered textshell.toml apply to the run."""
    (isolation / "textshell.toml").write_text("root = true\nnumeric = false\n", encoding="utf-8")
    result = run_cli_in(isolation, ["run", "sort"], input_text="2\n10\n")
    assert_SUCCESS(result)
    assert result.stdout == "10\n2\n"


def test_run_invalid_config_file(isolation: Path) -> None:
    """A broken config file maps to CONFIG_ERROR."""
    (isolation / "textshell.toml").write_text('root = true\nnewline = "cr"\n', encoding="utf-8")
    result = run_cli_in(isolation, ["run", "sort"], input_text="a\n")
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output


def test_run_unknown_locale_is_config_error() -> None:
    """An unavailable collation locale maps to CONFIG_ERROR."""
    result = run_cli(
        ["--no-config", "run", "sort", "--locale", "xx_NOT_A_LOCALE.NOPE"], input_text="a\n"
    )
    assert result.exit_code == ExitCode.CONFIG_ERROR, result.output
