# topmark:header:start
#
#   project      : TextShell
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: `version` command output."""

from __future__ import annotations

import json

from tests.cli.conftest import assert_SUCCESS, run_cli
from textshell.constants import TEXTSHELL_VERSION


def test_version_outputs_version() -> None:
    """It should output the installed version string (exact match)."""
    result = run_cli(["--no-color", "version"])
    assert_SUCCESS(result)
    assert result.stdout.strip() == TEXTSHELL_VERSION


def test_version_json() -> None:
    """JSON output wraps the version in an object."""
    result = run_cli(["version", "--format", "json"])
    assert_SUCCESS(result)
    assert json.loads(result.stdout) == {"version": TEXTSHELL_VERSION}


def test_version_markdown() -> None:
    """Markdown output has a heading and the version."""
    result = run_cli(["version", "--format", "markdown"])
    assert_SUCCESS(result)
    assert result.stdout.startswith("# TextShell Version")
    assert TEXTSHELL_VERSION in result.stdout
