# topmark:header:start
#
#   project      : TextShell
#   file         : test_color.py
#   file_relpath : tests/cli/test_color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Colour resolution rules."""

from __future__ import annotations

import pytest

from textshell.cli_shared.color import ColorMode, resolve_color_mode

pytestmark: list[pytest.MarkDecorator] = [pytest.mark.cli]


def test_json_is_never_coloured() -> None:
    assert not resolve_color_mode(
        color_mode_override=ColorMode.ALWAYS, output_format="JSON", stdout_isatty=True, environ={}
    )


@pytest.mark.parametrize(
    ("mode", "expected"), [(ColorMode.ALWAYS, True), (ColorMode.NEVER, False)]
)
def test_explicit_mode_beats_environment(mode: ColorMode, expected: bool) -> None:
    env = {"NO_COLOR": "1"} if expected else {"FORCE_COLOR": "1"}
    assert (
        resolve_color_mode(
            color_mode_override=mode, output_format=None, stdout_isatty=not expected, environ=env
        )
        is expected
    )


@pytest.mark.parametrize(
    ("env", "isatty", "expected"),
    [
        ({"FORCE_COLOR": "1"}, False, True),
        ({"FORCE_COLOR": "0"}, False, False),
        ({"NO_COLOR": ""}, True, False),
        ({}, True, True),
        ({}, False, False),
    ],
)
def test_auto_mode(env: dict[str, str], isatty: bool, expected: bool) -> None:
    assert (
        resolve_color_mode(
            color_mode_override=ColorMode.AUTO,
            output_format="default",
            stdout_isatty=isatty,
            environ=env,
        )
        is expected
    )
