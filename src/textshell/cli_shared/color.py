# topmark:header:start
#
#   project      : TextShell
#   file         : color.py
#   file_relpath : src/textshell/cli_shared/color.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Decide whether console output gets ANSI colour.

Pipeline results are printed unstyled regardless; colour only affects
informational output (``OK``, command listings, warnings and errors).
"""

from __future__ import annotations

import os
import sys
from enum import Enum
from typing import Mapping


class ColorMode(str, Enum):
    """Value of the ``--color`` option."""

    AUTO = "auto"
    ALWAYS = "always"
    NEVER = "never"


def _stdout_is_terminal() -> bool:
    try:
        return sys.stdout.isatty()
    except (OSError, ValueError):
        # closed or detached stream
        return False


def resolve_color_mode(
    *,
    color_mode_override: ColorMode | None,
    output_format: str | None,
    stdout_isatty: bool | None = None,
    environ: Mapping[str, str] | None = None,
) -> bool:
    """Return True if console output should be coloured.

    ``json`` output is never coloured. An explicit ``always`` / ``never``
    wins next, then ``FORCE_COLOR`` (any value but ``"0"``) and ``NO_COLOR``
    (any value). Otherwise colour follows whether STDOUT is a terminal.

    Args:
        color_mode_override (ColorMode | None): Mode from ``--color``; ``None`` or
            ``AUTO`` defers to the environment.
        output_format (str | None): Output format name, if the command has one.
        stdout_isatty (bool | None): Terminal detection override (tests).
        environ (Mapping[str, str] | None): Environment override (tests).
    """
    if output_format is not None and output_format.lower() == "json":
        return False
    if color_mode_override is ColorMode.ALWAYS:
        return True
    if color_mode_override is ColorMode.NEVER:
        return False

    env: Mapping[str, str] = os.environ if environ is None else environ
    if env.get("FORCE_COLOR", "0") != "0":
        return True
    if "NO_COLOR" in env:
        return False
    return _stdout_is_terminal() if stdout_isatty is None else stdout_isatty
