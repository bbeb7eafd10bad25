# topmark:header:start
#
#   project      : TextShell
#   file         : __init__.py
#   file_relpath : src/textshell/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextShell CLI package.

This package groups all Click command definitions and supporting utilities
for the TextShell command-line interface.

Typical usage:
    The console script entry point is defined in ``pyproject.toml`` as::

        [project.scripts]
        textshell = "textshell.cli.main:cli"

All subcommands live in [`textshell.cli.commands`][].
"""

from __future__ import annotations

__all__: list[str] = []
