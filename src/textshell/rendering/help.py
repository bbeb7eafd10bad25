# topmark:header:start
#
#   project      : TextShell
#   file         : help.py
#   file_relpath : src/textshell/rendering/help.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Render the TextShell help document (Markdown) from command metadata."""

from __future__ import annotations

from typing import TYPE_CHECKING

from textshell.constants import PIPE_SEPARATOR

if TYPE_CHECKING:
    from collections.abc import Iterable

    from textshell.registry.registry import CommandSpec


def render_help_markdown(specs: Iterable[CommandSpec]) -> str:
    """Return the help document listing ``specs``.

    Args:
        specs (Iterable[CommandSpec]): Commands to describe, in display order.

    Returns:
        str: Markdown text ending with a newline.
    """
    lines: list[str] = [
        "# TextShell",
        "",
        f"Chain commands with a pipe (`{PIPE_SEPARATOR}`); each command receives the",
        "lines produced by the previous one.",
        "",
        "```",
        f"sort desc {PIPE_SEPARATOR} uniq",
        "```",
        "",
        "# Available commands",
        "",
    ]
    for spec in specs:
        lines.append(f"- `{spec.name}`: {spec.summary}")
        for form in spec.usage:
            lines.append(f"  - `{form}`")
    lines.append("")
    return "\n".join(lines)
