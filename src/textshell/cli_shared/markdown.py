# topmark:header:start
#
#   project      : TextShell
#   file         : markdown.py
#   file_relpath : src/textshell/cli_shared/markdown.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-free Markdown helpers for CLI emitters."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence


def render_markdown_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render a GitHub‑flavoured Markdown table with padded, left-aligned columns.

    Args:
        headers: Column headers.
        rows: Row cells; each row must have as many cells as ``headers``.

    Returns:
        The Markdown table as a single string (ending with a newline).

    Raises:
        ValueError: If a row has the wrong number of cells.
    """
    if not headers:
        return ""
    ncols: int = len(headers)
    if any(len(r) != ncols for r in rows):
        raise ValueError("All rows must have the same number of columns as headers")

    widths: list[int] = [len(h) for h in headers]
    for r in rows:
        for i, cell in enumerate(r):
            widths[i] = max(widths[i], len(cell))

    def _line(cells: Sequence[str]) -> str:
        return "| " + " | ".join(f"{c:<{widths[i]}}" for i, c in enumerate(cells)) + " |"

    out: list[str] = [_line(headers), "| " + " | ".join("-" * w for w in widths) + " |"]
    out.extend(_line(r) for r in rows)
    return "\n".join(out) + "\n"
