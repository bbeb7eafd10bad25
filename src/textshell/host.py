# topmark:header:start
#
#   project      : TextShell
#   file         : host.py
#   file_relpath : src/textshell/host.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Text buffer and line regions: the host side of a pipeline run.

The host supplies the current lines (a region of a text, always whole lines)
and writes the pipeline output back over that region. Text outside the
region, the buffer's line break style and its final newline are preserved.

Regions are 0-based and inclusive internally; `LineRegion.parse` accepts the
1-based ``START:END`` form used on the command line.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Final

from textshell.config import NewlineMode
from textshell.config.logging import get_logger

if TYPE_CHECKING:
    from collections.abc import Sequence

    from textshell.config.logging import TextshellLogger

logger: TextshellLogger = get_logger(__name__)

_REGION_RE: Final[re.Pattern[str]] = re.compile(r"^\s*(\d*)\s*(?::\s*(\d*)\s*)?$")
_LINE_BREAK_RE: Final[re.Pattern[str]] = re.compile(r"\r?\n")

_NEWLINES: Final[dict[NewlineMode, str]] = {
    NewlineMode.LF: "\n",
    NewlineMode.CRLF: "\r\n",
}


class RegionError(ValueError):
    """Raised for a malformed region or one that lies outside the buffer."""


@dataclass(frozen=True)
class LineRegion:
    """Inclusive, 0-based range of whole lines.

    Attributes:
        start (int): First line of the region.
        end (int | None): Last line of the region; ``None`` means "to the end".
    """

    start: int = 0
    end: int | None = None

    def __post_init__(self) -> None:
        if self.start < 0:
            raise RegionError(f"Region start must be >= 0, got {self.start}")
        if self.end is not None and self.end < self.start:
            raise RegionError(f"Region end ({self.end}) is before its start ({self.start})")

    @classmethod
    def parse(cls, text: str) -> LineRegion:
        """Parse a 1-based ``START:END`` range (``"3"``, ``"3:7"``, ``"3:"``, ``":7"``).

        Raises:
            RegionError: If ``text`` is malformed or uses line 0.
        """
        m: re.Match[str] | None = _REGION_RE.match(text)
        if m is None or (not m.group(1) and not m.group(2)):
            raise RegionError(f"Invalid line range {text!r} (expected START:END, 1-based)")
        start_raw, end_raw = m.group(1), m.group(2)
        single: bool = ":" not in text
        start: int = int(start_raw) if start_raw else 1
        end: int | None
        if single:
            end = start
        else:
            end = int(end_raw) if end_raw else None
        if start < 1 or (end is not None and end < 1):
            raise RegionError(f"Invalid line range {text!r}: lines are numbered from 1")
        return cls(start=start - 1, end=None if end is None else end - 1)

    def clamp(self, line_count: int) -> tuple[int, int]:
        """Return ``(start, stop)`` slice bounds for a buffer of ``line_count`` lines.

        Raises:
            RegionError: If the region starts past the last line.
        """
        if line_count == 0 and self.start == 0:
            return 0, 0
        if self.start >= line_count:
            raise RegionError(
                f"Line range starts at line {self.start + 1} "
                f"but the text has {line_count} line(s)"
            )
        stop: int = line_count if self.end is None else min(self.end + 1, line_count)
        return self.start, stop


WHOLE_BUFFER: Final[LineRegion] = LineRegion()


def detect_newline(text: str) -> str:
    """Return ``"\\r\\n"`` if ``text`` uses CRLF line breaks, else ``"\\n"``."""
    return "\r\n" if "\r\n" in text else "\n"


@dataclass(frozen=True)
class TextBuffer:
    """Immutable text split into lines.

    Attributes:
        lines (tuple[str, ...]): Lines without their line breaks.
        newline (str): Line break used to join lines.
        final_newline (bool): Whether the text ends with a line break.
    """

    lines: tuple[str, ...]
    newline: str = "\n"
    final_newline: bool = False

    @classmethod
    def from_text(cls, text: str, *, newline: NewlineMode = NewlineMode.AUTO) -> TextBuffer:
        """Split ``text`` into a buffer.

        The input is split on both ``\\n`` and ``\\r\\n``; the detected style (or
        ``newline``) only decides which break is used when joining again.
        """
        detected: str = detect_newline(text)
        joiner: str = _NEWLINES.get(newline, detected)
        if not text:
            return cls(lines=(), newline=joiner, final_newline=False)
        parts: list[str] = _LINE_BREAK_RE.split(text)
        final_newline: bool = parts[-1] == ""
        if final_newline:
            parts.pop()
        return cls(lines=tuple(parts), newline=joiner, final_newline=final_newline)

    def lines_in(self, region: LineRegion = WHOLE_BUFFER) -> list[str]:
        """Return a copy of the lines covered by ``region``."""
        start, stop = region.clamp(len(self.lines))
        return list(self.lines[start:stop])

    def replace(self, region: LineRegion, new_lines: Sequence[str]) -> TextBuffer:
        """Return a buffer where the lines of ``region`` are replaced by ``new_lines``."""
        start, stop = region.clamp(len(self.lines))
        logger.debug("replacing lines [%d, %d) with %d line(s)", start, stop, len(new_lines))
        return replace(self, lines=(*self.lines[:start], *new_lines, *self.lines[stop:]))

    def to_text(self) -> str:
        """Join the lines back into text."""
        text: str = self.newline.join(self.lines)
        if self.final_newline and self.lines:
            text += self.newline
        return text
