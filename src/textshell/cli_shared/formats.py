# topmark:header:start
#
#   project      : TextShell
#   file         : formats.py
#   file_relpath : src/textshell/cli_shared/formats.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Output formats for informational CLI commands."""

from __future__ import annotations

from enum import Enum


class OutputFormat(str, Enum):
    """Output format for CLI rendering.

    Attributes:
        DEFAULT: Human-friendly text output; may include ANSI color if enabled.
        MARKDOWN: A Markdown document.
        JSON: A single JSON document (machine-readable, never colored).
    """

    DEFAULT = "default"
    MARKDOWN = "markdown"
    JSON = "json"
