# topmark:header:start
#
#   project      : TextShell
#   file         : errors.py
#   file_relpath : src/textshell/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for TextShell CLI.

Usage:
    Raise these exceptions in CLI commands to signal errors with standardized
    messages and exit codes. Library errors (parse errors, config errors) are
    translated by [`textshell.cli.cmd_common`][].

Styling:
    Exceptions prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from typing import IO, Any

import click

from textshell.cli_shared.exit_codes import ExitCode


class TextshellError(click.ClickException):
    """Base class for all TextShell CLI errors."""

    exit_code = ExitCode.FAILURE

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:
        """Display the error using the project console if available.

        Falls back to Click’s default error display when no console is present.
        """
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(getattr(ctx, "obj", None), dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(console.styled(self.format_message(), fg="bright_red"))
                return
        super().show(file)


class TextshellUsageError(TextshellError):
    """Error for command-line invocation errors (invalid flags/args, invalid pipeline)."""

    exit_code = ExitCode.USAGE_ERROR


class TextshellConfigError(TextshellError):
    """Error for configuration errors (missing/invalid/malformed config)."""

    exit_code = ExitCode.CONFIG_ERROR


class TextshellFileNotFoundError(TextshellError):
    """Error when input path does not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class TextshellPermissionDeniedError(TextshellError):
    """Error for insufficient permissions (read/write)."""

    exit_code = ExitCode.PERMISSION_DENIED


class TextshellIOError(TextshellError):
    """Error for I/O errors reading/writing files."""

    exit_code = ExitCode.IO_ERROR


class TextshellEncodingError(TextshellError):
    """Error for text decoding errors (e.g., UnicodeDecodeError)."""

    exit_code = ExitCode.ENCODING_ERROR


class TextshellPipelineError(TextshellError):
    """Error for a stage failing while the pipeline runs."""

    exit_code = ExitCode.PIPELINE_ERROR
