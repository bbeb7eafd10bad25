# topmark:header:start
#
#   project      : TextShell
#   file         : console.py
#   file_relpath : src/textshell/cli/console.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-backed implementation of [`ConsoleLike`][textshell.cli_shared.console_api.ConsoleLike].

STDOUT carries pipeline results and informational output. Everything else
(warnings, errors and the help document shown by the ``help`` stage) goes
to STDERR so a redirected ``textshell run`` only ever captures lines.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

import click

from textshell.cli_shared.console_api import ConsoleLike


class ClickConsole(ConsoleLike):
    """Console writing through ``click.echo``.

    Streams are resolved on every call, so a console created inside
    ``CliRunner.invoke`` writes to the runner's streams.

    Args:
        enable_color (bool): Emit ANSI styling.
        out (TextIO | None): Stream for results (default: current ``sys.stdout``).
        err (TextIO | None): Stream for diagnostics (default: current ``sys.stderr``).
    """

    def __init__(
        self,
        *,
        enable_color: bool = True,
        out: TextIO | None = None,
        err: TextIO | None = None,
    ) -> None:
        self.enable_color: bool = enable_color
        self.out: TextIO | None = out
        self.err: TextIO | None = err

    def _err_stream(self) -> TextIO:
        return self.err or sys.stderr

    def print(self, text: str = "", *, nl: bool = True) -> None:
        """Write ``text`` to the result stream."""
        click.echo(text, nl=nl, file=self.out, color=self.enable_color)

    def note(self, text: str, *, nl: bool = True) -> None:
        """Write ``text`` unstyled to the diagnostic stream."""
        click.echo(text, nl=nl, file=self._err_stream(), color=self.enable_color)

    def warn(self, text: str, *, nl: bool = True) -> None:
        """Write a yellow warning to the diagnostic stream."""
        click.secho(text, nl=nl, file=self._err_stream(), color=self.enable_color, fg="yellow")

    def error(self, text: str, *, nl: bool = True) -> None:
        """Write a red error to the diagnostic stream."""
        click.secho(
            text, nl=nl, file=self._err_stream(), color=self.enable_color, fg="bright_red"
        )

    def styled(self, text: str, **style_kwargs: Any) -> str:
        """Return ``click.style(text, ...)``, or ``text`` unchanged when colour is off."""
        return click.style(text, **style_kwargs) if self.enable_color else text
