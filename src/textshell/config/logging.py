# topmark:header:start
#
#   project      : TextShell
#   file         : logging.py
#   file_relpath : src/textshell/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom TextShell logging with TRACE logging.

This module extends the standard logging module with a custom TRACE level,
a specialized logger class, and colored output formatting.

Logging is for diagnostics only. Program output (pipeline results, help text,
warnings meant for the user) goes through the CLI console instead.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Callable, Final, TextIO, cast

from yachalk import chalk

from textshell.constants import LOG_LEVEL_ENV_VAR

if TYPE_CHECKING:
    from collections.abc import Mapping

TRACE_LEVEL: Final[int] = logging.DEBUG - 5


class TextshellLogger(logging.Logger):
    """Custom logger class for TextShell with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log at TRACE, below DEBUG; arguments as for ``Logger.debug``."""
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(TextshellLogger)


LOG_FORMAT = "[%(levelname)s] %(message)s"
DEBUG_LOG_FORMAT = "[%(levelname)s] [%(filename)s:%(lineno)d] [%(funcName)s] %(message)s"

_LEVEL_NAMES: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}

_LEVEL_STYLES: Final[tuple[tuple[int, Callable[[str], str]], ...]] = (
    (logging.CRITICAL, chalk.red_bright),
    (logging.ERROR, chalk.red),
    (logging.WARNING, chalk.yellow),
    (logging.INFO, chalk.green),
    (logging.DEBUG, chalk.gray),
    (TRACE_LEVEL, chalk.blue),
)


class ChalkFormatter(logging.Formatter):
    """Formatter colouring each record by severity (yachalk).

    Records below TRACE (custom levels) are dimmed red so they stand out.
    """

    def format(self, record: logging.LogRecord) -> str:
        message: str = super().format(record)
        for threshold, paint in _LEVEL_STYLES:
            if record.levelno >= threshold:
                return paint(message)
        return chalk.dim.red(message)


def parse_log_level(value: str | None) -> int | None:
    """Return a logging level for a level name or a numeric string.

    Args:
        value (str | None): Level name (``"TRACE"``, ``"debug"``, ...) or digits (``"10"``).

    Returns:
        int | None: The numeric level, or ``None`` if ``value`` is empty or unknown.
    """
    if not value:
        return None
    v = value.strip().upper()
    if v.isdigit():
        return int(v)
    return _LEVEL_NAMES.get(v)


def resolve_env_log_level() -> int | None:
    """Read the level from the environment, if set.

    Honors TEXTSHELL_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").
    """
    return parse_log_level(os.environ.get(LOG_LEVEL_ENV_VAR))


def setup_logging(level: int | None = None, *, stream: TextIO | None = None) -> None:
    """Install a single coloured handler on the root logger.

    Args:
        level (int | None): Log level; ``None`` reads ``TEXTSHELL_LOG_LEVEL`` and
            falls back to CRITICAL, which keeps a normal run silent.
        stream (TextIO | None): Destination; defaults to the current ``sys.stderr``
            so diagnostics never mix with pipeline output.
    """
    if level is None:
        level = resolve_env_log_level() or logging.CRITICAL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for old in root_logger.handlers[:]:
        root_logger.removeHandler(old)

    handler = logging.StreamHandler(stream or sys.stderr)
    # file/line details only when debugging
    handler.setFormatter(ChalkFormatter(LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT))
    root_logger.addHandler(handler)


def get_logger(name: str) -> TextshellLogger:
    """Retrieve a TextshellLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        TextshellLogger: A TextshellLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("TextshellLogger", logger)
