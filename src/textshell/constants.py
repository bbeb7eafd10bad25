# topmark:header:start
#
#   project      : TextShell
#   file         : constants.py
#   file_relpath : src/textshell/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextShell Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version
from typing import Final

TEXTSHELL_VERSION: str = get_version("textshell")

# Separator between pipeline stages:
PIPE_SEPARATOR: Final[str] = "|"

# Config file names, in discovery order within a directory:
TEXTSHELL_TOML_NAME: Final[str] = "textshell.toml"
PYPROJECT_TOML_NAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_SECTION: Final[str] = "textshell"

# Environment variable honored by the logging setup:
LOG_LEVEL_ENV_VAR: Final[str] = "TEXTSHELL_LOG_LEVEL"
