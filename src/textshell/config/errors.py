# topmark:header:start
#
#   project      : TextShell
#   file         : errors.py
#   file_relpath : src/textshell/config/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration errors (framework-agnostic)."""

from __future__ import annotations


class ConfigError(ValueError):
    """Raised for missing, unreadable, or invalid configuration."""
