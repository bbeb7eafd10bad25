# topmark:header:start
#
#   project      : TextShell
#   file         : __init__.py
#   file_relpath : src/textshell/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextShell CLI subcommands (one module per command)."""
