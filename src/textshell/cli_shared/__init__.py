# topmark:header:start
#
#   project      : TextShell
#   file         : __init__.py
#   file_relpath : src/textshell/cli_shared/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-independent helpers shared by CLI frontends (console protocol, exit codes, color)."""
