# topmark:header:start
#
#   project      : TextShell
#   file         : __main__.py
#   file_relpath : src/textshell/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running TextShell via ``python -m textshell``.

It delegates directly to :func:`textshell.cli.main.cli`, so the module interface
and the ``textshell`` console script behave identically.

Examples:
    Sort the lines of a file and drop duplicates::

        python -m textshell run "sort | uniq" names.txt
"""

from __future__ import annotations

from textshell.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
