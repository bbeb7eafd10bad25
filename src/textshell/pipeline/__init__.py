# topmark:header:start
#
#   project      : TextShell
#   file         : __init__.py
#   file_relpath : src/textshell/pipeline/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextShell pipeline package.

This package contains the pipeline language and its execution:

- Stage contracts and the concrete stages (sort, uniq, help)
- Numeric-aware collation used by ``sort``
- The parser turning ``"sort desc | uniq"`` into a pipeline
- The runner folding a pipeline over a line sequence
- The error taxonomy shared by parser and runner

The public entry points are [`textshell.pipeline.parser.parse`][] and
[`textshell.pipeline.runner.execute`][], also re-exported from
[`textshell.api`][].
"""
