# topmark:header:start
#
#   project      : TextShell
#   file         : __init__.py
#   file_relpath : src/textshell/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""TextShell package.

TextShell transforms an ordered sequence of text lines with a small pipeline
language (``sort desc | uniq``). It exposes both a CLI and a small typed API:

```python
from textshell.api import execute, parse

pipeline, error = parse("uniq | sort")
assert error is None
execute(pipeline, ["b", "a", "b"])  # ["a", "b"]
```
"""

from __future__ import annotations
