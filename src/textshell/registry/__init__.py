# topmark:header:start
#
#   project      : TextShell
#   file         : __init__.py
#   file_relpath : src/textshell/registry/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command registry.

Most callers only need the shared built-in registry:

```python
from textshell.registry import default_registry

registry = default_registry()
for spec in registry.iter_specs():
    print(spec.name, spec.summary)
```
"""

from __future__ import annotations

from .commands import BUILTIN_COMMANDS, default_registry
from .registry import CommandFactory, CommandRegistry, CommandSpec, StageEnv

__all__ = [
    "BUILTIN_COMMANDS",
    "CommandFactory",
    "CommandRegistry",
    "CommandSpec",
    "StageEnv",
    "default_registry",
]
