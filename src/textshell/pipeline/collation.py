# topmark:header:start
#
#   project      : TextShell
#   file         : collation.py
#   file_relpath : src/textshell/pipeline/collation.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Locale-aware, numeric-aware string ordering for the ``sort`` command.

Lines are split into digit runs and text runs. Digit runs compare by numeric
value (so ``item2`` sorts before ``item10``) and before any text run at the
same position. Text runs compare case-insensitively through the active
``LC_COLLATE`` locale (``locale.strxfrm``). Ties are broken so lowercase sorts
before uppercase, then by the raw text, which keeps the order total.

Example:
    ```python
    collator = Collator()
    sorted(["item2", "item10", "item1"], key=collator.sort_key)
    # ["item1", "item2", "item10"]
    ```
"""

from __future__ import annotations

import locale
import re
import unicodedata
from dataclasses import dataclass
from typing import Final, TypeAlias

from textshell.config.logging import TextshellLogger, get_logger

logger: TextshellLogger = get_logger(__name__)

_DIGIT_RUN_RE: Final[re.Pattern[str]] = re.compile(r"(\d+)")

# (kind, significant length, significant digits, digit count) for digit runs;
# (kind, 0, collation key, 0) for text runs.
# Kind 0 (digits) sorts before kind 1 (text), so later fields never mix types.
Chunk: TypeAlias = "tuple[int, int, str, int]"
SortKey: TypeAlias = "tuple[tuple[Chunk, ...], str, str]"


def _digits_key(run: str) -> tuple[int, str, int]:
    # value order without int(): significant length, then digits lexically
    significant: str = "".join(str(unicodedata.decimal(ch)) for ch in run).lstrip("0")
    return len(significant), significant, len(run)


def _xfrm(text: str) -> str:
    # strxfrm rejects embedded NUL characters
    return locale.strxfrm(text.casefold().replace("\x00", ""))


class CollationError(ValueError):
    """Raised when a collation locale cannot be activated."""


def activate_locale(name: str) -> str:
    """Switch the process ``LC_COLLATE`` category to ``name``.

    An empty name selects the user's default locale from the environment.

    Args:
        name (str): Locale name such as ``"en_US.UTF-8"``, or ``""``.

    Returns:
        str: The locale actually activated, as reported by ``setlocale``.

    Raises:
        CollationError: If the platform does not support the locale.
    """
    try:
        active: str = locale.setlocale(locale.LC_COLLATE, name)
    except locale.Error as exc:
        raise CollationError(f"Unsupported collation locale: {name!r}") from exc
    logger.debug("LC_COLLATE set to %r (requested %r)", active, name)
    return active


@dataclass(frozen=True)
class Collator:
    """Numeric-aware comparator for text lines.

    Attributes:
        numeric (bool): Compare digit runs by value. When False, digits are
            plain text and ordering is purely locale-driven.
    """

    numeric: bool = True

    def _chunks(self, text: str) -> tuple[Chunk, ...]:
        if not self.numeric:
            return ((1, 0, _xfrm(text), 0),)
        out: list[Chunk] = []
        for i, part in enumerate(_DIGIT_RUN_RE.split(text)):
            if not part:
                continue
            if i % 2:
                out.append((0, *_digits_key(part)))
            else:
                out.append((1, 0, _xfrm(part), 0))
        return tuple(out)

    def sort_key(self, text: str) -> SortKey:
        """Return a key usable with ``sorted(..., key=...)``.

        Args:
            text (str): A single line.

        Returns:
            SortKey: A comparable key implementing the collation order.
        """
        return (self._chunks(text), text.swapcase(), text)

    def compare(self, a: str, b: str) -> int:
        """Three-way compare two lines (negative, zero, positive)."""
        ka, kb = self.sort_key(a), self.sort_key(b)
        return (ka > kb) - (ka < kb)
