from __future__ import annotations

import sys
from typing import List

EXPLODE_NO_LIMIT = sys.maxsize


def explode(text: str, delimiter: str, limit: int = EXPLODE_NO_LIMIT) -> List[str]:
    """
    Split *text* on the literal *delimiter*.

      • limit > 0  → at most *limit* parts, the last one holds the remainder
      • limit == 0 → same as 1
      • limit < 0  → all parts except the last -limit ones
      • empty delimiter → the whole text as a single part
    """
    if not delimiter:
        return [text]
    if limit > 0:
        return text.split(delimiter, limit - 1)
    if limit == 0:
        return [text]
    parts = text.split(delimiter)
    return parts[:limit]


def chunk(text: str, length: int = 1) -> List[str]:
    """Fixed-size chunks of *length* code points; the last one may be shorter."""
    length = max(int(length), 1)
    return [text[i:i + length] for i in range(0, len(text), length)]


__all__ = ["EXPLODE_NO_LIMIT", "explode", "chunk"]
