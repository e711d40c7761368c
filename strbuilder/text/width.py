from __future__ import annotations

import unicodedata

# East Asian Wide and Fullwidth characters take two terminal columns
_WIDE = frozenset({"W", "F"})


def char_width(ch: str) -> int:
    return 2 if unicodedata.east_asian_width(ch) in _WIDE else 1


def display_width(text: str) -> int:
    """Column width of *text*: wide/fullwidth code points count 2, the rest 1."""
    return sum(char_width(ch) for ch in text)


def truncate_width(text: str, width: int) -> str:
    """
    Longest prefix of *text* whose display width does not exceed *width*.
    A wide character that would straddle the boundary is dropped entirely.
    """
    if width <= 0:
        return ""
    used = 0
    for i, ch in enumerate(text):
        w = char_width(ch)
        if used + w > width:
            return text[:i]
        used += w
    return text


__all__ = ["char_width", "display_width", "truncate_width"]
