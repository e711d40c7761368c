from __future__ import annotations

from functools import lru_cache

from ..types import DEFAULT_CHARACTER_MASK


@lru_cache(maxsize=64)
def expand_mask(mask: str) -> str:
    """
    Expand a character mask into the set of characters it names.

    "a..z" stands for the inclusive range a-z. A ".." that cannot form a
    range (missing right bound, or bound lower than the left one) is kept
    as literal characters.
    """
    chars: set[str] = set()
    i, n = 0, len(mask)
    while i < n:
        c = mask[i]
        if i + 3 < n and mask[i + 1:i + 3] == ".." and mask[i + 3] >= c:
            chars.update(chr(o) for o in range(ord(c), ord(mask[i + 3]) + 1))
            i += 4
            continue
        chars.add(c)
        i += 1
    return "".join(sorted(chars))


def trim(text: str, mask: str = DEFAULT_CHARACTER_MASK) -> str:
    return text.strip(expand_mask(mask)) if mask else text


def ltrim(text: str, mask: str = DEFAULT_CHARACTER_MASK) -> str:
    return text.lstrip(expand_mask(mask)) if mask else text


def rtrim(text: str, mask: str = DEFAULT_CHARACTER_MASK) -> str:
    return text.rstrip(expand_mask(mask)) if mask else text


__all__ = ["expand_mask", "trim", "ltrim", "rtrim"]
