"""
Markup tag stripping.

A small single-pass scanner over the text:
  • `<!-- ... -->` comments are dropped
  • `<? ... ?>` processing instructions are dropped
  • `<name ...>` / `</name>` tags are dropped unless *name* is allowed
  • quotes inside a tag may hide `>` characters
  • nested `<` inside a tag must be closed before the tag ends
  • an unclosed tag swallows the rest of the input
  • `<` followed by whitespace (or at the very end) is plain text
"""

from __future__ import annotations

import re
from typing import FrozenSet, List

from ..types import AllowedTags

_TAG_NAME = re.compile(r"<\s*/?\s*([^\s<>/]+)")


def parse_allowed(allowable: AllowedTags | None) -> FrozenSet[str]:
    """
    Normalize the allowed tag set to lowercase names.

    Accepts the concatenated form ("<p><b>") or an iterable of names
    (["p", "<b>"]).
    """
    if not allowable:
        return frozenset()
    if isinstance(allowable, str):
        return frozenset(m.lower() for m in _TAG_NAME.findall(allowable))
    names: List[str] = []
    for item in allowable:
        name = str(item).strip().strip("<>/").strip().lower()
        if name:
            names.append(name)
    return frozenset(names)


def tag_name(tag: str) -> str:
    """Lowercase element name of a raw tag like '<P class="x">' or '</p>'."""
    m = _TAG_NAME.match(tag)
    return m.group(1).lower() if m else ""


def _scan_tag_end(text: str, start: int) -> int:
    """
    Index of the '>' that closes the tag opened at *start*, or -1.
    """
    quote: str | None = None
    depth = 1
    for j in range(start + 1, len(text)):
        c = text[j]
        if quote:
            if c == quote:
                quote = None
        elif c in "\"'":
            quote = c
        elif c == "<":
            depth += 1
        elif c == ">":
            depth -= 1
            if depth == 0:
                return j
    return -1


def strip_tags(text: str, allowable: AllowedTags | None = None) -> str:
    allowed = parse_allowed(allowable)
    out: List[str] = []
    i, n = 0, len(text)

    while i < n:
        lt = text.find("<", i)
        if lt < 0:
            out.append(text[i:])
            break
        out.append(text[i:lt])

        nxt = text[lt + 1] if lt + 1 < n else ""
        if not nxt or nxt.isspace():
            out.append("<")
            i = lt + 1
            continue

        if text.startswith("<!--", lt):
            end = text.find("-->", lt + 4)
            i = n if end < 0 else end + 3
            continue

        if nxt == "?":
            end = text.find("?>", lt + 2)
            i = n if end < 0 else end + 2
            continue

        end = _scan_tag_end(text, lt)
        if end < 0:
            # unclosed tag: drop everything up to the end
            break
        tag = text[lt:end + 1]
        if allowed and tag_name(tag) in allowed:
            out.append(tag)
        i = end + 1

    return "".join(out)


__all__ = ["parse_allowed", "tag_name", "strip_tags"]
