"""
Immutable, chainable string builder.

Every transformation returns a new builder of the same concrete type as
the instance it was called on; queries return plain Python values.
"""

from __future__ import annotations

import logging
import random
import re
from dataclasses import dataclass
from typing import Any, Callable, ClassVar, Iterable, List, Optional, Tuple, Type, TypeVar

from .coerce import to_text
from .config import DEFAULT_CONFIG, BuilderConfig
from .interface import StringBuilderInterface
from .text import (
    EXPLODE_NO_LIMIT,
    chunk,
    display_width,
    explode,
    ltrim,
    pad_text,
    parse_float,
    parse_int,
    rtrim,
    strip_tags,
    trim,
    truncate_width,
)
from .types import (
    DEFAULT_CHARACTER_MASK,
    AllowedTags,
    Needles,
    PadSide,
    ReplaceResult,
    SearchArg,
    Stringable,
)

logger = logging.getLogger(__name__)

SB = TypeVar("SB", bound="StringBuilder")


def _alias(target: str) -> Callable[..., Any]:
    """Method that forwards to *target* looked up on the instance (overrides apply)."""
    def method(self, *args, **kwargs):
        return getattr(self, target)(*args, **kwargs)
    method.__doc__ = f"Alias of :meth:`{target}`."
    return method


def _is_many(values: Any) -> bool:
    """True for an iterable of values, False for a single (text-like) value."""
    if isinstance(values, (str, bytes, bytearray, StringBuilderInterface)):
        return False
    return isinstance(values, Iterable)


def _as_list(values: Any) -> List[Any]:
    """One value or an iterable of values → list."""
    return list(values) if _is_many(values) else [values]


@dataclass(frozen=True)
class StringBuilder(StringBuilderInterface):
    """
    Holds one text value.

    `item` may be anything with a textual representation; it is coerced
    to `str` on construction (see :func:`strbuilder.coerce.to_text`).
    """
    item: str = ""

    # operation defaults; see with_config()
    config: ClassVar[BuilderConfig] = DEFAULT_CONFIG

    def __post_init__(self) -> None:
        object.__setattr__(self, "item", to_text(self.item))

    # -------------------- construction --------------------

    @classmethod
    def make(cls: Type[SB], item: Stringable | str = "") -> SB:
        """Make an instance of the class this is invoked on."""
        return cls(item)

    @classmethod
    def with_config(cls: Type[SB], config: BuilderConfig) -> Type[SB]:
        """
        Subclass of *cls* whose operations default to *config*.
        Instances derived from it keep the subclass (and its defaults).
        """
        logger.debug("Creating %s bound to %s", cls.__name__, config)
        return type(cls)(cls.__name__, (cls,), {"config": config, "__module__": cls.__module__})

    def _new(self: SB, text: str) -> SB:
        return type(self)(text)

    # -------------------- queries --------------------

    def to_string(self) -> str:
        return self.item

    def __len__(self) -> int:
        return self.length()

    def length(self) -> int:
        """Number of code points."""
        return len(self.item)

    def size(self) -> int:
        return self.length()

    def index_of(self, needle: Stringable | str, offset: int = 0) -> Optional[int]:
        """
        Position of the first occurrence of *needle* at or after *offset*.

        A negative offset counts from the end. None when there is no match
        or the offset lies outside the item.
        """
        needle = to_text(needle)
        n = len(self.item)
        if offset < 0:
            offset += n
            if offset < 0:
                return None
        if offset > n:
            return None
        pos = self.item.find(needle, offset)
        return None if pos < 0 else pos

    def starts_with(self, needles: Needles) -> bool:
        """True if the item starts with any of *needles*. An empty needle never matches."""
        for needle in _as_list(needles):
            needle = to_text(needle)
            if needle != "" and self.item.startswith(needle):
                return True
        return False

    def ends_with(self, needles: Needles) -> bool:
        """
        True if the last len(needle) characters equal any of *needles*.
        Unlike starts_with(), an empty needle matches.
        """
        for needle in _as_list(needles):
            needle = to_text(needle)
            tail = self.item[max(len(self.item) - len(needle), 0):]
            if tail == needle:
                return True
        return False

    def explode(self, delimiter: str, limit: int = EXPLODE_NO_LIMIT) -> List[str]:
        return explode(self.item, to_text(delimiter), limit)

    def split(self, length: Optional[int] = None) -> List[str]:
        """Chunks of *length* characters (default from config, normally 1)."""
        length = self.config.split_length if length is None else length
        return chunk(self.item, length)

    def to_int(self) -> int:
        return parse_int(self.item)

    def to_float(self) -> float:
        return parse_float(self.item)

    # -------------------- transformations --------------------

    def append(self: SB, value: Stringable | str) -> SB:
        return self._new(self.item + to_text(value))

    def prepend(self: SB, value: Stringable | str) -> SB:
        return self._new(to_text(value) + self.item)

    def upcase(self: SB) -> SB:
        return self._new(self.item.upper())

    def downcase(self: SB) -> SB:
        return self._new(self.item.lower())

    def uc_first(self: SB) -> SB:
        return self._new(self.item[:1].upper() + self.item[1:])

    def lc_first(self: SB) -> SB:
        return self._new(self.item[:1].lower() + self.item[1:])

    def reverse(self: SB) -> SB:
        return self._new(self.item[::-1])

    def trim(self: SB, character_mask: Optional[str] = None) -> SB:
        """Strip characters in *character_mask* ("a..z" ranges allowed) from both ends."""
        mask = self.config.character_mask if character_mask is None else character_mask
        return self._new(trim(self.item, mask))

    def ltrim(self: SB, character_mask: Optional[str] = None) -> SB:
        mask = self.config.character_mask if character_mask is None else character_mask
        return self._new(ltrim(self.item, mask))

    def rtrim(self: SB, character_mask: Optional[str] = None) -> SB:
        mask = self.config.character_mask if character_mask is None else character_mask
        return self._new(rtrim(self.item, mask))

    def sub_str(self: SB, start: int, length: Optional[int] = None) -> SB:
        """
        Part of the item, counted in code points.

          • start < 0      → counted from the end (clamped to 0)
          • start past end → ""
          • length None    → up to the end
          • length < 0     → stop that many characters before the end
        """
        n = len(self.item)
        if start < 0:
            start = max(n + start, 0)
        if start > n:
            return self._new("")
        if length is None:
            end = n
        elif length < 0:
            end = n + length
        else:
            end = start + length
        if end <= start:
            return self._new("")
        return self._new(self.item[start:end])

    def pad(
        self: SB,
        length: int,
        string: Optional[str] = None,
        side: PadSide | str | None = None,
    ) -> SB:
        """
        Pad the item to *length* characters with repeated *string*.

        *side* is PadSide.LEFT / RIGHT / BOTH (or their names); BOTH puts
        the odd character on the right.
        """
        string = self.config.pad_string if string is None else to_text(string)
        side = self.config.pad_side if side is None else PadSide.coerce(side)
        return self._new(pad_text(self.item, length, string, side))

    def left_pad(self: SB, length: int, string: Optional[str] = None) -> SB:
        return self.pad(length, string, PadSide.LEFT)

    def right_pad(self: SB, length: int, string: Optional[str] = None) -> SB:
        return self.pad(length, string, PadSide.RIGHT)

    def _replace_all(self, search: SearchArg, replace: SearchArg, *, ignore_case: bool) -> Tuple[str, int]:
        searches = _as_list(search)
        if isinstance(replace, (list, tuple)):
            if not _is_many(search):
                raise TypeError("A list of replacements requires a list of search values")
            pairs = [(s, replace[i] if i < len(replace) else "") for i, s in enumerate(searches)]
        else:
            pairs = [(s, replace) for s in searches]

        text, total = self.item, 0
        for s, r in pairs:
            s, r = to_text(s), to_text(r)
            if not s:
                continue
            if ignore_case:
                text, n = re.subn(re.escape(s), lambda _m, r=r: r, text, flags=re.IGNORECASE)
            else:
                n = text.count(s)
                if n:
                    text = text.replace(s, r)
            total += n
        return text, total

    def replace(self: SB, search: SearchArg, replace: SearchArg) -> SB:
        """Literal, case-sensitive replacement of every occurrence."""
        return self.replace_counted(search, replace).builder

    def ireplace(self: SB, search: SearchArg, replace: SearchArg) -> SB:
        """Case-insensitive version of replace()."""
        return self.ireplace_counted(search, replace).builder

    def replace_counted(self, search: SearchArg, replace: SearchArg) -> ReplaceResult:
        text, count = self._replace_all(search, replace, ignore_case=False)
        return ReplaceResult(builder=self._new(text), count=count)

    def ireplace_counted(self, search: SearchArg, replace: SearchArg) -> ReplaceResult:
        text, count = self._replace_all(search, replace, ignore_case=True)
        return ReplaceResult(builder=self._new(text), count=count)

    def limit(self: SB, limit: Optional[int] = None, end: Optional[str] = None) -> SB:
        """
        Limit the item to *limit* display columns.

        Short enough → self is returned as is. Otherwise the item is cut,
        trailing whitespace (the default mask, whatever the configured one)
        of the cut body is trimmed and *end* appended. Trailing whitespace
        inside *end* itself is kept.
        """
        limit = self.config.limit if limit is None else limit
        end = self.config.limit_end if end is None else to_text(end)
        if display_width(self.item) <= limit:
            return self
        body = rtrim(truncate_width(self.item, limit), DEFAULT_CHARACTER_MASK)
        return self._new(body + end)

    def shuffle(self: SB, rng: Optional[random.Random] = None) -> SB:
        """Random permutation of the characters. Pass *rng* for reproducible output."""
        chars = list(self.item)
        (rng or random).shuffle(chars)
        return self._new("".join(chars))

    def strip_tags(self: SB, allowable_tags: AllowedTags = "") -> SB:
        """Strip markup tags, keeping the ones named in *allowable_tags* ("<p><b>" or ["p", "b"])."""
        return self._new(strip_tags(self.item, allowable_tags))

    # -------------------- camelCase aliases --------------------

    toString = _alias("to_string")
    indexOf = _alias("index_of")
    startsWith = _alias("starts_with")
    endsWith = _alias("ends_with")
    toInt = _alias("to_int")
    toFloat = _alias("to_float")
    ucFirst = _alias("uc_first")
    lcFirst = _alias("lc_first")
    subStr = _alias("sub_str")
    leftPad = _alias("left_pad")
    rightPad = _alias("right_pad")
    stripTags = _alias("strip_tags")


__all__ = ["StringBuilder"]
