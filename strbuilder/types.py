from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Protocol, Sequence, Union, runtime_checkable

if TYPE_CHECKING:
    from .builder import StringBuilder


# ---- Aliases for clarity ----
Needles = Union[str, Sequence[str]]            # one needle or an ordered list of them
SearchArg = Union[str, Sequence[str]]          # replace(): search / replacement values
AllowedTags = Union[str, Iterable[str]]        # "<p><b>" or ["p", "b"]

DEFAULT_CHARACTER_MASK = " \t\n\r\0\x0B"


@runtime_checkable
class Stringable(Protocol):
    """Anything that can render itself as text."""

    def __str__(self) -> str: ...


class PadSide(Enum):
    """Which end of the item receives the padding."""
    LEFT = "left"
    RIGHT = "right"
    BOTH = "both"           # extra character goes to the right

    @classmethod
    def coerce(cls, value: PadSide | str) -> PadSide:
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ValueError(
                f"Unknown pad side {value!r} (expected one of: left, right, both)"
            ) from None


@dataclass(frozen=True)
class ReplaceResult:
    """
    Outcome of a counting replace.

    `builder` is the new builder (same concrete type as the source),
    `count` the number of replacements performed.
    """
    builder: StringBuilder
    count: int

    @property
    def text(self) -> str:
        return self.builder.to_string()


__all__ = [
    "Needles",
    "SearchArg",
    "AllowedTags",
    "DEFAULT_CHARACTER_MASK",
    "Stringable",
    "PadSide",
    "ReplaceResult",
]
