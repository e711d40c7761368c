"""Pure text helpers behind the StringBuilder operations."""

from .numeric import parse_float, parse_int
from .padding import pad_text
from .splitting import EXPLODE_NO_LIMIT, chunk, explode
from .tags import strip_tags
from .trimming import ltrim, rtrim, trim
from .width import display_width, truncate_width

__all__ = [
    "parse_float", "parse_int",
    "pad_text",
    "EXPLODE_NO_LIMIT", "chunk", "explode",
    "strip_tags",
    "ltrim", "rtrim", "trim",
    "display_width", "truncate_width",
]
