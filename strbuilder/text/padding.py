from __future__ import annotations

from ..types import PadSide


def _fill(pad: str, count: int) -> str:
    """*count* characters made of repeated (last copy truncated) *pad*."""
    if count <= 0:
        return ""
    reps = -(-count // len(pad))  # ceil
    return (pad * reps)[:count]


def pad_text(text: str, length: int, pad: str = " ", side: PadSide = PadSide.RIGHT) -> str:
    """
    Pad *text* up to *length* code points.

    Already long enough → returned unchanged. An empty *pad* falls back
    to a single space. For BOTH the odd character goes to the right.
    """
    missing = length - len(text)
    if missing <= 0:
        return text
    pad = pad or " "

    if side is PadSide.LEFT:
        return _fill(pad, missing) + text
    if side is PadSide.BOTH:
        left = missing // 2
        return _fill(pad, left) + text + _fill(pad, missing - left)
    return text + _fill(pad, missing)


__all__ = ["pad_text"]
