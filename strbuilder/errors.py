"""
Exceptions raised by strbuilder.

All errors the library raises on purpose inherit from StringBuilderError,
so callers can catch the whole family with a single except clause.
Every operation except construction and config loading is total and
never raises.
"""

from __future__ import annotations


class StringBuilderError(Exception):
    """Base class for all expected strbuilder errors."""
    pass


class TypeConversionError(StringBuilderError, TypeError):
    """
    The value given to a builder has no textual representation.

    Raised only at construction time (and by operations that coerce
    their argument the same way, e.g. append/prepend).
    """

    def __init__(self, value: object, reason: str | None = None):
        self.value = value
        msg = f"Cannot convert value of type {type(value).__name__!r} to text"
        if reason:
            msg = f"{msg}: {reason}"
        super().__init__(msg)


class ConfigError(StringBuilderError, ValueError):
    """Invalid or unsupported builder defaults file."""
    pass


__all__ = ["StringBuilderError", "TypeConversionError", "ConfigError"]
