"""Conversion of arbitrary values to the text a builder stores."""

from __future__ import annotations

import logging
import numbers
from types import ModuleType

from .errors import TypeConversionError
from .interface import StringBuilderInterface

logger = logging.getLogger(__name__)

# Collections have no single textual form
_CONTAINERS = (list, tuple, dict, set, frozenset)


def _has_own_text(value: object) -> bool:
    cls = type(value)
    if cls.__str__ is not object.__str__:
        return True
    # only __repr__ is customised: acceptable unless it is the address-style
    # repr of functions, classes and modules
    if cls.__repr__ is object.__repr__:
        return False
    return not (callable(value) or isinstance(value, ModuleType))


def to_text(value: object) -> str:
    """
    Coerce *value* to text.

      • str            → as is
      • None           → ""
      • bool           → "1" / ""
      • numbers        → str(value)
      • bytes          → UTF-8 decoded
      • builders       → their stored text
      • other objects  → str(value), if the type defines its own conversion

    Raises TypeConversionError otherwise.
    """
    if isinstance(value, str):
        return str(value)
    if value is None:
        return ""
    if isinstance(value, bool):
        return "1" if value else ""
    if isinstance(value, numbers.Number):
        return str(value)
    if isinstance(value, (bytes, bytearray)):
        try:
            return bytes(value).decode("utf-8")
        except UnicodeDecodeError as e:
            logger.debug("Rejecting undecodable bytes: %s", e)
            raise TypeConversionError(value, "bytes are not valid UTF-8") from e
    if isinstance(value, StringBuilderInterface):
        return value.to_string()
    if isinstance(value, _CONTAINERS):
        logger.debug("Rejecting container of type %s", type(value).__name__)
        raise TypeConversionError(value, "containers have no textual representation")
    if not _has_own_text(value):
        logger.debug("Rejecting %r: no __str__/__repr__ of its own", type(value))
        raise TypeConversionError(value, "type does not define a textual conversion")

    try:
        return str(value)
    except Exception as e:
        raise TypeConversionError(value, f"__str__ failed: {e}") from e


__all__ = ["to_text"]
