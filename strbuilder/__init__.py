"""
strbuilder: an immutable, chainable string builder.

    >>> from strbuilder import StringBuilder
    >>> StringBuilder.make("  Hello ").trim().append(", world").upcase().to_string()
    'HELLO, WORLD'
"""

from .builder import StringBuilder
from .config import DEFAULT_CONFIG, BuilderConfig, load_config
from .errors import ConfigError, StringBuilderError, TypeConversionError
from .interface import StringBuilderInterface
from .types import DEFAULT_CHARACTER_MASK, PadSide, ReplaceResult, Stringable
from .version import tool_version

__version__ = tool_version()

__all__ = [
    "StringBuilder",
    "StringBuilderInterface",
    "BuilderConfig",
    "DEFAULT_CONFIG",
    "load_config",
    "StringBuilderError",
    "TypeConversionError",
    "ConfigError",
    "DEFAULT_CHARACTER_MASK",
    "PadSide",
    "ReplaceResult",
    "Stringable",
    "__version__",
]
