"""
Shared test helpers for strbuilder.

Modules:
- file_utils: writing config files in temporary directories
"""

from .file_utils import write

__all__ = ["write"]
