from __future__ import annotations

from abc import ABC, abstractmethod


class StringBuilderInterface(ABC):
    """Anything that holds a text value and can hand it back."""

    @abstractmethod
    def to_string(self) -> str:
        """Build the string."""
        ...

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["StringBuilderInterface"]
