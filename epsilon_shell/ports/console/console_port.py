"""
Console port interface defining the contract for user-visible output.
"""

from abc import ABC, abstractmethod
from typing import Optional


class ConsolePort(ABC):
    """Port interface for the output sink of the shell."""

    @abstractmethod
    def clear(self) -> None:
        """Clear the display."""
        pass

    @abstractmethod
    def width(self) -> int:
        """Width of the display in columns."""
        pass

    @abstractmethod
    def write_line(self, text: str = "", color: Optional[str] = None) -> None:
        """
        Write one line of text verbatim.

        Args:
            text: Text to write; never interpreted as markup
            color: Optional color name (e.g. "cyan", "grey70")
        """
        pass

    @abstractmethod
    def write_centered(self, text: str, color: Optional[str] = None) -> None:
        """Write one line of text centered on the display."""
        pass

    @abstractmethod
    def info(self, message: str) -> None:
        """Write an informational line."""
        pass

    @abstractmethod
    def error(self, message: str) -> None:
        """Write an error line."""
        pass
