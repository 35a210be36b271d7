"""Abstract base class for display implementations."""

from abc import ABC, abstractmethod
from typing import Any


class Display(ABC):
    """Where the 4-stage command pattern sends its messages and output."""

    @abstractmethod
    def status(self, message: str, **kwargs) -> None:
        """Display a status message (stage 1, announce)."""

    @abstractmethod
    def success(self, message: str, **kwargs) -> None:
        """Display a success message."""

    @abstractmethod
    def error(self, message: str, **kwargs) -> None:
        """Display an error message.

        Args:
            message: Error text
            kwargs: Implementation-specific options (e.g., details)
        """

    @abstractmethod
    def warning(self, message: str, **kwargs) -> None:
        """Display a warning message."""

    @abstractmethod
    def info(self, message: str, **kwargs) -> None:
        """Display an informational message (stage 2, progress)."""

    @abstractmethod
    def json_output(self, data: Any, **kwargs) -> None:
        """Print structured output (stage 4).

        Args:
            data: JSON-serializable data
            kwargs: format ("json" or "yaml"), indent
        """
