"""
Logger interface for bloodhound-cli diagnostics.

Diagnostics (probe results, files written, compose commands run) go through
ILogger and are off unless the operator enables them. Anything the operator
is meant to read goes through IPresenter instead.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Diagnostic sink; messages use %-style arguments like stdlib logging."""

    @abstractmethod
    def debug(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def info(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def warning(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def error(self, message: str, *args: Any, **kwargs: Any) -> None: ...

    @abstractmethod
    def set_level(self, level: str) -> None:
        """Change the threshold of every handler ('debug', 'info', 'warning' or 'error')."""
