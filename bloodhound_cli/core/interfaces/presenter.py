"""
Presenter interface for user-facing output.
"""

from abc import ABC, abstractmethod


class IPresenter(ABC):
    """
    Interface for output presentation.

    Everything the operator sees goes through a presenter: status lines,
    relayed subprocess output, tables and confirmation prompts.
    """

    @abstractmethod
    def print(self, message: str) -> None:
        """Print a message to output."""
        pass

    @abstractmethod
    def print_error(self, message: str) -> None:
        """Print an error message."""
        pass

    @abstractmethod
    def print_warning(self, message: str) -> None:
        """Print a warning message."""
        pass

    @abstractmethod
    def print_success(self, message: str) -> None:
        """Print a success message."""
        pass

    @abstractmethod
    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print a table.

        Args:
            headers: Column headers
            rows: Table rows (list of row values)
        """
        pass

    @abstractmethod
    def stream_line(self, line: str) -> None:
        """
        Relay one line of subprocess output.

        Must be safe to call from several reader threads at once.
        """
        pass

    @abstractmethod
    def confirm(self, message: str) -> bool:
        """
        Ask a yes/no question until a recognised answer is given.

        Args:
            message: Confirmation prompt

        Returns:
            True for yes, False for no
        """
        pass
