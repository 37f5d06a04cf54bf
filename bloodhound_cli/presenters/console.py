"""
Console presenter for terminal output.

Status lines go to stdout, errors and warnings to stderr. Colour is only
used when the stream is a terminal.
"""

import sys
import threading
from typing import Any

import click

from ..core.interfaces.presenter import IPresenter

ERROR_PREFIX = "[-] "
WARNING_PREFIX = "[!] "
COLUMN_GAP = "  "


class ConsolePresenter(IPresenter):
    """
    Console output presenter.

    ``stream_line`` may be called from the process runner's reader threads;
    a lock keeps each relayed line whole.
    """

    def __init__(self, use_color: bool = True, file=None, err_file=None) -> None:
        """
        Args:
            use_color: Allow colour when the stream is a terminal
            file: Output stream (defaults to sys.stdout)
            err_file: Error stream (defaults to sys.stderr)
        """
        self._file = file or sys.stdout
        self._err_file = err_file or sys.stderr
        self._use_color = use_color and hasattr(self._file, "isatty") and self._file.isatty()
        self._lock = threading.Lock()

    def _echo(self, message: str, err: bool = False, **style: Any) -> None:
        if self._use_color and style:
            message = click.style(message, **style)
        click.echo(message, file=self._err_file if err else self._file)

    def print(self, message: str) -> None:
        self._echo(message)

    def print_error(self, message: str) -> None:
        self._echo(f"{ERROR_PREFIX}{message}", err=True, fg="bright_red")

    def print_warning(self, message: str) -> None:
        self._echo(f"{WARNING_PREFIX}{message}", err=True, fg="bright_yellow")

    def print_success(self, message: str) -> None:
        self._echo(message, fg="bright_green")

    def print_table(self, headers: list[str], rows: list[list[str]]) -> None:
        """
        Print rows under left-aligned headers; nothing is printed for no rows.

        Column widths follow the widest cell; a row of dashes separates the
        header from the body.
        """
        if not rows:
            return

        widths = [
            max([len(str(header))] + [len(str(row[i])) for row in rows if i < len(row)])
            for i, header in enumerate(headers)
        ]

        header_line = _join_cells(headers, widths)
        self._echo(header_line, bold=True)
        self._echo("-" * len(header_line))
        for row in rows:
            self._echo(_join_cells(row, widths).rstrip())

    def stream_line(self, line: str) -> None:
        with self._lock:
            click.echo(line, file=self._file)
            self._file.flush()

    def confirm(self, message: str) -> bool:
        """Ask a yes/no question; y/yes/n/no in any case, anything else asks again."""
        return click.confirm(message, default=None)


def _join_cells(cells: list[Any], widths: list[int]) -> str:
    return COLUMN_GAP.join(
        str(cell).ljust(widths[i]) if i < len(widths) else str(cell) for i, cell in enumerate(cells)
    )
