"""
Diagnostics logging for bloodhound-cli.

Built on stdlib logging. Both outputs are optional and controlled by the
``BHCLI_LOG_*`` settings:

- console: formatted records on stderr, so they never mix with command output
- file: a rotating log file (10 MB, three backups)

With neither enabled the logger has no handlers and records are dropped.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any

from ..core.interfaces.logger import ILogger

LOGGER_NAME = "bloodhound_cli"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

MAX_LOG_BYTES = 10 * 1024 * 1024
LOG_BACKUPS = 3


def level_number(level: str) -> int:
    """Map a level name to its logging constant; unknown names mean WARNING."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.WARNING


def _stderr_handler() -> logging.Handler:
    return logging.StreamHandler(sys.stderr)


def _file_handler(path: Path) -> logging.Handler:
    path.parent.mkdir(parents=True, exist_ok=True)
    return RotatingFileHandler(path, maxBytes=MAX_LOG_BYTES, backupCount=LOG_BACKUPS)


class CliLogger(ILogger):
    """
    ILogger backed by a named stdlib logger.

    Usage:
        logger = CliLogger(level="debug", console_enabled=True)
        logger.debug("Loaded %d keys from %s", 13, path)
    """

    def __init__(
        self,
        name: str = LOGGER_NAME,
        level: str = "warning",
        console_enabled: bool = False,
        log_file: Path | None = None,
    ) -> None:
        """
        Args:
            name: stdlib logger name; existing handlers on it are replaced
            level: Threshold for every handler
            console_enabled: Write records to stderr
            log_file: Also write records to this file, rotated by size
        """
        self._logger = logging.getLogger(name)
        self._logger.handlers.clear()
        self._logger.propagate = False
        # Handlers do the filtering so set_level can change them together.
        self._logger.setLevel(logging.DEBUG)

        handlers = []
        if console_enabled:
            handlers.append(_stderr_handler())
        if log_file is not None:
            handlers.append(_file_handler(Path(log_file)))

        formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
        for handler in handlers:
            handler.setFormatter(formatter)
            self._logger.addHandler(handler)
        self.set_level(level)

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.debug(message, *args, **kwargs)

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.info(message, *args, **kwargs)

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.warning(message, *args, **kwargs)

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        self._logger.error(message, *args, **kwargs)

    def set_level(self, level: str) -> None:
        threshold = level_number(level)
        for handler in self._logger.handlers:
            handler.setLevel(threshold)


class NullLogger(ILogger):
    """Drops everything. Default for services constructed without a logger."""

    def debug(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def info(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def warning(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def error(self, message: str, *args: Any, **kwargs: Any) -> None:
        pass

    def set_level(self, level: str) -> None:
        pass
