"""
Process runner for external commands.

Two ways of running a command:
- ``run``: long-running service commands; stdout and stderr are relayed line
  by line to the presenter while the process runs.
- ``run_basic``: short capability/version probes; output is captured and
  returned in one piece.
"""

from __future__ import annotations

import os
import shutil
import subprocess
import threading
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import IO

from ..core.exceptions import CommandNotFoundError, ProcessExecutionError
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from .logging import NullLogger


@dataclass(frozen=True)
class CommandResult:
    """Outcome of a streamed command."""

    command: tuple[str, ...]
    returncode: int

    @property
    def ok(self) -> bool:
        return self.returncode == 0

    @property
    def display(self) -> str:
        return " ".join(self.command)


class ProcessRunner:
    """
    Runs external commands with a pinned working directory.

    Usage:
        runner = ProcessRunner(presenter)
        result = runner.run("docker", ["compose", "-f", path, "up", "-d"], cwd=config_dir)
        if not result.ok:
            ...
    """

    def __init__(self, presenter: IPresenter, logger: ILogger | None = None) -> None:
        self._presenter = presenter
        self._logger = logger or NullLogger()

    @staticmethod
    def which(name: str) -> str | None:
        """Return the full path of ``name`` on the PATH, or None."""
        return shutil.which(name)

    def require(self, name: str) -> str:
        """
        Locate ``name`` on the PATH.

        Raises:
            CommandNotFoundError: If it is not installed
        """
        path = self.which(name)
        if path is None:
            raise CommandNotFoundError(
                f"`{name}` is not installed or not available in the current PATH variable",
                command=name,
            )
        return path

    def run(
        self,
        name: str,
        args: Sequence[str],
        cwd: Path | None = None,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """
        Run a command and relay its output as it is produced.

        Args:
            name: Executable name, looked up on the PATH
            args: Arguments in order
            cwd: Working directory for the process
            env: Extra environment variables layered over os.environ

        Returns:
            CommandResult with the exit status. A non-zero exit is reported to
            the console but not raised.

        Raises:
            CommandNotFoundError: If the executable is not on the PATH
            ProcessExecutionError: If the process cannot be started
        """
        path = self.require(name)
        command = (name, *args)
        self._logger.debug("Running %s (cwd=%s)", " ".join(command), cwd)

        process_env = None
        if env:
            process_env = {**os.environ, **env}

        try:
            proc = subprocess.Popen(
                [path, *args],
                cwd=cwd,
                env=process_env,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                errors="replace",
                bufsize=1,
            )
        except OSError as e:
            raise ProcessExecutionError(
                f"Error trying to start `{name}`: {e}", command=" ".join(command), cause=e
            ) from e

        readers = [
            threading.Thread(target=self._relay, args=(proc.stdout,), daemon=True),
            threading.Thread(target=self._relay, args=(proc.stderr,), daemon=True),
        ]
        for reader in readers:
            reader.start()
        returncode = proc.wait()
        for reader in readers:
            reader.join()

        result = CommandResult(command=command, returncode=returncode)
        if not result.ok:
            self._presenter.print_error(f"Error from `{name}`: exit status {returncode}")
            self._logger.warning("%s exited with %d", result.display, returncode)
        return result

    def _relay(self, stream: IO[str] | None) -> None:
        """Forward each line of ``stream`` to the presenter until it closes."""
        if stream is None:
            return
        with stream:
            for line in stream:
                self._presenter.stream_line(line.rstrip("\r\n"))

    def run_basic(self, name: str, args: Sequence[str], cwd: Path | None = None) -> str:
        """
        Run a command to completion and return its standard output.

        Raises:
            CommandNotFoundError: If the executable is not on the PATH
            ProcessExecutionError: If the command fails or exits non-zero
        """
        path = self.require(name)
        command = " ".join([name, *args])
        try:
            completed = subprocess.run(
                [path, *args],
                cwd=cwd,
                capture_output=True,
                text=True,
                errors="replace",
            )
        except OSError as e:
            raise ProcessExecutionError(f"Error trying to run `{name}`: {e}", command=command, cause=e) from e

        self._logger.debug("%s exited with %d", command, completed.returncode)
        if completed.returncode != 0:
            raise ProcessExecutionError(
                f"`{command}` exited with status {completed.returncode}",
                returncode=completed.returncode,
                command=command,
                context={"stderr": completed.stderr.strip()} if completed.stderr.strip() else None,
            )
        return completed.stdout
