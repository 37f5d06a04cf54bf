"""
Host capability prober.

Checks that a container runtime is installed and running and picks the
compose invocation to use: the ``docker compose`` plugin first, then the
legacy standalone ``docker-compose`` script.
"""

from __future__ import annotations

from ...core.exceptions import (
    ComposeUnavailableError,
    ContainerRuntimeMissingError,
    DaemonUnavailableError,
    ProcessError,
)
from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ...core.models.capability import COMPOSE_LEGACY, COMPOSE_PLUGIN, CapabilityState
from ..logging import NullLogger
from ..process import ProcessRunner

RUNTIME_EXECUTABLE = "docker"
LEGACY_COMPOSE_SCRIPT = "docker-compose"
COMPOSE_INSTALL_URL = "https://docs.docker.com/compose/install/"


class CapabilityProber:
    """
    Determines which compose command prefix this invocation uses.

    Every failure is fatal for the invocation; the conditions checked do not
    change within one run, so nothing is retried.
    """

    def __init__(
        self,
        runner: ProcessRunner,
        presenter: IPresenter,
        logger: ILogger | None = None,
    ) -> None:
        self._runner = runner
        self._presenter = presenter
        self._logger = logger or NullLogger()

    def evaluate(self) -> CapabilityState:
        """
        Check the runtime, its daemon and the compose tooling.

        Returns:
            The selected CapabilityState

        Raises:
            ContainerRuntimeMissingError: If docker is not on the PATH
            DaemonUnavailableError: If ``docker info`` fails
            ComposeUnavailableError: If neither compose form is available
        """
        self._presenter.print("[+] Checking the status of Docker and the Compose plugin...")

        if self._runner.which(RUNTIME_EXECUTABLE) is None:
            raise ContainerRuntimeMissingError(
                "Docker is not installed on this system, so please install Docker and try again."
            )

        try:
            self._runner.run_basic(RUNTIME_EXECUTABLE, ["info"])
        except ProcessError as e:
            self._logger.debug("docker info failed: %s", e)
            raise DaemonUnavailableError(
                "Docker is installed on this system, but the daemon is not running.", cause=e
            ) from e

        state = self._select_compose()

        self._presenter.print("[+] Docker and the Compose plugin checks have passed")
        self._logger.info("Using compose command: %s", state.describe())
        return state

    def _select_compose(self) -> CapabilityState:
        try:
            self._runner.run_basic(RUNTIME_EXECUTABLE, ["compose", "version"])
            return CapabilityState(
                executable=RUNTIME_EXECUTABLE, prefix=("compose",), mode=COMPOSE_PLUGIN
            )
        except ProcessError as e:
            self._logger.debug("docker compose version failed: %s", e)

        self._presenter.print(
            "[+] The `compose` plugin is not installed, so we'll try the deprecated `docker-compose` script"
        )
        if self._runner.which(LEGACY_COMPOSE_SCRIPT) is None:
            self._presenter.print("[+] The `docker-compose` script is also not installed or not in the PATH")
            raise ComposeUnavailableError(
                "Docker Compose is not installed, so please install it and try again: "
                f"{COMPOSE_INSTALL_URL}"
            )
        self._presenter.print("[+] The `docker-compose` script is installed, so we'll use that instead")
        return CapabilityState(executable=LEGACY_COMPOSE_SCRIPT, prefix=(), mode=COMPOSE_LEGACY)

