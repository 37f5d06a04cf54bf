"""
Click context object for bloodhound-cli.

Holds the per-invocation service container and the global ``--file`` flag.
Services are created lazily, so ``bloodhound-cli --help`` never touches the
config directory.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from ..config import ConfigStore
from ..core.container import Services
from ..core.interfaces.logger import ILogger
from ..core.interfaces.presenter import IPresenter
from ..core.models.capability import CapabilityState
from ..services.compose.orchestrator import ComposeOrchestrator
from ..services.compose.prober import CapabilityProber
from ..services.compose.service_files import ServiceFileManager
from ..services.docker.runtime import ContainerRuntime
from ..services.http import ReleaseClient


@dataclass
class CliContext:
    """Extended context passed through the Click command chain.

    Attributes:
        services: Dependency container for this invocation
        file_override: Value of the global ``--file`` flag
        capability: Compose invocation chosen by the prober, once it has run
    """

    services: Services
    file_override: Path | None = None
    capability: CapabilityState | None = field(default=None)

    @classmethod
    def create(cls, file_override: str | None = None) -> CliContext:
        return cls(
            services=Services(),
            file_override=Path(file_override) if file_override else None,
        )

    @property
    def presenter(self) -> IPresenter:
        return self.services.presenter()

    @property
    def logger(self) -> ILogger:
        return self.services.logger()

    @property
    def store(self) -> ConfigStore:
        return self.services.store()

    @property
    def prober(self) -> CapabilityProber:
        return self.services.prober()

    @property
    def service_files(self) -> ServiceFileManager:
        return self.services.service_files()

    @property
    def runtime(self) -> ContainerRuntime:
        return self.services.runtime()

    @property
    def release_client(self) -> ReleaseClient:
        return self.services.release_client()

    def service_file(self) -> Path:
        """The YAML file container commands operate on (override or default)."""
        return self.service_files.resolve(self.file_override)

    def orchestrator(self) -> ComposeOrchestrator:
        if self.capability is None:
            raise RuntimeError("The environment must be evaluated before running compose commands")
        return self.services.orchestrator(capability=self.capability)
