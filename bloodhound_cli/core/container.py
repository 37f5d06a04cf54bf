"""
Dependency injection container for bloodhound-cli.

Uses dependency-injector to wire the services together. A new container is
created for every CLI invocation (see ``cli.context.CliContext``); there is
no module-level instance, so initialisation order stays explicit and tests
can override any provider.
"""

from __future__ import annotations

from dependency_injector import containers, providers

from ..config import create_store
from ..presenters.console import ConsolePresenter
from ..services.compose.orchestrator import ComposeOrchestrator
from ..services.compose.prober import CapabilityProber
from ..services.compose.service_files import (
    DEV_FILE_NAME,
    PROD_FILE_NAME,
    ServiceFileManager,
    ServiceFileSource,
)
from ..services.docker.runtime import ContainerRuntime
from ..services.http import Downloader, ReleaseClient
from ..services.logging import CliLogger
from ..services.process import ProcessRunner
from .settings import load_settings


def _service_file_sources(compose_url: str, compose_dev_url: str) -> list[ServiceFileSource]:
    return [
        ServiceFileSource(label="production", file_name=PROD_FILE_NAME, url=compose_url),
        ServiceFileSource(label="development", file_name=DEV_FILE_NAME, url=compose_dev_url),
    ]


class Services(containers.DeclarativeContainer):
    """Providers for every service a command may need.

    Singletons are created lazily, on first use, so commands that never touch
    docker or the network never construct those clients.
    """

    settings = providers.Singleton(load_settings)

    logger = providers.Singleton(
        CliLogger,
        level=settings.provided.log_level,
        console_enabled=settings.provided.log_console,
        log_file=settings.provided.log_file,
    )

    presenter = providers.Singleton(ConsolePresenter)

    store = providers.Singleton(create_store, logger=logger)

    runner = providers.Singleton(ProcessRunner, presenter=presenter, logger=logger)

    prober = providers.Singleton(CapabilityProber, runner=runner, presenter=presenter, logger=logger)

    downloader = providers.Singleton(
        Downloader,
        timeout=settings.provided.download_timeout,
        logger=logger,
    )

    service_files = providers.Singleton(
        ServiceFileManager,
        store=store,
        downloader=downloader,
        presenter=presenter,
        sources=providers.Callable(
            _service_file_sources,
            compose_url=settings.provided.compose_url,
            compose_dev_url=settings.provided.compose_dev_url,
        ),
        logger=logger,
    )

    # Needs the CapabilityState from the prober: orchestrator(capability=state)
    orchestrator = providers.Factory(
        ComposeOrchestrator,
        runner=runner,
        store=store,
        files=service_files,
        presenter=presenter,
        logger=logger,
    )

    runtime = providers.Singleton(ContainerRuntime, logger=logger)

    release_client = providers.Singleton(
        ReleaseClient,
        url=settings.provided.release_url,
        timeout=settings.provided.http_timeout,
        logger=logger,
    )
