"""
Service file manager.

Resolves which compose YAML file the container commands use and fetches the
upstream files into the config directory.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from ...config import ConfigStore
from ...core.exceptions import InvalidOverridePathError, ServiceFileMissingError
from ...core.interfaces.logger import ILogger
from ...core.interfaces.presenter import IPresenter
from ..files import file_exists
from ..http import Downloader
from ..logging import NullLogger

PROD_FILE_NAME = "docker-compose.yml"
DEV_FILE_NAME = "docker-compose.dev.yml"


@dataclass(frozen=True)
class ServiceFileSource:
    """A service-definition file and where it is downloaded from."""

    label: str
    file_name: str
    url: str


def missing_file_message(path: Path) -> str:
    return (
        f"The YAML file {path} does not exist! To continue, move your YAML file into the config "
        "directory or run `bloodhound-cli check` to download the necessary YAML file."
    )


class ServiceFileManager:
    """
    Locates and downloads the compose YAML files.

    Usage:
        files = ServiceFileManager(store, downloader, presenter, sources)
        path = files.resolve(override)
        files.ensure_exists(path)
    """

    def __init__(
        self,
        store: ConfigStore,
        downloader: Downloader,
        presenter: IPresenter,
        sources: list[ServiceFileSource],
        logger: ILogger | None = None,
    ) -> None:
        self._store = store
        self._downloader = downloader
        self._presenter = presenter
        self._sources = sources
        self._logger = logger or NullLogger()

    @property
    def directory(self) -> Path:
        return self._store.config_dir

    @property
    def default_path(self) -> Path:
        return self.directory / PROD_FILE_NAME

    def resolve(self, override: str | Path | None = None) -> Path:
        """
        Return the YAML file to use.

        An override must exist and must not be a directory; it is returned
        as given. Without an override the production file in the config
        directory is used (it may not exist yet).

        Raises:
            InvalidOverridePathError: If the override is unusable
        """
        if override:
            path = Path(override)
            self._logger.info("Using the override filepath: %s", path)
            if not path.exists():
                raise InvalidOverridePathError(
                    f"The override path '{path}' does not exist.", path=str(path)
                )
            if path.is_dir():
                raise InvalidOverridePathError(
                    f"The provided override path '{path}' is a directory instead of a YAML file.",
                    path=str(path),
                )
            return path
        return self.default_path

    def ensure_exists(self, path: Path) -> Path:
        """
        Raises:
            ServiceFileMissingError: If ``path`` is not an existing file
        """
        if not file_exists(path):
            raise ServiceFileMissingError(missing_file_message(path), path=str(path))
        return path

    def fetch(self) -> list[Path]:
        """
        Download every upstream YAML file into the config directory.

        Existing files are only replaced after the operator agrees.

        Returns:
            The files that were downloaded

        Raises:
            DownloadError: If a download fails
        """
        downloaded: list[Path] = []
        for source in self._sources:
            target = self.directory / source.file_name
            if file_exists(target) and not self._presenter.confirm(
                f"[*] A {source.label} YAML file already exists in the config directory. "
                "Do you want to overwrite it?"
            ):
                self._logger.debug("Keeping existing %s", target)
                continue
            self._presenter.print(f"[+] Downloading the {source.label} YAML file from {source.url}...")
            downloaded.append(self._downloader.download(source.url, target))
        return downloaded
