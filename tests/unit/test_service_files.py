"""
Tests for service-definition file resolution and download.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from bloodhound_cli.core.exceptions import (
    DownloadError,
    InvalidOverridePathError,
    ServiceFileMissingError,
)
from bloodhound_cli.services.compose.service_files import (
    DEV_FILE_NAME,
    PROD_FILE_NAME,
    ServiceFileManager,
    ServiceFileSource,
)
from bloodhound_cli.services.http import Downloader

SOURCES = [
    ServiceFileSource(label="production", file_name=PROD_FILE_NAME, url="https://example.com/prod.yml"),
    ServiceFileSource(label="development", file_name=DEV_FILE_NAME, url="https://example.com/dev.yml"),
]


@pytest.fixture
def downloader() -> MagicMock:
    """Downloader mock that writes the URL into the destination."""
    mock = MagicMock(spec=Downloader)

    def download(url, dest):
        dest.write_text(f"# from {url}\n")
        return dest

    mock.download.side_effect = download
    return mock


@pytest.fixture
def files(store, downloader, presenter) -> ServiceFileManager:
    return ServiceFileManager(store, downloader, presenter, SOURCES)


class TestResolve:
    """Tests for choosing the YAML file."""

    def test_default_is_production_file_in_config_dir(self, files, config_dir: Path) -> None:
        assert files.resolve(None) == config_dir / PROD_FILE_NAME

    def test_override_used_verbatim(self, files, tmp_path: Path) -> None:
        custom = tmp_path / "custom.yml"
        custom.write_text("services: {}\n")
        assert files.resolve(str(custom)) == custom

    def test_missing_override(self, files, tmp_path: Path) -> None:
        with pytest.raises(InvalidOverridePathError, match="does not exist"):
            files.resolve(tmp_path / "nope.yml")

    def test_directory_override(self, files, tmp_path: Path) -> None:
        with pytest.raises(InvalidOverridePathError, match="directory"):
            files.resolve(tmp_path)

    def test_ensure_exists(self, files, tmp_path: Path) -> None:
        with pytest.raises(ServiceFileMissingError):
            files.ensure_exists(tmp_path / "missing.yml")


class TestFetch:
    """Tests for downloading the upstream YAML files."""

    def test_downloads_both_files(self, files, downloader, config_dir: Path, presenter) -> None:
        downloaded = files.fetch()

        assert downloaded == [config_dir / PROD_FILE_NAME, config_dir / DEV_FILE_NAME]
        assert (config_dir / PROD_FILE_NAME).read_text() == "# from https://example.com/prod.yml\n"
        presenter.confirm.assert_not_called()

    def test_declined_overwrite_leaves_files_unchanged(
        self, files, downloader, config_dir: Path, presenter
    ) -> None:
        """Answering no for every existing file leaves both byte-identical."""
        (config_dir / PROD_FILE_NAME).write_text("prod: mine\n")
        (config_dir / DEV_FILE_NAME).write_text("dev: mine\n")
        presenter.confirm.return_value = False

        assert files.fetch() == []

        assert presenter.confirm.call_count == 2
        downloader.download.assert_not_called()
        assert (config_dir / PROD_FILE_NAME).read_text() == "prod: mine\n"
        assert (config_dir / DEV_FILE_NAME).read_text() == "dev: mine\n"

    def test_prompts_per_file(self, files, downloader, config_dir: Path, presenter) -> None:
        (config_dir / PROD_FILE_NAME).write_text("prod: mine\n")
        presenter.confirm.return_value = False

        assert files.fetch() == [config_dir / DEV_FILE_NAME]
        assert (config_dir / PROD_FILE_NAME).read_text() == "prod: mine\n"

    def test_download_failure_propagates(self, files, downloader) -> None:
        downloader.download.side_effect = DownloadError("failed to download file", status_code=404)
        with pytest.raises(DownloadError):
            files.fetch()
