"""
Tests for the dependency container and the click context object.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from bloodhound_cli.cli.context import CliContext
from bloodhound_cli.core.container import Services
from bloodhound_cli.services.compose.orchestrator import ComposeOrchestrator
from bloodhound_cli.services.compose.service_files import DEV_FILE_NAME, PROD_FILE_NAME


@pytest.fixture
def services(monkeypatch, tmp_path: Path) -> Services:
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
    monkeypatch.delenv("CONFIG_DIRECTORY", raising=False)
    return Services()


class TestServices:
    def test_store_is_shared(self, services) -> None:
        assert services.store() is services.store()
        assert services.service_files()._store is services.store()

    def test_store_lives_under_xdg_config_home(self, services, tmp_path: Path) -> None:
        assert services.store().config_dir == tmp_path / "bloodhound"

    def test_both_compose_files_are_managed(self, services) -> None:
        names = [s.file_name for s in services.service_files()._sources]
        assert names == [PROD_FILE_NAME, DEV_FILE_NAME]

    def test_orchestrator_needs_capability(self, services, plugin_capability) -> None:
        orch = services.orchestrator(capability=plugin_capability)
        assert isinstance(orch, ComposeOrchestrator)
        assert orch.capability is plugin_capability

    def test_presenter_can_be_overridden(self, services) -> None:
        fake = MagicMock()
        with services.presenter.override(fake):
            assert services.prober()._presenter is fake


class TestCliContext:
    def test_orchestrator_before_probe(self, services) -> None:
        ctx = CliContext(services=services)
        with pytest.raises(RuntimeError, match="evaluated"):
            ctx.orchestrator()

    def test_service_file_default(self, services, tmp_path: Path) -> None:
        ctx = CliContext(services=services)
        assert ctx.service_file() == tmp_path / "bloodhound" / PROD_FILE_NAME

    def test_create_keeps_override(self, monkeypatch, tmp_path: Path) -> None:
        ctx = CliContext.create(file_override=str(tmp_path / "x.yml"))
        assert ctx.file_override == tmp_path / "x.yml"
