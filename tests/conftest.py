"""
Shared pytest fixtures for bloodhound-cli tests.

This module provides:
- environ: an isolated environment mapping pointing XDG_CONFIG_HOME at tmp_path
- store: a loaded ConfigStore living under tmp_path
- presenter: a MagicMock standing in for the console presenter
- plugin_capability / legacy_capability: compose invocation forms
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from bloodhound_cli.config import create_store
from bloodhound_cli.core.interfaces.presenter import IPresenter
from bloodhound_cli.core.models.capability import COMPOSE_LEGACY, CapabilityState


@pytest.fixture
def environ(tmp_path: Path) -> dict[str, str]:
    """Environment mapping with the config home under tmp_path."""
    return {"XDG_CONFIG_HOME": str(tmp_path / "xdg")}


@pytest.fixture
def config_dir(tmp_path: Path) -> Path:
    return tmp_path / "xdg" / "bloodhound"


@pytest.fixture
def store(environ):
    """A ConfigStore with defaults registered and the file loaded."""
    return create_store(environ=environ)


@pytest.fixture
def presenter() -> MagicMock:
    """Presenter mock; confirm() answers yes unless a test says otherwise."""
    mock = MagicMock(spec=IPresenter)
    mock.confirm.return_value = True
    return mock


@pytest.fixture
def plugin_capability() -> CapabilityState:
    return CapabilityState(executable="docker", prefix=("compose",))


@pytest.fixture
def legacy_capability() -> CapabilityState:
    return CapabilityState(executable="docker-compose", prefix=(), mode=COMPOSE_LEGACY)
