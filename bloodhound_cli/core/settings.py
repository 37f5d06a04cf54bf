"""
Pydantic Settings for the CLI itself.

These settings control how bloodhound-cli behaves (logging, network
timeouts, download locations). They are read from ``BHCLI_*`` environment
variables and are unrelated to the BloodHound server settings kept in
``bloodhound.config.json`` (see ``bloodhound_cli.config``).
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .exceptions import ConfigError

LogLevel = Literal["debug", "info", "warning", "error"]

REPOSITORY_RAW_URL = "https://raw.githubusercontent.com/SpecterOps/BloodHound_CLI/refs/heads/main"
RELEASE_URL = "https://api.github.com/repos/SpecterOps/bloodhound-cli/releases/latest"


class CliSettings(BaseSettings):
    """bloodhound-cli settings with environment variable support.

    Priority (highest to lowest):
    1. Explicit init values
    2. Environment variables (BHCLI_<field>)
    3. Defaults
    """

    model_config = SettingsConfigDict(
        env_prefix="BHCLI_",
        case_sensitive=False,
        extra="ignore",
    )

    log_level: LogLevel = "warning"
    log_console: bool = False
    log_file: Path | None = None

    http_timeout: float = Field(default=10.0, gt=0)
    download_timeout: float = Field(default=60.0, gt=0)

    release_url: str = RELEASE_URL
    compose_url: str = f"{REPOSITORY_RAW_URL}/docker-compose.yml"
    compose_dev_url: str = f"{REPOSITORY_RAW_URL}/docker-compose.dev.yml"

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_level(cls, v: str) -> str:
        return v.lower() if isinstance(v, str) else v

    @field_validator("release_url", "compose_url", "compose_dev_url")
    @classmethod
    def validate_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL must start with http:// or https://")
        return v


def load_settings(**overrides) -> CliSettings:
    """Load CLI settings from the environment.

    Raises:
        ConfigError: If an environment variable holds an invalid value
    """
    try:
        return CliSettings(**overrides)
    except ValidationError as e:
        raise ConfigError(f"Invalid BHCLI_* environment settings: {e}", cause=e) from e
