"""
Tests for pydantic models and CLI settings.
"""

import pytest
from pydantic import ValidationError

from bloodhound_cli.core.exceptions import ConfigError
from bloodhound_cli.core.models import ConfigEntry, ContainerSummary, PortMapping, ReleaseInfo
from bloodhound_cli.core.settings import RELEASE_URL, load_settings


class TestReleaseInfo:
    def _release(self, published_at: str) -> ReleaseInfo:
        return ReleaseInfo(published_at=published_at, tag_name="v1.0.0", html_url="https://x")

    def test_describe_formats_date(self) -> None:
        assert self._release("2024-12-01T00:00:00Z").describe("BloodHound CLI") == (
            "BloodHound CLI v1.0.0 (01 December 2024)"
        )

    def test_describe_falls_back_to_raw_timestamp(self) -> None:
        assert self._release("last tuesday").describe("BloodHound CLI") == (
            "BloodHound CLI (published at: last tuesday)"
        )

    def test_is_frozen(self) -> None:
        release = self._release("2024-12-01T00:00:00Z")
        with pytest.raises(ValidationError):
            release.tag_name = "v2"


class TestContainerSummary:
    def test_from_api_without_ports_or_labels(self) -> None:
        summary = ContainerSummary.from_api({"Id": "abc", "Image": "img", "Status": "Up"})
        assert summary.name == ""
        assert summary.ports == ()

    def test_unpublished_port(self) -> None:
        assert str(PortMapping(private_port=5432)) == "5432/tcp"


class TestConfigEntry:
    @pytest.mark.parametrize("val, shown", [(True, "true"), (False, "false"), ("INFO", "INFO"), (2, "2")])
    def test_display_value(self, val, shown) -> None:
        assert ConfigEntry(key="k", val=val).display_value() == shown


class TestCliSettings:
    def test_defaults(self, monkeypatch) -> None:
        for name in ("BHCLI_LOG_LEVEL", "BHCLI_RELEASE_URL", "BHCLI_LOG_FILE"):
            monkeypatch.delenv(name, raising=False)
        settings = load_settings()
        assert settings.log_level == "warning"
        assert settings.log_file is None
        assert settings.release_url == RELEASE_URL

    def test_environment_prefix(self, monkeypatch) -> None:
        monkeypatch.setenv("BHCLI_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("BHCLI_HTTP_TIMEOUT", "3")
        settings = load_settings()
        assert settings.log_level == "debug"
        assert settings.http_timeout == 3

    def test_invalid_value_is_config_error(self, monkeypatch) -> None:
        monkeypatch.setenv("BHCLI_COMPOSE_URL", "ftp://example.com/x.yml")
        with pytest.raises(ConfigError, match="BHCLI_"):
            load_settings()
