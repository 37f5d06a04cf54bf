"""
Tests for the host capability prober.

The process runner is mocked; each test decides which probes succeed.
"""

from unittest.mock import MagicMock

import pytest

from bloodhound_cli.core.exceptions import (
    ComposeUnavailableError,
    ContainerRuntimeMissingError,
    DaemonUnavailableError,
    ProcessExecutionError,
)
from bloodhound_cli.services.compose.prober import CapabilityProber
from bloodhound_cli.services.process import ProcessRunner


def _runner(installed=("docker",), failing=()) -> MagicMock:
    """A runner mock where ``installed`` are on the PATH and ``failing`` probes exit 1."""
    runner = MagicMock(spec=ProcessRunner)
    runner.which.side_effect = lambda name: f"/usr/bin/{name}" if name in installed else None

    def run_basic(name, args, cwd=None):
        probe = " ".join([name, *args])
        if probe in failing:
            raise ProcessExecutionError(f"`{probe}` exited with status 1", returncode=1, command=probe)
        return "ok\n"

    runner.run_basic.side_effect = run_basic
    return runner


class TestEvaluate:
    """Tests for CapabilityProber.evaluate."""

    def test_plugin_is_preferred(self, presenter) -> None:
        state = CapabilityProber(_runner(), presenter).evaluate()

        assert state.executable == "docker"
        assert state.prefix == ("compose",)
        assert not state.is_legacy
        assert state.command("-f", "x.yml", "up") == ["compose", "-f", "x.yml", "up"]

    def test_falls_back_to_legacy_script(self, presenter) -> None:
        runner = _runner(installed=("docker", "docker-compose"), failing=("docker compose version",))

        state = CapabilityProber(runner, presenter).evaluate()

        assert state.executable == "docker-compose"
        assert state.prefix == ()
        assert state.is_legacy
        assert state.command("-f", "x.yml", "up") == ["-f", "x.yml", "up"]

    def test_no_compose_at_all(self, presenter) -> None:
        runner = _runner(failing=("docker compose version",))
        with pytest.raises(ComposeUnavailableError, match="install"):
            CapabilityProber(runner, presenter).evaluate()

    def test_runtime_missing_stops_before_other_probes(self, presenter) -> None:
        runner = _runner(installed=())
        with pytest.raises(ContainerRuntimeMissingError):
            CapabilityProber(runner, presenter).evaluate()
        runner.run_basic.assert_not_called()

    def test_daemon_not_running(self, presenter) -> None:
        runner = _runner(failing=("docker info",))
        with pytest.raises(DaemonUnavailableError):
            CapabilityProber(runner, presenter).evaluate()
        # compose is never probed when the daemon is down
        assert runner.run_basic.call_count == 1

