"""
Tests for the external process runner.

The streamed variant is exercised with the running Python interpreter as the
child process, so no container tooling is needed.
"""

import sys
from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from bloodhound_cli.core.exceptions import CommandNotFoundError, ProcessExecutionError
from bloodhound_cli.services.process import CommandResult, ProcessRunner

PYTHON = sys.executable


def _streamed(presenter: MagicMock) -> list[str]:
    return [c.args[0] for c in presenter.stream_line.call_args_list]


class TestRun:
    """Tests for ProcessRunner.run (line-relayed output)."""

    def test_relays_stdout_and_stderr(self, presenter) -> None:
        runner = ProcessRunner(presenter)
        script = "import sys; print('out-1'); print('err-1', file=sys.stderr); print('out-2')"

        result = runner.run(PYTHON, ["-c", script])

        assert result.ok
        lines = _streamed(presenter)
        assert sorted(lines) == ["err-1", "out-1", "out-2"]
        # Order within one stream is preserved
        assert lines.index("out-1") < lines.index("out-2")

    def test_nonzero_exit_is_reported_not_raised(self, presenter) -> None:
        runner = ProcessRunner(presenter)

        result = runner.run(PYTHON, ["-c", "import sys; sys.exit(3)"])

        assert result.returncode == 3
        assert not result.ok
        presenter.print_error.assert_called_once()
        assert "exit status 3" in presenter.print_error.call_args.args[0]

    def test_working_directory_is_pinned(self, presenter, tmp_path: Path) -> None:
        runner = ProcessRunner(presenter)

        runner.run(PYTHON, ["-c", "import os; print(os.getcwd())"], cwd=tmp_path)

        (line,) = _streamed(presenter)
        assert Path(line).resolve() == tmp_path.resolve()

    def test_extra_environment_is_layered(self, presenter) -> None:
        runner = ProcessRunner(presenter)

        runner.run(
            PYTHON,
            ["-c", "import os; print(os.environ['bhe_recreate_default_admin'])"],
            env={"bhe_recreate_default_admin": "true"},
        )

        assert _streamed(presenter) == ["true"]

    def test_missing_command(self, presenter) -> None:
        runner = ProcessRunner(presenter)
        with patch("bloodhound_cli.services.process.shutil.which", return_value=None):
            with pytest.raises(CommandNotFoundError, match="docker"):
                runner.run("docker", ["info"])
        presenter.stream_line.assert_not_called()

    def test_start_failure(self, presenter) -> None:
        runner = ProcessRunner(presenter)
        with patch("bloodhound_cli.services.process.subprocess.Popen", side_effect=OSError("boom")):
            with pytest.raises(ProcessExecutionError, match="boom"):
                runner.run(PYTHON, ["-c", "pass"])


class TestRunBasic:
    """Tests for ProcessRunner.run_basic (captured output)."""

    def test_returns_stdout(self, presenter) -> None:
        runner = ProcessRunner(presenter)
        out = runner.run_basic(PYTHON, ["-c", "print('Docker Compose version v2.27.0')"])
        assert out.strip() == "Docker Compose version v2.27.0"
        presenter.stream_line.assert_not_called()

    def test_nonzero_exit_raises(self, presenter) -> None:
        runner = ProcessRunner(presenter)
        with pytest.raises(ProcessExecutionError) as exc_info:
            runner.run_basic(PYTHON, ["-c", "import sys; sys.exit(2)"])
        assert exc_info.value.returncode == 2


class TestCommandResult:
    def test_display(self) -> None:
        result = CommandResult(command=("docker", "compose", "up", "-d"), returncode=0)
        assert result.display == "docker compose up -d"
        assert result.ok
