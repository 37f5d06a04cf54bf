"""
Tests for the console presenter and the diagnostics logger.
"""

import io
import logging
import threading
from pathlib import Path
from unittest.mock import patch

from bloodhound_cli.presenters import ConsolePresenter
from bloodhound_cli.services.logging import CliLogger, NullLogger


def _presenter():
    out, err = io.StringIO(), io.StringIO()
    return ConsolePresenter(file=out, err_file=err), out, err


class TestConsolePresenter:
    def test_error_and_warning_go_to_stderr(self) -> None:
        presenter, out, err = _presenter()
        presenter.print_error("bad")
        presenter.print_warning("careful")
        assert out.getvalue() == ""
        assert err.getvalue() == "[-] bad\n[!] careful\n"

    def test_table_layout(self) -> None:
        presenter, out, _ = _presenter()
        presenter.print_table(["NAME", "IMAGE"], [["bhce_neo4j", "neo4j:4.4"]])
        lines = out.getvalue().splitlines()
        assert lines[0] == "NAME        IMAGE    "
        assert set(lines[1]) == {"-"}
        assert lines[2] == "bhce_neo4j  neo4j:4.4"

    def test_empty_table_prints_nothing(self) -> None:
        presenter, out, _ = _presenter()
        presenter.print_table(["A"], [])
        assert out.getvalue() == ""

    def test_stream_lines_do_not_interleave(self) -> None:
        presenter, out, _ = _presenter()

        def relay(tag: str) -> None:
            for i in range(200):
                presenter.stream_line(f"{tag}-{i}")

        threads = [threading.Thread(target=relay, args=(tag,)) for tag in ("out", "err")]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        lines = out.getvalue().splitlines()
        assert len(lines) == 400
        assert [line for line in lines if line.startswith("out-")] == [f"out-{i}" for i in range(200)]

    def test_confirm_delegates_to_click(self) -> None:
        presenter, _, _ = _presenter()
        with patch("bloodhound_cli.presenters.console.click.confirm", return_value=False) as confirm:
            assert presenter.confirm("Overwrite?") is False
        confirm.assert_called_once_with("Overwrite?", default=None)


class TestCliLogger:
    def test_file_handler(self, tmp_path: Path) -> None:
        log_file = tmp_path / "logs" / "bhcli.log"
        logger = CliLogger(name="bhcli-test-file", level="info", log_file=log_file)

        logger.debug("hidden")
        logger.info("Loaded %d keys", 13)
        for handler in logging.getLogger("bhcli-test-file").handlers:
            handler.flush()

        text = log_file.read_text()
        assert "Loaded 13 keys" in text
        assert "hidden" not in text

    def test_no_handlers_by_default(self) -> None:
        CliLogger(name="bhcli-test-quiet")
        assert logging.getLogger("bhcli-test-quiet").handlers == []

    def test_null_logger_accepts_everything(self) -> None:
        NullLogger().error("ignored %s", "value")
