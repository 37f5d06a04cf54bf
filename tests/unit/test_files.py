"""
Tests for the atomic file helpers.
"""

from pathlib import Path

import pytest

from bloodhound_cli.services.files import atomic_write_text, atomic_writer, file_exists


class TestAtomicWriter:
    def test_replaces_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bloodhound.config.json"
        path.write_text("{}")
        atomic_write_text(path, '{"a": 1}\n')
        assert path.read_text() == '{"a": 1}\n'

    def test_failure_keeps_original_and_cleans_up(self, tmp_path: Path) -> None:
        path = tmp_path / "docker-compose.yml"
        path.write_text("original\n")

        with pytest.raises(RuntimeError):
            with atomic_writer(path) as f:
                f.write(b"partial")
                raise RuntimeError("connection dropped")

        assert path.read_text() == "original\n"
        assert list(tmp_path.iterdir()) == [path]

    def test_creates_parent_directory(self, tmp_path: Path) -> None:
        path = tmp_path / "new" / "file.txt"
        atomic_write_text(path, "x")
        assert path.read_text() == "x"


def test_file_exists(tmp_path: Path) -> None:
    (tmp_path / "f").write_text("")
    assert file_exists(tmp_path / "f")
    assert not file_exists(tmp_path)
    assert not file_exists(tmp_path / "missing")
