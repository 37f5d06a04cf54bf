"""
File-system helpers shared by the config store and the service file manager.
"""

from __future__ import annotations

import contextlib
import os
import tempfile
from collections.abc import Iterator
from pathlib import Path
from typing import BinaryIO


def file_exists(path: Path) -> bool:
    """True if ``path`` exists and is not a directory."""
    return path.exists() and not path.is_dir()


@contextlib.contextmanager
def atomic_writer(path: Path) -> Iterator[BinaryIO]:
    """Open a temporary sibling of ``path`` for writing and move it into place on success.

    If the block raises, the temporary file is removed and ``path`` is left
    untouched.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            yield f
            f.flush()
            os.fsync(f.fileno())
        tmp.replace(path)
    except BaseException:
        tmp.unlink(missing_ok=True)
        raise


def atomic_write_text(path: Path, text: str) -> None:
    """Atomically write text to a file, avoiding partial writes."""
    with atomic_writer(path) as f:
        f.write(text.encode("utf-8"))
