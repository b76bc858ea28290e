"""Filesystem helpers reused across multiple layers."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def ensure_directory(directory: Path) -> Path:
    """Ensure ``directory`` exists as a folder and return it."""

    if directory.exists():
        if not directory.is_dir():
            raise NotADirectoryError(f"Path exists but is not a directory: {directory}")
        return directory

    directory.mkdir(parents=True, exist_ok=True)
    return directory


def ensure_parent_directory(path: Path) -> Path:
    """Ensure the parent directory for ``path`` exists and return it."""

    return ensure_directory(path.parent)


def _write_temp(path: Path, data: bytes) -> str:
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "wb") as handle:
            _ = handle.write(data)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise
    return tmp_name


def replace_bytes(path: Path, data: bytes) -> None:
    """Write ``data`` to ``path`` through a sibling temp file and an atomic rename."""

    _ = ensure_parent_directory(path)
    tmp_name = _write_temp(path, data)
    try:
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def create_bytes(path: Path, data: bytes) -> None:
    """Create ``path`` with ``data``; raise ``FileExistsError`` if it is already present.

    The content is written to a temp file and then hard-linked into place, so
    ``path`` never appears half-written.
    """

    _ = ensure_parent_directory(path)
    tmp_name = _write_temp(path, data)
    try:
        os.link(tmp_name, path)
    finally:
        Path(tmp_name).unlink(missing_ok=True)


__all__ = ["create_bytes", "ensure_directory", "ensure_parent_directory", "replace_bytes"]
