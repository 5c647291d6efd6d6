"""Filesystem helpers that fail loudly.

Every helper raises ArtifactWriteError instead of leaving a half-written
target behind. Writers assume a single process owns the target.
"""

import logging
import os
import shutil
from pathlib import Path

from boxgen.core.exceptions import ArtifactWriteError

logger = logging.getLogger(__name__)


def ensure_dir(path: Path) -> Path:
    """Create a directory (and parents) if it does not exist.

    Raises:
        ArtifactWriteError: If the directory cannot be created.

    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ArtifactWriteError(f"Cannot create directory {path}: {e}", path) from e
    if not path.is_dir():
        raise ArtifactWriteError(f"Cannot create directory {path}", path)
    return path


def atomic_write_text(path: Path, content: str) -> None:
    """Write text atomically using temp file + rename.

    Raises:
        ArtifactWriteError: If the write fails.

    """
    temp_path = path.with_name(path.name + ".tmp")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_path, "w", encoding="utf-8", newline="\n") as f:
            f.write(content)
        os.replace(temp_path, path)
    except OSError as e:
        if temp_path.exists():
            temp_path.unlink()
        raise ArtifactWriteError(f"Failed to write {path}: {e}", path) from e


def atomic_write_bytes(path: Path, content: bytes) -> None:
    """Binary counterpart of atomic_write_text."""
    temp_path = path.with_name(path.name + ".tmp")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(temp_path, "wb") as f:
            f.write(content)
        os.replace(temp_path, path)
    except OSError as e:
        if temp_path.exists():
            temp_path.unlink()
        raise ArtifactWriteError(f"Failed to write {path}: {e}", path) from e


def copy_file(source: Path, target: Path) -> None:
    """Copy a file, creating the target's parent directory.

    Raises:
        ArtifactWriteError: If the copy fails.

    """
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
    except OSError as e:
        raise ArtifactWriteError(f"Cannot copy {source} to {target}: {e}", target) from e
    logger.debug("Copied %s -> %s", source, target)
