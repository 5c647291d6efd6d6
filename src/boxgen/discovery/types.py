"""Shared types for test-data discovery."""

import os
from pathlib import Path
from typing import NamedTuple, Protocol


class SourceUnit(NamedTuple):
    """One eligible test-data file.

    Attributes:
        path: Path as discovered (relative when the walk root is relative).
            Used for the namespace token and the generated string literal.
        text: Raw file contents.
        name: Base file name, the key for classification.

    """

    path: Path
    text: str
    name: str

    @property
    def absolute_path(self) -> Path:
        return self.path.absolute()


class FilesystemInterface(Protocol):
    """Protocol for filesystem operations to enable dependency injection."""

    def list_dir(self, path: Path) -> list[Path]:
        """List the entries of a directory.

        Args:
            path: Directory to list

        Returns:
            Entry paths, in no particular order

        Raises:
            OSError: If the directory cannot be listed

        """
        ...

    def is_dir(self, path: Path) -> bool:
        """Return True if path is a directory."""
        ...

    def read_text(self, path: Path) -> str:
        """Read a file as UTF-8 text, replacing undecodable bytes."""
        ...


class RealFilesystem:
    """Real filesystem implementation using os module."""

    def list_dir(self, path: Path) -> list[Path]:
        with os.scandir(path) as it:
            return [path / entry.name for entry in it]

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def read_text(self, path: Path) -> str:
        return path.read_text(encoding="utf-8", errors="replace")
