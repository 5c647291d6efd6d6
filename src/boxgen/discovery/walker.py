"""Test data discovery.

TestDataWalker performs a depth-first walk of the test data tree and lazily
yields the files that contain the entry-point marker. It neither compiles
nor emits anything, so discovery can be exercised without a compiler.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

from boxgen.core.exceptions import DiscoveryError
from boxgen.discovery.classifier import FileClassifier
from boxgen.discovery.types import FilesystemInterface, RealFilesystem, SourceUnit

logger = logging.getLogger(__name__)

DEFAULT_ENTRY_POINT_MARKER = "fun box()"


def has_entry_point(text: str, marker: str = DEFAULT_ENTRY_POINT_MARKER) -> bool:
    """Return True if text contains the entry-point marker."""
    return marker in text


class TestDataWalker:
    """Depth-first walker over the test data tree.

    Entries of each directory are visited in name order. Entries whose base
    name is excluded are skipped entirely, directories included. Files
    without the marker are read but never yielded.
    """

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        classifier: FileClassifier,
        marker: str = DEFAULT_ENTRY_POINT_MARKER,
        filesystem: FilesystemInterface | None = None,
    ) -> None:
        """Initialize the walker.

        Args:
            classifier: Answers whether a base name is excluded
            marker: Substring that makes a file eligible
            filesystem: Optional filesystem implementation for testing

        """
        self.classifier = classifier
        self.marker = marker
        self.filesystem = filesystem if filesystem is not None else RealFilesystem()

    def walk(self, root: Path) -> Iterator[SourceUnit]:
        """Yield eligible source units below root.

        Raises:
            DiscoveryError: If root is missing, not a directory or empty, or
                if any directory of the tree cannot be listed or read.

        """
        if not self.filesystem.is_dir(root):
            raise DiscoveryError(f"Folder with testData does not exist: {root.absolute()}", root)

        entries = self._list(root)
        if not entries:
            raise DiscoveryError(f"Folder with testData is empty: {root.absolute()}", root)

        yield from self._walk_entries(entries)

    def _list(self, directory: Path) -> list[Path]:
        try:
            entries = self.filesystem.list_dir(directory)
        except OSError as e:
            raise DiscoveryError(
                f"Cannot list testData folder {directory.absolute()}: {e}", directory
            ) from e
        return sorted(entries, key=lambda p: p.name)

    def _walk_entries(self, entries: list[Path]) -> Iterator[SourceUnit]:
        for entry in entries:
            if self.classifier.is_excluded(entry.name):
                logger.debug("Skipping excluded %s", entry)
                continue

            if self.filesystem.is_dir(entry):
                yield from self._walk_entries(self._list(entry))
                continue

            try:
                text = self.filesystem.read_text(entry)
            except OSError as e:
                raise DiscoveryError(f"Cannot read test data file {entry}: {e}", entry) from e

            if not has_entry_point(text, self.marker):
                continue

            yield SourceUnit(path=entry, text=text, name=entry.name)
