"""Persistence of compiled class files."""

import logging
from pathlib import Path, PurePosixPath

from boxgen.compiler.types import CompiledUnit
from boxgen.core.exceptions import ArtifactWriteError
from boxgen.core.fileio import atomic_write_bytes, ensure_dir

logger = logging.getLogger(__name__)


class ArtifactWriter:
    """Writes compiled units below one output directory.

    The directory is created on first use. Artifact paths are relative to
    it and may not escape it. Within one writer each path is written at most
    once; a second unit producing the same path is an error.
    """

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir
        self.written_count = 0
        self._owners: dict[str, Path] = {}

    def write(self, unit: CompiledUnit) -> list[Path]:
        """Persist every artifact of unit.

        Returns:
            Paths written, in artifact order.

        Raises:
            ArtifactWriteError: If the output directory cannot be created,
                an artifact path is unsafe or already written by another
                unit, or a write fails.

        """
        targets = {relative: self._target(relative) for relative in unit.files}
        for relative in targets:
            owner = self._owners.get(relative)
            if owner is not None:
                raise ArtifactWriteError(
                    f"Artifact {relative} of {unit.source_path} was already written "
                    f"for {owner}",
                    targets[relative],
                )

        ensure_dir(self.output_dir)

        written: list[Path] = []
        for relative, content in unit.files.items():
            atomic_write_bytes(targets[relative], content)
            self._owners[relative] = unit.source_path
            written.append(targets[relative])

        self.written_count += len(written)
        logger.debug("Wrote %d artifacts for %s", len(written), unit.source_path)
        return written

    def _target(self, relative: str) -> Path:
        rel = PurePosixPath(relative)
        if rel.is_absolute() or ".." in rel.parts or not rel.parts:
            raise ArtifactWriteError(f"Refusing to write artifact outside output dir: {relative}")
        return self.output_dir.joinpath(*rel.parts)
