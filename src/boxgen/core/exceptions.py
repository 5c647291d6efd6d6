"""Exception hierarchy for boxgen.

All errors raised by the generator derive from BoxgenError so the CLI can
map them to exit codes in one place. Nothing here is recoverable; every
error propagates to the top and aborts the run.
"""

from pathlib import Path

__all__ = [
    "BoxgenError",
    "ConfigError",
    "PreconditionError",
    "DiscoveryError",
    "CompilerServiceError",
    "CompilationError",
    "ArtifactWriteError",
]


class BoxgenError(Exception):
    """Base exception for all boxgen errors."""

    pass


class ConfigError(BoxgenError):
    """Configuration file is missing, malformed or fails validation."""

    pass


class PreconditionError(BoxgenError):
    """A prerequisite for generation is missing.

    Raised when:
    - The runtime archive has not been built yet
    - The JUnit jar required by the test-framework environment is absent
    - The configured copyright banner file does not exist
    """

    pass


class DiscoveryError(PreconditionError):
    """Test-data directory is missing, empty or cannot be listed."""

    def __init__(self, message: str, directory: Path | None = None) -> None:
        super().__init__(message)
        self.directory = directory


class CompilerServiceError(BoxgenError):
    """The external compiler rejected its input or could not be started.

    Attributes:
        returncode: Exit code of the compiler process, or None if it never ran.
        stderr: Captured diagnostic output.

    """

    def __init__(self, message: str, returncode: int | None = None, stderr: str = "") -> None:
        super().__init__(message)
        self.returncode = returncode
        self.stderr = stderr


class CompilationError(BoxgenError):
    """A source unit could not be compiled.

    The message carries the offending path and the full rewritten source so
    the failure can be reproduced outside the generator.

    Attributes:
        file_path: Absolute path of the original test-data file.
        source_text: Text that was handed to the compiler (after package rewrite).

    """

    def __init__(self, file_path: Path | str, source_text: str) -> None:
        super().__init__(f"Cannot compile: {file_path}\n{source_text}")
        self.file_path = Path(file_path)
        self.source_text = source_text


class ArtifactWriteError(BoxgenError):
    """Output directory or generated file could not be written."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
