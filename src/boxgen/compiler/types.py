"""Data models for the compiler service.

- ParsedSource: source text accepted by a compiler environment
- CompiledUnit: class files produced for one test data file
- CompilerEnvironment: protocol every compiler environment implements
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from boxgen.discovery.classifier import ConfigurationVariant


@dataclass(frozen=True)
class ParsedSource:
    """Source text in the form a compiler environment compiles.

    Attributes:
        file_name: Name the source is compiled under.
        text: Source text after package rewriting.
        module_name: Name of the compiled module, unique per unit, or None
            to let the compiler choose one.

    """

    file_name: str
    text: str
    module_name: str | None = None


@dataclass(frozen=True)
class CompiledUnit:
    """Binary artifacts produced by compiling one source unit.

    Attributes:
        source_path: Path of the original test data file.
        variant: Environment the unit was compiled in.
        files: Artifact contents keyed by path relative to the output
            directory (e.g. ``pkg_name/FooKt.class``).

    """

    source_path: Path
    variant: ConfigurationVariant
    files: Mapping[str, bytes] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.files)


class CompilerEnvironment(Protocol):
    """One configured compiler front end."""

    def parse(
        self, text: str, file_name: str, module_name: str | None = None
    ) -> ParsedSource:
        """Turn source text into the environment's input representation.

        Raises:
            CompilerServiceError: If the text cannot be parsed.

        """
        ...

    def compile(self, source: ParsedSource) -> dict[str, bytes]:
        """Compile a parsed source into named binary artifacts.

        Raises:
            CompilerServiceError: If the compiler rejects the source.

        """
        ...
