"""Per-file compiler configuration selection.

Test data files are compiled in one of four environments. Which one applies
is decided from the file's base name alone, by looking it up in the special
file lists from configuration.
"""

from dataclasses import dataclass, field
from enum import Enum

from boxgen.core.config import SpecialFilesConfig


class ConfigurationVariant(str, Enum):
    """Compiler environment a test data file is compiled in."""

    JDK_ONLY = "jdk_only"
    """Mock JDK with IDEA annotations, no standard library."""

    JDK_AND_ANNOTATIONS = "jdk_and_annotations"
    """Mock JDK with external annotations."""

    FULL_JDK = "full_jdk"
    """Full JDK with annotations and standard library (default)."""

    FULL_JDK_AND_JUNIT = "full_jdk_and_junit"
    """Full JDK plus JUnit on the classpath."""


@dataclass(frozen=True)
class ClassificationSets:
    """Static file-name sets for one run. Keys are base names, not paths."""

    excluded: frozenset[str] = field(default_factory=frozenset)
    without_stdlib: frozenset[str] = field(default_factory=frozenset)
    with_junit: frozenset[str] = field(default_factory=frozenset)
    with_external_annotations: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_config(cls, config: SpecialFilesConfig) -> "ClassificationSets":
        return cls(
            excluded=frozenset(config.excluded),
            without_stdlib=frozenset(config.without_stdlib),
            with_junit=frozenset(config.with_junit),
            with_external_annotations=frozenset(config.with_external_annotations),
        )


class FileClassifier:
    """Maps a base file name to its ConfigurationVariant.

    Lookup order matters: a name listed in several sets resolves to the
    first match of without_stdlib, with_junit, with_external_annotations.
    """

    def __init__(self, sets: ClassificationSets) -> None:
        self.sets = sets

    def is_excluded(self, file_name: str) -> bool:
        return file_name in self.sets.excluded

    def classify(self, file_name: str) -> ConfigurationVariant:
        if file_name in self.sets.without_stdlib:
            return ConfigurationVariant.JDK_ONLY
        elif file_name in self.sets.with_junit:
            return ConfigurationVariant.FULL_JDK_AND_JUNIT
        elif file_name in self.sets.with_external_annotations:
            return ConfigurationVariant.JDK_AND_ANNOTATIONS
        else:
            return ConfigurationVariant.FULL_JDK
