"""Pytest configuration and fixtures for boxgen tests."""

from pathlib import Path

import pytest

from boxgen.compiler.types import ParsedSource
from boxgen.core.config import BoxgenConfig, load_config
from boxgen.core.paths import ProjectPaths
from boxgen.discovery.classifier import ConfigurationVariant


def declared_package(text: str) -> str | None:
    for line in text.splitlines():
        if line.strip().startswith("package "):
            return line.split()[1]
    return None


class FakeEnvironment:
    """In-memory compiler environment recording what it compiled.

    Produces one class file per source, named after the declared package
    and the source file name, the way kotlinc lays out top-level functions.
    """

    def __init__(self, variant: ConfigurationVariant, fail_on: str | None = None) -> None:
        self.variant = variant
        self.fail_on = fail_on
        self.compiled: list[ParsedSource] = []

    def parse(
        self, text: str, file_name: str, module_name: str | None = None
    ) -> ParsedSource:
        return ParsedSource(file_name=file_name, text=text, module_name=module_name)

    def compile(self, source: ParsedSource) -> dict[str, bytes]:
        if self.fail_on is not None and self.fail_on in source.text:
            raise RuntimeError(f"error: unresolved reference: {self.fail_on}")
        self.compiled.append(source)
        package = declared_package(source.text)
        stem = source.file_name.rsplit(".", 1)[0]
        class_name = stem[:1].upper() + stem[1:] + "Kt.class"
        package_dir = (package or "").replace(".", "/")
        key = f"{package_dir}/{class_name}" if package_dir else class_name
        return {key: f"{self.variant.value}:{package}".encode()}


@pytest.fixture
def fake_environments() -> dict[ConfigurationVariant, FakeEnvironment]:
    """One FakeEnvironment per configuration variant."""
    return {variant: FakeEnvironment(variant) for variant in ConfigurationVariant}


@pytest.fixture
def repo_root(tmp_path: Path) -> Path:
    """Minimal repository layout: runtime jar, JUnit jar and test data root."""
    root = tmp_path / "repo"
    (root / "dist" / "kotlinc" / "lib").mkdir(parents=True)
    (root / "dist" / "kotlinc" / "lib" / "kotlin-runtime.jar").write_bytes(b"PK runtime")
    (root / "libraries" / "lib").mkdir(parents=True)
    (root / "libraries" / "lib" / "junit-4.9.jar").write_bytes(b"PK junit")
    (root / "compiler" / "testData" / "codegen").mkdir(parents=True)
    return root


@pytest.fixture
def make_config(repo_root: Path):
    """Factory building a BoxgenConfig rooted at repo_root."""

    def _make(**overrides) -> BoxgenConfig:
        data = {
            "paths": {"root": str(repo_root), "copyright_file": None},
        }
        for key, value in overrides.items():
            if isinstance(value, dict) and isinstance(data.get(key), dict):
                data[key] = {**data[key], **value}
            else:
                data[key] = value
        return load_config(data)

    return _make


@pytest.fixture
def paths(repo_root: Path) -> ProjectPaths:
    return ProjectPaths(repo_root, Path("tmp"))


@pytest.fixture
def fake_environment_cls() -> type[FakeEnvironment]:
    """The FakeEnvironment class, for tests needing custom instances."""
    return FakeEnvironment
