"""Configuration models and loading for boxgen.

Configuration lives in a single YAML file (``boxgen.yaml`` by default) and is
validated with frozen Pydantic models. Every field has a default matching the
layout of the Kotlin repository, so an empty file is a valid configuration.

Usage:
    from boxgen.core.config import load_config

    config = load_config(Path("boxgen.yaml"))
    marker = config.entry_point_marker
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from boxgen.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_FILENAME = "boxgen.yaml"


class TestClassConfig(BaseModel):
    """Names used in the generated test class.

    Attributes:
        package: Package of the generated class.
        name: Simple name of the generated class.
        base_package: Package of the harness base class.
        base_name: Simple name of the harness base class.
        generator_name: Name written into the DO NOT MODIFY warning.

    """

    __test__ = False  # not a pytest test class

    model_config = ConfigDict(frozen=True)

    package: str = Field(
        default="org.jetbrains.jet.compiler.android",
        description="Package of the generated test class",
    )
    name: str = Field(
        default="CodegenTestCaseOnAndroid",
        description="Simple name of the generated test class",
    )
    base_package: str = Field(
        default="org.jetbrains.jet.compiler.android",
        description="Package of the base test class providing invokeBoxMethod",
    )
    base_name: str = Field(
        default="AbstractCodegenTestCaseOnAndroid",
        description="Simple name of the base test class",
    )
    generator_name: str = Field(
        default="CodegenTestsOnAndroidGenerator",
        description="Generator name written into the generated-code warning",
    )

    @field_validator("name", "base_name", "generator_name")
    @classmethod
    def _validate_identifier(cls, v: str) -> str:
        if not v.isidentifier():
            raise ValueError(f"'{v}' is not a valid identifier")
        return v

    @field_validator("package", "base_package")
    @classmethod
    def _validate_package(cls, v: str) -> str:
        if not all(part.isidentifier() for part in v.split(".")):
            raise ValueError(f"'{v}' is not a valid package name")
        return v


class PathsConfig(BaseModel):
    """Filesystem locations, relative to ``root`` unless absolute.

    Attributes:
        root: Repository root all relative paths resolve against.
        tmp_folder: Scratch folder holding the android module copies.
        test_data_dir: Root of the box() test data tree.
        runtime_jar: Runtime archive produced by the dist build step.
        copyright_file: License banner for the generated file, or None for
            the built-in banner.

    """

    model_config = ConfigDict(frozen=True)

    root: Path = Field(default=Path("."), description="Repository root")
    tmp_folder: Path = Field(default=Path("tmp"), description="Scratch folder")
    test_data_dir: Path = Field(
        default=Path("compiler/testData/codegen"),
        description="Root of the test data tree",
    )
    runtime_jar: Path = Field(
        default=Path("dist/kotlinc/lib/kotlin-runtime.jar"),
        description="Runtime archive copied into the android module",
    )
    copyright_file: Path | None = Field(
        default=Path("injector-generator/copyright.txt"),
        description="License banner prepended to the generated file",
    )


class SpecialFilesConfig(BaseModel):
    """Base file names that need special handling.

    A name may appear in several lists; the classifier resolves overlaps by
    priority (without_stdlib, then with_junit, then with_external_annotations).
    """

    model_config = ConfigDict(frozen=True)

    excluded: list[str] = Field(default_factory=list, description="Never generated")
    without_stdlib: list[str] = Field(
        default_factory=list, description="Compiled against the mock JDK only"
    )
    with_junit: list[str] = Field(
        default_factory=list, description="Compiled with JUnit on the classpath"
    )
    with_external_annotations: list[str] = Field(
        default_factory=list, description="Compiled with external annotations"
    )


class CompilerConfig(BaseModel):
    """Settings for the kotlinc-backed compiler service.

    Attributes:
        executable: Compiler command (looked up on PATH when not absolute).
        mock_jdk_home: JDK home used by the mock-JDK environments.
        annotations_jar: IDEA annotations jar.
        external_annotations_jar: Extra annotations for the JDK-and-annotations
            environment.
        junit_jar: JUnit jar for the test-framework environment.
        extra_args: Arguments appended to every compiler invocation.

    """

    model_config = ConfigDict(frozen=True)

    executable: str = Field(default="kotlinc", description="Compiler command")
    mock_jdk_home: Path | None = Field(
        default=Path("compiler/testData/mockJDK"),
        description="JDK home for mock-JDK environments",
    )
    annotations_jar: Path | None = Field(
        default=Path("dist/kotlinc/lib/kotlin-annotations.jar"),
        description="Annotations jar",
    )
    external_annotations_jar: Path | None = Field(
        default=Path("ideaSDK/lib/annotations.jar"),
        description="External annotations jar",
    )
    junit_jar: Path = Field(
        default=Path("libraries/lib/junit-4.9.jar"),
        description="JUnit jar for the test-framework environment",
    )
    extra_args: list[str] = Field(default_factory=list, description="Extra compiler arguments")


class BoxgenConfig(BaseModel):
    """Root configuration model."""

    model_config = ConfigDict(frozen=True)

    test_class: TestClassConfig = Field(default_factory=TestClassConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    special_files: SpecialFilesConfig = Field(default_factory=SpecialFilesConfig)
    compiler: CompilerConfig = Field(default_factory=CompilerConfig)
    entry_point_marker: str = Field(
        default="fun box()",
        min_length=1,
        description="Substring marking a file as a runnable test case",
    )


def load_config(source: Path | dict[str, Any]) -> BoxgenConfig:
    """Load and validate configuration.

    Relative ``paths.root`` values in a YAML file resolve against the
    directory holding that file.

    Args:
        source: Path to a YAML file, or an already-parsed mapping.

    Returns:
        Validated BoxgenConfig.

    Raises:
        ConfigError: If the file is missing or unreadable, the YAML is
            invalid, the root is not a mapping, or validation fails.

    """
    if isinstance(source, dict):
        return _validate(source, origin="<dict>")

    config_path = Path(source)
    if not config_path.is_file():
        raise ConfigError(
            f"Configuration file not found: {config_path}\n"
            f"  How to fix: Create {DEFAULT_CONFIG_FILENAME} or pass --config"
        )

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read configuration file: {config_path}\n  Error: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"Configuration root must be a mapping: {config_path}")

    paths = data.get("paths")
    if paths is None:
        paths = {}
    if not isinstance(paths, dict):
        raise ConfigError(f"'paths' must be a mapping: {config_path}")
    root = Path(paths.get("root", "."))
    if not root.is_absolute():
        root = config_path.parent / root
    data = {**data, "paths": {**paths, "root": root}}

    logger.debug("Loaded configuration from %s", config_path)
    return _validate(data, origin=str(config_path))


def _validate(data: dict[str, Any], origin: str) -> BoxgenConfig:
    try:
        return BoxgenConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {origin}:\n{e}") from e
