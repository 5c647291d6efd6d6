"""Top-level generation of the on-device codegen test class.

CodegenTestsGenerator prepares the android module, walks the test data
tree, compiles every eligible file into the tested module and writes one
Java class with a test method per compiled file.

Usage:
    from boxgen.core.config import load_config
    from boxgen.core.paths import ProjectPaths
    from boxgen.generator.service import CodegenTestsGenerator

    config = load_config(Path("boxgen.yaml"))
    result = CodegenTestsGenerator(config, ProjectPaths.from_config(config)).generate()
"""

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from pathlib import Path

from boxgen.compiler.artifacts import ArtifactWriter
from boxgen.compiler.driver import CompilationDriver
from boxgen.compiler.environment import build_environments
from boxgen.compiler.types import CompilerEnvironment
from boxgen.core.config import BoxgenConfig
from boxgen.core.exceptions import PreconditionError
from boxgen.core.fileio import atomic_write_text, copy_file, ensure_dir
from boxgen.core.paths import ProjectPaths
from boxgen.discovery.classifier import ClassificationSets, ConfigurationVariant, FileClassifier
from boxgen.discovery.naming import NameAllocator
from boxgen.discovery.package_rewriter import rewrite_for_path
from boxgen.discovery.types import FilesystemInterface, SourceUnit
from boxgen.discovery.walker import TestDataWalker
from boxgen.generator.emitter import TestMethodEmitter, escape_string_characters
from boxgen.generator.printer import Printer

logger = logging.getLogger(__name__)

DEFAULT_COPYRIGHT = """\
/*
 * Copyright 2010-2012 JetBrains s.r.o.
 *
 * Licensed under the Apache License, Version 2.0 (the "License");
 * you may not use this file except in compliance with the License.
 * You may obtain a copy of the License at
 *
 * http://www.apache.org/licenses/LICENSE-2.0
 *
 * Unless required by applicable law or agreed to in writing, software
 * distributed under the License is distributed on an "AS IS" BASIS,
 * WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
 * See the License for the specific language governing permissions and
 * limitations under the License.
 */

"""


@dataclass(frozen=True)
class PlannedTest:
    """A discovered test case and the decisions made for it."""

    unit: SourceUnit
    test_name: str
    namespace: str
    variant: ConfigurationVariant


@dataclass(frozen=True)
class GenerationResult:
    """Outcome of a generation run.

    Attributes:
        output_file: Path of the generated Java source.
        test_names: Generated test names, in emission order.
        compiled_files: Number of class files written.

    """

    output_file: Path
    test_names: tuple[str, ...]
    compiled_files: int


class CodegenTestsGenerator:
    """Generates the test class and the compiled test data it runs.

    One instance performs one run: the name registry and emitted method
    count are never reset.
    """

    def __init__(
        self,
        config: BoxgenConfig,
        paths: ProjectPaths,
        environments: Mapping[ConfigurationVariant, CompilerEnvironment] | None = None,
        filesystem: FilesystemInterface | None = None,
    ) -> None:
        """Initialize the generator.

        Args:
            config: Generator configuration
            paths: Path layout of the android modules
            environments: Compiler environment per variant; built from
                config when None
            filesystem: Optional filesystem implementation for discovery

        Raises:
            PreconditionError: If environments must be built and the JUnit
                jar is missing.

        """
        self.config = config
        self.paths = paths
        self.classifier = FileClassifier(ClassificationSets.from_config(config.special_files))
        self.walker = TestDataWalker(self.classifier, config.entry_point_marker, filesystem)
        if environments is None:
            environments = build_environments(config, paths)
        self.driver = CompilationDriver(environments)
        self.artifacts = ArtifactWriter(paths.output_for_compiled_files)
        self.emitter = TestMethodEmitter()
        self.names = NameAllocator()

    @property
    def test_data_dir(self) -> Path:
        return self.paths.resolve(self.config.paths.test_data_dir)

    @property
    def output_file(self) -> Path:
        test_class = self.config.test_class
        return self.paths.generated_test_file(test_class.package, test_class.name)

    def generate(self) -> GenerationResult:
        self.prepare_environment()
        return self.generate_and_save()

    def prepare_environment(self) -> None:
        """Copy the runtime archive and create the tested module libs folder.

        Raises:
            PreconditionError: If the runtime archive has not been built.
            ArtifactWriteError: If copying or directory creation fails.

        """
        logger.info("Copying %s in android module...", self.config.paths.runtime_jar.name)
        self.copy_runtime_jar()

        logger.info('Check "libs" folder in tested android module...')
        ensure_dir(self.paths.libs_folder_in_android_tested_module_tmp_folder)

    def copy_runtime_jar(self) -> Path:
        runtime_in_dist = self.paths.resolve(self.config.paths.runtime_jar)
        if not runtime_in_dist.is_file():
            raise PreconditionError(
                f"{runtime_in_dist.name} in {runtime_in_dist.parent} doesn't exist. "
                "Run dist ant task before generating test for android."
            )
        target = self.paths.libs_folder_in_android_tmp_folder / runtime_in_dist.name
        copy_file(runtime_in_dist, target)
        return target

    def generate_and_save(self) -> GenerationResult:
        """Build the whole test class and write it once.

        Nothing is written to the generated file unless every eligible test
        data file compiled.
        """
        logger.info("Generating test files...")
        test_class = self.config.test_class
        p = Printer()

        p.print(self.load_copyright())
        p.println("package ", test_class.package, ";")
        p.println()
        p.println("import ", test_class.base_package, ".", test_class.base_name, ";")
        p.println()
        p.println(
            "/* This class is generated by ", test_class.generator_name,
            ". DO NOT MODIFY MANUALLY */",
        )
        p.println("public class ", test_class.name, " extends ", test_class.base_name, " {")
        p.push_indent()

        self.generate_test_methods(p, self.test_data_dir)

        p.pop_indent()
        p.println("}")

        output_file = self.output_file
        atomic_write_text(output_file, p.getvalue())
        logger.info(
            "Generated %d tests in %s (%d class files)",
            len(self.names), output_file, self.artifacts.written_count,
        )
        return GenerationResult(
            output_file=output_file,
            test_names=tuple(self.names.names),
            compiled_files=self.artifacts.written_count,
        )

    def load_copyright(self) -> str:
        copyright_file = self.config.paths.copyright_file
        if copyright_file is None:
            return DEFAULT_COPYRIGHT
        path = self.paths.resolve(copyright_file)
        if not path.is_file():
            raise PreconditionError(f"Copyright file not found: {path}")
        return path.read_text(encoding="utf-8")

    def source_path(self, unit: SourceUnit) -> Path:
        """Path of unit relative to the repository root, as the harness sees it."""
        try:
            return unit.path.absolute().relative_to(self.paths.root)
        except ValueError:
            return unit.path

    def generate_test_methods(self, printer: Printer, directory: Path) -> None:
        """Compile, persist and emit every eligible file below directory."""
        for unit in self.walker.walk(directory):
            self.process(printer, unit)

    def process(self, printer: Printer, unit: SourceUnit) -> str:
        """Handle one eligible source unit and return its test name.

        Raises:
            CompilationError: If the unit does not compile.

        """
        variant = self.classifier.classify(unit.name)
        source_path = self.source_path(unit)
        namespace, text = rewrite_for_path(source_path, unit.text)
        compiled = self.driver.compile(unit.path, text, variant, module_name=namespace)
        self.artifacts.write(compiled)

        test_name = self.names.allocate(unit.name)
        self.emitter.emit(printer, test_name, escape_string_characters(source_path.as_posix()))
        return test_name

    def plan(self, directory: Path | None = None) -> Iterator[PlannedTest]:
        """Discover test cases without compiling or writing anything.

        Uses its own name registry, so planning does not affect names
        allocated by a later generate().
        """
        names = NameAllocator()
        for unit in self.walker.walk(directory or self.test_data_dir):
            namespace, _ = rewrite_for_path(self.source_path(unit), unit.text)
            yield PlannedTest(
                unit=unit,
                test_name=names.allocate(unit.name),
                namespace=namespace,
                variant=self.classifier.classify(unit.name),
            )
