"""kotlinc-backed compiler environments.

Each ConfigurationVariant maps to one KotlincEnvironment whose command line
reproduces that setup (standard library on or off, which JDK, which jars on
the classpath). The table is built once per run by build_environments().
"""

import logging
import os
import subprocess
import tempfile
from pathlib import Path

from boxgen.compiler.types import CompilerEnvironment, ParsedSource
from boxgen.core.config import BoxgenConfig
from boxgen.core.exceptions import CompilerServiceError, PreconditionError
from boxgen.core.paths import ProjectPaths
from boxgen.discovery.classifier import ConfigurationVariant

logger = logging.getLogger(__name__)

DEFAULT_SOURCE_NAME = "box.kt"


class KotlincEnvironment:
    """Compiler environment invoking an external ``kotlinc`` process.

    Attributes:
        executable: Compiler command.
        no_stdlib: Compile without the Kotlin standard library.
        jdk_home: JDK to compile against, or None for the running JDK.
        classpath: Jars added to the compilation classpath.
        extra_args: Arguments appended to every invocation.

    """

    def __init__(
        self,
        executable: str = "kotlinc",
        *,
        no_stdlib: bool = False,
        jdk_home: Path | None = None,
        classpath: list[Path] | None = None,
        extra_args: list[str] | None = None,
    ) -> None:
        self.executable = executable
        self.no_stdlib = no_stdlib
        self.jdk_home = jdk_home
        self.classpath = list(classpath or [])
        self.extra_args = list(extra_args or [])

    def build_args(self, output_dir: Path, module_name: str | None = None) -> list[str]:
        """Compiler arguments (excluding executable and source file)."""
        args = ["-d", str(output_dir)]
        if module_name is not None:
            args += ["-module-name", module_name]
        if self.no_stdlib:
            args += ["-no-stdlib", "-no-reflect"]
        if self.jdk_home is not None:
            args += ["-jdk-home", str(self.jdk_home)]
        if self.classpath:
            args += ["-classpath", os.pathsep.join(str(p) for p in self.classpath)]
        return args + self.extra_args

    def parse(
        self,
        text: str,
        file_name: str = DEFAULT_SOURCE_NAME,
        module_name: str | None = None,
    ) -> ParsedSource:
        if not text.strip():
            raise CompilerServiceError(f"Source {file_name} is empty")
        return ParsedSource(file_name=file_name, text=text, module_name=module_name)

    def compile(self, source: ParsedSource) -> dict[str, bytes]:
        with tempfile.TemporaryDirectory(prefix="boxgen_") as tmp:
            tmp_path = Path(tmp)
            source_file = tmp_path / "src" / source.file_name
            output_dir = tmp_path / "out"
            source_file.parent.mkdir()
            output_dir.mkdir()
            source_file.write_text(source.text, encoding="utf-8")

            args = self.build_args(output_dir, source.module_name)
            cmd = [self.executable, str(source_file), *args]
            logger.debug("Running %s", " ".join(cmd))
            try:
                result = subprocess.run(cmd, capture_output=True, text=True, check=False)
            except OSError as e:
                raise CompilerServiceError(f"Cannot run compiler '{self.executable}': {e}") from e

            if result.returncode != 0:
                raise CompilerServiceError(
                    f"{self.executable} exited with code {result.returncode}:\n{result.stderr}",
                    returncode=result.returncode,
                    stderr=result.stderr,
                )

            files = {
                path.relative_to(output_dir).as_posix(): path.read_bytes()
                for path in sorted(output_dir.rglob("*"))
                if path.is_file()
            }

        if not files:
            raise CompilerServiceError(f"{self.executable} produced no class files")
        return files

    def __repr__(self) -> str:
        return (
            f"KotlincEnvironment(executable={self.executable!r}, no_stdlib={self.no_stdlib}, "
            f"jdk_home={self.jdk_home}, classpath={self.classpath})"
        )


def build_environments(
    config: BoxgenConfig, paths: ProjectPaths
) -> dict[ConfigurationVariant, CompilerEnvironment]:
    """Build the variant-to-environment table for one run.

    Raises:
        PreconditionError: If the JUnit jar for the test-framework
            environment does not exist.

    """
    compiler = config.compiler

    def resolve_all(*jars: Path | None) -> list[Path]:
        return [paths.resolve(jar) for jar in jars if jar is not None]

    junit_jar = paths.resolve(compiler.junit_jar)
    if not junit_jar.is_file():
        raise PreconditionError(f"JUnit jar not found: {junit_jar}")

    mock_jdk = paths.resolve(compiler.mock_jdk_home) if compiler.mock_jdk_home else None

    environments: dict[ConfigurationVariant, CompilerEnvironment] = {
        ConfigurationVariant.JDK_ONLY: KotlincEnvironment(
            compiler.executable,
            no_stdlib=True,
            jdk_home=mock_jdk,
            classpath=resolve_all(compiler.annotations_jar),
            extra_args=compiler.extra_args,
        ),
        ConfigurationVariant.JDK_AND_ANNOTATIONS: KotlincEnvironment(
            compiler.executable,
            no_stdlib=True,
            jdk_home=mock_jdk,
            classpath=resolve_all(compiler.annotations_jar, compiler.external_annotations_jar),
            extra_args=compiler.extra_args,
        ),
        ConfigurationVariant.FULL_JDK: KotlincEnvironment(
            compiler.executable,
            classpath=resolve_all(compiler.annotations_jar),
            extra_args=compiler.extra_args,
        ),
        ConfigurationVariant.FULL_JDK_AND_JUNIT: KotlincEnvironment(
            compiler.executable,
            classpath=resolve_all(compiler.annotations_jar, junit_jar),
            extra_args=compiler.extra_args,
        ),
    }
    logger.debug("Built %d compiler environments", len(environments))
    return environments
