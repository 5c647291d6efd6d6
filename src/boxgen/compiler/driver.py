"""Compilation of rewritten test data through the compiler service."""

import logging
from collections.abc import Mapping
from pathlib import Path

from boxgen.compiler.types import CompiledUnit, CompilerEnvironment
from boxgen.core.exceptions import CompilationError, ConfigError
from boxgen.discovery.classifier import ConfigurationVariant

logger = logging.getLogger(__name__)


class CompilationDriver:
    """Routes each source unit to the environment of its variant.

    The environment table is fixed at construction; environments are
    stateful and are only ever used from the calling thread.
    """

    def __init__(self, environments: Mapping[ConfigurationVariant, CompilerEnvironment]) -> None:
        self.environments = dict(environments)

    def environment_for(self, variant: ConfigurationVariant) -> CompilerEnvironment:
        try:
            return self.environments[variant]
        except KeyError:
            raise ConfigError(f"No compiler environment configured for {variant.value}") from None

    def compile(
        self,
        file_path: Path,
        text: str,
        variant: ConfigurationVariant,
        module_name: str | None = None,
    ) -> CompiledUnit:
        """Compile one rewritten source.

        Args:
            file_path: Original test data file, used for error reporting and
                as the compiled source's file name.
            text: Source text after package rewriting.
            variant: Environment to compile in.
            module_name: Module name of the compiled unit, unique per run.

        Returns:
            CompiledUnit with the produced artifacts.

        Raises:
            CompilationError: If parsing or compilation fails for any reason.
                Carries the absolute path and the full text.

        """
        environment = self.environment_for(variant)
        logger.debug("Compiling %s with %s", file_path, variant.value)
        try:
            parsed = environment.parse(text, file_path.name, module_name)
            files = environment.compile(parsed)
        except Exception as e:
            raise CompilationError(file_path.absolute(), text) from e

        return CompiledUnit(source_path=file_path, variant=variant, files=files)
