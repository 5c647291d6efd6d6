"""Compiler service: environments, compilation driver and artifact writer."""

from boxgen.compiler.artifacts import ArtifactWriter
from boxgen.compiler.driver import CompilationDriver
from boxgen.compiler.environment import KotlincEnvironment, build_environments
from boxgen.compiler.types import CompiledUnit, CompilerEnvironment, ParsedSource

__all__ = [
    "ArtifactWriter",
    "CompilationDriver",
    "CompiledUnit",
    "CompilerEnvironment",
    "KotlincEnvironment",
    "ParsedSource",
    "build_environments",
]
