"""Command-line interface for boxgen.

Example:
    $ boxgen generate
    $ boxgen generate --config path/to/boxgen.yaml --verbose
    $ boxgen discover
    $ boxgen config verify
"""

from pathlib import Path

import typer
from rich.table import Table

from boxgen.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    EXIT_PRECONDITION_ERROR,
    _error,
    _info,
    _setup_logging,
    _success,
    console,
)
from boxgen.commands.config import config_app
from boxgen.core.config import DEFAULT_CONFIG_FILENAME, BoxgenConfig, load_config
from boxgen.core.exceptions import (
    ArtifactWriteError,
    BoxgenError,
    CompilationError,
    ConfigError,
    PreconditionError,
)
from boxgen.core.paths import ProjectPaths
from boxgen.generator.service import CodegenTestsGenerator

app = typer.Typer(
    name="boxgen",
    help="Generate the on-device codegen test suite from box() test data",
    no_args_is_help=True,
)
app.add_typer(config_app, name="config")

_CONFIG_OPTION = typer.Option(
    Path(DEFAULT_CONFIG_FILENAME),
    "--config",
    "-c",
    help="Path to configuration file (default: ./boxgen.yaml)",
)
_VERBOSE_OPTION = typer.Option(
    False,
    "--verbose",
    "-v",
    help="Enable verbose output with debug logging",
)


def _load_config_or_exit(config: Path) -> BoxgenConfig:
    try:
        return load_config(config)
    except ConfigError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None


def _exit_code_for(error: BoxgenError) -> int:
    if isinstance(error, ConfigError):
        return EXIT_CONFIG_ERROR
    if isinstance(error, PreconditionError):
        return EXIT_PRECONDITION_ERROR
    return EXIT_ERROR


@app.command(name="generate")
def generate_command(
    config: Path = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """Compile every box() test case and generate the test class.

    Exit codes:
        0 = generated
        1 = compilation or write failure
        2 = configuration error
        3 = missing prerequisite (runtime jar, JUnit jar, test data)

    """
    _setup_logging(verbose=verbose, quiet=False)
    loaded = _load_config_or_exit(config)

    try:
        generator = CodegenTestsGenerator(loaded, ProjectPaths.from_config(loaded))
        result = generator.generate()
    except CompilationError as e:
        _error(f"Cannot compile: {e.file_path}")
        console.print(e.source_text, markup=False, highlight=False)
        if e.__cause__ is not None:
            console.print(str(e.__cause__), markup=False, highlight=False)
        raise typer.Exit(code=EXIT_ERROR) from None
    except ArtifactWriteError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None
    except BoxgenError as e:
        _error(str(e))
        raise typer.Exit(code=_exit_code_for(e)) from None

    _success(f"Generated {len(result.test_names)} tests: {result.output_file}")


@app.command(name="discover")
def discover_command(
    config: Path = _CONFIG_OPTION,
    verbose: bool = _VERBOSE_OPTION,
) -> None:
    """List the test cases generate would emit, without compiling."""
    _setup_logging(verbose=verbose, quiet=False)
    loaded = _load_config_or_exit(config)

    table = Table(title="Discovered test cases")
    table.add_column("Test", no_wrap=True)
    table.add_column("Variant", no_wrap=True)
    table.add_column("Package")
    table.add_column("File")

    try:
        generator = CodegenTestsGenerator(
            loaded, ProjectPaths.from_config(loaded), environments={}
        )
        planned = list(generator.plan())
    except BoxgenError as e:
        _error(str(e))
        raise typer.Exit(code=_exit_code_for(e)) from None

    for test in planned:
        table.add_row(
            f"test{test.test_name}",
            test.variant.value,
            test.namespace,
            str(generator.source_path(test.unit)),
        )
    console.print(table)
    _info(f"{len(planned)} test cases")


def main() -> None:
    app()


if __name__ == "__main__":
    main()
