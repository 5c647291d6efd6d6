"""Config command group for boxgen.

Provides configuration verification:
- `boxgen config verify`: Validate a configuration file and check that the
  inputs it points at exist

Example:
    $ boxgen config verify
    $ boxgen config verify ~/kotlin/boxgen.yaml
"""

import logging
from pathlib import Path

import typer

from boxgen.cli_utils import EXIT_CONFIG_ERROR, EXIT_SUCCESS, console
from boxgen.core.config import DEFAULT_CONFIG_FILENAME, BoxgenConfig, load_config
from boxgen.core.exceptions import ConfigError
from boxgen.core.paths import ProjectPaths

logger = logging.getLogger(__name__)

config_app = typer.Typer(
    name="config",
    help="Configuration management commands",
    no_args_is_help=True,
)


def check_inputs(config: BoxgenConfig) -> list[tuple[str, Path, bool]]:
    """Check the configured inputs exist.

    Returns:
        (label, resolved path, exists) per input.

    """
    paths = ProjectPaths.from_config(config)
    checks = [
        ("test data", paths.resolve(config.paths.test_data_dir), True),
        ("runtime jar", paths.resolve(config.paths.runtime_jar), False),
        ("junit jar", paths.resolve(config.compiler.junit_jar), False),
    ]
    if config.paths.copyright_file is not None:
        checks.append(("copyright", paths.resolve(config.paths.copyright_file), False))

    results = []
    for label, path, is_dir in checks:
        exists = path.is_dir() if is_dir else path.is_file()
        results.append((label, path, exists))
    return results


@config_app.command(name="verify")
def verify_command(
    config: Path = typer.Argument(
        None,
        help="Path to config file (default: ./boxgen.yaml)",
    ),
) -> None:
    """Verify configuration file for errors and missing inputs.

    Shows [OK], [WARN], or [ERR] status for each check. Missing inputs are
    warnings since a build step may still produce them.

    Exits with code 0 if valid (warnings allowed), 2 if errors found.
    """
    if config is None:
        config = Path(DEFAULT_CONFIG_FILENAME)

    config_path = config.resolve()

    try:
        loaded = load_config(config_path)
    except ConfigError as e:
        console.print(f"[red][ERR][/red] {e}", highlight=False)
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None

    console.print(f"[green][OK][/green] Configuration valid: {config_path}", highlight=False)
    for label, path, exists in check_inputs(loaded):
        if exists:
            console.print(f"[green][OK][/green] {label}: {path}", highlight=False)
        else:
            console.print(f"[yellow][WARN][/yellow] {label} not found: {path}", highlight=False)

    raise typer.Exit(code=EXIT_SUCCESS)
