"""Shared CLI helpers: exit codes, console output and logging setup."""

import logging

from rich.console import Console
from rich.logging import RichHandler

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2
EXIT_PRECONDITION_ERROR = 3

console = Console()


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure the root logger with a rich handler.

    Args:
        verbose: Log DEBUG and above.
        quiet: Log WARNING and above (ignored when verbose).

    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.WARNING
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose, rich_tracebacks=verbose)],
        force=True,
    )


def _error(message: str) -> None:
    console.print(f"[red]Error:[/red] {message}", highlight=False)


def _info(message: str) -> None:
    console.print(message, highlight=False)


def _success(message: str) -> None:
    console.print(f"[green]{message}[/green]", highlight=False)
