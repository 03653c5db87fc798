"""Shared helpers for scriptisto-harness CLI commands.

Exit codes, rich consoles and logging setup used by every subcommand.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

EXIT_SUCCESS = 0
EXIT_ERROR = 1
EXIT_CONFIG_ERROR = 2

# Progress to stdout, diagnostics to stderr; one line per message when piped
console = Console(soft_wrap=True)
err_console = Console(stderr=True, soft_wrap=True)


def _setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Configure root logging through a stderr RichHandler.

    Args:
        verbose: Log DEBUG and above.
        quiet: Log ERROR and above. Ignored when verbose is set.

    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=verbose, markup=False)],
        force=True,
    )


def _error(message: str) -> None:
    """Print an error diagnostic to stderr."""
    err_console.print(f"[red]Error:[/red] {escape(message)}")


def _warning(message: str) -> None:
    """Print a warning to stderr."""
    err_console.print(f"[yellow]Warning:[/yellow] {escape(message)}")


def _success(message: str) -> None:
    """Print a success message to stdout."""
    console.print(f"[green]✓[/green] {escape(message)}")
