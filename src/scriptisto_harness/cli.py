"""Command-line entry point for scriptisto-harness.

Usage:
    scriptisto-harness generate
    scriptisto-harness test-all
"""

import typer

from scriptisto_harness import __version__
from scriptisto_harness.cli_utils import _setup_logging, console
from scriptisto_harness.commands.generate import generate_command
from scriptisto_harness.commands.run_tests import run_tests_command

app = typer.Typer(
    name="scriptisto-harness",
    help="Manage and test scriptisto-generated scripts.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"scriptisto-harness {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose (debug) logging",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
) -> None:
    """Manage and test scriptisto-generated scripts."""
    _setup_logging(verbose=verbose, quiet=False)


app.command(name="generate")(generate_command)
app.command(name="test-all")(run_tests_command)
