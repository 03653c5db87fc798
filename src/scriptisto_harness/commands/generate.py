"""Generate command for scriptisto-harness CLI.

Writes one sample script per scaffolding template into the scripts directory.
"""

import typer

from scriptisto_harness.cli_utils import (
    EXIT_CONFIG_ERROR,
    EXIT_ERROR,
    _error,
    _success,
    _warning,
    console,
    err_console,
)
from scriptisto_harness.core.config import load_config
from scriptisto_harness.core.exceptions import ConfigError, HarnessError


def generate_command() -> None:
    """Generate scripts if the `scripts` directory does not exist.

    Asks `scriptisto new` for its template list, then writes
    `scripts/<template>.<extension>` for every template and marks it
    executable. Does nothing if the directory is already there.

    Examples:
        scriptisto-harness generate

    """
    from scriptisto_harness.scaffold import ScriptGenerator

    try:
        config = load_config()
    except ConfigError as e:
        _error(f"Config error: {e}")
        raise typer.Exit(code=EXIT_CONFIG_ERROR) from None

    generator = ScriptGenerator(config, console=console, err_console=err_console)

    try:
        report = generator.run()
    except HarnessError as e:
        _error(str(e))
        raise typer.Exit(code=EXIT_ERROR) from None

    if report.skipped:
        return

    if not report.success:
        _warning(
            f"{len(report.failed)} template(s) failed: {', '.join(report.failed)}"
        )
        raise typer.Exit(code=EXIT_ERROR)

    _success(f"Generated {len(report.generated)} scripts in {config.scripts_dir}/")
