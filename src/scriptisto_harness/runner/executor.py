"""Batch execution of every script in the scripts directory.

Each regular file is run with the scripts directory as working directory.
Captured stdout of a passing script is saved to ``<name>.output.txt``,
captured stderr of a failing one to ``<name>.fail.txt``. Exactly one of the
two exists for each script after a run.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from scriptisto_harness.core.config import HarnessConfig
from scriptisto_harness.core.exceptions import ArtifactWriteError, ScriptsDirError
from scriptisto_harness.runner.summary import RunSummary, ScriptResult

logger = logging.getLogger(__name__)

OUTPUT_SUFFIX = ".output.txt"
FAIL_SUFFIX = ".fail.txt"


def output_artifact(script: Path) -> Path:
    """Path of the success artifact for a script."""
    return script.with_name(script.name + OUTPUT_SUFFIX)


def fail_artifact(script: Path) -> Path:
    """Path of the failure artifact for a script."""
    return script.with_name(script.name + FAIL_SUFFIX)


def is_result_artifact(path: Path) -> bool:
    """True for files written by a previous test-all run."""
    return path.name.endswith((OUTPUT_SUFFIX, FAIL_SUFFIX))


def discover_scripts(scripts_dir: Path) -> list[Path]:
    """List the scripts to test, in name order.

    Only immediate regular files count. Result artifacts from earlier runs
    are excluded. The listing is taken once so artifacts written during the
    run are never picked up.

    Raises:
        ScriptsDirError: If the directory cannot be read.

    """
    try:
        entries = sorted(scripts_dir.iterdir())
    except OSError as e:
        raise ScriptsDirError(f"Failed to read '{scripts_dir}' directory: {e}", path=scripts_dir) from e

    return [entry for entry in entries if entry.is_file() and not is_result_artifact(entry)]


def _write_artifact(path: Path, content: bytes, stale: Path) -> None:
    try:
        path.write_bytes(content)
        stale.unlink(missing_ok=True)
    except OSError as e:
        raise ArtifactWriteError(f"Failed to write {path.name}: {e}", path=path) from e


def run_script(script: Path, timeout: float | None = None) -> ScriptResult:
    """Execute one script and save its result artifact.

    Args:
        script: Script to run. Its parent directory is the working directory.
        timeout: Seconds to wait before killing the script. None waits forever.

    Returns:
        ScriptResult for the script.

    Raises:
        ArtifactWriteError: If the result artifact cannot be written.

    """
    returncode: int | None = None
    timed_out = False

    try:
        completed = subprocess.run(
            [str(script.resolve())],
            cwd=script.parent,
            capture_output=True,
            timeout=timeout,
        )
        returncode = completed.returncode
        stdout, stderr = completed.stdout, completed.stderr
    except subprocess.TimeoutExpired as e:
        logger.debug("%s timed out after %ss", script.name, timeout)
        timed_out = True
        stdout = b""
        stderr = (e.stderr or b"") + f"\nTimed out after {timeout}s\n".encode()
    except OSError as e:
        # Not executable, missing interpreter, bad shebang...
        logger.debug("Failed to execute %s: %s", script.name, e)
        stdout = b""
        stderr = f"Failed to execute script: {script.name}: {e}\n".encode()

    if returncode == 0:
        artifact = output_artifact(script)
        _write_artifact(artifact, stdout, stale=fail_artifact(script))
        return ScriptResult(script=script, success=True, returncode=0, artifact=artifact)

    artifact = fail_artifact(script)
    _write_artifact(artifact, stderr, stale=output_artifact(script))
    return ScriptResult(
        script=script,
        success=False,
        returncode=returncode,
        artifact=artifact,
        timed_out=timed_out,
    )


class ScriptRunner:
    """Runs every script in the scripts directory and tallies the results.

    Attributes:
        config: Harness configuration.
        console: Rich console for progress output.
        err_console: Rich console for diagnostics.

    """

    def __init__(
        self,
        config: HarnessConfig,
        console: Console | None = None,
        err_console: Console | None = None,
    ) -> None:
        self.config = config
        self.console = console or Console(soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, soft_wrap=True)

    def run(self, base: Path | None = None) -> RunSummary:
        """Test all scripts and print the summary block.

        Args:
            base: Directory the scripts directory is resolved against.
                Defaults to the current working directory.

        Returns:
            RunSummary with per-script results.

        Raises:
            ScriptsDirError: If the scripts directory is missing, not a
                directory, or unreadable.
            ArtifactWriteError: If a result artifact cannot be written.

        """
        scripts_dir = self.config.scripts_path(base)
        name = self.config.scripts_dir

        if not scripts_dir.exists():
            raise ScriptsDirError(
                f"The '{name}' directory does not exist. "
                "Please run the 'generate' command first.",
                path=scripts_dir,
            )
        if not scripts_dir.is_dir():
            raise ScriptsDirError(f"'{name}' is not a directory", path=scripts_dir)

        summary = RunSummary()
        for script in discover_scripts(scripts_dir):
            self.console.print(f"Testing script: {escape(script.name)}")
            result = run_script(script, timeout=self.config.script_timeout)
            summary.record(result)

            if result.success:
                self.console.print(f"Success: Output saved to {escape(result.artifact.name)}")
            else:
                self.err_console.print(f"Failure: Output saved to {escape(result.artifact.name)}")

        logger.info(
            "Tested %d scripts in %s: %d passed, %d failed",
            summary.total,
            scripts_dir,
            summary.success_count,
            summary.failure_count,
        )
        summary.render(self.console)
        return summary
