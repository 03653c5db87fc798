"""Batch execution of generated scripts."""

from scriptisto_harness.runner.executor import (
    FAIL_SUFFIX,
    OUTPUT_SUFFIX,
    ScriptRunner,
    discover_scripts,
    run_script,
)
from scriptisto_harness.runner.summary import RunSummary, ScriptResult

__all__ = [
    "FAIL_SUFFIX",
    "OUTPUT_SUFFIX",
    "RunSummary",
    "ScriptResult",
    "ScriptRunner",
    "discover_scripts",
    "run_script",
]
