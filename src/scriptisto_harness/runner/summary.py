"""Aggregate counters and summary rendering for test-all runs."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console

RATE_UNAVAILABLE = "N/A"


@dataclass(frozen=True)
class ScriptResult:
    """Outcome of executing one script.

    Attributes:
        script: Path of the executed script.
        success: True when the script exited with status zero.
        returncode: Exit status, or None if the script never ran to completion.
        artifact: Result artifact written for this script.
        timed_out: True when the configured timeout killed the script.

    """

    script: Path
    success: bool
    returncode: int | None
    artifact: Path
    timed_out: bool = False


@dataclass
class RunSummary:
    """Success/failure counters accumulated over a test-all run."""

    success_count: int = 0
    failure_count: int = 0
    results: list[ScriptResult] = field(default_factory=list)

    @property
    def total(self) -> int:
        """Number of scripts tested."""
        return self.success_count + self.failure_count

    @property
    def success_rate(self) -> float | None:
        """Percentage of successful scripts, None when nothing was tested."""
        if self.total == 0:
            return None
        return self.success_count / self.total * 100.0

    @property
    def all_passed(self) -> bool:
        """True when no script failed."""
        return self.failure_count == 0

    def record(self, result: ScriptResult) -> None:
        """Count one script result."""
        if result.success:
            self.success_count += 1
        else:
            self.failure_count += 1
        self.results.append(result)

    def format_rate(self) -> str:
        """Format the success rate with two decimals, e.g. "75.00%"."""
        rate = self.success_rate
        if rate is None:
            return RATE_UNAVAILABLE
        return f"{rate:.2f}%"

    def render(self, console: Console) -> None:
        """Print the summary block."""
        console.print()
        console.print("Test Results:")
        console.print(f"Total scripts tested: {self.total}")
        console.print(f"Successful scripts: {self.success_count}")
        console.print(f"Failed scripts: {self.failure_count}")
        console.print(f"Success rate: {self.format_rate()}")
