"""Exception hierarchy for scriptisto-harness.

All library errors derive from HarnessError so command handlers can map
them to a single diagnostic and an exit code.
"""

from __future__ import annotations

from pathlib import Path


class HarnessError(Exception):
    """Base exception for scriptisto-harness."""

    pass


class ConfigError(HarnessError):
    """Configuration file missing required structure or failing validation."""

    pass


class ScriptsDirError(HarnessError):
    """Scripts directory cannot be created, read, or is not a directory.

    Attributes:
        path: The offending scripts directory.

    """

    def __init__(self, message: str, path: Path) -> None:
        """Initialize ScriptsDirError.

        Args:
            message: Human-readable error message.
            path: The offending scripts directory.

        """
        super().__init__(message)
        self.path = path


class ScaffoldToolError(HarnessError):
    """External scaffolding tool could not produce the template listing.

    Attributes:
        command: Command line that was attempted.
        stderr: Captured standard error, if the process started.

    """

    def __init__(self, message: str, command: list[str], stderr: str = "") -> None:
        """Initialize ScaffoldToolError.

        Args:
            message: Human-readable error message.
            command: Command line that was attempted.
            stderr: Captured standard error, if any.

        """
        super().__init__(message)
        self.command = command
        self.stderr = stderr


class TemplateTableError(HarnessError):
    """Template listing contained no usable rows."""

    pass


class ArtifactWriteError(HarnessError):
    """A script file or result artifact could not be written."""

    def __init__(self, message: str, path: Path) -> None:
        super().__init__(message)
        self.path = path
