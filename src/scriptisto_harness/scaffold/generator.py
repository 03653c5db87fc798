"""Bulk script generation from every scriptisto template.

Creates the scripts directory, asks the scaffolding tool for its template
listing, then writes one executable sample script per template.

Usage:
    from scriptisto_harness.scaffold.generator import ScriptGenerator

    report = ScriptGenerator(config).run()
    if report.failed:
        ...
"""

from __future__ import annotations

import logging
import stat
import subprocess
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from scriptisto_harness.core.config import HarnessConfig
from scriptisto_harness.core.exceptions import (
    ArtifactWriteError,
    ScaffoldToolError,
    ScriptsDirError,
    TemplateTableError,
)
from scriptisto_harness.scaffold.templates import TemplateDescriptor, parse_template_table

logger = logging.getLogger(__name__)

_EXECUTE_BITS = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


@dataclass
class GenerationReport:
    """Outcome of a generate run.

    Attributes:
        scripts_dir: Directory the scripts were written to.
        skipped: True when the directory already existed and nothing ran.
        generated: Paths of scripts written and marked executable.
        failed: Names of templates that could not be generated.

    """

    scripts_dir: Path
    skipped: bool = False
    generated: list[Path] = field(default_factory=list)
    failed: list[str] = field(default_factory=list)

    @property
    def success(self) -> bool:
        """True when no template failed."""
        return not self.failed


def list_templates(tool_command: list[str]) -> list[TemplateDescriptor]:
    """Run the scaffolding tool bare and parse its template table.

    Args:
        tool_command: Base command, e.g. ["scriptisto", "new"].

    Returns:
        Parsed template descriptors (never empty).

    Raises:
        ScaffoldToolError: If the tool cannot be launched.
        TemplateTableError: If the listing contains no usable templates.

    """
    logger.debug("Listing templates: %s", tool_command)
    try:
        result = subprocess.run(tool_command, capture_output=True)
    except OSError as e:
        raise ScaffoldToolError(
            f"Failed to execute '{' '.join(tool_command)}': {e}", command=tool_command
        ) from e

    stderr = result.stderr.decode("utf-8", errors="replace")
    if result.returncode != 0:
        # Listing is still parsed; some tool versions exit nonzero after printing usage
        logger.warning(
            "'%s' exited with code %d: %s",
            " ".join(tool_command),
            result.returncode,
            stderr.strip(),
        )

    templates = parse_template_table(result.stdout.decode("utf-8", errors="replace"))
    if not templates:
        raise TemplateTableError(
            f"No templates found in the output of '{' '.join(tool_command)}'"
        )
    return templates


def render_template(tool_command: list[str], template: TemplateDescriptor) -> bytes | None:
    """Ask the tool for a template's script source.

    Returns:
        Script bytes, or None if the tool could not be launched or exited
        nonzero.

    """
    command = [*tool_command, template.name]
    try:
        result = subprocess.run(command, capture_output=True)
    except OSError as e:
        logger.debug("Failed to execute '%s': %s", " ".join(command), e)
        return None

    if result.returncode != 0:
        logger.debug(
            "'%s' exited with code %d: %s",
            " ".join(command),
            result.returncode,
            result.stderr.decode("utf-8", errors="replace").strip(),
        )
        return None
    return result.stdout


def make_executable(path: Path) -> None:
    """Add execute permission for owner, group and others (chmod +x)."""
    mode = path.stat().st_mode
    path.chmod(mode | _EXECUTE_BITS)


class ScriptGenerator:
    """Generates one sample script per scaffolding template.

    Progress goes to console, per-template failures to err_console.

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
        """Initialize ScriptGenerator.

        Args:
            config: Harness configuration.
            console: Optional console for progress. Creates new if None.
            err_console: Optional console for diagnostics. Creates a stderr
                console if None.

        """
        self.config = config
        self.console = console or Console(soft_wrap=True)
        self.err_console = err_console or Console(stderr=True, soft_wrap=True)

    def run(self, base: Path | None = None) -> GenerationReport:
        """Generate scripts unless the scripts directory already exists.

        Args:
            base: Directory the scripts directory is resolved against.
                Defaults to the current working directory.

        Returns:
            GenerationReport describing what was written.

        Raises:
            ScriptsDirError: If the scripts directory cannot be created.
            ScaffoldToolError: If the template listing cannot be obtained.
            TemplateTableError: If the listing holds no templates.
            ArtifactWriteError: If a script file cannot be written.

        """
        scripts_dir = self.config.scripts_path(base)
        report = GenerationReport(scripts_dir=scripts_dir)

        if scripts_dir.exists():
            self.console.print(
                f"The '{escape(self.config.scripts_dir)}' directory already exists. "
                "Skipping generation."
            )
            report.skipped = True
            return report

        try:
            scripts_dir.mkdir()
        except OSError as e:
            raise ScriptsDirError(
                f"Failed to create '{self.config.scripts_dir}' directory: {e}", path=scripts_dir
            ) from e
        logger.info("Created scripts directory %s", scripts_dir)

        templates = list_templates(self.config.tool_command)

        for template in templates:
            path = self._generate_one(scripts_dir, template)
            if path is None:
                report.failed.append(template.name)
            else:
                report.generated.append(path)

        logger.info(
            "Generated %d of %d templates into %s",
            len(report.generated),
            len(templates),
            scripts_dir,
        )
        return report

    def _generate_one(self, scripts_dir: Path, template: TemplateDescriptor) -> Path | None:
        """Generate, write and chmod one template's script.

        Returns:
            Path of the generated script, or None if the template failed.

        """
        self.console.print(f"Generating script for template: {escape(template.name)}")

        content = render_template(self.config.tool_command, template)
        if content is None:
            self.err_console.print(
                f"Failed to generate script for template: {escape(template.name)}"
            )
            return None

        path = scripts_dir / template.filename
        display = Path(self.config.scripts_dir) / template.filename
        try:
            path.write_bytes(content)
        except OSError as e:
            raise ArtifactWriteError(
                f"Failed to write script for template {template.name}: {e}", path=path
            ) from e

        try:
            make_executable(path)
        except OSError as e:
            logger.debug("chmod failed for %s: %s", path, e)
            self.err_console.print(
                f"Failed to make the script executable: {escape(str(display))}"
            )
            return None

        self.console.print(f"Generated: {escape(str(display))}")
        return path
