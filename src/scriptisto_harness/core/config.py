"""Configuration model and loader for scriptisto-harness.

The harness runs with built-in defaults. An optional
``scriptisto-harness.yaml`` in the current working directory overrides them.

Usage:
    from scriptisto_harness.core.config import load_config

    config = load_config()
    scripts_dir = config.scripts_path()
"""

import logging
from pathlib import Path
from typing import Annotated, Final

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from scriptisto_harness.core.exceptions import ConfigError

logger = logging.getLogger(__name__)

CONFIG_FILENAME: Final[str] = "scriptisto-harness.yaml"

# 1 MiB is far more than any sane config needs
MAX_CONFIG_SIZE: Final[int] = 1024 * 1024

DEFAULT_SCRIPTS_DIR: Final[str] = "scripts"
DEFAULT_TOOL_COMMAND: Final[tuple[str, ...]] = ("scriptisto", "new")


class HarnessConfig(BaseModel):
    """Settings shared by the generate and test-all commands.

    Attributes:
        scripts_dir: Directory holding generated scripts and result artifacts,
            relative to the working directory unless absolute.
        tool_command: Command that lists templates when run bare and prints a
            template's script when the template name is appended.
        script_timeout: Per-script timeout in seconds for test-all. None waits
            indefinitely.

    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    scripts_dir: str = Field(
        default=DEFAULT_SCRIPTS_DIR,
        min_length=1,
        description="Directory for generated scripts and result artifacts",
    )
    tool_command: list[str] = Field(
        default_factory=lambda: list(DEFAULT_TOOL_COMMAND),
        min_length=1,
        description="Scaffolding tool command (template name is appended)",
    )
    script_timeout: Annotated[float, Field(gt=0)] | None = Field(
        default=None,
        description="Per-script timeout in seconds (None = no timeout)",
    )

    @field_validator("tool_command", mode="after")
    @classmethod
    def validate_tool_command(cls, v: list[str]) -> list[str]:
        """Reject blank command parts."""
        if any(not part.strip() for part in v):
            raise ValueError("tool_command entries must be non-empty strings")
        return v

    def scripts_path(self, base: Path | None = None) -> Path:
        """Resolve the scripts directory against base (default: cwd)."""
        path = Path(self.scripts_dir)
        if path.is_absolute():
            return path
        return (base or Path.cwd()) / path


def load_config(project_path: Path | None = None) -> HarnessConfig:
    """Load configuration from the project directory.

    Args:
        project_path: Directory to look for the config file in. Defaults to
            the current working directory.

    Returns:
        HarnessConfig built from the file, or defaults when no file exists.

    Raises:
        ConfigError: If the file is too large, unreadable, not valid YAML,
            not a mapping, or fails validation.

    """
    config_path = (project_path or Path.cwd()) / CONFIG_FILENAME

    if not config_path.is_file():
        logger.debug("No %s found, using defaults", CONFIG_FILENAME)
        return HarnessConfig()

    try:
        size = config_path.stat().st_size
        if size > MAX_CONFIG_SIZE:
            raise ConfigError(
                f"{config_path} exceeds {MAX_CONFIG_SIZE // 1024}KB limit ({size} bytes)"
            )
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {config_path}: {e}") from e

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {config_path}: {e}") from e

    if data is None:
        logger.debug("%s is empty, using defaults", config_path)
        return HarnessConfig()
    if not isinstance(data, dict):
        raise ConfigError(f"{config_path} must contain a YAML mapping")

    try:
        config = HarnessConfig.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid configuration in {config_path}:\n{e}") from e

    logger.debug("Loaded config from %s: %s", config_path, config)
    return config
