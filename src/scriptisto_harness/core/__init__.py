"""Core configuration and exceptions for scriptisto-harness."""

from scriptisto_harness.core.config import (
    CONFIG_FILENAME,
    MAX_CONFIG_SIZE,
    HarnessConfig,
    load_config,
)
from scriptisto_harness.core.exceptions import (
    ArtifactWriteError,
    ConfigError,
    HarnessError,
    ScaffoldToolError,
    ScriptsDirError,
    TemplateTableError,
)

__all__ = [
    # Config
    "CONFIG_FILENAME",
    "MAX_CONFIG_SIZE",
    "HarnessConfig",
    "load_config",
    # Exceptions
    "ArtifactWriteError",
    "ConfigError",
    "HarnessError",
    "ScaffoldToolError",
    "ScriptsDirError",
    "TemplateTableError",
]
