"""Tests for configuration loading."""

from pathlib import Path

import pytest

from scriptisto_harness.core.config import (
    CONFIG_FILENAME,
    MAX_CONFIG_SIZE,
    HarnessConfig,
    load_config,
)
from scriptisto_harness.core.exceptions import ConfigError


class TestHarnessConfigDefaults:
    """Tests for built-in defaults."""

    def test_defaults(self) -> None:
        """Defaults match the plain scriptisto setup."""
        config = HarnessConfig()
        assert config.scripts_dir == "scripts"
        assert config.tool_command == ["scriptisto", "new"]
        assert config.script_timeout is None

    def test_frozen(self) -> None:
        """Config cannot be mutated after creation."""
        config = HarnessConfig()
        with pytest.raises(Exception):
            config.scripts_dir = "other"  # type: ignore[misc]

    def test_scripts_path_relative(self, tmp_path: Path) -> None:
        """Relative scripts_dir resolves against the base directory."""
        assert HarnessConfig().scripts_path(tmp_path) == tmp_path / "scripts"

    def test_scripts_path_defaults_to_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Without a base the working directory is used."""
        monkeypatch.chdir(tmp_path)
        assert HarnessConfig().scripts_path() == Path.cwd() / "scripts"

    def test_scripts_path_absolute(self, tmp_path: Path) -> None:
        """Absolute scripts_dir ignores the base directory."""
        target = tmp_path / "elsewhere"
        config = HarnessConfig(scripts_dir=str(target))
        assert config.scripts_path(Path("/unused")) == target


class TestHarnessConfigValidation:
    """Tests for field validation."""

    def test_empty_tool_command_rejected(self) -> None:
        """At least one command part is required."""
        with pytest.raises(ValueError):
            HarnessConfig(tool_command=[])

    def test_blank_tool_command_part_rejected(self) -> None:
        """Blank command parts are rejected."""
        with pytest.raises(ValueError, match="non-empty"):
            HarnessConfig(tool_command=["scriptisto", " "])

    def test_non_positive_timeout_rejected(self) -> None:
        """Timeout must be positive."""
        with pytest.raises(ValueError):
            HarnessConfig(script_timeout=0)

    def test_unknown_field_rejected(self) -> None:
        """Typos in config keys are reported."""
        with pytest.raises(ValueError):
            HarnessConfig.model_validate({"script_dir": "x"})


class TestLoadConfig:
    """Tests for load_config()."""

    def test_missing_file_uses_defaults(self, tmp_path: Path) -> None:
        """No config file means defaults."""
        assert load_config(tmp_path) == HarnessConfig()

    def test_empty_file_uses_defaults(self, tmp_path: Path) -> None:
        """An empty file means defaults."""
        (tmp_path / CONFIG_FILENAME).write_text("")
        assert load_config(tmp_path) == HarnessConfig()

    def test_loads_overrides(self, tmp_path: Path) -> None:
        """Values in the file override defaults."""
        (tmp_path / CONFIG_FILENAME).write_text(
            """
scripts_dir: examples
tool_command: [/opt/bin/scriptisto, new]
script_timeout: 30
"""
        )
        config = load_config(tmp_path)
        assert config.scripts_dir == "examples"
        assert config.tool_command == ["/opt/bin/scriptisto", "new"]
        assert config.script_timeout == 30.0

    def test_defaults_to_cwd(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Without a path the working directory is searched."""
        (tmp_path / CONFIG_FILENAME).write_text("scripts_dir: from-cwd\n")
        monkeypatch.chdir(tmp_path)
        assert load_config().scripts_dir == "from-cwd"

    def test_malformed_yaml(self, tmp_path: Path) -> None:
        """Invalid YAML raises ConfigError."""
        (tmp_path / CONFIG_FILENAME).write_text("scripts_dir: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_config(tmp_path)

    def test_non_mapping(self, tmp_path: Path) -> None:
        """A YAML list is not a valid config."""
        (tmp_path / CONFIG_FILENAME).write_text("- scripts\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_config(tmp_path)

    def test_schema_violation(self, tmp_path: Path) -> None:
        """Validation errors are wrapped in ConfigError."""
        (tmp_path / CONFIG_FILENAME).write_text("script_timeout: -1\n")
        with pytest.raises(ConfigError, match="Invalid configuration"):
            load_config(tmp_path)

    def test_oversized_file(self, tmp_path: Path) -> None:
        """Files above the size limit are rejected."""
        (tmp_path / CONFIG_FILENAME).write_text("#" * (MAX_CONFIG_SIZE + 1))
        with pytest.raises(ConfigError, match="limit"):
            load_config(tmp_path)
