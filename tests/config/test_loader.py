"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error handling
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any
from unittest.mock import patch

import pytest

from covgap.config.loader import (
    GLOBAL_CONFIG_PATH,
    PROJECT_CONFIG_NAME,
    _deep_merge,
    _load_yaml,
    load_config,
)
from covgap.config.models import LoggingConfig
from covgap.core.errors import ConfigError, ErrorCode


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        """Returns empty dict when file doesn't exist."""
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        """Loads valid YAML content."""
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("logging:\n  level: DEBUG\n")
        assert _load_yaml(yaml_file) == {"logging": {"level": "DEBUG"}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        """Returns empty dict for empty file."""
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")
        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid YAML syntax."""
        yaml_file = tmp_path / "invalid.yaml"
        yaml_file.write_text("logging:\n  level:\n    - invalid: [unclosed")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        """A top-level list is not a config."""
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        """Override values replace base values."""
        assert _deep_merge({"a": 1, "b": 2}, {"b": 3}) == {"a": 1, "b": 3}

    def test_nested_merge(self) -> None:
        """Nested dicts are merged recursively."""
        base = {"logging": {"level": "INFO", "outputs": []}}
        override = {"logging": {"level": "DEBUG"}}
        assert _deep_merge(base, override) == {"logging": {"level": "DEBUG", "outputs": []}}

    def test_lists_are_replaced(self) -> None:
        """Lists are values, not merged element-wise."""
        base: dict[str, Any] = {"run": {"command": ["cargo", "llvm-cov"]}}
        override: dict[str, Any] = {"run": {"command": ["grcov"]}}
        assert _deep_merge(base, override) == {"run": {"command": ["grcov"]}}

    def test_does_not_mutate_base(self) -> None:
        """Base dict is not mutated."""
        base = {"a": 1}
        _deep_merge(base, {"b": 2})
        assert base == {"a": 1}


class TestLoadConfig:
    """Tests for load_config function."""

    def test_returns_default_config_when_no_files(self, tmp_path: Path) -> None:
        """Returns default config when no config files exist."""
        with patch("covgap.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path)
        assert config.logging.level == "WARNING"
        assert config.run.command == ["cargo", "llvm-cov"]
        assert config.output.relative_paths is False

    def test_loads_project_config(self, tmp_path: Path) -> None:
        """Loads .covgap.yaml from the project root."""
        (tmp_path / PROJECT_CONFIG_NAME).write_text(
            "output:\n  relative_paths: true\nrun:\n  command: [cargo, +nightly, llvm-cov]\n"
        )

        with patch("covgap.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
            config = load_config(tmp_path)
        assert config.output.relative_paths is True
        assert config.run.command == ["cargo", "+nightly", "llvm-cov"]

    def test_project_overrides_global(self, tmp_path: Path) -> None:
        """Project YAML wins over global YAML, section by section."""
        global_file = tmp_path / "global.yaml"
        global_file.write_text("logging:\n  level: INFO\noutput:\n  relative_paths: true\n")
        project = tmp_path / "project"
        project.mkdir()
        (project / PROJECT_CONFIG_NAME).write_text("logging:\n  level: ERROR\n")

        with patch("covgap.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(project)
        assert config.logging.level == "ERROR"
        assert config.output.relative_paths is True

    def test_env_vars_override_yaml(self, tmp_path: Path) -> None:
        """Environment variables override YAML config."""
        (tmp_path / PROJECT_CONFIG_NAME).write_text("logging:\n  level: INFO\n")

        with (
            patch("covgap.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            patch.dict(os.environ, {"COVGAP__LOGGING__LEVEL": "DEBUG"}),
        ):
            config = load_config(tmp_path)
        assert config.logging.level == "DEBUG"

    def test_env_bool(self, tmp_path: Path) -> None:
        """Boolean settings parse from env strings."""
        with (
            patch("covgap.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            patch.dict(os.environ, {"COVGAP__OUTPUT__RELATIVE_PATHS": "true"}),
        ):
            config = load_config(tmp_path)
        assert config.output.relative_paths is True

    def test_kwargs_override_all(self, tmp_path: Path) -> None:
        """Keyword arguments override everything."""
        with (
            patch("covgap.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            patch.dict(os.environ, {"COVGAP__LOGGING__LEVEL": "DEBUG"}),
        ):
            config = load_config(tmp_path, logging=LoggingConfig(level="ERROR"))
        assert config.logging.level == "ERROR"

    def test_raises_config_error_for_invalid_value(self, tmp_path: Path) -> None:
        """Raises ConfigError for invalid config values."""
        (tmp_path / PROJECT_CONFIG_NAME).write_text("run:\n  command: []\n")

        with (
            patch("covgap.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            pytest.raises(ConfigError) as exc_info,
        ):
            load_config(tmp_path)
        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert exc_info.value.details["field"] == "run.command"

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        """Broken project YAML surfaces as ConfigError."""
        (tmp_path / PROJECT_CONFIG_NAME).write_text("output: [unclosed\n")

        with (
            patch("covgap.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"),
            pytest.raises(ConfigError),
        ):
            load_config(tmp_path)


class TestGlobalConfigPath:
    """Tests for GLOBAL_CONFIG_PATH constant."""

    def test_is_in_user_config(self) -> None:
        """Path is an absolute location under the user's covgap config dir."""
        assert isinstance(GLOBAL_CONFIG_PATH, Path)
        assert GLOBAL_CONFIG_PATH.parts[-2:] == ("covgap", "config.yaml")
