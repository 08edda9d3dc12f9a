# SPDX-License-Identifier: MIT
"""Tests for CLI configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from semver_cli.config import CLIConfig, ConfigError, find_project_root, load_config
from semver_engine import DEFAULT_CONFIG, EngineConfig


class TestCLIConfig:
    """Tests for reading [tool.semver] settings."""

    def test_defaults(self):
        config = CLIConfig.from_pyproject_dict({"project": {"name": "demo"}})
        assert config.allow_prerelease_across_core is False
        assert config.engine_config() == DEFAULT_CONFIG

    def test_hyphenated_key(self):
        config = CLIConfig.from_pyproject_dict(
            {"tool": {"semver": {"allow-prerelease-across-core": True}}}
        )
        assert config.allow_prerelease_across_core is True

    def test_underscored_key(self):
        config = CLIConfig.from_pyproject_dict(
            {"tool": {"semver": {"allow_prerelease_across_core": True}}}
        )
        assert config.allow_prerelease_across_core is True

    def test_non_boolean_rejected(self):
        with pytest.raises(ConfigError, match="must be a boolean"):
            CLIConfig.from_pyproject_dict(
                {"tool": {"semver": {"allow-prerelease-across-core": 1}}}
            )

    def test_non_table_rejected(self):
        with pytest.raises(ConfigError, match="must be a table"):
            CLIConfig.from_pyproject_dict({"tool": {"semver": "yes"}})

    def test_flag_overrides_file(self):
        config = CLIConfig(allow_prerelease_across_core=False)
        assert config.engine_config(allow_prerelease=True) == EngineConfig(
            allow_prerelease_across_core=True
        )

    def test_from_pyproject(self, prerelease_project: Path):
        config = CLIConfig.from_pyproject(prerelease_project)
        assert config.project_dir == prerelease_project
        assert config.allow_prerelease_across_core is True

    def test_from_pyproject_missing(self, tmp_path: Path):
        with pytest.raises(FileNotFoundError):
            CLIConfig.from_pyproject(tmp_path)

    def test_invalid_toml(self, tmp_path: Path):
        (tmp_path / "pyproject.toml").write_text("[tool.semver\n")
        with pytest.raises(ConfigError, match="Invalid TOML syntax"):
            CLIConfig.from_pyproject(tmp_path)


class TestFindProjectRoot:
    """Tests for locating pyproject.toml."""

    def test_finds_parent(self, prerelease_project: Path):
        nested = prerelease_project / "src" / "pkg"
        nested.mkdir(parents=True)
        assert find_project_root(nested) == prerelease_project.resolve()

    def test_load_config_from_nested_dir(self, prerelease_project: Path):
        nested = prerelease_project / "docs"
        nested.mkdir()
        assert load_config(nested).allow_prerelease_across_core is True
