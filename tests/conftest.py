# SPDX-License-Identifier: MIT
"""Pytest configuration and fixtures for CLI tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def prerelease_project(tmp_path: Path) -> Path:
    """Create a project whose pyproject.toml allows pre-releases across cores."""
    project_dir = tmp_path / "project"
    project_dir.mkdir()
    (project_dir / "pyproject.toml").write_text(
        """[project]
name = "demo"
version = "0.1.0"

[tool.semver]
allow-prerelease-across-core = true
"""
    )
    return project_dir
