# SPDX-License-Identifier: MIT
"""CLI configuration loading from pyproject.toml.

Settings live in the ``[tool.semver]`` table::

    [tool.semver]
    allow-prerelease-across-core = true
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib

from semver_engine import EngineConfig


class ConfigError(Exception):
    """Raised when configuration loading fails."""

    pass


@dataclass
class CLIConfig:
    """CLI configuration loaded from pyproject.toml.

    Attributes:
        project_dir: Directory containing pyproject.toml, if one was found
        allow_prerelease_across_core: Default for pre-release matching
    """

    project_dir: Optional[Path] = None
    allow_prerelease_across_core: bool = False

    @classmethod
    def from_pyproject(cls, project_dir: str | Path) -> "CLIConfig":
        """Load configuration from pyproject.toml.

        Args:
            project_dir: Directory containing pyproject.toml

        Returns:
            CLIConfig instance

        Raises:
            ConfigError: If the file is invalid or holds invalid settings
            FileNotFoundError: If pyproject.toml doesn't exist
        """
        project_path = Path(project_dir)
        pyproject_path = project_path / "pyproject.toml"

        if not pyproject_path.exists():
            raise FileNotFoundError(f"pyproject.toml not found in {project_path}")

        try:
            with open(pyproject_path, "rb") as f:
                pyproject = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigError(f"Invalid TOML syntax in {pyproject_path}: {e}") from e

        return cls.from_pyproject_dict(pyproject, project_path)

    @classmethod
    def from_pyproject_dict(
        cls,
        pyproject: dict[str, Any],
        project_dir: Optional[Path] = None,
    ) -> "CLIConfig":
        """Create CLIConfig from a parsed pyproject.toml dictionary.

        Raises:
            ConfigError: If a setting has the wrong type
        """
        tool_semver = pyproject.get("tool", {}).get("semver", {})
        if not isinstance(tool_semver, dict):
            raise ConfigError("[tool.semver] must be a table")

        allow = tool_semver.get(
            "allow-prerelease-across-core",
            tool_semver.get("allow_prerelease_across_core", False),
        )
        if not isinstance(allow, bool):
            raise ConfigError(
                f"tool.semver.allow-prerelease-across-core must be a boolean, got {allow!r}"
            )

        return cls(project_dir=project_dir, allow_prerelease_across_core=allow)

    def engine_config(self, allow_prerelease: bool = False) -> EngineConfig:
        """Return engine settings, with the command-line flag taking precedence."""
        return EngineConfig(
            allow_prerelease_across_core=allow_prerelease or self.allow_prerelease_across_core
        )


def find_project_root(start_dir: Optional[str | Path] = None) -> Path:
    """Find the nearest directory holding a pyproject.toml.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to the project root directory

    Raises:
        ConfigError: If no project root is found
    """
    current = Path(start_dir) if start_dir else Path.cwd()
    current = current.resolve()

    while True:
        if (current / "pyproject.toml").exists():
            return current
        if current == current.parent:
            break
        current = current.parent

    raise ConfigError("Could not find project root (no pyproject.toml found)")


def load_config(project_dir: Optional[str | Path] = None) -> CLIConfig:
    """Load CLI configuration, falling back to defaults without a pyproject.

    Args:
        project_dir: Directory to start looking from (defaults to cwd)

    Returns:
        CLIConfig instance

    Raises:
        ConfigError: If a pyproject.toml is found but cannot be used
    """
    try:
        project_path = find_project_root(project_dir)
    except ConfigError:
        return CLIConfig()

    return CLIConfig.from_pyproject(project_path)
