# SPDX-License-Identifier: MIT
"""Evaluation settings for the constraint engine."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class EngineConfig:
    """Configuration for constraint evaluation.

    Attributes:
        allow_prerelease_across_core: Let a pre-release version satisfy a
            constraint group even when no clause of that group names a
            pre-release on the same major.minor.patch
    """

    allow_prerelease_across_core: bool = False


DEFAULT_CONFIG = EngineConfig()
