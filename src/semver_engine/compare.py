# SPDX-License-Identifier: MIT
"""Version comparison following SemVer 2.0.0 precedence rules.

Numeric pre-release identifiers compare numerically and sort before
alphanumeric ones. Build metadata is ignored in comparisons, as SemVer 2.0.0 requires.
"""

from __future__ import annotations

from typing import Iterable, Union

from .errors import EmptyVersionSetError
from .version import Version, identifier_key, parse_version

VersionLike = Union[str, Version]


def _coerce(version: VersionLike) -> Version:
    return parse_version(version) if isinstance(version, str) else version


def _compare_prerelease(pre1: tuple[str, ...], pre2: tuple[str, ...]) -> int:
    """Compare two pre-release identifier lists.

    Returns:
        -1 if pre1 < pre2
        0 if pre1 == pre2
        1 if pre1 > pre2

    Per SemVer: a version without pre-release has higher precedence
    than one with pre-release (1.0.0 > 1.0.0-alpha).
    """
    if not pre1 and not pre2:
        return 0
    if not pre1:
        return 1  # Release > pre-release
    if not pre2:
        return -1  # Pre-release < release

    for p1, p2 in zip(pre1, pre2):
        key1 = identifier_key(p1)
        key2 = identifier_key(p2)
        if key1 != key2:
            return -1 if key1 < key2 else 1

    # All compared parts equal - longer pre-release has higher precedence
    if len(pre1) != len(pre2):
        return -1 if len(pre1) < len(pre2) else 1

    return 0


def compare_versions(version1: VersionLike, version2: VersionLike) -> int:
    """Compare two semantic versions.

    Args:
        version1: First version (string or Version object)
        version2: Second version (string or Version object)

    Returns:
        -1 if version1 < version2
        0 if version1 == version2
        1 if version1 > version2

    Raises:
        InvalidVersionError: If either version string is invalid

    Examples:
        >>> compare_versions("1.0.0", "2.0.0")
        -1
        >>> compare_versions("1.0.0+build.1", "1.0.0")
        0
        >>> compare_versions("1.0.0-alpha.beta", "1.0.0-alpha.1")
        1
    """
    v1 = _coerce(version1)
    v2 = _coerce(version2)

    for attr in ("major", "minor", "patch"):
        val1 = getattr(v1, attr)
        val2 = getattr(v2, attr)
        if val1 != val2:
            return -1 if val1 < val2 else 1

    return _compare_prerelease(v1.prerelease, v2.prerelease)


def greater_than(version1: VersionLike, version2: VersionLike) -> bool:
    return compare_versions(version1, version2) > 0


def less_than(version1: VersionLike, version2: VersionLike) -> bool:
    return compare_versions(version1, version2) < 0


def equal(version1: VersionLike, version2: VersionLike) -> bool:
    return compare_versions(version1, version2) == 0


def version_key(version: VersionLike) -> tuple:
    """Return a sort key for a version, suitable for sorting.

    Examples:
        >>> sorted(["1.0.0", "2.0.0", "1.0.0-alpha"], key=version_key)
        ['1.0.0-alpha', '1.0.0', '2.0.0']
    """
    return _coerce(version).precedence_key


def greatest(
    versions: Iterable[VersionLike],
    filter_prerelease: bool = False,
    filter_build: bool = False,
) -> Version:
    """Return the greatest of several versions.

    Args:
        versions: Versions to choose from (strings or Version objects)
        filter_prerelease: Drop versions carrying a pre-release first
        filter_build: Then drop versions carrying build metadata

    Returns:
        The version with the highest precedence. When several share it, the
        first one given wins.

    Raises:
        InvalidVersionError: If any version string is invalid
        EmptyVersionSetError: If no version is left after filtering
    """
    candidates = [_coerce(v) for v in versions]
    if filter_prerelease:
        candidates = [v for v in candidates if not v.prerelease]
    if filter_build:
        candidates = [v for v in candidates if not v.build]

    if not candidates:
        raise EmptyVersionSetError("No versions left to compare")

    best = candidates[0]
    for candidate in candidates[1:]:
        if compare_versions(candidate, best) > 0:
            best = candidate
    return best
