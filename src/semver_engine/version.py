# SPDX-License-Identifier: MIT
"""Semantic version parsing and component mutation.

Supports MAJOR.MINOR.PATCH format with optional pre-release and build metadata:
- Pre-release: -alpha, -alpha.1, -beta, -beta.2, -rc, -rc.1, -0.3.7
- Build metadata: +build, +build.123, +20240101, +exp.sha.5114f85

A leading ``v`` or ``V`` is accepted and dropped. Core components are bounded
to unsigned 64-bit values; anything larger is rejected rather than wrapped.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field, replace
from functools import total_ordering
from typing import Optional

from .errors import (
    InvalidIdentifierError,
    InvalidVersionError,
    UnknownComponentError,
)

MAX_COMPONENT = 2**64 - 1

# Semantic versioning regex pattern (SemVer 2.0.0 compliant)
# https://semver.org/#is-there-a-suggested-regular-expression-regex-to-check-a-semver-string
SEMVER_PATTERN = re.compile(
    r"^(?P<major>0|[1-9]\d*)"
    r"\.(?P<minor>0|[1-9]\d*)"
    r"\.(?P<patch>0|[1-9]\d*)"
    r"(?:-(?P<prerelease>(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+(?P<buildmetadata>[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?$",
    re.ASCII,
)

PRERELEASE_PATTERN = re.compile(
    r"(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*",
    re.ASCII,
)

BUILD_PATTERN = re.compile(r"[0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*", re.ASCII)

NUMERIC_IDENTIFIER = re.compile(r"[0-9]+", re.ASCII)

CORE_COMPONENTS = ("major", "minor", "patch")
COMPONENTS = CORE_COMPONENTS + ("prerelease", "metadata")


def _split_identifiers(text: Optional[str]) -> tuple[str, ...]:
    return tuple(text.split(".")) if text else ()


def identifier_key(identifier: str) -> tuple:
    """Return the precedence key of a single pre-release identifier.

    Numeric identifiers sort numerically and always before alphanumeric ones,
    which sort in ASCII order.
    """
    if NUMERIC_IDENTIFIER.fullmatch(identifier):
        return (0, int(identifier))
    return (1, identifier)


@total_ordering
@dataclass(frozen=True, slots=True)
class Version:
    """Represents a parsed semantic version.

    Equality, hashing and ordering ignore build metadata.

    Attributes:
        major: Major version number (breaking changes)
        minor: Minor version number (new features, backward compatible)
        patch: Patch version number (bug fixes, backward compatible)
        prerelease: Pre-release identifiers, e.g. ("alpha", "1"); empty for a release
        build: Build metadata identifiers, e.g. ("build", "123")
    """

    major: int
    minor: int
    patch: int
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = field(default=(), compare=False)

    @classmethod
    def parse(cls, version_string: str) -> "Version":
        """Parse a version string. See :func:`parse_version`."""
        return parse_version(version_string)

    def __str__(self) -> str:
        """Return the canonical string representation of the version."""
        version = self.base_version
        if self.prerelease:
            version += f"-{self.prerelease_text}"
        if self.build:
            version += f"+{self.build_text}"
        return version

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Version):
            return NotImplemented
        return self.precedence_key < other.precedence_key

    @property
    def is_prerelease(self) -> bool:
        """Return True if this is a pre-release version."""
        return bool(self.prerelease)

    @property
    def base_version(self) -> str:
        """Return the base version without pre-release or build metadata."""
        return f"{self.major}.{self.minor}.{self.patch}"

    @property
    def core(self) -> tuple[int, int, int]:
        return (self.major, self.minor, self.patch)

    @property
    def prerelease_text(self) -> str:
        return ".".join(self.prerelease)

    @property
    def build_text(self) -> str:
        return ".".join(self.build)

    @property
    def precedence_key(self) -> tuple:
        """Return a tuple ordering versions by SemVer 2.0.0 precedence.

        A release sorts after every pre-release of the same core, and a
        shorter identifier list sorts before a longer one sharing its prefix.
        """
        if not self.prerelease:
            prerelease_key: tuple = (1,)
        else:
            prerelease_key = (0, tuple(identifier_key(p) for p in self.prerelease))
        return (self.major, self.minor, self.patch, prerelease_key)

    # Component mutation. Every operation returns a new Version.

    def inc_major(self) -> "Version":
        return Version(_bump(self.major, "major", self), 0, 0)

    def inc_minor(self) -> "Version":
        return Version(self.major, _bump(self.minor, "minor", self), 0)

    def inc_patch(self) -> "Version":
        return Version(self.major, self.minor, _bump(self.patch, "patch", self))

    def increment(self, component: str) -> "Version":
        """Increment the named core component.

        Lower components are zeroed, and pre-release and build metadata are
        always cleared, so the result is a release version.

        Raises:
            UnknownComponentError: If component is not major, minor or patch
        """
        if component == "major":
            return self.inc_major()
        if component == "minor":
            return self.inc_minor()
        if component == "patch":
            return self.inc_patch()
        raise UnknownComponentError(component)

    def get_component(self, component: str) -> str:
        """Return a component as text.

        Core components are rendered in decimal; ``prerelease`` and
        ``metadata`` return their dot-joined identifiers, or "" when absent.
        """
        if component in CORE_COMPONENTS:
            return str(getattr(self, component))
        if component == "prerelease":
            return self.prerelease_text
        if component == "metadata":
            return self.build_text
        raise UnknownComponentError(component)

    def set_prerelease(self, prerelease: str) -> "Version":
        """Return a copy with the pre-release replaced.

        An empty string clears the pre-release.

        Raises:
            InvalidIdentifierError: If the value is not a valid pre-release
        """
        if prerelease and not PRERELEASE_PATTERN.fullmatch(prerelease):
            raise InvalidIdentifierError(
                prerelease, f"Invalid prerelease identifier: {prerelease!r}"
            )
        return replace(self, prerelease=_split_identifiers(prerelease))

    def set_metadata(self, metadata: str) -> "Version":
        """Return a copy with the build metadata replaced.

        An empty string clears the metadata.

        Raises:
            InvalidIdentifierError: If the value is not valid build metadata
        """
        if metadata and not BUILD_PATTERN.fullmatch(metadata):
            raise InvalidIdentifierError(metadata, f"Invalid metadata identifier: {metadata!r}")
        return replace(self, build=_split_identifiers(metadata))

    def set_component(self, component: str, value: str) -> "Version":
        if component == "prerelease":
            return self.set_prerelease(value)
        if component == "metadata":
            return self.set_metadata(value)
        raise UnknownComponentError(component)


def _bump(value: int, name: str, version: Version) -> int:
    if value >= MAX_COMPONENT:
        raise InvalidVersionError(
            str(version), f"Cannot increment {name} of {version}: component would overflow"
        )
    return value + 1


def _parse_component(text: str, name: str, version_string: str) -> int:
    value = int(text)
    if value > MAX_COMPONENT:
        raise InvalidVersionError(
            version_string,
            f"Invalid semantic version: {version_string} ({name} exceeds {MAX_COMPONENT})",
        )
    return value


def parse_version(version_string: str) -> Version:
    """Parse a semantic version string into a Version object.

    Args:
        version_string: A string following semantic versioning format
            ([v]MAJOR.MINOR.PATCH[-prerelease][+build])

    Returns:
        A Version object with parsed components

    Raises:
        InvalidVersionError: If the string does not follow semantic versioning

    Examples:
        >>> parse_version("1.2.3")
        Version(major=1, minor=2, patch=3, prerelease=(), build=())

        >>> parse_version("v1.0.0-alpha.1")
        Version(major=1, minor=0, patch=0, prerelease=('alpha', '1'), build=())

        >>> str(parse_version("2.0.0-rc.1+build.456"))
        '2.0.0-rc.1+build.456'
    """
    if not isinstance(version_string, str):
        raise InvalidVersionError(
            str(version_string), f"Version must be a string, got {type(version_string).__name__}"
        )

    original = version_string
    version_string = version_string.strip()
    if not version_string:
        raise InvalidVersionError(original, "Version string cannot be empty")

    if version_string[0] in "vV":
        version_string = version_string[1:]

    match = SEMVER_PATTERN.fullmatch(version_string)
    if not match:
        raise InvalidVersionError(original)

    return Version(
        major=_parse_component(match.group("major"), "major", original),
        minor=_parse_component(match.group("minor"), "minor", original),
        patch=_parse_component(match.group("patch"), "patch", original),
        prerelease=_split_identifiers(match.group("prerelease")),
        build=_split_identifiers(match.group("buildmetadata")),
    )


def is_valid_semver(version_string: str) -> bool:
    """Check if a string is a valid semantic version.

    Examples:
        >>> is_valid_semver("1.0.0")
        True
        >>> is_valid_semver("1.0")
        False
        >>> is_valid_semver("v1.0.0-alpha")
        True
    """
    try:
        parse_version(version_string)
    except InvalidVersionError:
        return False
    return True
