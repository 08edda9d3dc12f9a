# SPDX-License-Identifier: MIT
"""Error types raised by the semver engine.

Every failure carries an :class:`ErrorKind` so callers can branch on the kind
of problem without matching on message text.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Kinds of failure the engine reports."""

    INVALID_FORMAT = "InvalidFormat"
    INVALID_IDENTIFIER = "InvalidIdentifier"
    INVALID_CONSTRAINT = "InvalidConstraint"
    UNKNOWN_COMPONENT = "UnknownComponent"


class SemverError(Exception):
    """Base class for all engine errors.

    Attributes:
        kind: The kind of failure
        value: The offending input text
        message: Human-readable description
    """

    kind: ErrorKind

    def __init__(self, value: str, message: str = ""):
        self.value = value
        self.message = message or self.default_message(value)
        super().__init__(self.message)

    @staticmethod
    def default_message(value: str) -> str:
        return f"Invalid value: {value}"


class InvalidVersionError(SemverError):
    """Raised when a version string does not follow semantic versioning."""

    kind = ErrorKind.INVALID_FORMAT

    @staticmethod
    def default_message(value: str) -> str:
        return f"Invalid semantic version: {value}"


class InvalidIdentifierError(SemverError):
    """Raised when a prerelease or metadata value is not a valid identifier list."""

    kind = ErrorKind.INVALID_IDENTIFIER

    @staticmethod
    def default_message(value: str) -> str:
        return f"Invalid identifier: {value}"


class InvalidConstraintError(SemverError):
    """Raised when a constraint expression cannot be parsed."""

    kind = ErrorKind.INVALID_CONSTRAINT

    @staticmethod
    def default_message(value: str) -> str:
        return f"Invalid constraint: {value}"


class UnknownComponentError(SemverError):
    """Raised when a version component name is not recognised."""

    kind = ErrorKind.UNKNOWN_COMPONENT

    @staticmethod
    def default_message(value: str) -> str:
        return f"unknown component name: '{value}'"


class EmptyVersionSetError(ValueError):
    """Raised when there is no version left to pick the greatest from."""

    pass
