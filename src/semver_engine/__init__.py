# SPDX-License-Identifier: MIT
"""Semantic version parsing, comparison and constraint checking.

This package parses SemVer 2.0.0 versions, orders them by precedence,
mutates their components and evaluates them against constraint expressions.

Example:
    >>> from semver_engine import parse_version, parse_constraint, validate
    >>>
    >>> version = parse_version("1.2.3-alpha.1+build.456")
    >>> version.major
    1
    >>> version.prerelease_text
    'alpha.1'
    >>>
    >>> str(version.inc_minor())
    '1.3.0'
    >>>
    >>> validate(parse_constraint(">=1.2.0 <2.0.0"), "1.5.0").satisfied
    True
"""

__version__ = "1.0.0"

from .errors import (
    ErrorKind,
    SemverError,
    InvalidVersionError,
    InvalidIdentifierError,
    InvalidConstraintError,
    UnknownComponentError,
    EmptyVersionSetError,
)
from .version import (
    Version,
    parse_version,
    is_valid_semver,
    SEMVER_PATTERN,
    MAX_COMPONENT,
    COMPONENTS,
    CORE_COMPONENTS,
)
from .compare import (
    compare_versions,
    greater_than,
    less_than,
    equal,
    version_key,
    greatest,
)
from .config import EngineConfig, DEFAULT_CONFIG
from .constraint import (
    Constraint,
    Comparator,
    HyphenRange,
    Operator,
    PartialVersion,
    PrimitiveClause,
    ValidationResult,
    lower,
    parse_constraint,
    validate,
    satisfies,
)

__all__ = [
    # Errors
    "ErrorKind",
    "SemverError",
    "InvalidVersionError",
    "InvalidIdentifierError",
    "InvalidConstraintError",
    "UnknownComponentError",
    "EmptyVersionSetError",
    # Version parsing
    "Version",
    "parse_version",
    "is_valid_semver",
    "SEMVER_PATTERN",
    "MAX_COMPONENT",
    "COMPONENTS",
    "CORE_COMPONENTS",
    # Version comparison
    "compare_versions",
    "greater_than",
    "less_than",
    "equal",
    "version_key",
    "greatest",
    # Constraints
    "EngineConfig",
    "DEFAULT_CONFIG",
    "Constraint",
    "Comparator",
    "HyphenRange",
    "Operator",
    "PartialVersion",
    "PrimitiveClause",
    "ValidationResult",
    "lower",
    "parse_constraint",
    "validate",
    "satisfies",
]
