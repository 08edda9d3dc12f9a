# SPDX-License-Identifier: MIT
"""Constraint expression parsing and evaluation.

A constraint is a disjunction of groups, each group a conjunction of clauses::

    >=1.2.0 <2.0.0 || ^3.1 , 4.0.0 - 4.2

Groups are separated by ``||``, ``|`` or ``,``; clauses inside a group by
whitespace. Supported clause forms:

- bare version (implicit ``=``) and ``=``, ``!=``, ``>``, ``>=``, ``<``, ``<=``
- tilde ``~1.2.3`` / ``~>1.2.3``: patch-level changes (minor-level for ``~1``)
- caret ``^1.2.3``: changes that keep the leftmost non-zero component
- hyphen ranges ``1.2.3 - 2.3.4`` with inclusive bounds
- wildcards ``1.2.x``, ``1.*``, ``*`` and omitted trailing components

Every sugar form is lowered at parse time into primitive clauses over concrete
versions, so evaluation only ever runs the six primitive comparators.
"""

from __future__ import annotations

import logging
import operator
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, NamedTuple, Optional, Union

from .compare import VersionLike, compare_versions
from .config import DEFAULT_CONFIG, EngineConfig
from .errors import InvalidConstraintError
from .version import BUILD_PATTERN, MAX_COMPONENT, PRERELEASE_PATTERN, Version, parse_version

logger = logging.getLogger(__name__)


class Operator(str, Enum):
    """Comparator operators."""

    EQ = "="
    NE = "!="
    GT = ">"
    GE = ">="
    LT = "<"
    LE = "<="
    TILDE = "~"
    CARET = "^"


PRIMITIVE_OPERATORS = frozenset(
    {Operator.EQ, Operator.NE, Operator.GT, Operator.GE, Operator.LT, Operator.LE}
)

_OPERATOR_ALIASES = {
    "=": Operator.EQ,
    "!=": Operator.NE,
    ">": Operator.GT,
    ">=": Operator.GE,
    "=>": Operator.GE,
    "<": Operator.LT,
    "<=": Operator.LE,
    "=<": Operator.LE,
    "~": Operator.TILDE,
    "~>": Operator.TILDE,
    "^": Operator.CARET,
}

_TESTS: dict[Operator, Callable[[int, int], bool]] = {
    Operator.EQ: operator.eq,
    Operator.NE: operator.ne,
    Operator.GT: operator.gt,
    Operator.GE: operator.ge,
    Operator.LT: operator.lt,
    Operator.LE: operator.le,
}

_FAILURE_MESSAGES = {
    Operator.EQ: "{version} is not equal to {clause}",
    Operator.NE: "{version} is equal to {clause}",
    Operator.GT: "{version} is less than or equal to {clause}",
    Operator.GE: "{version} is less than {clause}",
    Operator.LT: "{version} is greater than or equal to {clause}",
    Operator.LE: "{version} is greater than {clause}",
}

_PRERELEASE_MESSAGE = (
    "{version} is a prerelease version and {clause} only matches release versions"
)

_ZERO = Version(0, 0, 0)

_WILDCARDS = frozenset({"x", "X", "*"})

_TOKEN_PATTERN = re.compile(
    r"(?P<ws>\s+)"
    r"|(?P<or>\|\||[|,])"
    r"|(?P<op>!=|>=|=>|<=|=<|~>|[=<>~^])"
    r"|(?P<word>[^\s,|!=<>~^]+)"
    r"|(?P<bad>.)",
    re.DOTALL,
)

_COMPONENT = r"0|[1-9]\d*|[xX*]"

PARTIAL_PATTERN = re.compile(
    rf"[vV]?(?P<major>{_COMPONENT})"
    rf"(?:\.(?P<minor>{_COMPONENT}))?"
    rf"(?:\.(?P<patch>{_COMPONENT}))?"
    rf"(?:-(?P<prerelease>{PRERELEASE_PATTERN.pattern}))?"
    rf"(?:\+(?P<build>{BUILD_PATTERN.pattern}))?",
    re.ASCII,
)


# =============================================================================
# Parsed expression types
# =============================================================================


@dataclass(frozen=True)
class PartialVersion:
    """A version as written in a constraint, possibly with wildcards.

    Missing or wildcard components are None. Only a fully specified version
    may carry pre-release or build identifiers.
    """

    major: Optional[int]
    minor: Optional[int] = None
    patch: Optional[int] = None
    prerelease: tuple[str, ...] = ()
    build: tuple[str, ...] = ()

    @property
    def specified(self) -> int:
        """Number of leading components that are concrete numbers."""
        count = 0
        for value in (self.major, self.minor, self.patch):
            if value is None:
                break
            count += 1
        return count

    def floor(self) -> Version:
        """Lowest version in the range, with missing components zeroed."""
        return Version(
            self.major or 0,
            self.minor or 0,
            self.patch or 0,
            self.prerelease,
            self.build,
        )

    def ceiling(self) -> Version:
        """Exclusive upper bound of the range a partial version covers."""
        if self.specified == 1:
            return Version(self.major + 1, 0, 0)
        return Version(self.major, self.minor + 1, 0)


@dataclass(frozen=True)
class Comparator:
    """A single ``operator version`` clause as written."""

    op: Operator
    version: PartialVersion
    text: str


@dataclass(frozen=True)
class HyphenRange:
    """An inclusive ``lower - upper`` range as written."""

    lower: PartialVersion
    upper: PartialVersion
    text: str


ComparatorExpr = Union[Comparator, HyphenRange]


@dataclass(frozen=True)
class PrimitiveClause:
    """A primitive comparison against a concrete version.

    Attributes:
        op: One of the six primitive operators
        version: Version the operand is compared with
        source: Clause text this primitive was lowered from
    """

    op: Operator
    version: Version
    source: str = ""

    def __post_init__(self) -> None:
        if self.op not in PRIMITIVE_OPERATORS:
            raise ValueError(f"{self.op.value!r} is not a primitive operator")

    def __str__(self) -> str:
        return f"{self.op.value}{self.version}"

    def matches(self, version: Version) -> bool:
        return _TESTS[self.op](compare_versions(version, self.version), 0)

    def _describe(self) -> str:
        text = str(self)
        if self.source and self.source != text:
            return f"{text} (from {self.source})"
        return text

    def failure_reason(self, version: Version) -> str:
        return _FAILURE_MESSAGES[self.op].format(version=version, clause=self._describe())

    def prerelease_reason(self, version: Version) -> str:
        return _PRERELEASE_MESSAGE.format(version=version, clause=self._describe())


class ValidationResult(NamedTuple):
    """Outcome of evaluating a version against a constraint."""

    satisfied: bool
    reasons: tuple[str, ...]


@dataclass(frozen=True)
class Constraint:
    """A parsed constraint: OR of groups, each an AND of primitive clauses."""

    groups: tuple[tuple[PrimitiveClause, ...], ...]
    text: str = field(default="", compare=False)

    @classmethod
    def parse(cls, text: str) -> "Constraint":
        """Parse a constraint string. See :func:`parse_constraint`."""
        return parse_constraint(text)

    def __str__(self) -> str:
        return " || ".join(" ".join(str(clause) for clause in group) for group in self.groups)

    def validate(
        self, version: VersionLike, config: Optional[EngineConfig] = None
    ) -> ValidationResult:
        return validate(self, version, config)

    def check(self, version: VersionLike, config: Optional[EngineConfig] = None) -> bool:
        return validate(self, version, config).satisfied


# =============================================================================
# Tokenizer
# =============================================================================


class _Token(NamedTuple):
    kind: str
    text: str
    pos: int


def _tokenize(text: str) -> list[_Token]:
    tokens: list[_Token] = []
    for match in _TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        value = match.group()
        if kind == "ws":
            continue
        if kind == "bad":
            raise InvalidConstraintError(
                text, f"Invalid constraint {text!r}: unexpected character {value!r}"
            )
        if kind == "word" and value == "-":
            kind = "hyphen"
        tokens.append(_Token(kind, value, match.start()))
    return tokens


# =============================================================================
# Parser
# =============================================================================


def _parse_partial(word: str, constraint_text: str) -> PartialVersion:
    match = PARTIAL_PATTERN.fullmatch(word)
    if not match:
        raise InvalidConstraintError(
            constraint_text, f"Invalid constraint {constraint_text!r}: malformed version {word!r}"
        )

    components: list[Optional[int]] = []
    wildcard_seen = False
    for name in ("major", "minor", "patch"):
        raw = match.group(name)
        if raw is None or raw in _WILDCARDS:
            wildcard_seen = True
            components.append(None)
            continue
        if wildcard_seen:
            raise InvalidConstraintError(
                constraint_text,
                f"Invalid constraint {constraint_text!r}: number after wildcard in {word!r}",
            )
        value = int(raw)
        if value > MAX_COMPONENT:
            raise InvalidConstraintError(
                constraint_text,
                f"Invalid constraint {constraint_text!r}: {name} of {word!r} is too large",
            )
        components.append(value)

    prerelease = match.group("prerelease")
    build = match.group("build")
    if wildcard_seen and (prerelease or build):
        raise InvalidConstraintError(
            constraint_text,
            f"Invalid constraint {constraint_text!r}: partial version {word!r} "
            "cannot carry prerelease or build metadata",
        )

    return PartialVersion(
        components[0],
        components[1],
        components[2],
        tuple(prerelease.split(".")) if prerelease else (),
        tuple(build.split(".")) if build else (),
    )


class _ConstraintParser:
    """Recursive-descent parser: constraint -> groups -> clauses."""

    def __init__(self, text: str):
        self.text = text
        self.tokens = _tokenize(text)
        self.pos = 0

    def _error(self, message: str) -> InvalidConstraintError:
        return InvalidConstraintError(self.text, f"Invalid constraint {self.text!r}: {message}")

    def _peek(self) -> Optional[_Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _advance(self) -> _Token:
        token = self.tokens[self.pos]
        self.pos += 1
        return token

    def _expect_version(self, after: _Token) -> _Token:
        token = self._peek()
        if token is None or token.kind != "word":
            raise self._error(f"expected a version after {after.text!r}")
        return self._advance()

    def parse(self) -> tuple[tuple[ComparatorExpr, ...], ...]:
        groups = [self._parse_group()]
        while self._peek() is not None:
            self._advance()  # group separator
            groups.append(self._parse_group())
        return tuple(groups)

    def _parse_group(self) -> tuple[ComparatorExpr, ...]:
        clauses: list[ComparatorExpr] = []
        token = self._peek()
        while token is not None and token.kind != "or":
            clauses.append(self._parse_clause())
            token = self._peek()
        if not clauses:
            raise self._error("empty constraint group")
        return tuple(clauses)

    def _parse_clause(self) -> ComparatorExpr:
        token = self._advance()

        if token.kind == "op":
            word = self._expect_version(token)
            return Comparator(
                _OPERATOR_ALIASES[token.text],
                _parse_partial(word.text, self.text),
                f"{token.text}{word.text}",
            )

        if token.kind == "word":
            lower = _parse_partial(token.text, self.text)
            following = self._peek()
            if following is not None and following.kind == "hyphen":
                self._advance()
                upper = self._expect_version(following)
                return HyphenRange(
                    lower,
                    _parse_partial(upper.text, self.text),
                    f"{token.text} - {upper.text}",
                )
            return Comparator(Operator.EQ, lower, token.text)

        raise self._error(f"unexpected {token.text!r}")


# =============================================================================
# Lowering
# =============================================================================


def _caret_ceiling(partial: PartialVersion) -> Version:
    if partial.major or partial.specified == 1:
        return Version(partial.major + 1, 0, 0)
    if partial.minor or partial.specified == 2:
        return Version(0, partial.minor + 1, 0)
    return Version(0, 0, partial.patch + 1)


def _upper_inclusive(partial: PartialVersion, source: str) -> tuple[PrimitiveClause, ...]:
    n = partial.specified
    if n == 0:
        return ()
    if n == 3:
        return (PrimitiveClause(Operator.LE, partial.floor(), source),)
    return (PrimitiveClause(Operator.LT, partial.ceiling(), source),)


def lower(expr: ComparatorExpr) -> tuple[PrimitiveClause, ...]:
    """Rewrite a parsed clause into primitive clauses that must all hold.

    Examples:
        ``~1.2.3`` -> ``>=1.2.3 <1.3.0``
        ``^0.2.3`` -> ``>=0.2.3 <0.3.0``
        ``1.2.x`` -> ``>=1.2.0 <1.3.0``
        ``1.2 - 2.3`` -> ``>=1.2.0 <2.4.0``

    Raises:
        InvalidConstraintError: For ``!=`` against a partial version
    """
    source = expr.text

    if isinstance(expr, HyphenRange):
        floor = PrimitiveClause(Operator.GE, expr.lower.floor(), source)
        return (floor,) + _upper_inclusive(expr.upper, source)

    op = expr.op
    partial = expr.version
    n = partial.specified

    if op in (Operator.EQ, Operator.NE, Operator.GT, Operator.LE) and n == 3:
        return (PrimitiveClause(op, partial.floor(), source),)

    # Only >=, <, ~ and ^ reach this point with a full version.
    if op is Operator.NE:
        raise InvalidConstraintError(source, f"'!=' needs a full version, got {source!r}")

    if n == 0:
        if op in (Operator.GT, Operator.LT):
            return (PrimitiveClause(Operator.LT, _ZERO, source),)
        return (PrimitiveClause(Operator.GE, _ZERO, source),)

    floor = PrimitiveClause(Operator.GE, partial.floor(), source)

    if op is Operator.GE:
        return (floor,)
    if op is Operator.LT:
        return (PrimitiveClause(Operator.LT, partial.floor(), source),)
    if op is Operator.GT:
        return (PrimitiveClause(Operator.GE, partial.ceiling(), source),)
    if op is Operator.LE:
        return (PrimitiveClause(Operator.LT, partial.ceiling(), source),)
    if op is Operator.EQ:
        return (floor, PrimitiveClause(Operator.LT, partial.ceiling(), source))
    if op is Operator.TILDE:
        if n == 1:
            ceiling = Version(partial.major + 1, 0, 0)
        else:
            ceiling = Version(partial.major, partial.minor + 1, 0)
        return (floor, PrimitiveClause(Operator.LT, ceiling, source))
    if op is Operator.CARET:
        return (floor, PrimitiveClause(Operator.LT, _caret_ceiling(partial), source))

    raise InvalidConstraintError(source, f"unsupported operator in {source!r}")


def parse_constraint(text: str) -> Constraint:
    """Parse a constraint expression into a reusable Constraint.

    Args:
        text: Constraint expression, e.g. ``">=1.2.0 <2.0.0 || ^3.0"``

    Returns:
        An immutable Constraint holding only primitive clauses

    Raises:
        InvalidConstraintError: If the text is empty, a comparator or
            embedded version is malformed, or a group is empty

    Examples:
        >>> str(parse_constraint("^1.2.3"))
        '>=1.2.3 <2.0.0'
        >>> str(parse_constraint("1.x || ~2.4"))
        '>=1.0.0 <2.0.0 || >=2.4.0 <2.5.0'
    """
    if not isinstance(text, str):
        raise InvalidConstraintError(
            str(text), f"Constraint must be a string, got {type(text).__name__}"
        )

    parsed = _ConstraintParser(text).parse()
    try:
        groups = tuple(
            tuple(clause for expr in group for clause in lower(expr)) for group in parsed
        )
    except InvalidConstraintError as e:
        raise InvalidConstraintError(text, f"Invalid constraint {text!r}: {e.message}") from e
    constraint = Constraint(groups=groups, text=text)
    logger.debug("Parsed constraint %r as %s", text, constraint)
    return constraint


# =============================================================================
# Evaluation
# =============================================================================


def _admits_prerelease(group: tuple[PrimitiveClause, ...], version: Version) -> bool:
    return any(
        clause.version.prerelease and clause.version.core == version.core for clause in group
    )


def _check_group(
    group: tuple[PrimitiveClause, ...], version: Version, config: EngineConfig
) -> list[str]:
    if (
        version.prerelease
        and not config.allow_prerelease_across_core
        and not _admits_prerelease(group, version)
    ):
        return [clause.prerelease_reason(version) for clause in group]
    return [clause.failure_reason(version) for clause in group if not clause.matches(version)]


def validate(
    constraint: Union[str, Constraint],
    version: VersionLike,
    config: Optional[EngineConfig] = None,
) -> ValidationResult:
    """Evaluate a version against a constraint.

    The constraint holds when any group has all its clauses satisfied. A
    pre-release version only satisfies a group containing a clause with a
    pre-release on the same major.minor.patch, unless ``config`` allows
    pre-releases across cores.

    Args:
        constraint: Parsed Constraint or constraint string
        version: Version object or version string
        config: Evaluation settings (defaults to DEFAULT_CONFIG)

    Returns:
        ValidationResult with the outcome and, when unsatisfied, one reason
        per failed clause in declaration order

    Raises:
        InvalidConstraintError: If a constraint string is invalid
        InvalidVersionError: If a version string is invalid
    """
    if isinstance(constraint, str):
        constraint = parse_constraint(constraint)
    if isinstance(version, str):
        version = parse_version(version)
    if config is None:
        config = DEFAULT_CONFIG

    reasons: list[str] = []
    for group in constraint.groups:
        failures = _check_group(group, version, config)
        if not failures:
            logger.debug("%s satisfies %s", version, constraint)
            return ValidationResult(True, ())
        reasons.extend(failures)

    logger.debug("%s does not satisfy %s (%d failed clauses)", version, constraint, len(reasons))
    return ValidationResult(False, tuple(reasons))


def satisfies(
    version: VersionLike,
    constraint: Union[str, Constraint],
    config: Optional[EngineConfig] = None,
) -> bool:
    """Return True if version satisfies constraint."""
    return validate(constraint, version, config).satisfied
