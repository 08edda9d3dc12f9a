# SPDX-License-Identifier: MIT
"""Check a version against a constraint expression."""

from __future__ import annotations

import sys

import click

from semver_engine import validate

from ..main import (
    EXIT_FALSE,
    Context,
    echo_info,
    must_parse_constraint,
    must_parse_version,
    pass_context,
)


@click.command()
@click.argument("version")
@click.argument("constraints")
@pass_context
def satisfies(ctx: Context, version: str, constraints: str) -> None:
    """Test if VERSION satisfies CONSTRAINTS.

    Exit 0 if it does, 1 if not. With --verbose, print one line per failed
    clause explaining why.

    \b
    Examples:
        semver satisfies 1.5.0 ">=1.2.0 <2.0.0"
        semver -v satisfies 2.0.0 "^1.2.3 || ~3.1"
    """
    parsed_version = must_parse_version(version, "VERSION")
    constraint = must_parse_constraint(constraints)

    result = validate(constraint, parsed_version, ctx.engine_config())
    if not result.satisfied:
        if ctx.verbose:
            for reason in result.reasons:
                echo_info(reason)
        sys.exit(EXIT_FALSE)
