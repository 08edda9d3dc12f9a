# SPDX-License-Identifier: MIT
"""Pairwise version comparison commands."""

from __future__ import annotations

import sys

import click

from semver_engine import equal as versions_equal, greater_than, less_than

from ..main import EXIT_FALSE, Context, echo_info, must_parse_version, pass_context


@click.command()
@click.argument("a")
@click.argument("b")
@pass_context
def greater(ctx: Context, a: str, b: str) -> None:
    """Compare two versions. Exit 0 if A > B, 1 if not.

    With --verbose, print the greater of the two.
    """
    version_a = must_parse_version(a, "A")
    version_b = must_parse_version(b, "B")

    if not greater_than(version_a, version_b):
        if ctx.verbose:
            echo_info(b)
        sys.exit(EXIT_FALSE)

    if ctx.verbose:
        echo_info(a)


@click.command()
@click.argument("a")
@click.argument("b")
@pass_context
def lesser(ctx: Context, a: str, b: str) -> None:
    """Compare two versions. Exit 0 if A < B, 1 if not.

    With --verbose, print the lesser of the two.
    """
    version_a = must_parse_version(a, "A")
    version_b = must_parse_version(b, "B")

    if not less_than(version_a, version_b):
        if ctx.verbose:
            echo_info(b)
        sys.exit(EXIT_FALSE)

    if ctx.verbose:
        echo_info(a)


@click.command()
@click.argument("a")
@click.argument("b")
def equal(a: str, b: str) -> None:
    """Compare two versions. Exit 0 if they are equal, 1 if not.

    Build metadata is ignored.
    """
    version_a = must_parse_version(a, "A")
    version_b = must_parse_version(b, "B")

    if not versions_equal(version_a, version_b):
        sys.exit(EXIT_FALSE)
