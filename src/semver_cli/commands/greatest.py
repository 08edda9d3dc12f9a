# SPDX-License-Identifier: MIT
"""Pick the greatest version from a list."""

from __future__ import annotations

import click

from semver_engine import EmptyVersionSetError, greatest as pick_greatest

from ..main import echo_info, fail, must_parse_version


@click.command()
@click.option(
    "--filter-pre-release",
    "-p",
    "filter_prerelease",
    is_flag=True,
    help="Ignore all versions with pre-release information before comparison.",
)
@click.option(
    "--filter-build",
    "-b",
    "filter_build",
    is_flag=True,
    help="Ignore all versions with build information before comparison.",
)
@click.argument("versions", nargs=-1, required=True)
def greatest(filter_prerelease: bool, filter_build: bool, versions: tuple[str, ...]) -> None:
    """Find the greatest of VERSIONS and print it.

    \b
    Examples:
        semver greatest 1.0.0 1.2.0-beta 1.1.0
        semver greatest --filter-pre-release 1.0.0 1.2.0-beta 1.1.0
    """
    parsed = [must_parse_version(v, "VERSION") for v in versions]

    try:
        result = pick_greatest(
            parsed, filter_prerelease=filter_prerelease, filter_build=filter_build
        )
    except EmptyVersionSetError:
        fail("no versions left to compare after filtering")
    echo_info(str(result))
