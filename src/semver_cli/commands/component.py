# SPDX-License-Identifier: MIT
"""Commands reading and changing single version components."""

from __future__ import annotations

import click

from semver_engine import COMPONENTS, CORE_COMPONENTS, InvalidIdentifierError, InvalidVersionError

from ..main import echo_info, fail, must_parse_version

SETTABLE_COMPONENTS = ("prerelease", "metadata")


def _check_component(component: str, allowed: tuple[str, ...]) -> None:
    if component not in allowed:
        fail(f"unknown component name: '{component}'")


@click.command()
@click.argument("component")
@click.argument("version")
def inc(component: str, version: str) -> None:
    """Increment the COMPONENT of VERSION and print the result.

    COMPONENT is one of major, minor or patch. Lower components are reset and
    pre-release and build metadata are dropped.
    """
    parsed = must_parse_version(version, "VERSION")
    _check_component(component, CORE_COMPONENTS)

    try:
        echo_info(str(parsed.increment(component)))
    except InvalidVersionError as e:
        fail(e.message)


@click.command()
@click.argument("component")
@click.argument("version")
def get(component: str, version: str) -> None:
    """Print the COMPONENT of VERSION.

    COMPONENT is one of major, minor, patch, prerelease or metadata.
    """
    parsed = must_parse_version(version, "VERSION")
    _check_component(component, COMPONENTS)

    echo_info(parsed.get_component(component))


@click.command(name="set")
@click.argument("component")
@click.argument("version")
@click.argument("value")
def set_(component: str, version: str, value: str) -> None:
    """Set the COMPONENT of VERSION to VALUE and print the result.

    COMPONENT is one of prerelease or metadata.
    """
    parsed = must_parse_version(version, "VERSION")
    _check_component(component, SETTABLE_COMPONENTS)

    try:
        updated = parsed.set_component(component, value)
    except InvalidIdentifierError as e:
        fail(f"invalid {component}; {e.message}")
    echo_info(str(updated))
