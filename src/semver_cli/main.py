# SPDX-License-Identifier: MIT
"""CLI entry point for the semver command.

Exit status: 0 when the answer is yes, 1 when it is no, and -1 when an input
cannot be parsed or a component name is unknown.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import NoReturn, Optional

import click

from semver_engine import (
    Constraint,
    EngineConfig,
    InvalidConstraintError,
    InvalidVersionError,
    SemverError,
    Version,
    parse_constraint,
    parse_version,
)

from . import __version__
from .config import CLIConfig, ConfigError, load_config

EXIT_TRUE = 0
EXIT_FALSE = 1
EXIT_ERROR = -1


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.config: Optional[CLIConfig] = None
        self.verbose: bool = False
        self.allow_prerelease: bool = False
        self.project_dir: Optional[Path] = None

    def load_config(self) -> CLIConfig:
        """Load configuration, caching the result."""
        if self.config is None:
            self.config = load_config(self.project_dir)
        return self.config

    def engine_config(self) -> EngineConfig:
        """Build constraint evaluation settings from pyproject and flags."""
        try:
            config = self.load_config()
        except ConfigError as e:
            fail(str(e))
        return config.engine_config(allow_prerelease=self.allow_prerelease)


pass_context = click.make_pass_decorator(Context, ensure=True)


def echo_error(message: str) -> None:
    """Print an error message to stderr."""
    click.secho(f"Error: {message}", fg="red", err=True)


def echo_info(message: str) -> None:
    """Print an info message."""
    click.echo(message)


def fail(message: str) -> NoReturn:
    """Report an error on stderr and exit with the error status."""
    echo_error(message)
    sys.exit(EXIT_ERROR)


def must_parse_version(text: str, label: str) -> Version:
    """Parse a version argument or exit with the error status."""
    try:
        return parse_version(text)
    except InvalidVersionError as e:
        fail(f"Failed to parse <{label}> version; {e.message}")


def must_parse_constraint(text: str) -> Constraint:
    """Parse a constraint argument or exit with the error status."""
    try:
        return parse_constraint(text)
    except InvalidConstraintError as e:
        fail(f"Failed to parse constraints; {e.message}")


@click.group()
@click.version_option(version=__version__, prog_name="semver")
@click.option(
    "-v",
    "--verbose",
    is_flag=True,
    help="Print explanations and winning versions to stdout.",
)
@click.option(
    "--allow-prerelease",
    is_flag=True,
    help="Let pre-release versions satisfy constraints on other major.minor.patch cores.",
)
@click.option(
    "--debug",
    is_flag=True,
    help="Log engine decisions to stderr.",
)
@click.option(
    "-C",
    "--directory",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
    help="Look up pyproject.toml configuration from this directory.",
)
@pass_context
def cli(
    ctx: Context,
    verbose: bool,
    allow_prerelease: bool,
    debug: bool,
    directory: Optional[Path],
) -> None:
    """Command-line semver tools.

    On error, print to stderr and exit -1.

    \b
    Examples:
        semver satisfies 1.5.0 ">=1.2.0 <2.0.0"
        semver greater 1.10.0 1.9.0
        semver inc minor 1.2.3-rc.1
        semver get prerelease 1.0.0-beta.2
        semver set metadata 1.0.0 build.7
        semver greatest -p 1.0.0 1.2.0-beta 1.1.0
    """
    ctx.verbose = verbose
    ctx.allow_prerelease = allow_prerelease
    ctx.project_dir = directory
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            stream=sys.stderr,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Import and register commands
from .commands import compare, component, greatest, satisfies

cli.add_command(satisfies.satisfies)
cli.add_command(compare.greater)
cli.add_command(compare.lesser)
cli.add_command(compare.equal)
cli.add_command(component.inc)
cli.add_command(component.get)
cli.add_command(component.set_)
cli.add_command(greatest.greatest)


def main() -> None:
    """Main entry point for the CLI."""
    try:
        cli(prog_name="semver")
    except (ConfigError, SemverError) as e:
        echo_error(str(e))
        sys.exit(EXIT_ERROR)
    except Exception as e:
        echo_error(f"Unexpected error: {e}")
        sys.exit(EXIT_ERROR)


if __name__ == "__main__":
    main()
