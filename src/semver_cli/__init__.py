# SPDX-License-Identifier: MIT
"""Command-line front end for the semver engine."""

__version__ = "1.0.0"
