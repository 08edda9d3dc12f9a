# SPDX-License-Identifier: MIT
"""CLI command implementations."""

from . import compare, component, greatest, satisfies

__all__ = ["compare", "component", "greatest", "satisfies"]
