"""CLI commands for injectctl.

This package contains all subcommand implementations.
"""

from injectctl.cli.commands import check, inject, profiles, remove

__all__ = ["check", "inject", "profiles", "remove"]
