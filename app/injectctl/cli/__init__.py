"""CLI package for injectctl.

This package contains the Typer application and all subcommands.
"""

from injectctl.cli.main import app

__all__ = ["app"]
