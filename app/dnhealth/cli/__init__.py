"""CLI package for dnhealth.

This package contains the Typer application and all subcommands.
"""

from dnhealth.cli.main import app

__all__ = ["app"]
