"""CLI commands for dnhealth.

This package contains all subcommand implementations.
"""

from dnhealth.cli.commands import authorize, catalog, config, scan

__all__ = ["authorize", "catalog", "config", "scan"]
