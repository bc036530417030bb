"""Installation scanners for .NET discovery strategies.

This module exports the scanner classes and the discovery entry point.
"""

from dnhealth.scanners.base import Scanner
from dnhealth.scanners.cli import DotnetCliScanner
from dnhealth.scanners.directory import InstallDirectoryScanner
from dnhealth.scanners.discovery import discover, get_scanner

__all__ = [
    "DotnetCliScanner",
    "InstallDirectoryScanner",
    "Scanner",
    "discover",
    "get_scanner",
]
