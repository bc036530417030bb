"""Installation discovery entry point.

Chooses between the CLI and directory strategies for a single target.
"""

import logging
from pathlib import Path

from dnhealth.core.settings import Settings
from dnhealth.models.installation import InstallationRecord
from dnhealth.scanners.base import Scanner
from dnhealth.scanners.cli import DotnetCliScanner, find_executable
from dnhealth.scanners.directory import InstallDirectoryScanner

logger = logging.getLogger(__name__)


def get_scanner(root: Path | None, settings: Settings) -> Scanner | None:
    """Pick the scanner for a discovery target.

    With an explicit root the directory strategy is used. Without one,
    the first dotnet executable from the configured probe list is used;
    if there is none, the configured installation root is scanned
    directly, provided it exists.

    Args:
        root: Explicit installation root, or None for automatic discovery.
        settings: Probe list, fallback root and timeouts.

    Returns:
        The scanner to run, or None if there is nothing to scan.
    """
    if root is not None:
        return InstallDirectoryScanner(root)

    executable = find_executable(settings.executable_paths)
    if executable is not None:
        logger.debug("Using dotnet executable at %s", executable)
        return DotnetCliScanner(executable, timeout=settings.command_timeout_seconds)

    logger.debug("No dotnet executable found, falling back to %s", settings.install_root)
    fallback = InstallDirectoryScanner(settings.install_root)
    if not fallback.is_available():
        return None
    return fallback


async def discover(root: Path | None, settings: Settings) -> list[InstallationRecord]:
    """Discover .NET installations for one target.

    Never raises; failures of individual sub-steps yield fewer records.

    Args:
        root: Explicit installation root, or None for automatic discovery.
        settings: Probe list, fallback root and timeouts.

    Returns:
        Records found for the target, possibly empty.
    """
    scanner = get_scanner(root, settings)
    if scanner is None:
        return []
    logger.debug("Scanning %s with the %s strategy", root or "(automatic)", scanner.strategy)
    return await scanner.scan()
