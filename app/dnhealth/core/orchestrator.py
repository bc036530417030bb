"""Scan sequencing.

A scan refreshes the release catalog, runs discovery over an ordered
list of targets, optionally asks the user for one more directory when
nothing was found, and analyzes whatever was discovered. Every step
degrades instead of raising, so a scan always produces a report.
"""

import logging
import os
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from dnhealth.core.analyzer import analyze
from dnhealth.core.authorization import AuthorizedDirectoryStore
from dnhealth.core.catalog import ReleaseCatalogClient, refresh_catalog
from dnhealth.core.settings import Settings
from dnhealth.models.catalog import CatalogSnapshot
from dnhealth.models.installation import InstallationRecord
from dnhealth.models.scan_result import ScanReport
from dnhealth.scanners.cli import find_executable
from dnhealth.scanners.directory import missing_subdirs
from dnhealth.scanners.discovery import discover
from dnhealth.utils.shell import is_executable_file

logger = logging.getLogger(__name__)

AUTOMATIC_DISCOVERY = "(automatic discovery)"

NETWORK_UNAVAILABLE_MESSAGE = (
    "Network unavailable - showing installed versions only. Unable to check for updates."
)


class DirectoryAuthorizer(Protocol):
    """Asks the user for an installation directory to scan."""

    def request_directory(self) -> Path | None:
        """Return the directory the user authorized, or None if declined."""
        ...


@dataclass(frozen=True, slots=True)
class ScanPass:
    """Records and attempt descriptions from one pass over some targets."""

    records: list[InstallationRecord]
    attempts: list[str]


def _target_key(target: Path | None) -> str:
    if target is None:
        return AUTOMATIC_DISCOVERY
    return str(target.expanduser().resolve())


class ScanOrchestrator:
    """Runs a complete scan.

    Example:
        >>> orchestrator = ScanOrchestrator(load_settings_or_default())
        >>> report = await orchestrator.run()
        >>> for verdict in report.verdicts:
        ...     print(verdict.display_name, verdict.status_text)
    """

    def __init__(
        self,
        settings: Settings,
        *,
        catalog_client: ReleaseCatalogClient | None = None,
        offline: bool = False,
        extra_roots: Sequence[Path] = (),
        store: AuthorizedDirectoryStore | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            settings: Discovery and catalog settings.
            catalog_client: Catalog client to use. Built from settings if None.
            offline: Skip the catalog fetch and use the fallback catalog.
            extra_roots: Explicit installation roots scanned after the
                automatic targets.
            store: Token store guarding access to user-authorized directories.
        """
        self.settings = settings
        self.offline = offline
        self.extra_roots = list(extra_roots)
        self.store = store
        if catalog_client is None and not offline:
            catalog_client = ReleaseCatalogClient(
                settings.catalog_url,
                timeout=settings.fetch_timeout_seconds,
            )
        self.catalog_client = catalog_client

    async def refresh_catalog(self) -> CatalogSnapshot:
        """Fetch the tracked lines, falling back to the static catalog."""
        return await refresh_catalog(None if self.offline else self.catalog_client)

    def build_targets(self) -> list[Path | None]:
        """Build the ordered, de-duplicated list of discovery targets.

        Automatic discovery always comes first, then the canonical
        installation root if it exists, then any explicit roots. Explicit
        roots are returned expanded and resolved.
        """
        candidates: list[Path | None] = [None]
        if self.settings.install_root.exists():
            candidates.append(self.settings.install_root.resolve())
        candidates.extend(root.expanduser().resolve() for root in self.extra_roots)

        seen: set[str] = set()
        targets: list[Path | None] = []
        for target in candidates:
            key = _target_key(target)
            if key in seen:
                continue
            seen.add(key)
            targets.append(target)
        return targets

    def describe_attempt(self, target: Path | None) -> str:
        """Describe a discovery target for diagnostics.

        Args:
            target: Installation root, or None for automatic discovery.

        Returns:
            A short description noting what exists at the target.
        """
        if target is None:
            executable = find_executable(self.settings.executable_paths)
            if executable is not None:
                return f"{AUTOMATIC_DISCOVERY} (dotnet: {executable})"
            return f"{AUTOMATIC_DISCOVERY} (dotnet: not found)"

        resolved = target.expanduser().resolve()
        if not resolved.exists():
            return f"{resolved} (missing)"

        if resolved.is_dir():
            has_binary = (resolved / "dotnet").exists()
            description = f"{resolved} (dotnet: {'found' if has_binary else 'missing'})"
            missing = missing_subdirs(resolved)
            if missing:
                description += f" (missing: {', '.join(missing)})"
            return description

        return f"{resolved} (executable: {'yes' if is_executable_file(resolved) else 'no'})"

    async def scan_targets(self, targets: Sequence[Path | None]) -> ScanPass:
        """Run discovery over each target in order.

        Args:
            targets: Discovery targets (None means automatic discovery).

        Returns:
            Concatenated records and one description per target. A record
            already found through an earlier target is not repeated.
        """
        records: list[InstallationRecord] = []
        attempts: list[str] = []
        seen: set[InstallationRecord] = set()

        for target in targets:
            attempts.append(self.describe_attempt(target))
            found = await discover(target, self.settings)
            logger.debug("%s: %d records", _target_key(target), len(found))
            for record in found:
                if record not in seen:
                    seen.add(record)
                    records.append(record)

        return ScanPass(records=records, attempts=attempts)

    async def scan_authorized(self, directory: Path) -> ScanPass:
        """Scan a user-authorized directory inside an access grant."""
        if self.store is None:
            return await self.scan_targets([directory])

        with self.store.access(directory) as granted:
            if not granted:
                return ScanPass(records=[], attempts=[f"{directory} (access denied)"])
            return await self.scan_targets([directory])

    async def run(self, authorizer: DirectoryAuthorizer | None = None) -> ScanReport:
        """Run a complete scan.

        Args:
            authorizer: Asked for one more directory if nothing is found.

        Returns:
            The scan report; never raises for discovery or network failures.
        """
        catalog = await self.refresh_catalog()

        scan_pass = await self.scan_targets(self.build_targets())
        attempts = list(scan_pass.attempts)

        if not scan_pass.records and authorizer is not None:
            directory = authorizer.request_directory()
            if directory is not None:
                logger.info("Scanning authorized directory %s", directory)
                scan_pass = await self.scan_authorized(directory)
                attempts.extend(scan_pass.attempts)

        verdicts = analyze(scan_pass.records, catalog.lines)

        return ScanReport(
            verdicts=verdicts,
            records=scan_pass.records,
            attempts=attempts,
            catalog=catalog,
            error_message=build_error_message(catalog, scan_pass.records, attempts),
        )


def build_error_message(
    catalog: CatalogSnapshot,
    records: Sequence[InstallationRecord],
    attempts: Sequence[str],
) -> str | None:
    """Compose the user-facing error message for a scan, if any.

    Args:
        catalog: Catalog snapshot used for the scan.
        records: Everything that was discovered.
        attempts: Descriptions of every target tried.

    Returns:
        The message, or None when there is nothing to report.
    """
    if not records:
        tried = ", ".join(attempts)
        env_path = os.environ.get("PATH", "(nil PATH)")
        return f".NET installations not found. Tried: {tried}\nPATH={env_path}"

    if not catalog.is_live:
        return NETWORK_UNAVAILABLE_MESSAGE

    return None
