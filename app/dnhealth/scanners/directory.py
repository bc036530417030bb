"""Installation directory scanner implementation.

Enumerates a .NET installation root laid out as:

    <root>/sdk/<version>/
    <root>/host/fxr/<version>/
    <root>/shared/<product>/<version>/

Each of the three subtrees is scanned independently; a missing or
unreadable subtree simply contributes no records.
"""

import asyncio
import logging
from pathlib import Path

from dnhealth.models.installation import InstallationKind, InstallationRecord
from dnhealth.scanners.base import Scanner

logger = logging.getLogger(__name__)

SDK_SUBDIR = Path("sdk")
HOST_SUBDIR = Path("host") / "fxr"
SHARED_SUBDIR = Path("shared")

EXPECTED_SUBDIRS: tuple[Path, ...] = (SDK_SUBDIR, HOST_SUBDIR, SHARED_SUBDIR)


def list_entry_names(path: Path) -> list[str]:
    """List visible entry names of a directory.

    Dot-prefixed entries are skipped. Names are sorted so that results
    do not depend on filesystem ordering.

    Args:
        path: Directory to list.

    Returns:
        Sorted entry names, or an empty list if the directory cannot be read.
    """
    try:
        names = [entry.name for entry in path.iterdir()]
    except OSError as e:
        logger.debug("Cannot list %s: %s", path, e)
        return []
    return sorted(name for name in names if not name.startswith("."))


def missing_subdirs(root: Path) -> list[str]:
    """Return the expected layout subdirectories that are absent under root."""
    return [str(sub) for sub in EXPECTED_SUBDIRS if not (root / sub).exists()]


class InstallDirectoryScanner(Scanner):
    """Scanner for a .NET installation root directory.

    Version records are taken verbatim from directory entry names.
    """

    def __init__(self, root: Path) -> None:
        """Initialize the scanner.

        Args:
            root: Installation root (e.g., /usr/local/share/dotnet).
        """
        self.root = root

    @property
    def strategy(self) -> str:
        """Return 'directory' as the strategy name."""
        return "directory"

    def is_available(self) -> bool:
        """Check if the root exists and is a directory."""
        return self.root.is_dir()

    async def scan(self) -> list[InstallationRecord]:
        """Scan SDK, host and shared runtime directories under the root.

        Returns:
            SDK records, then host records, then runtime records.
        """
        records: list[InstallationRecord] = []
        records.extend(await self.scan_sdks())
        records.extend(await self.scan_hosts())
        records.extend(await self.scan_runtimes())
        logger.debug("Found %d records under %s", len(records), self.root)
        return records

    async def scan_sdks(self) -> list[InstallationRecord]:
        """Return one SDK record per entry of <root>/sdk."""
        names = await asyncio.to_thread(list_entry_names, self.root / SDK_SUBDIR)
        return [InstallationRecord(version=name, kind=InstallationKind.SDK) for name in names]

    async def scan_hosts(self) -> list[InstallationRecord]:
        """Return one host record per entry of <root>/host/fxr."""
        names = await asyncio.to_thread(list_entry_names, self.root / HOST_SUBDIR)
        return [InstallationRecord(version=name, kind=InstallationKind.HOST) for name in names]

    async def scan_runtimes(self) -> list[InstallationRecord]:
        """Return runtime records for every <root>/shared/<product>/<version>."""
        shared = self.root / SHARED_SUBDIR
        records: list[InstallationRecord] = []

        for product in await asyncio.to_thread(list_entry_names, shared):
            versions = await asyncio.to_thread(list_entry_names, shared / product)
            records.extend(
                InstallationRecord(version=name, kind=InstallationKind.RUNTIME, product=product)
                for name in versions
            )

        return records
