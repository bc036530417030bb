"""Abstract base class for installation scanners.

This module defines the Scanner interface that every .NET discovery
strategy must implement.
"""

from abc import ABC, abstractmethod
from dnhealth.models.installation import InstallationRecord


class Scanner(ABC):
    """Abstract base class for all installation scanners.

    Scanners locate .NET components and return normalized records.
    Unlike most I/O code, a scan never raises: every independent
    sub-step that fails contributes an empty list instead.

    Example:
        >>> scanner = InstallDirectoryScanner(Path("/usr/local/share/dotnet"))
        >>> if scanner.is_available():
        ...     for record in await scanner.scan():
        ...         print(f"{record.kind.value}: {record.version}")
    """

    @property
    @abstractmethod
    def strategy(self) -> str:
        """Return a short name for the discovery strategy (e.g., 'cli')."""

    @abstractmethod
    def is_available(self) -> bool:
        """Check if this strategy can find anything on the system.

        Returns:
            True if the scanner has something to inspect, False otherwise.
        """

    @abstractmethod
    async def scan(self) -> list[InstallationRecord]:
        """Discover installations.

        Returns:
            InstallationRecord for each component found, possibly empty.
        """
