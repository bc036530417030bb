"""Installation models for .NET discovery.

This module defines the normalized record produced by every discovery
strategy, whether it parsed CLI output or a directory entry name.
"""

from dataclasses import dataclass, field
from enum import Enum

from dnhealth.core.version import major_version


class InstallationKind(Enum):
    """Enumeration of .NET installation component kinds."""

    SDK = "sdk"
    RUNTIME = "runtime"
    HOST = "host"


@dataclass(frozen=True, slots=True)
class InstallationRecord:
    """Represents a single .NET component found on disk.

    This is an immutable data structure; records are never modified
    after discovery.

    Attributes:
        version: Dot-delimited version string (e.g., '8.0.404')
        kind: Which component this record describes
        product: Shared framework name, only set for runtimes
            (e.g., 'Microsoft.NETCore.App')
    """

    version: str
    kind: InstallationKind
    product: str | None = field(default=None)

    def __post_init__(self) -> None:
        """Validate record data after initialization."""
        if not self.version:
            msg = "Installation version cannot be empty"
            raise ValueError(msg)

    @property
    def major_version(self) -> int:
        """Leading numeric component of the version, 0 if not numeric."""
        return major_version(self.version)

    @property
    def is_sdk(self) -> bool:
        """Check if this record is an SDK."""
        return self.kind == InstallationKind.SDK
