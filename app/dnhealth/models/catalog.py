"""Tracked release line models.

A catalog snapshot is the immutable set of release lines a scan is
judged against, tagged with where it came from.
"""

from dataclasses import dataclass, field
from enum import Enum


class CatalogSource(Enum):
    """Origin of a catalog snapshot."""

    LIVE = "live"
    FALLBACK = "fallback"


@dataclass(frozen=True, slots=True)
class TrackedLine:
    """A .NET release line monitored for health.

    Attributes:
        major_version: Major version of the channel (e.g., 10)
        latest_version: Latest SDK version published for the channel
        label: Display label ('Current', 'Previous', 'LTS', 'Unsupported')
        is_supported: Whether the channel is in active support
        is_long_term_support: Whether the channel is an LTS release
    """

    major_version: int
    latest_version: str
    label: str
    is_supported: bool = True
    is_long_term_support: bool = False


# Used until a live catalog has been fetched, and whenever a fetch fails
FALLBACK_LINES: tuple[TrackedLine, ...] = (
    TrackedLine(
        major_version=10,
        latest_version="10.0.101",
        label="Current",
        is_long_term_support=True,
    ),
    TrackedLine(
        major_version=9,
        latest_version="9.0.308",
        label="Previous",
    ),
    TrackedLine(
        major_version=8,
        latest_version="8.0.416",
        label="LTS",
        is_long_term_support=True,
    ),
)


@dataclass(frozen=True, slots=True)
class CatalogSnapshot:
    """Immutable set of tracked lines used for one scan.

    Attributes:
        lines: Tracked lines in catalog order.
        source: Whether the lines were fetched or are the static fallback.
        error: Why the fallback is in use, if it is.
    """

    lines: tuple[TrackedLine, ...]
    source: CatalogSource
    error: str | None = field(default=None)

    @classmethod
    def live(cls, lines: list[TrackedLine]) -> "CatalogSnapshot":
        """Create a snapshot from freshly fetched lines."""
        return cls(lines=tuple(lines), source=CatalogSource.LIVE)

    @classmethod
    def fallback(cls, error: str | None = None) -> "CatalogSnapshot":
        """Create a snapshot holding the static fallback catalog."""
        return cls(lines=FALLBACK_LINES, source=CatalogSource.FALLBACK, error=error)

    @property
    def is_live(self) -> bool:
        """Check if this snapshot came from the remote catalog."""
        return self.source == CatalogSource.LIVE
