"""Scan report model for display and JSON export.

This module defines the data structure returned by a complete scan:
health verdicts together with the diagnostics that explain them.
"""

import socket
from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any

from dnhealth.models.catalog import CatalogSnapshot, TrackedLine
from dnhealth.models.health import HealthVerdict
from dnhealth.models.installation import InstallationRecord


@dataclass(frozen=True, slots=True)
class ScanReport:
    """Complete result of one scan.

    Attributes:
        verdicts: Health verdicts, tracked lines first.
        records: Every installation record discovered.
        attempts: Human-readable description of each target tried.
        catalog: Catalog snapshot the verdicts were computed against.
        error_message: Non-fatal problem to report to the user, if any.
        timestamp: ISO format timestamp when the scan finished.
    """

    verdicts: list[HealthVerdict]
    records: list[InstallationRecord]
    attempts: list[str]
    catalog: CatalogSnapshot
    error_message: str | None = field(default=None)
    timestamp: str = field(default_factory=lambda: datetime.now(UTC).isoformat())

    @property
    def network_available(self) -> bool:
        """Check if the live catalog was used."""
        return self.catalog.is_live

    @property
    def found_installations(self) -> bool:
        """Check if any installation record was discovered."""
        return bool(self.records)

    @property
    def tracked_verdicts(self) -> list[HealthVerdict]:
        """Verdicts for tracked release lines."""
        return [v for v in self.verdicts if not v.is_other]

    @property
    def other_verdicts(self) -> list[HealthVerdict]:
        """Verdicts for untracked major versions."""
        return [v for v in self.verdicts if v.is_other]

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        from dnhealth import __version__

        return {
            "metadata": {
                "timestamp": self.timestamp,
                "hostname": socket.gethostname(),
                "dnhealth_version": __version__,
                "catalog_source": self.catalog.source.value,
                "network_available": self.network_available,
            },
            "verdicts": [verdict_to_dict(v) for v in self.verdicts],
            "installations": [record_to_dict(r) for r in self.records],
            "attempts": list(self.attempts),
            "error": self.error_message,
        }


def verdict_to_dict(verdict: HealthVerdict) -> dict[str, Any]:
    """Convert a HealthVerdict to a dictionary."""
    return {
        "major_version": verdict.major_version,
        "label": verdict.label,
        "expected_version": verdict.expected_version,
        "installed_version": verdict.installed_version,
        "status": verdict.status.value,
    }


def record_to_dict(record: InstallationRecord) -> dict[str, Any]:
    """Convert an InstallationRecord to a dictionary."""
    return {
        "version": record.version,
        "kind": record.kind.value,
        "product": record.product,
    }


def tracked_line_to_dict(line: TrackedLine) -> dict[str, Any]:
    """Convert a TrackedLine to a dictionary."""
    return {
        "major_version": line.major_version,
        "latest_version": line.latest_version,
        "label": line.label,
        "supported": line.is_supported,
        "lts": line.is_long_term_support,
    }
