"""Data models for dnhealth.

This module exports the core data structures used throughout the application.
"""

from dnhealth.models.catalog import FALLBACK_LINES, CatalogSnapshot, CatalogSource, TrackedLine
from dnhealth.models.health import OTHER_LABEL, HealthStatus, HealthVerdict
from dnhealth.models.installation import InstallationKind, InstallationRecord
from dnhealth.models.scan_result import ScanReport

__all__ = [
    "FALLBACK_LINES",
    "OTHER_LABEL",
    "CatalogSnapshot",
    "CatalogSource",
    "HealthStatus",
    "HealthVerdict",
    "InstallationKind",
    "InstallationRecord",
    "ScanReport",
    "TrackedLine",
]
