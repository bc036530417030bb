"""Health verdict models.

One verdict is produced per tracked release line, plus one per untracked
major version found on disk.
"""

from dataclasses import dataclass, field
from enum import Enum

OTHER_LABEL = "Other"


class HealthStatus(Enum):
    """Health classification of a release line."""

    HEALTHY = "healthy"
    OUT_OF_DATE = "out_of_date"
    MISSING = "missing"
    UNSUPPORTED = "unsupported"


@dataclass(frozen=True, slots=True)
class HealthVerdict:
    """Health result for one major version.

    Attributes:
        major_version: Major version the verdict applies to
        label: Tracked line label, or 'Other' for untracked versions
        expected_version: Latest version of the tracked line (None if untracked)
        installed_version: Highest installed SDK version (None if none installed)
        status: Derived health status
    """

    major_version: int
    label: str
    status: HealthStatus
    expected_version: str | None = field(default=None)
    installed_version: str | None = field(default=None)

    @property
    def display_name(self) -> str:
        """Return the human-readable product name (e.g., '.NET 8')."""
        return f".NET {self.major_version}"

    @property
    def is_other(self) -> bool:
        """Check if this verdict describes an untracked version."""
        return self.label == OTHER_LABEL

    @property
    def status_text(self) -> str:
        """Return a short sentence describing the status."""
        if self.status == HealthStatus.HEALTHY:
            if self.installed_version is None:
                return "Up to date"
            return f"Up to date ({self.installed_version})"

        if self.status == HealthStatus.OUT_OF_DATE:
            if self.installed_version is None or self.expected_version is None:
                return "Out of date"
            return f"Out of date ({self.installed_version} → {self.expected_version})"

        if self.status == HealthStatus.MISSING:
            return "Not installed"

        if self.installed_version is None:
            return "No longer supported"
        return f"No longer supported ({self.installed_version})"
