"""Unit tests for health verdict models."""

import pytest
from dnhealth.models.health import OTHER_LABEL, HealthStatus, HealthVerdict


class TestHealthStatus:
    """Tests for HealthStatus enum."""

    def test_values(self) -> None:
        """Statuses serialize to snake_case names."""
        assert [s.value for s in HealthStatus] == [
            "healthy",
            "out_of_date",
            "missing",
            "unsupported",
        ]


class TestHealthVerdict:
    """Tests for HealthVerdict dataclass."""

    def test_display_name(self) -> None:
        """Display name uses the major version."""
        verdict = HealthVerdict(major_version=8, label="LTS", status=HealthStatus.MISSING)
        assert verdict.display_name == ".NET 8"

    def test_is_other(self) -> None:
        """Only the Other label marks untracked versions."""
        other = HealthVerdict(major_version=6, label=OTHER_LABEL, status=HealthStatus.HEALTHY)
        tracked = HealthVerdict(major_version=9, label="Previous", status=HealthStatus.HEALTHY)

        assert other.is_other is True
        assert tracked.is_other is False

    @pytest.mark.parametrize(
        ("status", "installed", "expected", "text"),
        [
            (HealthStatus.HEALTHY, "10.0.101", "10.0.101", "Up to date (10.0.101)"),
            (HealthStatus.OUT_OF_DATE, "10.0.50", "10.0.101", "Out of date (10.0.50 → 10.0.101)"),
            (HealthStatus.MISSING, None, "10.0.101", "Not installed"),
            (HealthStatus.UNSUPPORTED, "7.0.5", "7.0.410", "No longer supported (7.0.5)"),
        ],
    )
    def test_status_text(
        self,
        status: HealthStatus,
        installed: str | None,
        expected: str | None,
        text: str,
    ) -> None:
        """Status text describes the verdict."""
        verdict = HealthVerdict(
            major_version=10,
            label="Current",
            status=status,
            expected_version=expected,
            installed_version=installed,
        )
        assert verdict.status_text == text
