"""Unit tests for the scan report model."""

import json

from dnhealth import __version__
from dnhealth.models.catalog import CatalogSnapshot
from dnhealth.models.health import OTHER_LABEL, HealthStatus, HealthVerdict
from dnhealth.models.installation import InstallationKind, InstallationRecord
from dnhealth.models.scan_result import ScanReport, tracked_line_to_dict


def make_report(catalog: CatalogSnapshot | None = None) -> ScanReport:
    """Build a small report."""
    return ScanReport(
        verdicts=[
            HealthVerdict(
                major_version=10,
                label="Current",
                status=HealthStatus.OUT_OF_DATE,
                expected_version="10.0.101",
                installed_version="10.0.50",
            ),
            HealthVerdict(
                major_version=6,
                label=OTHER_LABEL,
                status=HealthStatus.HEALTHY,
                installed_version="6.0.428",
            ),
        ],
        records=[
            InstallationRecord(version="10.0.50", kind=InstallationKind.SDK),
            InstallationRecord(
                version="10.0.0", kind=InstallationKind.RUNTIME, product="Microsoft.NETCore.App"
            ),
        ],
        attempts=["(automatic discovery) (dotnet: /usr/local/bin/dotnet)"],
        catalog=catalog or CatalogSnapshot.fallback("offline mode"),
        error_message="Network unavailable",
    )


class TestScanReport:
    """Tests for ScanReport dataclass."""

    def test_verdict_partitions(self) -> None:
        """Tracked and other verdicts are split by label."""
        report = make_report()

        assert [v.major_version for v in report.tracked_verdicts] == [10]
        assert [v.major_version for v in report.other_verdicts] == [6]

    def test_network_available_follows_catalog(self) -> None:
        """network_available is true only for live catalogs."""
        assert make_report().network_available is False
        assert make_report(CatalogSnapshot.live([])).network_available is True

    def test_found_installations(self) -> None:
        """found_installations reflects the records."""
        assert make_report().found_installations is True

    def test_to_dict_is_json_serializable(self) -> None:
        """The exported dictionary round-trips through JSON."""
        data = json.loads(json.dumps(make_report().to_dict()))

        assert data["metadata"]["dnhealth_version"] == __version__
        assert data["metadata"]["catalog_source"] == "fallback"
        assert data["metadata"]["network_available"] is False
        assert data["verdicts"][0] == {
            "major_version": 10,
            "label": "Current",
            "expected_version": "10.0.101",
            "installed_version": "10.0.50",
            "status": "out_of_date",
        }
        assert data["installations"][1]["product"] == "Microsoft.NETCore.App"
        assert data["error"] == "Network unavailable"


class TestTrackedLineToDict:
    """Tests for tracked_line_to_dict function."""

    def test_keys(self) -> None:
        """Tracked lines export support flags."""
        line = CatalogSnapshot.fallback().lines[0]

        assert tracked_line_to_dict(line) == {
            "major_version": 10,
            "latest_version": "10.0.101",
            "label": "Current",
            "supported": True,
            "lts": True,
        }
