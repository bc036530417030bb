"""Unit tests for Rich formatting helpers."""

import io

from dnhealth.core.theme import get_theme
from dnhealth.models.catalog import FALLBACK_LINES, TrackedLine
from dnhealth.models.health import OTHER_LABEL, HealthStatus, HealthVerdict
from dnhealth.models.installation import InstallationKind, InstallationRecord
from dnhealth.utils.formatting import (
    create_catalog_table,
    create_health_table,
    create_records_table,
    format_record_row,
    format_tracked_line_row,
    format_verdict_row,
    label_style,
    status_style,
)
from rich.console import Console


class TestStyles:
    """Tests for style name helpers."""

    def test_status_style(self) -> None:
        """Status styles follow the status value."""
        assert status_style(HealthStatus.OUT_OF_DATE) == "status.out_of_date"

    def test_label_style(self) -> None:
        """Known labels have their own style, everything else shares one."""
        assert label_style("Current") == "label.current"
        assert label_style("LTS") == "label.lts"
        assert label_style("Unsupported") == "label.other"


class TestTables:
    """Tests for table builders and row formatters."""

    def test_health_row_matches_columns(self) -> None:
        """Verdict rows fit the health table."""
        verdict = HealthVerdict(
            major_version=8,
            label="LTS",
            status=HealthStatus.OUT_OF_DATE,
            expected_version="8.0.416",
            installed_version="8.0.404",
        )
        table = create_health_table()

        row = format_verdict_row(verdict)

        assert len(row) == len(table.columns)
        assert row[3] == "8.0.404"
        assert "8.0.404 → 8.0.416" in row[5]

    def test_other_row_has_no_label(self) -> None:
        """Untracked verdicts show no line label or expected version."""
        verdict = HealthVerdict(
            major_version=6,
            label=OTHER_LABEL,
            status=HealthStatus.HEALTHY,
            installed_version="6.0.428",
        )

        row = format_verdict_row(verdict)

        assert row[2] == ""
        assert row[4] == "-"

    def test_catalog_row_matches_columns(self) -> None:
        """Tracked line rows fit the catalog table."""
        row = format_tracked_line_row(FALLBACK_LINES[0])

        assert len(row) == len(create_catalog_table().columns)
        assert row[2] == "10.0.101"

    def test_unsupported_line_row(self) -> None:
        """Unsupported lines are marked as such."""
        line = TrackedLine(
            major_version=7, latest_version="7.0.410", label="Unsupported", is_supported=False
        )
        assert "no" in format_tracked_line_row(line)[3]

    def test_record_row(self) -> None:
        """Records without a product show a dash."""
        row = format_record_row(InstallationRecord(version="8.0.10", kind=InstallationKind.HOST))

        assert row == ("host", "8.0.10", "-")
        assert len(row) == len(create_records_table().columns)

    def test_bracketed_values_render_literally(self) -> None:
        """Versions and products taken from disk are not read as markup."""
        record = InstallationRecord(
            version="8.0.1[/]", kind=InstallationKind.RUNTIME, product="[bold]App"
        )
        table = create_records_table()
        table.add_row(*format_record_row(record))
        out = io.StringIO()

        Console(file=out, width=120, color_system=None, theme=get_theme()).print(table)

        assert "8.0.1[/]" in out.getvalue()
        assert "[bold]App" in out.getvalue()
