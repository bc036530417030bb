"""Unit tests for catalog command."""

import json
from pathlib import Path
from unittest.mock import AsyncMock, patch

from dnhealth.cli.main import app
from dnhealth.models.catalog import CatalogSnapshot, TrackedLine
from typer.testing import CliRunner

runner = CliRunner()

LIVE = CatalogSnapshot.live(
    [
        TrackedLine(
            major_version=11,
            latest_version="11.0.100",
            label="Current",
        ),
        TrackedLine(
            major_version=10,
            latest_version="10.0.200",
            label="Previous",
            is_long_term_support=True,
        ),
    ]
)


class TestCatalogCommand:
    """Tests for dnhealth catalog command."""

    def test_offline_shows_builtin(self, xdg_dirs: dict[str, Path]) -> None:
        """--offline shows the built-in lines without a warning."""
        result = runner.invoke(app, ["catalog", "--offline"])

        assert result.exit_code == 0
        assert "built-in" in result.output
        assert "10.0.101" in result.output
        assert "Warning" not in result.output

    def test_live(self, xdg_dirs: dict[str, Path]) -> None:
        """A live catalog is rendered as a table."""
        with patch(
            "dnhealth.cli.commands.catalog.refresh_catalog",
            new_callable=AsyncMock,
            return_value=LIVE,
        ):
            result = runner.invoke(app, ["catalog"])

        assert result.exit_code == 0
        assert "11.0.100" in result.output
        assert "built-in" not in result.output

    def test_fetch_failure_warns(self, xdg_dirs: dict[str, Path]) -> None:
        """A failed fetch warns and shows the built-in catalog."""
        with patch(
            "dnhealth.cli.commands.catalog.refresh_catalog",
            new_callable=AsyncMock,
            return_value=CatalogSnapshot.fallback("HTTP 503"),
        ):
            result = runner.invoke(app, ["catalog"])

        assert result.exit_code == 0
        assert "HTTP 503" in result.output

    def test_json(self, xdg_dirs: dict[str, Path]) -> None:
        """--format json prints source, error and lines."""
        result = runner.invoke(app, ["catalog", "--offline", "--format", "json"])

        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["source"] == "fallback"
        assert data["error"] == "offline mode"
        assert [ln["major_version"] for ln in data["lines"]] == [10, 9, 8]
