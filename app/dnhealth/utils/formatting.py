"""Rich output for the dnhealth CLI.

Shared consoles, the tables used by the commands, and one-line
status messages.
"""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from dnhealth.core.theme import get_theme
from dnhealth.models.health import HealthStatus

if TYPE_CHECKING:
    from dnhealth.models.catalog import TrackedLine
    from dnhealth.models.health import HealthVerdict
    from dnhealth.models.installation import InstallationRecord


def _color_system() -> str:
    # Full hex colors on a terminal, Rich's own detection elsewhere
    return "truecolor" if sys.stdout.isatty() else "auto"


console = Console(theme=get_theme(), color_system=_color_system())
err_console = Console(theme=get_theme(), stderr=True, color_system=_color_system())

_STATUS_ICONS: dict[HealthStatus, str] = {
    HealthStatus.HEALTHY: "✔",
    HealthStatus.OUT_OF_DATE: "⚠",
    HealthStatus.MISSING: "✘",
    HealthStatus.UNSUPPORTED: "ℹ",
}

_LABEL_STYLES = {
    "Current": "label.current",
    "Previous": "label.previous",
    "LTS": "label.lts",
}


def status_style(status: HealthStatus) -> str:
    """Return the theme style name for a health status."""
    return f"status.{status.value}"


def label_style(label: str) -> str:
    """Return the theme style name for a release line label."""
    return _LABEL_STYLES.get(label, "label.other")


def _themed_table(title: str, columns: list[tuple[str, dict[str, Any]]], **kwargs: Any) -> Table:
    table = Table(
        title=title,
        show_header=True,
        header_style="bold_header",
        border_style="border",
        **kwargs,
    )
    for header, options in columns:
        table.add_column(header, **options)
    return table


def create_health_table(title: str = ".NET Version Health") -> Table:
    """Create the table listing one health verdict per row.

    Args:
        title: Table title.

    Returns:
        Table with icon, version, line, installed, expected and status columns.
    """
    return _themed_table(
        title,
        [
            ("", {"width": 2, "justify": "center"}),
            ("Version", {"no_wrap": True}),
            ("Line", {"no_wrap": True}),
            ("Installed", {"style": "version"}),
            ("Expected", {"style": "version"}),
            ("Status", {}),
        ],
    )


def format_verdict_row(verdict: HealthVerdict) -> tuple[str, str, str, str, str, str]:
    """Format a verdict as a row of create_health_table()."""
    style = status_style(verdict.status)
    return (
        f"[{style}]{_STATUS_ICONS[verdict.status]}[/]",
        f"[text]{verdict.display_name}[/]",
        "" if verdict.is_other else f"[{label_style(verdict.label)}]{verdict.label}[/]",
        escape(verdict.installed_version or "-"),
        escape(verdict.expected_version or "-"),
        f"[{style}]{escape(verdict.status_text)}[/]",
    )


def create_catalog_table(title: str = "Tracked Release Lines") -> Table:
    """Create the table listing tracked release lines."""
    return _themed_table(
        title,
        [
            ("Version", {"no_wrap": True}),
            ("Line", {"no_wrap": True}),
            ("Latest SDK", {"style": "version"}),
            ("Supported", {"justify": "center"}),
            ("LTS", {"justify": "center"}),
        ],
    )


def _yes_no(flag: bool) -> str:
    return "[success]yes[/]" if flag else "[muted]no[/]"


def format_tracked_line_row(line: TrackedLine) -> tuple[str, str, str, str, str]:
    """Format a tracked line as a row of create_catalog_table()."""
    return (
        f"[text].NET {line.major_version}[/]",
        f"[{label_style(line.label)}]{line.label}[/]",
        escape(line.latest_version),
        _yes_no(line.is_supported),
        _yes_no(line.is_long_term_support),
    )


def create_records_table(title: str = "Discovered Components") -> Table:
    """Create the table listing raw installation records."""
    return _themed_table(
        title,
        [
            ("Kind", {"no_wrap": True}),
            ("Version", {"style": "version"}),
            ("Product", {"style": "text"}),
        ],
        row_styles=["", "on grey7"],
    )


def format_record_row(record: InstallationRecord) -> tuple[str, str, str]:
    """Format a record as a row of create_records_table()."""
    return (record.kind.value, escape(record.version), escape(record.product or "-"))


def print_info(message: str) -> None:
    """Print an informational line to stdout."""
    console.print(f"[info]{escape(message)}[/]")


def print_success(message: str) -> None:
    """Print a success line to stdout."""
    console.print(f"[success]{escape(message)}[/]")


def print_warning(message: str) -> None:
    """Print a warning to stderr."""
    err_console.print(f"[warning]Warning:[/] {escape(message)}")


def print_error(message: str) -> None:
    """Print an error to stderr."""
    err_console.print(f"[error]Error:[/] {escape(message)}")
