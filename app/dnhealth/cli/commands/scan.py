"""Scan command implementation.

Discovers installed .NET components and reports the health of each
tracked release line.
"""

import asyncio
import json
from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from dnhealth.cli.types import OutputFormat, PromptAuthorizer, require_settings
from dnhealth.core.authorization import AuthorizedDirectoryStore
from dnhealth.core.orchestrator import ScanOrchestrator
from dnhealth.models.health import HealthStatus
from dnhealth.models.scan_result import ScanReport
from dnhealth.utils.formatting import (
    console,
    create_health_table,
    create_records_table,
    format_record_row,
    format_verdict_row,
    print_error,
    print_info,
    print_warning,
)

app = typer.Typer(
    help="Scan for installed .NET SDKs and check their health.",
    invoke_without_command=True,
)


def _print_report(report: ScanReport, show_records: bool) -> None:
    """Render a scan report as Rich tables."""
    tracked = report.tracked_verdicts
    if tracked:
        table = create_health_table()
        for verdict in tracked:
            table.add_row(*format_verdict_row(verdict))
        console.print(table)

    others = report.other_verdicts
    if others:
        table = create_health_table("Other Installations")
        for verdict in others:
            table.add_row(*format_verdict_row(verdict))
        console.print(table)

    if show_records and report.records:
        table = create_records_table()
        for record in report.records:
            table.add_row(*format_record_row(record))
        console.print(table)

    counts = {status: 0 for status in HealthStatus}
    for verdict in tracked:
        counts[verdict.status] += 1

    summary = (
        f"[status.healthy]{counts[HealthStatus.HEALTHY]} healthy[/], "
        f"[status.out_of_date]{counts[HealthStatus.OUT_OF_DATE]} out of date[/], "
        f"[status.missing]{counts[HealthStatus.MISSING]} missing[/], "
        f"[status.unsupported]{counts[HealthStatus.UNSUPPORTED]} unsupported[/]"
    )
    source = "live catalog" if report.network_available else "fallback catalog"
    console.print(f"\n[dim]{len(report.records)} components found ({source})[/]")
    console.print(f"Summary: {summary}")


@app.callback(invoke_without_command=True)
def scan_installations(
    ctx: typer.Context,
    roots: Annotated[
        list[Path] | None,
        typer.Option(
            "--root",
            "-r",
            help="Additional installation root to scan (repeatable).",
        ),
    ] = None,
    offline: Annotated[
        bool,
        typer.Option(
            "--offline",
            help="Do not fetch the releases index; use the built-in catalog.",
        ),
    ] = False,
    authorize: Annotated[
        bool,
        typer.Option(
            "--authorize/--no-authorize",
            help="Ask for an installation directory if nothing is found.",
        ),
    ] = True,
    show_records: Annotated[
        bool,
        typer.Option(
            "--show-records",
            "-a",
            help="Also list every discovered SDK, runtime and host.",
        ),
    ] = False,
    export_path: Annotated[
        Path | None,
        typer.Option(
            "--export",
            "-e",
            help="Export scan results to JSON file.",
        ),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format: table or json.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TABLE,
) -> None:
    """Scan for .NET installations and report their health.

    Automatic discovery through the dotnet CLI runs first, followed by
    the standard installation directory and any --root given.

    Examples:
        dnhealth scan                        # Scan and show health table
        dnhealth scan --offline              # Use the built-in catalog
        dnhealth scan --root ~/.dotnet       # Also scan a custom root
        dnhealth scan --format json          # Output as JSON
        dnhealth scan --export scan.json     # Export to JSON file
    """
    if ctx.invoked_subcommand is not None:
        return

    settings = require_settings()
    store = AuthorizedDirectoryStore()
    orchestrator = ScanOrchestrator(
        settings,
        offline=offline,
        extra_roots=roots or [],
        store=store,
    )
    authorizer = None
    if authorize:
        authorizer = PromptAuthorizer(
            store,
            settings.install_root,
            interactive=output_format != OutputFormat.JSON,
        )

    report = asyncio.run(orchestrator.run(authorizer))

    if export_path is not None:
        export_path = export_path.resolve()
        if export_path.is_dir():
            print_error(f"Export path is a directory: {export_path}")
            raise typer.Exit(code=1)
        try:
            export_path.parent.mkdir(parents=True, exist_ok=True)
            export_path.write_text(json.dumps(report.to_dict(), indent=2))
            print_info(f"Scan results exported to {export_path}")
        except OSError as e:
            print_error(f"Failed to export: {e}")
            raise typer.Exit(code=1) from e

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(report.to_dict()))
        if not report.found_installations:
            raise typer.Exit(code=1)
        return

    if not report.found_installations:
        print_error(report.error_message or ".NET installations not found.")
        raise typer.Exit(code=1)

    if report.error_message:
        print_warning(report.error_message)

    _print_report(report, show_records)

    if ctx.obj and ctx.obj.get("verbose"):
        console.print("\n[dim]Tried:[/]")
        for attempt in report.attempts:
            console.print(f"  [muted]{escape(attempt)}[/]")
