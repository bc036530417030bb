"""Catalog command implementation.

Shows the release lines that scans are checked against.
"""

import asyncio
import json
from typing import Annotated

import typer

from dnhealth.cli.types import OutputFormat, require_settings
from dnhealth.core.catalog import ReleaseCatalogClient, refresh_catalog
from dnhealth.models.scan_result import tracked_line_to_dict
from dnhealth.utils.formatting import (
    console,
    create_catalog_table,
    format_tracked_line_row,
    print_warning,
)

app = typer.Typer(
    help="Show the tracked .NET release lines.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def show_catalog(
    ctx: typer.Context,
    offline: Annotated[
        bool,
        typer.Option(
            "--offline",
            help="Show the built-in catalog without fetching.",
        ),
    ] = False,
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
    """Fetch the releases index and show the tracked lines.

    Examples:
        dnhealth catalog                 # Live catalog (fallback if offline)
        dnhealth catalog --offline       # Built-in catalog
        dnhealth catalog --format json
    """
    if ctx.invoked_subcommand is not None:
        return

    client = None
    if not offline:
        settings = require_settings()
        client = ReleaseCatalogClient(
            settings.catalog_url,
            timeout=settings.fetch_timeout_seconds,
        )

    snapshot = asyncio.run(refresh_catalog(client))

    if output_format == OutputFormat.JSON:
        data = {
            "source": snapshot.source.value,
            "error": snapshot.error,
            "lines": [tracked_line_to_dict(line) for line in snapshot.lines],
        }
        console.print_json(json.dumps(data))
        return

    if not snapshot.is_live and not offline:
        print_warning(f"Using built-in catalog: {snapshot.error}")

    title = "Tracked Release Lines" if snapshot.is_live else "Tracked Release Lines (built-in)"
    table = create_catalog_table(title)
    for line in snapshot.lines:
        table.add_row(*format_tracked_line_row(line))
    console.print(table)
