"""Config command implementation.

Shows and initializes the dnhealth settings file.
"""

from typing import Annotated

import tomli_w
import typer
from rich.markup import escape

from dnhealth.cli.types import require_settings
from dnhealth.core.paths import get_settings_path
from dnhealth.core.settings import Settings, SettingsError, save_settings, settings_to_dict
from dnhealth.utils.formatting import console, print_error, print_success, print_warning

app = typer.Typer(
    help="Show or create the settings file.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Print the effective settings as TOML."""
    settings = require_settings()
    path = get_settings_path()
    source = str(path) if path.exists() else "defaults"
    console.print(f"[dim]# source: {escape(source)}[/]")
    console.print(tomli_w.dumps(settings_to_dict(settings)), markup=False, highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option(
            "--force",
            help="Overwrite an existing settings file.",
        ),
    ] = False,
) -> None:
    """Write a settings file with default values."""
    path = get_settings_path()
    if path.exists() and not force:
        print_warning(f"Settings file already exists: {path} (use --force to overwrite)")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(Settings(), path)
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {saved}")
