"""Authorize command implementation.

Manages the installation directory that scans fall back to when
automatic discovery finds nothing.
"""

from pathlib import Path
from typing import Annotated

import typer
from rich.markup import escape

from dnhealth.core.authorization import AuthorizationError, AuthorizedDirectoryStore
from dnhealth.scanners.directory import missing_subdirs
from dnhealth.utils.formatting import console, print_error, print_info, print_success, print_warning

app = typer.Typer(
    help="Manage the authorized .NET installation directory.",
    invoke_without_command=True,
)


@app.callback(invoke_without_command=True)
def authorize_directory(
    ctx: typer.Context,
    directory: Annotated[
        Path | None,
        typer.Argument(help="Installation directory to authorize."),
    ] = None,
    forget: Annotated[
        bool,
        typer.Option(
            "--forget",
            help="Remove the stored directory.",
        ),
    ] = False,
) -> None:
    """Authorize an installation directory, or show the current one.

    Examples:
        dnhealth authorize                          # Show stored directory
        dnhealth authorize /usr/local/share/dotnet  # Store a directory
        dnhealth authorize --forget                 # Remove it
    """
    if ctx.invoked_subcommand is not None:
        return

    store = AuthorizedDirectoryStore()

    if forget:
        store.forget()
        print_success("Authorized directory removed.")
        return

    if directory is None:
        current = store.resolve()
        if current is None:
            print_info("No directory authorized.")
        else:
            console.print(f"Authorized directory: [text]{escape(str(current))}[/]")
        return

    directory = directory.expanduser()
    if not directory.is_dir():
        print_error(f"Not a directory: {directory}")
        raise typer.Exit(code=1)

    missing = missing_subdirs(directory)
    if missing:
        print_warning(f"{directory} does not look like a .NET root (missing: {', '.join(missing)})")

    try:
        store.save(directory)
    except AuthorizationError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e

    print_success(f"Authorized {directory.resolve()}")
