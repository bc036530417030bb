"""Command line entry point for dnhealth.

Holds the root Typer application, the global flags, and logging setup.
"""

import logging
from typing import Annotated

import typer
from rich.logging import RichHandler

from dnhealth import __version__
from dnhealth.cli.commands import authorize, catalog, config, scan
from dnhealth.utils.formatting import err_console

app = typer.Typer(
    name="dnhealth",
    help="Check the health of locally installed .NET SDKs.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)
app.add_typer(scan.app, name="scan")
app.add_typer(catalog.app, name="catalog")
app.add_typer(authorize.app, name="authorize")
app.add_typer(config.app, name="config")


def configure_logging(verbose: bool, quiet: bool) -> None:
    """Send records of the dnhealth logger to stderr through Rich.

    WARNING by default, DEBUG with --verbose, ERROR with --quiet.
    """
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    logger = logging.getLogger("dnhealth")
    logger.setLevel(level)
    logger.propagate = False
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=err_console, show_path=False))


def _print_version(value: bool) -> None:
    if not value:
        return
    typer.echo(f"dnhealth version {__version__}")
    raise typer.Exit()


VersionFlag = Annotated[
    bool | None,
    typer.Option(
        "--version",
        "-V",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
]
VerboseFlag = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Debug logging and the list of targets tried."),
]
QuietFlag = Annotated[
    bool,
    typer.Option("--quiet", "-q", help="Only log errors."),
]


@app.callback()
def main(
    ctx: typer.Context,
    version: VersionFlag = None,
    verbose: VerboseFlag = False,
    quiet: QuietFlag = False,
) -> None:
    """dnhealth - .NET installation health check.

    Finds installed .NET SDKs, runtimes and hosts and compares them
    against the Current, Previous and LTS release lines.
    """
    configure_logging(verbose, quiet)
    ctx.ensure_object(dict)
    ctx.obj.update(verbose=verbose, quiet=quiet)


if __name__ == "__main__":
    app()
