"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

import sys
from enum import Enum
from pathlib import Path

import typer

from dnhealth.core.authorization import AuthorizationError, AuthorizedDirectoryStore
from dnhealth.core.settings import Settings, SettingsError, load_settings_or_default
from dnhealth.utils.formatting import print_error, print_warning


class OutputFormat(str, Enum):
    """Output format options."""

    TABLE = "table"
    JSON = "json"


def require_settings() -> Settings:
    """Load settings or exit with an error message.

    Returns:
        Settings from the config file, or defaults if there is none.

    Raises:
        typer.Exit: If the config file exists but is invalid.
    """
    try:
        return load_settings_or_default()
    except SettingsError as e:
        print_error(str(e))
        raise typer.Exit(code=1) from e


def stdin_is_interactive() -> bool:
    """Check if stdin is attached to a terminal."""
    return sys.stdin.isatty()


class PromptAuthorizer:
    """Asks the user on the terminal for an installation directory.

    A directory authorized in an earlier run is reused without asking.
    Nothing is asked when stdin is not a terminal or prompting is off.
    """

    def __init__(
        self,
        store: AuthorizedDirectoryStore,
        default: Path,
        *,
        interactive: bool = True,
    ) -> None:
        """Initialize the authorizer.

        Args:
            store: Where the authorized directory is persisted.
            default: Directory offered at the prompt.
            interactive: Allow prompting. Off while stdout carries JSON.
        """
        self.store = store
        self.default = default
        self.interactive = interactive

    def request_directory(self) -> Path | None:
        """Return a stored or newly authorized directory, or None."""
        stored = self.store.resolve()
        if stored is not None:
            return stored

        if not self.interactive or not stdin_is_interactive():
            return None

        confirmed = typer.confirm(
            "No .NET installations were found automatically. "
            "Authorize a directory to scan?",
            default=True,
        )
        if not confirmed:
            return None

        answer = typer.prompt("Installation directory", default=str(self.default))
        directory = Path(answer).expanduser()
        if not directory.is_dir():
            print_warning(f"Not a directory: {directory}")
            return None

        try:
            self.store.save(directory)
        except AuthorizationError as e:
            print_warning(str(e))
        return directory.resolve()
