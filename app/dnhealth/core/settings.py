"""Application settings.

This module provides the configuration model and I/O functions for
dnhealth. Settings control where the release catalog is fetched from,
where the dotnet executable and installation root are looked for, and
how long subprocess and network calls may take.

Configuration is stored in ~/.config/dnhealth/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from dnhealth.core.paths import get_settings_path

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_URL = (
    "https://raw.githubusercontent.com/dotnet/core/main/release-notes/releases-index.json"
)

# Canonical installation root used by the official installers
DEFAULT_INSTALL_ROOT = Path("/usr/local/share/dotnet")

# Probed in order; the first existing file wins
DEFAULT_EXECUTABLE_PATHS: tuple[Path, ...] = (
    Path("/usr/local/share/dotnet/dotnet"),
    Path("/usr/local/bin/dotnet"),
    Path("/opt/homebrew/bin/dotnet"),
    Path("/usr/share/dotnet/dotnet"),
    Path("/usr/lib/dotnet/dotnet"),
)


class Settings(BaseModel):
    """Configuration for dnhealth.

    Attributes:
        catalog_url: URL of the .NET releases index JSON document.
        executable_paths: Absolute paths probed for a dotnet executable.
        install_root: Installation root scanned when no executable is found.
        command_timeout_seconds: Limit for each dotnet CLI invocation.
        fetch_timeout_seconds: Limit for the catalog download.
    """

    model_config = ConfigDict(extra="forbid")

    catalog_url: Annotated[
        str,
        Field(min_length=1, description="Releases index URL"),
    ] = DEFAULT_CATALOG_URL
    executable_paths: Annotated[
        list[Path],
        Field(
            default_factory=lambda: list(DEFAULT_EXECUTABLE_PATHS),
            description="Candidate dotnet executable paths, in probe order",
        ),
    ]
    install_root: Annotated[
        Path,
        Field(description="Canonical .NET installation root"),
    ] = DEFAULT_INSTALL_ROOT
    command_timeout_seconds: Annotated[
        float,
        Field(gt=0, le=600, description="Timeout per dotnet invocation (seconds)"),
    ] = 60.0
    fetch_timeout_seconds: Annotated[
        float,
        Field(gt=0, le=300, description="Timeout for the catalog fetch (seconds)"),
    ] = 30.0


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsNotFoundError(SettingsError):
    """Raised when the settings file is not found."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Validated Settings object.

    Raises:
        SettingsNotFoundError: If the settings file doesn't exist.
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    settings_path = path or get_settings_path()

    if not settings_path.exists():
        raise SettingsNotFoundError(f"Settings file not found: {settings_path}")

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    try:
        return Settings.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def load_settings_or_default(path: Path | None = None) -> Settings:
    """Load settings, falling back to defaults when no file exists.

    Args:
        path: Path to the settings file. If None, uses the default path.

    Returns:
        Settings from the file, or default Settings if it is missing.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the content doesn't match the schema.
    """
    try:
        return load_settings(path)
    except SettingsNotFoundError:
        logger.debug("No settings file, using defaults")
        return Settings()


def save_settings(settings: Settings, path: Path | None = None) -> Path:
    """Save settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: The Settings object to save.
        path: Path to save the settings. If None, uses the default path.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    settings_path.parent.mkdir(parents=True, exist_ok=True)

    data = settings_to_dict(settings)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path


def settings_to_dict(settings: Settings) -> dict[str, object]:
    """Convert Settings to a dictionary for TOML serialization.

    Args:
        settings: The Settings to convert.

    Returns:
        Dictionary ready for TOML serialization (paths as strings).
    """
    return {
        "catalog_url": settings.catalog_url,
        "executable_paths": [str(p) for p in settings.executable_paths],
        "install_root": str(settings.install_root),
        "command_timeout_seconds": settings.command_timeout_seconds,
        "fetch_timeout_seconds": settings.fetch_timeout_seconds,
    }
