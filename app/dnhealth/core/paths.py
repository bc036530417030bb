"""Where dnhealth keeps its files.

Settings and the theme override are configuration; the authorized
directory token is state. Both follow the XDG base directory layout:

- ``$XDG_CONFIG_HOME/dnhealth`` (default ``~/.config/dnhealth``)
- ``$XDG_STATE_HOME/dnhealth`` (default ``~/.local/state/dnhealth``)
"""

import os
from pathlib import Path

APP_NAME = "dnhealth"

SETTINGS_FILENAME = "config.toml"
THEME_FILENAME = "theme.toml"
AUTHORIZED_DIR_FILENAME = "authorized.toml"


def _app_dir(env_var: str, fallback: str) -> Path:
    # An empty variable counts as unset
    base = os.environ.get(env_var) or str(Path.home() / fallback)
    return Path(base) / APP_NAME


def get_config_dir() -> Path:
    """Directory holding config.toml and theme.toml."""
    return _app_dir("XDG_CONFIG_HOME", ".config")


def get_state_dir() -> Path:
    """Directory holding the authorized directory token."""
    return _app_dir("XDG_STATE_HOME", ".local/state")


def get_settings_path() -> Path:
    """Path of the settings file."""
    return get_config_dir() / SETTINGS_FILENAME


def get_user_theme_path() -> Path:
    """Path of the optional user color overrides."""
    return get_config_dir() / THEME_FILENAME


def get_authorized_dir_path() -> Path:
    """Path of the persisted authorization token."""
    return get_state_dir() / AUTHORIZED_DIR_FILENAME
