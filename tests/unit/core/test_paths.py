"""Unit tests for XDG path management."""

import os
from pathlib import Path
from unittest.mock import patch

from dnhealth.core.paths import (
    APP_NAME,
    get_authorized_dir_path,
    get_config_dir,
    get_settings_path,
    get_state_dir,
    get_user_theme_path,
)


class TestAppDirs:
    """Tests for get_config_dir and get_state_dir."""

    def test_defaults_under_home(self) -> None:
        """Without XDG variables the home directory defaults are used."""
        with patch.dict(os.environ, {"HOME": str(Path.home())}, clear=True):
            config_dir = get_config_dir()
            state_dir = get_state_dir()

        assert config_dir == Path.home() / ".config" / APP_NAME
        assert state_dir == Path.home() / ".local" / "state" / APP_NAME

    def test_respects_xdg_variables(self, tmp_path: Path) -> None:
        """XDG_CONFIG_HOME and XDG_STATE_HOME are honored."""
        env = {"XDG_CONFIG_HOME": str(tmp_path / "c"), "XDG_STATE_HOME": str(tmp_path / "s")}
        with patch.dict(os.environ, env):
            assert get_config_dir() == tmp_path / "c" / APP_NAME
            assert get_state_dir() == tmp_path / "s" / APP_NAME

    def test_empty_variable_uses_default(self) -> None:
        """An empty XDG variable is treated as unset."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            assert get_config_dir() == Path.home() / ".config" / APP_NAME


class TestFilePaths:
    """Tests for file path getters."""

    def test_config_files(self, xdg_dirs: dict[str, Path]) -> None:
        """Settings and theme live in the config directory."""
        assert get_settings_path() == xdg_dirs["config"] / "config.toml"
        assert get_user_theme_path() == xdg_dirs["config"] / "theme.toml"

    def test_authorization_token(self, xdg_dirs: dict[str, Path]) -> None:
        """The authorization token lives in the state directory."""
        assert get_authorized_dir_path() == xdg_dirs["state"] / "authorized.toml"

    def test_nothing_created(self, xdg_dirs: dict[str, Path]) -> None:
        """Resolving paths does not touch the filesystem."""
        get_settings_path()
        get_authorized_dir_path()

        assert not xdg_dirs["config"].exists()
        assert not xdg_dirs["state"].exists()
