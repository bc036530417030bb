"""Terminal colors for dnhealth output.

The bundled ``data/theme.toml`` supplies every color; a ``theme.toml``
in the config directory may override any subset of them.
"""

import logging
import re
import tomllib
from functools import cache
from importlib import resources
from pathlib import Path
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, ValidationError
from rich.theme import Theme

from dnhealth.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)

_HEX_COLOR = re.compile(r"#(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})")


def _check_hex(value: str) -> str:
    color = value.strip()
    if not _HEX_COLOR.fullmatch(color):
        msg = f"expected #RGB or #RRGGBB, got {value!r}"
        raise ValueError(msg)
    return color


HexColor = Annotated[str, AfterValidator(_check_hex)]


class ThemeColors(BaseModel):
    """Hex colors for every themed element of the CLI output."""

    model_config = ConfigDict(extra="forbid")

    text: HexColor = "#ffffff"
    muted: HexColor = "#b2bec3"
    header: HexColor = "#69B9A1"
    border: HexColor = "#29526d"

    success: HexColor = "#03b971"
    warning: HexColor = "#f5b332"
    error: HexColor = "#f53263"
    info: HexColor = "#0ec1c8"

    status_healthy: HexColor = "#03b971"
    status_out_of_date: HexColor = "#f5b332"
    status_missing: HexColor = "#f53263"
    status_unsupported: HexColor = "#8395a7"

    label_current: HexColor = "#0e8ac8"
    label_previous: HexColor = "#a55eea"
    label_lts: HexColor = "#5f5fd7"
    label_other: HexColor = "#8395a7"


# Rich style name -> (ThemeColors field, bold)
STYLE_MAP: dict[str, tuple[str, bool]] = {
    "text": ("text", False),
    "muted": ("muted", False),
    "dim": ("muted", False),
    "version": ("muted", False),
    "header": ("header", False),
    "bold_header": ("header", True),
    "border": ("border", False),
    "success": ("success", False),
    "warning": ("warning", False),
    "error": ("error", True),
    "info": ("info", False),
    "status.healthy": ("status_healthy", False),
    "status.out_of_date": ("status_out_of_date", True),
    "status.missing": ("status_missing", True),
    "status.unsupported": ("status_unsupported", False),
    "label.current": ("label_current", True),
    "label.previous": ("label_previous", True),
    "label.lts": ("label_lts", True),
    "label.other": ("label_other", False),
}


def bundled_theme_path() -> Path:
    """Path of the theme file shipped inside the package."""
    return Path(str(resources.files("dnhealth.data").joinpath("theme.toml")))


def read_theme_file(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are dropped. Returns None if the file is missing,
    unreadable or not valid TOML.
    """
    try:
        with open(path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        return None
    except (OSError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    colors = data.get("colors", {})
    if not isinstance(colors, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return None
    return {key: value for key, value in colors.items() if isinstance(value, str)}


def load_theme(user_path: Path | None = None) -> ThemeColors:
    """Merge user overrides over the bundled colors.

    Args:
        user_path: Override file. Defaults to theme.toml in the config dir.

    Returns:
        Validated colors; the built-in defaults if the merge is invalid.
    """
    colors = read_theme_file(bundled_theme_path())
    if colors is None:
        logger.error("Bundled theme is missing, the installation may be broken")
        colors = {}

    overrides = read_theme_file(user_path or get_user_theme_path())
    if overrides:
        colors.update(overrides)

    try:
        return ThemeColors.model_validate(colors)
    except ValidationError as e:
        logger.warning("Invalid theme colors, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Build the Rich theme used by the shared consoles."""
    colors = colors or load_theme()
    styles = {}
    for name, (field, bold) in STYLE_MAP.items():
        color = getattr(colors, field)
        styles[name] = f"bold {color}" if bold else color
    return Theme(styles)


@cache
def get_theme() -> Theme:
    """Return the Rich theme, loading it on first use."""
    return get_rich_theme()
