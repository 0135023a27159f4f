"""Theme catalog and style resolution.

Built-in themes are the installed Pygments styles, exposed with snake_case
names (``solarized-dark`` becomes ``solarized_dark``). Users can add more by
dropping ``*.tmTheme`` files into the ``themes`` directory next to
``config.yml``; those contribute names only.
"""

from __future__ import annotations

import logging
from pathlib import Path

from pygments.style import Style
from pygments.styles import get_all_styles, get_style_by_name
from pygments.util import ClassNotFound

from .constants import DEFAULTS, THEME_FILE_SUFFIX, THEMES_DIRNAME
from .preferences import default_config_dir

logger = logging.getLogger(__name__)

FALLBACK_STYLE = "default"


def theme_name_for_style(style_name: str) -> str:
    return style_name.strip().replace("-", "_").lower()


def style_name_for_theme(theme_name: str) -> str:
    return theme_name.strip().replace("_", "-").lower()


def themes_dir(config_dir: Path | None = None) -> Path:
    """Return the user theme directory inside the app config directory."""
    return (config_dir if config_dir is not None else default_config_dir()) / THEMES_DIRNAME


def builtin_theme_names() -> tuple[str, ...]:
    """Return theme names for every installed Pygments style."""
    return tuple(sorted({theme_name_for_style(name) for name in get_all_styles()}))


def user_theme_names(themes_dir: Path) -> tuple[str, ...]:
    """Return stems of theme files in ``themes_dir``.

    A missing or unreadable directory contributes no themes.
    """
    try:
        entries = list(themes_dir.iterdir())
    except OSError as exc:
        logger.debug("Skipping user themes in %s: %s", themes_dir, exc)
        return ()
    names = {entry.stem for entry in entries if entry.suffix == THEME_FILE_SUFFIX and entry.is_file()}
    return tuple(sorted(names))


def available_theme_names(themes_dir: Path | None = None) -> tuple[str, ...]:
    """Return sorted built-in plus user theme names without duplicates."""
    names = set(builtin_theme_names())
    if themes_dir is not None:
        names.update(user_theme_names(themes_dir))
    return tuple(sorted(names))


def resolve_style(name: str | None) -> type[Style]:
    """Return the Pygments style for ``name``.

    Unknown names fall back to the default theme, then to Pygments' own
    ``default`` style.
    """
    for candidate in (name, DEFAULTS.theme):
        if not candidate:
            continue
        try:
            return get_style_by_name(style_name_for_theme(candidate))
        except ClassNotFound:
            logger.debug("No Pygments style for theme %r", candidate)
    return get_style_by_name(FALLBACK_STYLE)


__all__ = [
    "FALLBACK_STYLE",
    "available_theme_names",
    "builtin_theme_names",
    "themes_dir",
    "resolve_style",
    "style_name_for_theme",
    "theme_name_for_style",
    "user_theme_names",
]
