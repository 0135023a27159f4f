"""Application identity, preference keys, and built-in defaults.

Everything here is immutable. The resolver and the search-select modes take
these values as constructor defaults instead of reading ambient globals.
"""

from __future__ import annotations

from dataclasses import dataclass

APP_NAME = "lazyeditor"
APP_AUTHOR = "lazyeditor"
CONFIG_FILENAME = "config.yml"
THEMES_DIRNAME = "themes"
THEME_FILE_SUFFIX = ".tmTheme"

TYPES_KEY = "types"
THEME_KEY = "theme"
TAB_WIDTH_KEY = "tab_width"
LINE_LENGTH_GUIDE_KEY = "line_length_guide"
LINE_WRAPPING_KEY = "line_wrapping"
SOFT_TABS_KEY = "soft_tabs"

# Upper bound on rows any search-select mode keeps after filtering.
MAX_SEARCH_SELECT_RESULTS = 5


@dataclass(frozen=True)
class PreferenceDefaults:
    """Fallback values used when the user document is silent or malformed."""

    theme: str = "solarized_dark"
    tab_width: int = 2
    line_length_guide: int = 80
    line_wrapping: bool = True
    soft_tabs: bool = True


DEFAULTS = PreferenceDefaults()

__all__ = [
    "APP_NAME",
    "APP_AUTHOR",
    "CONFIG_FILENAME",
    "THEMES_DIRNAME",
    "THEME_FILE_SUFFIX",
    "TYPES_KEY",
    "THEME_KEY",
    "TAB_WIDTH_KEY",
    "LINE_LENGTH_GUIDE_KEY",
    "LINE_WRAPPING_KEY",
    "SOFT_TABS_KEY",
    "MAX_SEARCH_SELECT_RESULTS",
    "PreferenceDefaults",
    "DEFAULTS",
]
