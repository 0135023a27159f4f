"""User preferences backed by a YAML document.

``Preferences.load`` reads ``config.yml`` from the per-user config directory
and keeps the first YAML document. Every query afterwards is a fresh walk over
that document with a fixed fallback order; missing keys and wrong-typed values
silently resolve to the built-in defaults.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import yaml
from platformdirs import user_config_dir

from .constants import (
    APP_AUTHOR,
    APP_NAME,
    CONFIG_FILENAME,
    DEFAULTS,
    LINE_LENGTH_GUIDE_KEY,
    LINE_WRAPPING_KEY,
    SOFT_TABS_KEY,
    TAB_WIDTH_KEY,
    THEME_KEY,
    TYPES_KEY,
    PreferenceDefaults,
)
from .errors import ConfigDirectoryUnavailableError, ConfigFileUnopenableError, ConfigParseError

logger = logging.getLogger(__name__)

_MISSING = object()


def default_config_dir() -> Path:
    """Return the platform-specific per-user config directory for the app."""
    return Path(user_config_dir(APP_NAME, APP_AUTHOR))


def config_path(config_dir: Path | None = None) -> Path:
    """Return the config file path inside ``config_dir`` (or the default dir)."""
    return (config_dir if config_dir is not None else default_config_dir()) / CONFIG_FILENAME


def parse_document(text: str, path: Path | None = None) -> object | None:
    """Parse YAML text and return its first document, or ``None`` when empty."""
    try:
        documents = list(yaml.safe_load_all(text))
    except yaml.YAMLError as exc:
        logger.warning("Invalid YAML in %s: %s", path or "<string>", exc)
        raise ConfigParseError(path) from exc
    return documents[0] if documents else None


def _lookup(data: object, *keys: str) -> object:
    """Walk nested mappings along ``keys``; return ``_MISSING`` on any miss."""
    node = data
    for key in keys:
        if not isinstance(node, dict) or key not in node:
            return _MISSING
        node = node[key]
    return node


def _as_int(value: object) -> int | None:
    """Accept real integers only; YAML booleans are not widths."""
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _path_extension(path: str | os.PathLike[str] | None) -> str | None:
    """Return the final suffix of ``path`` without its dot, if it has one."""
    if path is None:
        return None
    try:
        suffix = Path(path).suffix
    except TypeError:
        return None
    return suffix[1:] or None


class Preferences:
    """Typed, defaulted view over an optional preferences document."""

    def __init__(self, data: object | None = None, defaults: PreferenceDefaults = DEFAULTS) -> None:
        self.data = data
        self.defaults = defaults

    @classmethod
    def from_yaml(cls, text: str, defaults: PreferenceDefaults = DEFAULTS) -> Preferences:
        """Build preferences from YAML source text."""
        return cls(parse_document(text), defaults)

    @classmethod
    def load(cls, config_dir: Path | None = None, defaults: PreferenceDefaults = DEFAULTS) -> Preferences:
        """Open (creating if needed) the user config file and parse it.

        Raises a :class:`~lazyeditor.errors.PreferencesError` subclass naming
        the first step that failed. Callers decide whether to abort or carry
        on with ``Preferences(None)``.
        """
        if config_dir is None:
            try:
                config_dir = default_config_dir()
            except Exception as exc:
                logger.warning("Could not resolve user config directory: %s", exc)
                raise ConfigDirectoryUnavailableError() from exc
        try:
            config_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.warning("Could not create config directory %s: %s", config_dir, exc)
            raise ConfigDirectoryUnavailableError(config_dir) from exc

        path = config_path(config_dir)
        logger.debug("Loading preferences from %s", path)
        try:
            config_file = open(path, "a+", encoding="utf-8")
        except OSError as exc:
            logger.warning("Could not open config file %s: %s", path, exc)
            raise ConfigFileUnopenableError(path) from exc

        with config_file:
            try:
                config_file.seek(0)
                text = config_file.read()
            except (OSError, UnicodeDecodeError) as exc:
                logger.warning("Could not read config file %s: %s", path, exc)
                raise ConfigFileUnopenableError(path, step="read") from exc

        return cls(parse_document(text, path), defaults)

    def _get(self, *keys: str) -> object:
        if self.data is None:
            return _MISSING
        return _lookup(self.data, *keys)

    def theme(self) -> str:
        value = self._get(THEME_KEY)
        return value if isinstance(value, str) else self.defaults.theme

    def tab_width(self, path: str | os.PathLike[str] | None = None) -> int:
        """Resolve tab width: ``types.<ext>.tab_width``, then ``tab_width``, then default."""
        extension = _path_extension(path)
        if extension is not None:
            width = _as_int(self._get(TYPES_KEY, extension, TAB_WIDTH_KEY))
            if width is not None:
                return width
        width = _as_int(self._get(TAB_WIDTH_KEY))
        return width if width is not None else self.defaults.tab_width

    def line_length_guide(self) -> int | None:
        """Return the guide column, the default column for ``true``, or ``None``."""
        value = self._get(LINE_LENGTH_GUIDE_KEY)
        if isinstance(value, bool):
            return self.defaults.line_length_guide if value else None
        return _as_int(value)

    def line_wrapping(self) -> bool:
        value = self._get(LINE_WRAPPING_KEY)
        return value if isinstance(value, bool) else self.defaults.line_wrapping

    def soft_tabs(self) -> bool:
        value = self._get(SOFT_TABS_KEY)
        return value if isinstance(value, bool) else self.defaults.soft_tabs

    def tab_content(self) -> str:
        """Return the text inserted for one indent level.

        Width always comes from the global setting; per-extension overrides
        do not apply here.
        """
        if self.soft_tabs():
            return " " * self.tab_width(None)
        return "\t"


__all__ = [
    "Preferences",
    "config_path",
    "default_config_dir",
    "parse_document",
]
