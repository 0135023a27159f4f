"""Exceptions raised while loading the user preferences document.

Each error message names the step that failed. The underlying exception is
chained with ``raise ... from`` and stays reachable through ``__cause__``.
"""

from __future__ import annotations

from pathlib import Path


class PreferencesError(Exception):
    """Base exception for preference loading failures."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        self.path = path
        super().__init__(message)


class ConfigDirectoryUnavailableError(PreferencesError):
    """Raised when the user config directory cannot be created or located."""

    def __init__(self, path: Path | None = None) -> None:
        super().__init__("Couldn't create or open application config directory", path)


class ConfigFileUnopenableError(PreferencesError):
    """Raised when the config file cannot be created, opened, or read."""

    def __init__(self, path: Path | None = None, step: str = "create or open") -> None:
        self.step = step
        super().__init__(f"Couldn't {step} config file", path)


class ConfigParseError(PreferencesError):
    """Raised when the config file does not contain valid YAML."""

    def __init__(self, path: Path | None = None) -> None:
        super().__init__("Couldn't parse config file", path)


def describe_error_chain(exc: BaseException) -> str:
    """Render ``exc`` and its chained causes as one ``a: b: c`` line."""
    parts: list[str] = []
    current: BaseException | None = exc
    while current is not None:
        text = str(current).strip()
        if text:
            parts.append(text)
        current = current.__cause__
    return ": ".join(parts)


__all__ = [
    "PreferencesError",
    "ConfigDirectoryUnavailableError",
    "ConfigFileUnopenableError",
    "ConfigParseError",
    "describe_error_chain",
]
