"""Search-select mode exports.

``SearchSelectMode`` is the shared capability; ``ThemeMode`` and
``CommandMode`` are the concrete pick-lists.
"""

from __future__ import annotations

from ..constants import MAX_SEARCH_SELECT_RESULTS
from .command import DEFAULT_COMMANDS, Command, CommandMode
from .search_select import SearchSelectMode
from .theme import ThemeMode

__all__ = [
    "MAX_SEARCH_SELECT_RESULTS",
    "SearchSelectMode",
    "ThemeMode",
    "Command",
    "CommandMode",
    "DEFAULT_COMMANDS",
]
