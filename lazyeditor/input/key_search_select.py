"""Search-select keyboard handling."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from ..modes.search_select import SearchSelectMode


@dataclass(frozen=True)
class SearchSelectKeyCallbacks:
    """External operations required for search-select key handling."""

    close_mode: Callable[[], None]
    accept_selection: Callable[[object], bool]


def _accept(mode: SearchSelectMode, accept_selection: Callable[[object], bool]) -> bool:
    """Hand the current selection to ``accept_selection``; nothing happens when empty."""
    selection = mode.selection()
    if selection is None:
        return False
    return bool(accept_selection(selection))


def handle_search_select_key(
    key: str,
    mode: SearchSelectMode,
    callbacks: SearchSelectKeyCallbacks,
) -> tuple[bool, bool]:
    """Handle one key while a search-select mode is active.

    Returns ``(handled, should_quit)`` so the main loop can stop event
    propagation and optionally terminate the application.
    """
    key_lower = key.lower()

    if key == "ESC" or key == "\x03":
        callbacks.close_mode()
        return True, False

    if key == "TAB":
        mode.insert_mode = not mode.insert_mode
        return True, False

    if key == "UP":
        mode.select_previous()
        return True, False
    if key == "DOWN":
        mode.select_next()
        return True, False
    if key == "ENTER":
        return True, _accept(mode, callbacks.accept_selection)

    if mode.insert_mode:
        if key == "BACKSPACE":
            if mode.query:
                mode.query = mode.query[:-1]
                mode.search()
            return True, False
        if len(key) == 1 and key.isprintable():
            mode.query += key
            mode.search()
        return True, False

    if key_lower == "k":
        mode.select_previous()
        return True, False
    if key_lower == "j":
        mode.select_next()
        return True, False
    if key_lower == "l":
        return True, _accept(mode, callbacks.accept_selection)
    if key_lower == "i":
        mode.insert_mode = True
    return True, False


__all__ = ["SearchSelectKeyCallbacks", "handle_search_select_key"]
