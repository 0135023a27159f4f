"""Input-layer handlers for interactive modes."""

from .key_search_select import SearchSelectKeyCallbacks, handle_search_select_key

__all__ = [
    "SearchSelectKeyCallbacks",
    "handle_search_select_key",
]
