"""Theme picker mode."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from ..constants import MAX_SEARCH_SELECT_RESULTS
from ..search.matching import find
from ..selection import SelectionList


class ThemeMode:
    """Search-select mode over a fixed set of theme names."""

    LABEL = "THEME"

    def __init__(self, themes: Iterable[str], limit: int = MAX_SEARCH_SELECT_RESULTS) -> None:
        self.insert_mode = True
        self.query = ""
        self.themes: tuple[str, ...] = tuple(themes)
        self.limit = limit
        self._results: SelectionList[str] = SelectionList()

    def __str__(self) -> str:
        return self.LABEL

    def search(self) -> None:
        """Rebuild results from the current query; the cursor returns to the top."""
        matches = find(self.query, self.themes, self.limit)
        self._results = SelectionList(match.candidate for match in matches)

    def results(self) -> Iterator[str]:
        return iter(self._results)

    def selection(self) -> str | None:
        return self._results.selection()

    def selected_index(self) -> int:
        return self._results.selected_index()

    def select_previous(self) -> None:
        self._results.select_previous()

    def select_next(self) -> None:
        self._results.select_next()


__all__ = ["ThemeMode"]
