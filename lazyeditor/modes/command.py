"""Command palette mode.

Matching runs against human-readable labels while results keep the full
``Command`` record, so activation can dispatch on ``Command.id``.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from ..constants import MAX_SEARCH_SELECT_RESULTS
from ..search.matching import find
from ..selection import SelectionList


@dataclass(frozen=True)
class Command:
    """One palette entry: dispatch id plus display label."""

    id: str
    label: str


DEFAULT_COMMANDS: tuple[Command, ...] = (
    Command("pick_theme", "Pick theme"),
    Command("toggle_wrap", "Toggle line wrapping"),
    Command("toggle_soft_tabs", "Toggle soft tabs"),
    Command("toggle_line_length_guide", "Toggle line length guide"),
    Command("show_preferences", "Show resolved preferences"),
    Command("open_config", "Open config file"),
    Command("quit", "Quit"),
)


class CommandMode:
    """Search-select mode over palette commands."""

    LABEL = "COMMAND"

    def __init__(
        self,
        commands: Iterable[Command] = DEFAULT_COMMANDS,
        limit: int = MAX_SEARCH_SELECT_RESULTS,
    ) -> None:
        self.insert_mode = True
        self.query = ""
        self.commands: tuple[Command, ...] = tuple(commands)
        self._labels = [command.label for command in self.commands]
        self.limit = limit
        self._results: SelectionList[Command] = SelectionList()

    def __str__(self) -> str:
        return self.LABEL

    def search(self) -> None:
        matches = find(self.query, self._labels, self.limit)
        self._results = SelectionList(self.commands[match.index] for match in matches)

    def results(self) -> Iterator[Command]:
        return iter(self._results)

    def selection(self) -> Command | None:
        return self._results.selection()

    def selected_index(self) -> int:
        return self._results.selected_index()

    def select_previous(self) -> None:
        self._results.select_previous()

    def select_next(self) -> None:
        self._results.select_next()


__all__ = ["Command", "CommandMode", "DEFAULT_COMMANDS"]
