"""Ordered, cursor-addressable container backing search-select results.

Items are frozen at construction. Only the cursor moves, and it is always
clamped to the list bounds (no wraparound).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")


class SelectionList(Generic[T]):
    """Immutable sequence of items plus a clamped selection cursor.

    An empty list has no selection. ``selected_index()`` then reports ``0`` as
    a sentinel, so callers that must tell the two cases apart use
    ``has_selection()``.
    """

    def __init__(self, items: Iterable[T] = ()) -> None:
        """Build the list with the cursor on the first item."""
        self._items: tuple[T, ...] = tuple(items)
        self._selected_index = 0

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"SelectionList({list(self._items)!r}, selected_index={self._selected_index})"

    def has_selection(self) -> bool:
        """Return whether there is an item under the cursor."""
        return bool(self._items)

    def selection(self) -> T | None:
        """Return the item under the cursor, or ``None`` when empty."""
        if not self._items:
            return None
        return self._items[self._selected_index]

    def selected_index(self) -> int:
        """Return the cursor position (``0`` when the list is empty)."""
        return self._selected_index

    def _move(self, direction: int) -> None:
        if not self._items:
            return
        self._selected_index = max(0, min(len(self._items) - 1, self._selected_index + direction))

    def select_previous(self) -> None:
        """Move the cursor one item toward the start, stopping at the first."""
        self._move(-1)

    def select_next(self) -> None:
        """Move the cursor one item toward the end, stopping at the last."""
        self._move(1)


__all__ = ["SelectionList"]
