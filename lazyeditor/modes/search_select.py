"""Capability shared by "type to filter, arrow to pick" modes.

Concrete modes own all of their state. This module only describes the
surface the input layer and renderers rely on.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Protocol, TypeVar

T = TypeVar("T", covariant=True)


class SearchSelectMode(Protocol[T]):
    """Interactive pick-list driven by a query buffer.

    ``query`` is mutated directly by the input layer, which is expected to
    call ``search()`` after every change. ``insert_mode`` tells whether the
    buffer accepts characters or keys navigate the result list.
    """

    LABEL: str
    query: str
    insert_mode: bool

    def search(self) -> None: ...

    def results(self) -> Iterator[T]: ...

    def selection(self) -> T | None: ...

    def selected_index(self) -> int: ...

    def select_previous(self) -> None: ...

    def select_next(self) -> None: ...


__all__ = ["SearchSelectMode"]
