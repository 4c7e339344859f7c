"""Filterable collections backing every resource list.

A collection holds the full item list, the subset matching the active search
and a cursor into that subset. The cursor is ``None`` exactly when the
filtered subset is empty; otherwise it always indexes into it.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pulsarhawk.models.resources import Message
from pulsarhawk.utils.message_decoding import body_text

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass
class Search:
    """Search text and whether typed characters currently feed it."""

    value: str = ""
    expecting_input: bool = True


@dataclass(frozen=True, slots=True)
class CollectionView:
    """Immutable copy of a collection handed to the renderer."""

    all: tuple[Any, ...]
    filtered: tuple[Any, ...]
    cursor: int | None
    search: Search | None

    @property
    def selected(self) -> Any | None:
        if self.cursor is None:
            return None
        return self.filtered[self.cursor]


def clamp_cursor(items: list[Any], cursor: int | None) -> int | None:
    """Keep ``cursor`` when it still indexes ``items``, else snap to 0 or None."""
    if not items:
        return None
    if cursor is not None and 0 <= cursor < len(items):
        return cursor
    return 0


class FilterableCollection(Generic[T]):
    """Named items with a search-filtered view and a circular cursor."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self.all: list[T] = list(items or [])
        self.filtered: list[T] = list(self.all)
        self.cursor: int | None = clamp_cursor(self.filtered, 0)
        self.search: Search | None = None

    def __len__(self) -> int:
        return len(self.filtered)

    # ------------------------------------------------------------------
    # Matching
    # ------------------------------------------------------------------

    def matches(self, item: T, needle: str) -> bool:
        """Substring match against the item's name."""
        return needle in item.name  # type: ignore[attr-defined]

    def same_item(self, left: T, right: T) -> bool:
        """Identity used to keep the selection across a refresh."""
        return left.name == right.name  # type: ignore[attr-defined]

    # ------------------------------------------------------------------
    # Filtering and cursor
    # ------------------------------------------------------------------

    def filter(self, reset_cursor: bool = False) -> None:
        """Recompute ``filtered`` from ``all`` and the search, then clamp the cursor."""
        if self.search is None:
            self.filtered = list(self.all)
        else:
            needle = self.search.value
            self.filtered = [item for item in self.all if self.matches(item, needle)]
        self.cursor = clamp_cursor(self.filtered, 0 if reset_cursor else self.cursor)

    def cursor_up(self) -> None:
        if self.cursor is None:
            return
        self.cursor = (self.cursor - 1) % len(self.filtered)

    def cursor_down(self) -> None:
        if self.cursor is None:
            return
        self.cursor = (self.cursor + 1) % len(self.filtered)

    def selected(self) -> T | None:
        if self.cursor is None:
            return None
        return self.filtered[self.cursor]

    def set_all(self, items: Iterable[T]) -> None:
        """Replace every item, keeping the selected item when it survives.

        When the previously selected item is gone the cursor falls back to the
        first row (or ``None`` for an empty result).
        """
        previous = self.selected()
        self.all = list(items)
        self.filter()
        if previous is None or self.cursor is None:
            return
        for index, item in enumerate(self.filtered):
            if self.same_item(item, previous):
                self.cursor = index
                return
        self.cursor = 0

    def clear(self) -> None:
        """Drop every item and any search."""
        self.all = []
        self.search = None
        self.filter(reset_cursor=True)

    # ------------------------------------------------------------------
    # Search
    # ------------------------------------------------------------------

    @property
    def is_capturing(self) -> bool:
        return self.search is not None and self.search.expecting_input

    def toggle_search(self) -> None:
        """Start, clear or resume the search depending on its current mode."""
        if self.search is None:
            self.search = Search()
        elif self.search.expecting_input:
            self.search = None
        else:
            self.search.expecting_input = True
        self.filter(reset_cursor=True)

    def clear_search(self) -> None:
        self.search = None
        self.filter(reset_cursor=True)

    def lock_search(self) -> bool:
        """Stop feeding characters to the search; returns False if not capturing."""
        if not self.is_capturing:
            return False
        self.search.expecting_input = False  # type: ignore[union-attr]
        return True

    def push_search_char(self, char: str) -> None:
        if not self.is_capturing:
            return
        self.search.value += char  # type: ignore[union-attr]
        self.filter(reset_cursor=True)

    def pop_search_char(self) -> None:
        if not self.is_capturing:
            return
        self.search.value = self.search.value[:-1]  # type: ignore[union-attr]
        self.filter(reset_cursor=True)

    def clear_search_input(self) -> None:
        if not self.is_capturing:
            return
        self.search.value = ""  # type: ignore[union-attr]
        self.filter(reset_cursor=True)

    def snapshot(self) -> CollectionView:
        search = None
        if self.search is not None:
            search = Search(self.search.value, self.search.expecting_input)
        return CollectionView(
            all=tuple(self.all),
            filtered=tuple(self.filtered),
            cursor=self.cursor,
            search=search,
        )


class MessageCollection(FilterableCollection[Message]):
    """Live-tail buffer filtered on body text and properties.

    Spaces in the search text are ignored. Bodies that are not valid UTF-8
    never match a non-empty search.
    """

    def matches(self, item: Message, needle: str) -> bool:
        needle = needle.replace(" ", "")
        text = body_text(item.body)
        if text is None:
            return False
        return needle in text or any(needle in prop for prop in item.properties)

    def same_item(self, left: Message, right: Message) -> bool:
        return left is right

    def append(self, message: Message, max_size: int | None = None) -> None:
        """Add a newly received message without moving the cursor.

        The cursor is initialised to the first row only when it was unset.
        With ``max_size`` the oldest messages are evicted first and the
        cursor follows the selected message.
        """
        had_cursor = self.cursor is not None
        previous = self.selected()
        self.all.append(message)
        evicted = 0
        if max_size is not None and len(self.all) > max_size:
            evicted = len(self.all) - max_size
            del self.all[:evicted]
        if evicted:
            self.filter()
        elif self.search is None or self.matches(message, self.search.value):
            # Only the new message needs testing; earlier rows keep their places.
            self.filtered.append(message)
        if not had_cursor:
            self.cursor = clamp_cursor(self.filtered, 0)
            return
        if evicted and previous is not None:
            for index, item in enumerate(self.filtered):
                if item is previous:
                    self.cursor = index
                    return
            logger.debug("Selected message evicted from the live buffer")
            self.cursor = clamp_cursor(self.filtered, 0)
