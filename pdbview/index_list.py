"""Selectable list of named indices, such as types or symbols."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterable, Optional, TypeVar

Index = TypeVar("Index")


class IndexListOrdering(Enum):
    """Order in which an index list keeps its entries."""

    NONE = "none"
    ALPHABETICAL = "alphabetical"


class IndexList(Generic[Index]):
    """List of ``(name, index)`` entries with at most one selected row."""

    def __init__(self, ordering: IndexListOrdering = IndexListOrdering.NONE) -> None:
        self.ordering = ordering
        self._entries: list[tuple[str, Index]] = []
        self._selected_row: Optional[int] = None

    @property
    def entries(self) -> list[tuple[str, Index]]:
        """The entries, in display order."""
        return list(self._entries)

    @property
    def selected_row(self) -> Optional[int]:
        """Row of the selected entry, or None when nothing is selected."""
        return self._selected_row

    def __len__(self) -> int:
        return len(self._entries)

    def update_index_list(self, index_list: Iterable[tuple[str, Index]]) -> None:
        """Replace the entries and clear the selection."""
        self._entries = list(index_list)
        self._selected_row = None
        if self.ordering is IndexListOrdering.ALPHABETICAL:
            self._entries.sort(key=lambda entry: entry[0])

    def select(self, row: int) -> tuple[str, Index]:
        """Select the entry at ``row`` and return it."""
        if not 0 <= row < len(self._entries):
            raise IndexError(f"row {row} out of range for {len(self._entries)} entries")
        self._selected_row = row
        return self._entries[row]

    def select_previous(self) -> Optional[tuple[str, Index]]:
        """Move the selection up one row if possible; return the new selection."""
        if self._selected_row is not None and self._selected_row > 0:
            self._selected_row -= 1
        return self.selected()

    def select_next(self) -> Optional[tuple[str, Index]]:
        """Move the selection down one row if possible; return the new selection."""
        if self._selected_row is not None and self._selected_row < len(self._entries) - 1:
            self._selected_row += 1
        return self.selected()

    def selected(self) -> Optional[tuple[str, Index]]:
        """The selected entry, or None when nothing is selected."""
        if self._selected_row is None:
            return None
        return self._entries[self._selected_row]