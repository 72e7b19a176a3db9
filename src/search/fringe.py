"""Fringe of discovered cells awaiting expansion."""

from typing import Callable, Iterator

from src.terrain.models import Cell


class Fringe:
    """
    Unordered multiset of cells with linear-scan selection.

    A cell may be pushed several times if it is relaxed more than once
    before being expanded. Selection scans every entry and keeps the first
    one with a strictly lower priority, so among equal minima the entry
    pushed earliest wins.
    """

    def __init__(self) -> None:
        self._entries: list[Cell] = []

    def push(self, cell: Cell) -> None:
        """Append a cell, even if it is already present."""
        self._entries.append(cell)

    def pop_min(self, priority: Callable[[Cell], float]) -> Cell:
        """
        Remove and return the first entry with the lowest priority.

        Args:
            priority: Function mapping a cell to its ordering key

        Returns:
            The selected cell

        Raises:
            IndexError: If the fringe is empty
        """
        if not self._entries:
            raise IndexError("pop from empty fringe")

        best_index = 0
        best_value = priority(self._entries[0])
        for index in range(1, len(self._entries)):
            value = priority(self._entries[index])
            if value < best_value:
                best_value = value
                best_index = index

        return self._entries.pop(best_index)

    def __len__(self) -> int:
        return len(self._entries)

    def __bool__(self) -> bool:
        return bool(self._entries)

    def __iter__(self) -> Iterator[Cell]:
        return iter(self._entries)

    def __contains__(self, cell: object) -> bool:
        return cell in self._entries
