"""Path reconstruction shared by every search strategy."""

from typing import Mapping

from src.terrain.models import Cell


def reconstruct_path(predecessors: Mapping[Cell, Cell], goal: Cell) -> list[Cell]:
    """
    Walk the predecessor chain backward from goal.

    The walk stops at the first cell with no recorded predecessor. For a
    goal that was never reached this yields ``[goal]``, which callers use to
    detect an unreachable goal (the path will not begin at start).

    Args:
        predecessors: Map from cell to the cell it was cheapest reached from
        goal: Cell to reconstruct the path to

    Returns:
        Cells ordered from the first cell of the chain to goal
    """
    path = [goal]
    current = goal
    while current in predecessors:
        current = predecessors[current]
        path.append(current)
    path.reverse()
    return path
