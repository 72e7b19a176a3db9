"""
Uniform-cost search (Dijkstra).

Expands the fringe cell with the lowest accumulated cost from start.
Ties go to the cell that entered the fringe first.
"""

from src.terrain.models import Cell

from .base import SearchState, SearchStrategy


class UniformCostSearch(SearchStrategy):
    """Dijkstra's algorithm over the grid's neighbor graph."""

    name = "Dijkstra"

    def _priority(self, cell: Cell, state: SearchState, context: object) -> float:
        return state.distance_to(cell)
