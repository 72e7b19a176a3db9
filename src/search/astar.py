"""
Heuristic-guided search (A*).

Orders the fringe by accumulated cost plus an elevation-aware estimate of
the remaining cost. Relaxation still uses only true edge costs; the
estimate never enters the distance map.

The estimate assumes the exponential cost model, where climbing by ``d``
in one step costs ``2 ** d``. Spreading a height change evenly across the
fewest possible steps gives ``steps * 2 ** (d / steps)``. Against that
model the downhill and flat cases never overestimate. The uphill case can
overestimate when a longer detour spreads the climb over more steps than
``steps``, so A* optimality only holds on grids where that does not pay
off. Other cost models get no guarantee at all.
"""

import math

import numpy as np

from src.terrain.models import Cell

from .base import GridContract, SearchState, SearchStrategy


def terrain_heuristic(
    source: Cell,
    target: Cell,
    source_height: float,
    target_height: float,
) -> float:
    """
    Estimate the cost of moving from source to target.

    Args:
        source: Cell the estimate starts from
        target: Cell the estimate ends at (normally the goal)
        source_height: Elevation at source
        target_height: Elevation at target

    Returns:
        0 for the same cell, the Chebyshev step count on flat ground,
        discounted exponentially going downhill and inflated uphill;
        a climb too steep for a float saturates to infinity
    """
    if source == target:
        return 0.0

    steps = source.chebyshev_distance(target)

    if source_height == target_height:
        return float(steps)
    if source_height > target_height:
        return steps * math.pow(2.0, -(source_height - target_height) / steps)
    try:
        return steps * math.pow(2.0, (target_height - source_height) / steps)
    except OverflowError:
        return math.inf


class _HeuristicCache:
    """Per-run lazy table of heuristic values toward the goal."""

    def __init__(self, grid: GridContract):
        self.grid = grid
        self.goal = grid.goal
        self.goal_height = grid.elevation(grid.goal)
        self.values = np.full((grid.height, grid.width), np.nan, dtype=np.float64)

    def __call__(self, cell: Cell) -> float:
        value = self.values[cell.y, cell.x]
        if np.isnan(value):
            value = terrain_heuristic(cell, self.goal, self.grid.elevation(cell), self.goal_height)
            self.values[cell.y, cell.x] = value
        return float(value)


class HeuristicSearch(SearchStrategy):
    """A* with the elevation-aware heuristic."""

    name = "AStar"

    def _prepare(self, grid: GridContract) -> _HeuristicCache:
        return _HeuristicCache(grid)

    def _priority(self, cell: Cell, state: SearchState, context: _HeuristicCache) -> float:
        return state.distance_to(cell) + context(cell)
