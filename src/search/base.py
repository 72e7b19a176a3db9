"""
Search strategy interface.

Defines the grid contract the strategies consume, the per-run working
state, and the shared relaxation loop. Concrete strategies only decide how
fringe entries are ordered.
"""

import logging
import math
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol, Sequence

import numpy as np

from src.terrain.models import Cell

from .exceptions import InvalidEdgeCostError, InvalidGridError
from .fringe import Fringe
from .path import reconstruct_path

logger = logging.getLogger(__name__)


class GridContract(Protocol):
    """What a search needs to know about a grid."""

    @property
    def width(self) -> int: ...

    @property
    def height(self) -> int: ...

    @property
    def start(self) -> Cell: ...

    @property
    def goal(self) -> Cell: ...

    def elevation(self, cell: Cell) -> float: ...

    def neighbors(self, cell: Cell) -> Sequence[Cell]: ...

    def edge_cost(self, source: Cell, target: Cell) -> float: ...


@dataclass
class SearchResult:
    """Outcome of one search run."""

    path: list[Cell]
    cost: float
    expanded: int = 0

    @property
    def reached(self) -> bool:
        """Whether the goal was reached."""
        return math.isfinite(self.cost)

    def __len__(self) -> int:
        """Return path length in cells."""
        return len(self.path)

    def __iter__(self):
        """Allow `for cell in result:` to iterate the path."""
        return iter(self.path)

    def __repr__(self) -> str:
        if self.reached:
            return f"SearchResult(path=[{len(self.path)} cells], cost={self.cost:.4f}, expanded={self.expanded})"
        return f"SearchResult(path=[goal only], cost=inf, expanded={self.expanded})"


@dataclass
class SearchState:
    """
    Working structures for a single run.

    Allocated fresh per run and sized to the grid. Arrays are indexed
    ``[y, x]``; a cell absent from ``predecessors`` has no predecessor.
    """

    distance: np.ndarray
    visited: np.ndarray
    predecessors: dict[Cell, Cell] = field(default_factory=dict)
    fringe: Fringe = field(default_factory=Fringe)
    expanded: int = 0

    @classmethod
    def for_grid(cls, grid: GridContract) -> "SearchState":
        state = cls(
            distance=np.full((grid.height, grid.width), np.inf, dtype=np.float64),
            visited=np.zeros((grid.height, grid.width), dtype=bool),
        )
        state.distance[grid.start.y, grid.start.x] = 0.0
        state.fringe.push(grid.start)
        return state

    def distance_to(self, cell: Cell) -> float:
        return float(self.distance[cell.y, cell.x])

    def is_visited(self, cell: Cell) -> bool:
        return bool(self.visited[cell.y, cell.x])


def _in_bounds(grid: GridContract, cell: Cell) -> bool:
    return 0 <= cell.x < grid.width and 0 <= cell.y < grid.height


def validate_grid(grid: GridContract) -> None:
    """
    Check the grid preconditions before a search starts.

    Raises:
        InvalidGridError: If dimensions are not positive or start/goal lie
            outside the grid
    """
    if grid.width <= 0 or grid.height <= 0:
        raise InvalidGridError(f"Grid dimensions must be positive, got {grid.width}x{grid.height}")
    if not _in_bounds(grid, grid.start):
        raise InvalidGridError(f"Start {grid.start} is outside the {grid.width}x{grid.height} grid", cell=grid.start)
    if not _in_bounds(grid, grid.goal):
        raise InvalidGridError(f"Goal {grid.goal} is outside the {grid.width}x{grid.height} grid", cell=grid.goal)


class SearchStrategy(ABC):
    """
    Abstract base class for grid search strategies.

    Subclasses must implement:
    - _priority(): ordering key of a fringe cell

    Strategies hold no per-run state, so one instance may be reused for
    any number of runs (but not concurrently on the same grid).
    """

    name: str = "search"

    def find_path(self, grid: GridContract) -> list[Cell]:
        """
        Find a least-cost path from the grid's start to its goal.

        Args:
            grid: Grid to search; treated as read-only for the run

        Returns:
            Cells from start to goal inclusive, or ``[goal]`` when the goal
            cannot be reached
        """
        return self.search(grid).path

    def search(self, grid: GridContract) -> SearchResult:
        """
        Run the search and report path, cost and expansion count.

        Raises:
            InvalidGridError: If start or goal is out of bounds
            InvalidEdgeCostError: If the grid reports a negative or
                non-finite edge cost
        """
        validate_grid(grid)
        goal = grid.goal
        state = SearchState.for_grid(grid)
        context = self._prepare(grid)

        logger.debug(f"{self.name}: searching {grid.width}x{grid.height} grid from {grid.start} to {goal}")

        def priority(cell: Cell) -> float:
            return self._priority(cell, state, context)

        while state.fringe:
            current = state.fringe.pop_min(priority)
            if state.is_visited(current):
                continue  # stale duplicate

            state.visited[current.y, current.x] = True
            state.expanded += 1

            if current == goal:
                break

            self._relax_neighbors(grid, state, current)

        cost = state.distance_to(goal)
        path = reconstruct_path(state.predecessors, goal)

        if math.isfinite(cost):
            logger.debug(f"{self.name}: reached {goal} with cost {cost:.4f}, {len(path)} cells, {state.expanded} expanded")
        else:
            logger.info(f"{self.name}: fringe exhausted, {goal} unreachable from {grid.start} ({state.expanded} expanded)")

        return SearchResult(path=path, cost=cost, expanded=state.expanded)

    def _relax_neighbors(self, grid: GridContract, state: SearchState, current: Cell) -> None:
        """Relax every unvisited neighbor of current through current."""
        base = state.distance_to(current)
        for neighbor in grid.neighbors(current):
            if state.is_visited(neighbor):
                continue

            step = grid.edge_cost(current, neighbor)
            if step < 0 or not math.isfinite(step):
                raise InvalidEdgeCostError(
                    f"Edge {current} -> {neighbor} has invalid cost {step}",
                    source=current,
                    target=neighbor,
                    cost=step,
                )

            candidate = base + step
            if candidate < state.distance_to(neighbor):
                state.distance[neighbor.y, neighbor.x] = candidate
                state.fringe.push(neighbor)
                state.predecessors[neighbor] = current

    def _prepare(self, grid: GridContract) -> object:
        """Build per-run data the priority function needs. None by default."""
        return None

    @abstractmethod
    def _priority(self, cell: Cell, state: SearchState, context: object) -> float:
        """
        Ordering key of a fringe cell; lowest is expanded first.

        Args:
            cell: Fringe cell
            state: Working state of the current run
            context: Whatever _prepare() returned for this run

        Returns:
            Priority value
        """

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
