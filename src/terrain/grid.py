"""
Terrain map: the concrete grid the search strategies run on.

Holds a height field plus start and goal cells, enumerates neighbors
according to a movement type, prices steps with a cost model, and records
which cells a search uncovered.
"""

import logging
import math
from typing import TYPE_CHECKING, Optional, Sequence

import numpy as np

from src.search.exceptions import InvalidPathError

from .models import Cell, CostModel, MovementType

if TYPE_CHECKING:
    from src.search.base import SearchStrategy

logger = logging.getLogger(__name__)


class TerrainMap:
    """
    A height field with start and goal cells.

    Heights are indexed ``[y, x]``. By default the start sits at the middle
    of the west edge and the goal at the middle of the east edge.
    """

    def __init__(
        self,
        heights: np.ndarray,
        start: Optional[Cell] = None,
        goal: Optional[Cell] = None,
        movement: MovementType = MovementType.CHESS,
        cost_model: CostModel = CostModel.EXPONENTIAL,
        blocked: Optional[np.ndarray] = None,
    ):
        """
        Initialize the map.

        Args:
            heights: 2D array of elevations, shape (height, width)
            start: Start cell (defaults to west-middle)
            goal: Goal cell (defaults to east-middle)
            movement: Adjacency model for neighbor enumeration
            cost_model: How elevation change is priced
            blocked: Optional boolean mask of impassable cells, same shape
        """
        self.heights = np.asarray(heights, dtype=np.float64)
        if self.heights.ndim != 2:
            raise ValueError(f"Heights must be a 2D array, got shape {self.heights.shape}")

        rows, cols = self.heights.shape
        self._width = cols
        self._height = rows
        self._start = start if start is not None else Cell(0, rows // 2)
        self._goal = goal if goal is not None else Cell(cols - 1, rows // 2)
        self.movement = movement
        self.cost_model = cost_model

        if blocked is None:
            self.blocked = np.zeros(self.heights.shape, dtype=bool)
        else:
            self.blocked = np.asarray(blocked, dtype=bool)
            if self.blocked.shape != self.heights.shape:
                raise ValueError(
                    f"Blocked mask shape {self.blocked.shape} does not match heights {self.heights.shape}"
                )

        self._uncovered = np.zeros(self.heights.shape, dtype=bool)
        self.last_path: list[Cell] = []

    # -------------------- grid contract --------------------

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def start(self) -> Cell:
        return self._start

    @property
    def goal(self) -> Cell:
        return self._goal

    def in_bounds(self, cell: Cell) -> bool:
        """Check if a cell lies on the map."""
        return 0 <= cell.x < self._width and 0 <= cell.y < self._height

    def is_blocked(self, cell: Cell) -> bool:
        """Check if a cell is impassable."""
        return bool(self.blocked[cell.y, cell.x])

    def elevation(self, cell: Cell) -> float:
        """Height at a cell."""
        return float(self.heights[cell.y, cell.x])

    def neighbors(self, cell: Cell) -> list[Cell]:
        """
        Traversable cells one step away, in fixed offset order.

        Calling this marks the cell as uncovered.
        """
        self._uncovered[cell.y, cell.x] = True
        result = []
        for offset in self.movement.offsets:
            neighbor = cell + offset
            if self.in_bounds(neighbor) and not self.is_blocked(neighbor):
                result.append(neighbor)
        return result

    def edge_cost(self, source: Cell, target: Cell) -> float:
        """Cost of stepping from source to an adjacent target."""
        base = self.cost_model.cost(self.elevation(source), self.elevation(target))
        return base * self.movement.step_weight(target.x - source.x, target.y - source.y)

    # -------------------- reporting --------------------

    @property
    def num_uncovered(self) -> int:
        """Number of cells whose neighbors have been requested."""
        return int(self._uncovered.sum())

    def uncovered_cells(self) -> list[Cell]:
        """Cells whose neighbors have been requested, row-major."""
        ys, xs = np.nonzero(self._uncovered)
        return [Cell(int(x), int(y)) for y, x in zip(ys, xs)]

    def reset_uncovered(self) -> None:
        """Forget which cells were uncovered."""
        self._uncovered[:] = False

    def _is_step(self, source: Cell, target: Cell) -> bool:
        dx, dy = target.x - source.x, target.y - source.y
        return (dx, dy) in self.movement.offsets and self.in_bounds(target) and not self.is_blocked(target)

    def path_cost(self, path: Sequence[Cell]) -> float:
        """
        Total cost of a path.

        Args:
            path: Cells to walk, expected to begin at start

        Returns:
            Sum of edge costs, or infinity if the path does not begin at
            start or end at goal

        Raises:
            InvalidPathError: If two consecutive cells are not neighbors
        """
        if not path or path[0] != self._start or path[-1] != self._goal:
            logger.warning(f"Path does not connect {self._start} to {self._goal}; treating cost as infinite")
            return math.inf

        total = 0.0
        for index in range(len(path) - 1):
            source, target = path[index], path[index + 1]
            if not self._is_step(source, target):
                raise InvalidPathError(
                    f"Step {index} from {source} to {target} is not a legal move",
                    index=index,
                )
            total += self.edge_cost(source, target)
        return total

    def find_path(self, strategy: "SearchStrategy") -> float:
        """
        Run a strategy on this map and price the path it returns.

        Uncovered-cell tracking is reset first so num_uncovered reflects
        only this run.

        Args:
            strategy: Search strategy to run

        Returns:
            Cost of the returned path (infinity if the goal was not reached)
        """
        self.reset_uncovered()
        path = strategy.find_path(self)
        self.last_path = path
        return self.path_cost(path)

    def __repr__(self) -> str:
        return (
            f"TerrainMap({self._width}x{self._height}, start={self._start}, goal={self._goal}, "
            f"movement={self.movement.value}, cost_model={self.cost_model.value})"
        )
