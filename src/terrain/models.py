"""
Data models for terrain grids.

These dataclasses and enums describe cells, movement rules and cost
models in a structured way that both the grid and the search strategies
can share.
"""

import math
from dataclasses import dataclass
from enum import Enum


class MovementType(Enum):
    """How a walker may step between adjacent cells."""

    CHESS = "chess"          # King moves, 8-connected
    MANHATTAN = "manhattan"  # Cardinal moves only, 4-connected
    EUCLIDEAN = "euclidean"  # 8-connected, diagonal steps weighted by sqrt(2)

    @classmethod
    def from_name(cls, name: str) -> "MovementType":
        """Parse a movement name; accepts the first letter as shorthand."""
        key = name.strip().lower()
        for member in cls:
            if key == member.value or key == member.value[0]:
                return member
        raise ValueError(f"Unrecognized movement type: {name!r}")

    @property
    def offsets(self) -> tuple[tuple[int, int], ...]:
        """Neighbor offsets in enumeration order."""
        if self is MovementType.MANHATTAN:
            return CARDINAL_OFFSETS
        return ALL_OFFSETS

    def step_weight(self, dx: int, dy: int) -> float:
        """Multiplier applied to the base edge cost for a step."""
        if self is MovementType.EUCLIDEAN and dx != 0 and dy != 0:
            return math.sqrt(2)
        return 1.0


class CostModel(Enum):
    """How elevation change translates into movement cost."""

    EXPONENTIAL = "exponential"  # 2 ** (h1 - h0)
    DIVISION = "division"        # (h1 + 1) / (h0 + 1)
    UNIFORM = "uniform"          # 1 per step, elevation ignored

    def cost(self, from_height: float, to_height: float) -> float:
        """Base cost of stepping from one height to another."""
        if self is CostModel.EXPONENTIAL:
            try:
                return math.pow(2.0, to_height - from_height)
            except OverflowError:
                return math.inf
        if self is CostModel.DIVISION:
            return (to_height + 1.0) / (from_height + 1.0)
        return 1.0


# Row-major over (dy, dx); this order is what makes tie-breaks reproducible
ALL_OFFSETS = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)
CARDINAL_OFFSETS = ((0, -1), (-1, 0), (1, 0), (0, 1))


@dataclass(frozen=True, order=True)
class Cell:
    """A cell on the grid."""

    x: int
    y: int

    def chebyshev_distance(self, other: "Cell") -> int:
        """Number of king moves between two cells."""
        return max(abs(self.x - other.x), abs(self.y - other.y))

    def is_adjacent(self, other: "Cell") -> bool:
        """True if other is one king move away."""
        return self.chebyshev_distance(other) == 1

    def __add__(self, other: tuple[int, int]) -> "Cell":
        """Add a delta tuple to the cell."""
        return Cell(self.x + other[0], self.y + other[1])

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"
