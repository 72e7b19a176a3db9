"""Exceptions raised by the pathfinding core."""

from typing import Optional

from src.terrain.models import Cell


class PathfindingError(Exception):
    """Base class for pathfinding errors."""


class InvalidGridError(PathfindingError, ValueError):
    """The grid reports a start or goal cell outside its bounds."""

    def __init__(self, message: str, cell: Optional[Cell] = None):
        super().__init__(message)
        self.cell = cell


class InvalidEdgeCostError(PathfindingError, ValueError):
    """The grid reported a negative or non-finite edge cost."""

    def __init__(self, message: str, source: Cell, target: Cell, cost: float):
        super().__init__(message)
        self.source = source
        self.target = target
        self.cost = cost


class InvalidPathError(PathfindingError, ValueError):
    """A path contains a step between cells that are not neighbors."""

    def __init__(self, message: str, index: int = 0):
        super().__init__(message)
        self.index = index


class UnknownAlgorithmError(PathfindingError, ValueError):
    """No search strategy is registered under the requested name."""

    def __init__(self, message: str, name: str = ""):
        super().__init__(message)
        self.name = name
