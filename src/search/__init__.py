"""Search strategies for least-cost paths over terrain grids."""

from .astar import HeuristicSearch, terrain_heuristic
from .base import GridContract, SearchResult, SearchState, SearchStrategy, validate_grid
from .dijkstra import UniformCostSearch
from .exceptions import (
    InvalidEdgeCostError,
    InvalidGridError,
    InvalidPathError,
    PathfindingError,
    UnknownAlgorithmError,
)
from .fringe import Fringe
from .path import reconstruct_path
from .registry import SearchAlgorithm, create_strategy, list_algorithms

__all__ = [
    # Interface
    "GridContract",
    "SearchResult",
    "SearchState",
    "SearchStrategy",
    "validate_grid",
    # Strategies
    "HeuristicSearch",
    "UniformCostSearch",
    "terrain_heuristic",
    # Building blocks
    "Fringe",
    "reconstruct_path",
    # Registry
    "SearchAlgorithm",
    "create_strategy",
    "list_algorithms",
    # Errors
    "InvalidEdgeCostError",
    "InvalidGridError",
    "InvalidPathError",
    "PathfindingError",
    "UnknownAlgorithmError",
]
