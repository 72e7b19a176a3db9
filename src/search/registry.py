"""
Search strategy lookup.

The set of strategies is closed: each member of SearchAlgorithm maps to
exactly one strategy class, and names are resolved against that table.
"""

from enum import Enum

from .astar import HeuristicSearch
from .base import SearchStrategy
from .dijkstra import UniformCostSearch
from .exceptions import UnknownAlgorithmError


class SearchAlgorithm(Enum):
    """Available search strategies."""

    DIJKSTRA = "dijkstra"
    ASTAR = "astar"

    @classmethod
    def from_name(cls, name: str) -> "SearchAlgorithm":
        """
        Resolve an algorithm name.

        Matching ignores case, hyphens, underscores and a literal ``*``,
        so ``Dijkstra``, ``AStar``, ``a-star`` and ``A*`` all work.

        Raises:
            UnknownAlgorithmError: If no algorithm matches
        """
        key = name.strip().lower().replace("-", "").replace("_", "").replace("*", "star")
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            available = ", ".join(member.value for member in cls)
            raise UnknownAlgorithmError(
                f"Unknown algorithm: '{name}'. Available: {available}",
                name=name,
            ) from None


_ALIASES = {
    "ucs": "dijkstra",
    "uniformcost": "dijkstra",
    "heuristic": "astar",
}

_STRATEGIES: dict[SearchAlgorithm, type[SearchStrategy]] = {
    SearchAlgorithm.DIJKSTRA: UniformCostSearch,
    SearchAlgorithm.ASTAR: HeuristicSearch,
}


def create_strategy(algorithm: "SearchAlgorithm | str") -> SearchStrategy:
    """
    Create a search strategy.

    Args:
        algorithm: SearchAlgorithm member or a name accepted by from_name()

    Returns:
        New strategy instance

    Raises:
        UnknownAlgorithmError: If the name is not recognized
    """
    if not isinstance(algorithm, SearchAlgorithm):
        algorithm = SearchAlgorithm.from_name(algorithm)
    return _STRATEGIES[algorithm]()


def list_algorithms() -> list[str]:
    """Names of every available algorithm."""
    return [member.value for member in SearchAlgorithm]
