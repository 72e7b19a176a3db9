"""Terrain grids: cells, movement rules, height generation and the map itself."""

from .models import ALL_OFFSETS, CARDINAL_OFFSETS, Cell, CostModel, MovementType
from .generator import generate_terrain
from .grid import TerrainMap

__all__ = [
    # Models
    "Cell",
    "CostModel",
    "MovementType",
    "ALL_OFFSETS",
    "CARDINAL_OFFSETS",
    # Generation
    "generate_terrain",
    # Map
    "TerrainMap",
]
