"""Configuration management for the terrain pathfinder."""

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml

from src.terrain.models import CostModel, MovementType

logger = logging.getLogger(__name__)


@dataclass
class TerrainConfig:
    """Terrain map settings."""

    width: int = 100
    height: int = 100
    roughness: int = 3
    # None = derive from the current time
    seed: Optional[int] = None
    # Options: "chess", "manhattan", "euclidean"
    movement: str = "chess"
    # Options: "exponential", "division", "uniform"
    cost_model: str = "exponential"

    def get_movement(self) -> MovementType:
        """Get movement as enum, falling back to chess on bad values."""
        try:
            return MovementType.from_name(self.movement)
        except ValueError:
            logger.warning(f"Invalid movement value '{self.movement}', defaulting to chess")
            return MovementType.CHESS

    def get_cost_model(self) -> CostModel:
        """Get cost model as enum, falling back to exponential on bad values."""
        try:
            return CostModel(self.cost_model.lower())
        except ValueError:
            logger.warning(f"Invalid cost_model value '{self.cost_model}', defaulting to exponential")
            return CostModel.EXPONENTIAL


@dataclass
class SearchConfig:
    """Which strategies to run by default."""

    algorithms: list[str] = field(default_factory=lambda: ["dijkstra", "astar"])


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    file: Optional[str] = None


@dataclass
class Config:
    """Main configuration container."""

    terrain: TerrainConfig = field(default_factory=TerrainConfig)
    search: SearchConfig = field(default_factory=SearchConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Load configuration from YAML file with environment variable overrides.

    Args:
        config_path: Path to config file. Defaults to config/default.yaml

    Returns:
        Populated Config dataclass
    """
    if config_path is None:
        # Look for config in standard locations
        candidates = [
            Path("config/default.yaml"),
            Path(__file__).parent.parent / "config" / "default.yaml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = str(candidate)
                break

    config = Config()

    if config_path and Path(config_path).exists():
        with open(config_path) as f:
            data = yaml.safe_load(f)

        if data:
            if "terrain" in data:
                config.terrain = TerrainConfig(**data["terrain"])
            if "search" in data:
                config.search = SearchConfig(**data["search"])
            if "logging" in data:
                config.logging = LoggingConfig(**data["logging"])

    # Environment variable overrides
    if os.environ.get("TERRAINPATH_LOG_LEVEL"):
        config.logging.level = os.environ["TERRAINPATH_LOG_LEVEL"]
    if os.environ.get("TERRAINPATH_SEED"):
        config.terrain.seed = int(os.environ["TERRAINPATH_SEED"])
    if os.environ.get("TERRAINPATH_MOVEMENT"):
        config.terrain.movement = os.environ["TERRAINPATH_MOVEMENT"]
    if os.environ.get("TERRAINPATH_ALGORITHMS"):
        config.search.algorithms = [
            name.strip() for name in os.environ["TERRAINPATH_ALGORITHMS"].split(",") if name.strip()
        ]

    return config


def setup_logging(config: LoggingConfig) -> None:
    """
    Configure logging based on configuration.

    Args:
        config: Logging configuration
    """
    level = getattr(logging, config.level.upper(), logging.INFO)

    handlers: list[logging.Handler] = [logging.StreamHandler()]

    if config.file:
        # Ensure log directory exists
        log_path = Path(config.file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(config.file))

    logging.basicConfig(
        level=level,
        format=config.format,
        handlers=handlers,
        force=True,
    )

    logger.info(f"Logging configured at level {config.level}")
