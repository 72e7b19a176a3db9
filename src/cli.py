"""
Command-line interface for the terrain pathfinder.

Usage:
    python -m src.cli run                      Run the configured algorithms
    python -m src.cli run dijkstra astar -W 200 -H 200 --seed 3
    python -m src.cli algorithms               List available algorithms
"""

import argparse
import logging
import math
import sys
import time
from typing import Optional

from rich.console import Console
from rich.table import Table

from src.config import Config, load_config, setup_logging
from src.search import PathfindingError, create_strategy, list_algorithms
from src.terrain import CostModel, MovementType, TerrainMap, generate_terrain

logger = logging.getLogger(__name__)


def _apply_overrides(args: argparse.Namespace, config: Config) -> None:
    """Copy CLI flags that were given onto the loaded config."""
    terrain = config.terrain
    if args.width is not None:
        terrain.width = args.width
    if args.height is not None:
        terrain.height = args.height
    if args.roughness is not None:
        terrain.roughness = args.roughness
    if args.seed is not None:
        terrain.seed = args.seed
    if args.movement is not None:
        terrain.movement = args.movement
    if args.cost_model is not None:
        terrain.cost_model = args.cost_model
    if args.algorithms:
        config.search.algorithms = list(args.algorithms)


def cmd_run(args: argparse.Namespace, config: Config) -> int:
    """Generate a terrain and run each requested algorithm on it."""
    _apply_overrides(args, config)
    terrain = config.terrain

    try:
        strategies = [create_strategy(name) for name in config.search.algorithms]
    except PathfindingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not strategies:
        print("Error: no algorithms requested", file=sys.stderr)
        return 1

    seed = terrain.seed if terrain.seed is not None else int(time.time() * 1000)
    movement = terrain.get_movement()
    cost_model = terrain.get_cost_model()

    try:
        heights = generate_terrain(terrain.width, terrain.height, terrain.roughness, seed)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    logger.info(
        f"Terrain {terrain.width}x{terrain.height}, roughness={terrain.roughness}, seed={seed}, "
        f"movement={movement.value}, cost_model={cost_model.value}"
    )

    table = Table(title=f"Seed {seed}")
    table.add_column("Algorithm")
    table.add_column("PathCost", justify="right")
    table.add_column("Uncovered", justify="right")
    table.add_column("PathLength", justify="right")
    table.add_column("TimeTaken (ms)", justify="right")

    exit_code = 0
    for strategy in strategies:
        terrain_map = TerrainMap(heights, movement=movement, cost_model=cost_model)
        started = time.perf_counter()
        try:
            cost = terrain_map.find_path(strategy)
        except PathfindingError as e:
            logger.error(f"{strategy.name} failed: {e}")
            print(f"Error: {strategy.name} failed: {e}", file=sys.stderr)
            exit_code = 3
            continue
        elapsed_ms = (time.perf_counter() - started) * 1000

        cost_text = f"{cost:.4f}" if math.isfinite(cost) else "unreachable"
        table.add_row(
            strategy.name,
            cost_text,
            str(terrain_map.num_uncovered),
            str(len(terrain_map.last_path)),
            f"{elapsed_ms:.1f}",
        )

    Console().print(table)
    return exit_code


def cmd_algorithms(args: argparse.Namespace, config: Config) -> int:
    """Print the available algorithm names."""
    for name in list_algorithms():
        print(name)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Terrain pathfinder - least-cost routes over height maps",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to configuration file",
    )
    parser.add_argument(
        "--log-level",
        "-l",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level override",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # run command
    run_parser = subparsers.add_parser("run", help="Run algorithms on a generated terrain")
    run_parser.add_argument(
        "algorithms",
        nargs="*",
        help=f"Algorithms to run ({', '.join(list_algorithms())}); defaults to the configured list",
    )
    run_parser.add_argument("--width", "-W", type=int, default=None, help="Width of the terrain map")
    run_parser.add_argument("--height", "-H", type=int, default=None, help="Height of the terrain map")
    run_parser.add_argument("--seed", "-s", type=int, default=None, help="Seed for terrain generation")
    run_parser.add_argument(
        "--roughness",
        "-r",
        type=int,
        default=None,
        choices=range(0, 8),
        metavar="[0-7]",
        help="Roughness of the terrain",
    )
    run_parser.add_argument(
        "--movement",
        "-m",
        type=str,
        default=None,
        choices=[m.value for m in MovementType],
        help="Movement type",
    )
    run_parser.add_argument(
        "--cost-model",
        type=str,
        default=None,
        choices=[c.value for c in CostModel],
        help="How elevation change is priced",
    )
    run_parser.set_defaults(func=cmd_run)

    # algorithms command
    algorithms_parser = subparsers.add_parser("algorithms", help="List available algorithms")
    algorithms_parser.set_defaults(func=cmd_algorithms)

    args = parser.parse_args(argv)

    # Load config and set up logging
    config = load_config(args.config)
    if args.log_level:
        config.logging.level = args.log_level
    setup_logging(config.logging)

    if args.command is None:
        parser.print_help()
        return 1

    return args.func(args, config)


if __name__ == "__main__":
    sys.exit(main())
