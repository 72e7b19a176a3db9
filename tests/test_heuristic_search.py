"""Tests for heuristic-guided (A*) search and its terrain heuristic."""

import math

import numpy as np
import pytest

from src.search import HeuristicSearch, UniformCostSearch, terrain_heuristic
from src.terrain.grid import TerrainMap
from src.terrain.models import Cell, CostModel, MovementType

from grids import GraphGrid, brute_force_cost, flat_map


class TestTerrainHeuristic:
    """The elevation-aware estimate."""

    def test_same_cell_is_zero(self):
        """No distance, no cost, regardless of heights."""
        assert terrain_heuristic(Cell(2, 3), Cell(2, 3), 10.0, 99.0) == 0.0

    def test_flat_is_chebyshev_steps(self):
        """Equal heights give the number of king moves."""
        assert terrain_heuristic(Cell(0, 0), Cell(3, 1), 5.0, 5.0) == 3.0

    def test_downhill_is_discounted(self):
        """Descending 4 over 2 steps: 2 * 2**-2."""
        assert terrain_heuristic(Cell(0, 0), Cell(2, 0), 10.0, 6.0) == pytest.approx(0.5)

    def test_uphill_is_inflated(self):
        """Climbing 4 over 2 steps: 2 * 2**2."""
        assert terrain_heuristic(Cell(0, 0), Cell(2, 2), 6.0, 10.0) == pytest.approx(8.0)

    def test_direction_matters(self):
        """Swapping heights changes the estimate."""
        up = terrain_heuristic(Cell(0, 0), Cell(1, 0), 0.0, 3.0)
        down = terrain_heuristic(Cell(0, 0), Cell(1, 0), 3.0, 0.0)
        assert up == pytest.approx(8.0)
        assert down == pytest.approx(0.125)

    def test_steep_climb_saturates(self):
        """A climb past float range gives infinity instead of raising."""
        assert terrain_heuristic(Cell(0, 0), Cell(1, 0), 0.0, 2000.0) == math.inf

    def test_steep_descent_is_zero(self):
        """A drop past float range underflows to zero."""
        assert terrain_heuristic(Cell(0, 0), Cell(1, 0), 2000.0, 0.0) == 0.0

    def test_fractional_heights(self):
        """Heights need not be integers."""
        value = terrain_heuristic(Cell(0, 0), Cell(0, 4), 1.0, 3.0)
        assert value == pytest.approx(4 * math.pow(2, 0.5))


class TestHeuristicSearch:
    """A* over terrain maps."""

    def test_diagonal_path_on_3x3(self):
        """Flat 3x3 chess map: straight diagonal of cost 2."""
        grid = flat_map(3, 3, Cell(0, 0), Cell(2, 2))
        result = HeuristicSearch().search(grid)

        assert result.path == [Cell(0, 0), Cell(1, 1), Cell(2, 2)]
        assert result.cost == pytest.approx(2.0)

    def test_heuristic_does_not_enter_cost(self):
        """Reported cost is the true path cost, not cost plus estimate."""
        heights = np.array([[0.0, 3.0, 6.0]])
        grid = TerrainMap(heights, start=Cell(0, 0), goal=Cell(2, 0))
        result = HeuristicSearch().search(grid)

        assert result.cost == pytest.approx(16.0)
        assert result.cost == pytest.approx(grid.path_cost(result.path))

    def test_expands_fewer_cells_than_dijkstra(self):
        """The estimate steers A* toward the goal on open ground."""
        grid = flat_map(20, 20, Cell(0, 10), Cell(19, 10))
        astar = HeuristicSearch().search(grid)
        dijkstra = UniformCostSearch().search(grid)

        assert astar.cost == pytest.approx(dijkstra.cost)
        assert astar.expanded < dijkstra.expanded

    def test_unreachable_goal(self):
        """A fenced goal yields the goal-only path, like Dijkstra."""
        grid = flat_map(5, 5, Cell(0, 0), Cell(4, 4), blocked=[Cell(3, 3), Cell(3, 4), Cell(4, 3)])
        result = HeuristicSearch().search(grid)

        assert result.path == [Cell(4, 4)]
        assert math.isinf(result.cost)

    def test_steep_terrain_with_uniform_costs(self):
        """An infinite estimate does not stop A* from reaching the goal."""
        heights = np.array([[0.0, 0.0, 2000.0]])
        grid = TerrainMap(heights, start=Cell(0, 0), goal=Cell(2, 0), cost_model=CostModel.UNIFORM)

        astar = HeuristicSearch().search(grid)
        dijkstra = UniformCostSearch().search(grid)

        assert dijkstra.cost == pytest.approx(2.0)
        assert astar.cost == pytest.approx(2.0)
        assert astar.path == [Cell(0, 0), Cell(1, 0), Cell(2, 0)]

    def test_tie_break_follows_neighbor_order(self):
        """Equal f values resolve to the earliest fringe entry."""
        S, A, B, G = Cell(0, 0), Cell(1, 0), Cell(0, 1), Cell(1, 1)
        first = GraphGrid(2, 2, S, G, {S: [(A, 1.0), (B, 1.0)], A: [(G, 1.0)], B: [(G, 1.0)]})
        second = GraphGrid(2, 2, S, G, {S: [(B, 1.0), (A, 1.0)], A: [(G, 1.0)], B: [(G, 1.0)]})

        assert HeuristicSearch().find_path(first) == [S, A, G]
        assert HeuristicSearch().find_path(second) == [S, B, G]


class TestHeuristicCostCoupling:
    """The estimate is only safe for the exponential cost model."""

    @pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
    def test_optimal_when_goal_is_lowest(self, seed):
        """With the goal at the lowest elevation A* matches the optimum."""
        rng = np.random.default_rng(seed)
        heights = rng.integers(1, 5, size=(7, 7)).astype(float)
        heights[6, 6] = 0.0
        grid = TerrainMap(heights, start=Cell(0, 0), goal=Cell(6, 6))

        result = HeuristicSearch().search(grid)
        assert result.cost == pytest.approx(brute_force_cost(grid))

    def test_uphill_estimate_can_overestimate(self):
        """A climb split over a detour costs less than the estimate."""
        # Straight up 4 costs 16; via a cell at height 2 it costs 4 + 4
        heights = np.array([
            [0.0, 4.0],
            [0.0, 2.0],
        ])
        grid = TerrainMap(heights, start=Cell(0, 0), goal=Cell(1, 0))
        estimate = terrain_heuristic(grid.start, grid.goal, 0.0, 4.0)
        optimum = brute_force_cost(grid)

        assert estimate == pytest.approx(16.0)
        assert optimum == pytest.approx(8.0)
        assert estimate > optimum

    def test_uniform_cost_model_breaks_admissibility(self):
        """Under unit step costs any climb is overestimated."""
        heights = np.array([[0.0, 0.0, 9.0]])
        grid = TerrainMap(heights, start=Cell(0, 0), goal=Cell(2, 0), cost_model=CostModel.UNIFORM)

        estimate = terrain_heuristic(grid.start, grid.goal, 0.0, 9.0)
        assert estimate > UniformCostSearch().search(grid).cost

    def test_euclidean_weights_keep_flat_estimate_safe(self):
        """Diagonal steps cost more than one, so Chebyshev still underestimates."""
        grid = flat_map(6, 6, Cell(0, 0), Cell(5, 3), movement=MovementType.EUCLIDEAN)
        astar = HeuristicSearch().search(grid)
        assert astar.cost == pytest.approx(UniformCostSearch().search(grid).cost)
        assert astar.cost == pytest.approx(3 * math.sqrt(2) + 2)
