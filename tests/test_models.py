"""Tests for terrain data models."""

import pytest

from src.terrain.models import ALL_OFFSETS, CARDINAL_OFFSETS, Cell, CostModel, MovementType


class TestCell:
    """Tests for Cell."""

    def test_equality_by_value(self):
        """Cells with the same coordinates are equal and hash alike."""
        assert Cell(1, 2) == Cell(1, 2)
        assert len({Cell(1, 2), Cell(1, 2)}) == 1

    def test_immutable(self):
        """Cells cannot be modified."""
        cell = Cell(0, 0)
        with pytest.raises(AttributeError):
            cell.x = 3

    def test_chebyshev_distance(self):
        """King-move distance takes the larger axis delta."""
        assert Cell(0, 0).chebyshev_distance(Cell(3, -5)) == 5

    def test_is_adjacent(self):
        """Adjacent means exactly one king move away."""
        assert Cell(1, 1).is_adjacent(Cell(2, 2))
        assert not Cell(1, 1).is_adjacent(Cell(1, 1))
        assert not Cell(1, 1).is_adjacent(Cell(3, 1))

    def test_add_offset(self):
        """Adding a delta tuple moves the cell."""
        assert Cell(2, 2) + (-1, 1) == Cell(1, 3)

    def test_str(self):
        assert str(Cell(4, 7)) == "(4, 7)"


class TestMovementType:
    """Tests for MovementType."""

    @pytest.mark.parametrize(
        "name,expected",
        [
            ("chess", MovementType.CHESS),
            ("c", MovementType.CHESS),
            ("Manhattan", MovementType.MANHATTAN),
            ("m", MovementType.MANHATTAN),
            (" euclidean ", MovementType.EUCLIDEAN),
            ("e", MovementType.EUCLIDEAN),
        ],
    )
    def test_from_name(self, name, expected):
        """Full names and first letters both parse."""
        assert MovementType.from_name(name) is expected

    def test_from_name_rejects_unknown(self):
        """Unknown names raise ValueError."""
        with pytest.raises(ValueError, match="Unrecognized movement"):
            MovementType.from_name("knight")

    def test_offsets(self):
        """Manhattan uses cardinal offsets, others all eight."""
        assert MovementType.MANHATTAN.offsets == CARDINAL_OFFSETS
        assert MovementType.CHESS.offsets == ALL_OFFSETS
        assert len(ALL_OFFSETS) == 8
        assert (0, 0) not in ALL_OFFSETS

    def test_offset_order_is_row_major(self):
        """Offsets run top row first, left to right."""
        assert ALL_OFFSETS[0] == (-1, -1)
        assert ALL_OFFSETS[-1] == (1, 1)


class TestCostModel:
    """Tests for CostModel."""

    def test_exponential(self):
        assert CostModel.EXPONENTIAL.cost(2.0, 5.0) == pytest.approx(8.0)

    def test_exponential_overflow(self):
        assert CostModel.EXPONENTIAL.cost(0.0, 1100.0) == float("inf")

    def test_division(self):
        assert CostModel.DIVISION.cost(1.0, 3.0) == pytest.approx(2.0)

    def test_uniform(self):
        assert CostModel.UNIFORM.cost(0.0, 100.0) == 1.0
