"""Unit tests for /src/tictactoe/cell.py"""

import pytest

from src.tictactoe.cell import BOARD_DIMENSIONS, Cell


def test_cell_within_bounds() -> None:
    """happy case: every cell of the 3x3 grid"""
    for x in range(BOARD_DIMENSIONS[0]):
        for y in range(BOARD_DIMENSIONS[1]):
            assert Cell(x, y).is_within_bounds()


@pytest.mark.parametrize("x, y", [(-1, 0), (0, -1), (3, 0), (0, 3), (-5, 10), (3, 3)])
def test_cell_out_of_bounds(x: int, y: int) -> None:
    assert not Cell(x, y).is_within_bounds()


def test_tuple_conversion() -> None:
    cell = Cell.from_tuple((2, 1))
    assert cell == Cell(2, 1)
    assert cell.to_tuple() == (2, 1)


def test_cells_are_hashable() -> None:
    """Cells are used as keys of the occupancy grid."""
    assert len({Cell(0, 0), Cell(0, 0), Cell(1, 0)}) == 2
