"""Unit tests for /src/tictactoe/board.py"""

import pytest

from src.tictactoe.board import WINNING_LINES, Board
from src.tictactoe.cell import Cell


def test_empty_board() -> None:
    board = Board()
    assert len(board.occupancy) == 9
    assert not board.is_full()
    assert board.to_diagram() == "___/___/___"


def test_eight_winning_lines() -> None:
    """3 rows, 3 columns and 2 diagonals, all different, all on the board."""
    assert len(WINNING_LINES) == 8
    assert len({frozenset(line) for line in WINNING_LINES}) == 8
    assert all(cell.is_within_bounds() for line in WINNING_LINES for cell in line)
    assert (Cell(0, 0), Cell(1, 1), Cell(2, 2)) in WINNING_LINES
    assert (Cell(0, 2), Cell(1, 1), Cell(2, 0)) in WINNING_LINES


def test_place_marks_cell() -> None:
    board = Board()
    board.place(Cell(1, 1), 0)
    assert board.is_occupied(Cell(1, 1))
    assert board.occupant(Cell(1, 1)) == 0


def test_off_board_cell_is_never_occupied() -> None:
    assert not Board().is_occupied(Cell(3, 3))


def test_placing_twice_is_a_bug() -> None:
    board = Board()
    board.place(Cell(0, 0), 0)
    with pytest.raises(AssertionError):
        board.place(Cell(0, 0), 1)


def test_from_moves_alternates_slots() -> None:
    board = Board.from_moves([Cell(0, 0), Cell(1, 0), Cell(2, 2)])
    assert board.occupant(Cell(0, 0)) == 0
    assert board.occupant(Cell(1, 0)) == 1
    assert board.occupant(Cell(2, 2)) == 0
    assert board.to_diagram() == "x__/o__/__x"


@pytest.mark.parametrize("line", WINNING_LINES)
def test_every_line_wins(line: tuple[Cell, Cell, Cell]) -> None:
    board = Board()
    for cell in line:
        board.place(cell, 1)
    assert board.winning_line(1) == line
    assert board.winning_line(0) is None


def test_mixed_line_does_not_win() -> None:
    """Three occupied cells in a line only win if they all belong to the same player."""
    board = Board()
    board.place(Cell(0, 0), 0)
    board.place(Cell(0, 1), 1)
    board.place(Cell(0, 2), 0)
    assert board.winning_line(0) is None
    assert board.winning_line(1) is None


def test_full_board() -> None:
    moves = [Cell(x, y) for x in range(3) for y in range(3)]
    board = Board.from_moves(moves)
    assert board.is_full()
