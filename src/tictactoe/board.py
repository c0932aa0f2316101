"""The Game board keeps track of which cells are occupied, and by whom. It also knows the lines that win the game."""

from dataclasses import dataclass, field
from typing import Optional, Self

from src.tictactoe.cell import BOARD_DIMENSIONS, Cell

# A slot is the index of a participant in the session: 0 moves first, 1 moves second
Slot = int
Line = tuple[Cell, Cell, Cell]

SLOT_TO_MARK: dict[Slot, str] = {0: "x", 1: "o"}
EMPTY_MARK = "_"


def _winning_lines() -> list[Line]:
    """3 rows, 3 columns and the 2 diagonals."""
    size = BOARD_DIMENSIONS[0]
    rows = [tuple(Cell(x, y) for y in range(size)) for x in range(size)]
    columns = [tuple(Cell(x, y) for x in range(size)) for y in range(size)]
    diagonal = tuple(Cell(i, i) for i in range(size))
    anti_diagonal = tuple(Cell(i, size - 1 - i) for i in range(size))
    return [*rows, *columns, diagonal, anti_diagonal]


WINNING_LINES: list[Line] = _winning_lines()


@dataclass
class Board:
    occupancy: dict[Cell, Optional[Slot]] = field(
        default_factory=lambda: {
            Cell(x, y): None
            for x in range(BOARD_DIMENSIONS[0])
            for y in range(BOARD_DIMENSIONS[1])
        }
    )

    @classmethod
    def from_moves(cls, moves: list[Cell]) -> Self:
        """Replay a list of moves. Turns alternate, so the slot of each move follows from its index."""
        board = cls()
        for index, cell in enumerate(moves):
            board.place(cell, index % 2)
        return board

    def occupant(self, cell: Cell) -> Optional[Slot]:
        return self.occupancy[cell]

    def is_occupied(self, cell: Cell) -> bool:
        return self.occupancy.get(cell) is not None

    def is_full(self) -> bool:
        return all(slot is not None for slot in self.occupancy.values())

    def place(self, cell: Cell, slot: Slot) -> None:
        """Mark a cell. Callers validate the cell first, placing on a taken or off-board cell is a bug."""
        assert cell in self.occupancy, f"{cell} is not on the board"
        assert self.occupancy[cell] is None, f"{cell} is already occupied"
        self.occupancy[cell] = slot

    def winning_line(self, slot: Slot) -> Optional[Line]:
        """First line entirely occupied by the given slot, if any"""
        for line in WINNING_LINES:
            if all(self.occupancy[cell] == slot for cell in line):
                return line
        return None

    def to_diagram(self) -> str:
        """
        Compact text diagram, rows separated by slashes.
        ex. after (0,0), (1,0), (0,1), (1,1), (0,2):
        xxx/oo_/___
        meaning:
        * each group is one value of x, read from y=0 to y=2
        * 'x' marks the first participant, 'o' the second, '_' an empty cell
        """
        return "/".join(self._row_to_diagram(x) for x in range(BOARD_DIMENSIONS[0]))

    def _row_to_diagram(self, x: int) -> str:
        return "".join(
            SLOT_TO_MARK.get(self.occupancy[Cell(x, y)], EMPTY_MARK)
            for y in range(BOARD_DIMENSIONS[1])
        )
