"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Tic-tac-toe is played on a 3x3 grid only
BOARD_DIMENSIONS = (3, 3)


@dataclass(frozen=True)
class Cell:
    x: int
    y: int

    @classmethod
    def from_tuple(cls, coordinates: tuple[int, int]) -> Cell:
        x, y = coordinates
        return cls(x, y)

    def to_tuple(self) -> tuple[int, int]:
        return (self.x, self.y)

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (0 <= self.y < BOARD_DIMENSIONS[1])
