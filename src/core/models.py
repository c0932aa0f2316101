"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
The storage layer (lower) and the domain layer keep sessions in this shape between two operations,
so neither has to know how the other represents a session internally.
"""

from dataclasses import dataclass, field
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerId = int
Coordinates = tuple[int, int]


@dataclass
class GameModel:
    """Transport-safe representation of a tic-tac-toe session used between Service, DB, and Game layers."""

    session_id: int
    status: str
    players: list[Optional[PlayerId]] = field(default_factory=lambda: [None, None])
    moves: list[Coordinates] = field(default_factory=list)
    next_player_id: PlayerId = 0
    winner: Optional[PlayerId] = None
