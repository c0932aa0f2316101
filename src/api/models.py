"""Response models: the tagged results handed back to whoever calls the registry."""

from typing import Optional, Self

from pydantic import BaseModel, model_validator

from src.core.shared_types import (
    GAME_ONGOING_CODE,
    LEGACY_CODES,
    ErrorKind,
    Outcome,
    Status,
)

PlayerId = int
Coordinates = tuple[int, int]


# --- RESPONSE MODELS ---
class JoinResult(BaseModel):
    """Either the id of the player that just joined, or the reason joining failed."""

    session_id: int
    player_id: Optional[PlayerId] = None
    error: Optional[ErrorKind] = None

    @model_validator(mode="after")
    def validate_tag(self) -> Self:
        if (self.player_id is None) == (self.error is None):
            raise ValueError("JoinResult needs exactly one of player_id or error.")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_code(self) -> int:
        """Single integer encoding: ids are >= 0, signals are negative."""
        if self.error is not None:
            return LEGACY_CODES[self.error]
        assert self.player_id is not None
        return self.player_id


class MoveResult(BaseModel):
    """
    Either what the accepted move did (outcome), or the reason it was rejected (error).
    ----
    player_id is the winner for Outcome.WIN, and the second player of the session for Outcome.DRAW.
    """

    session_id: int
    outcome: Optional[Outcome] = None
    player_id: Optional[PlayerId] = None
    error: Optional[ErrorKind] = None

    @model_validator(mode="after")
    def validate_tag(self) -> Self:
        if (self.outcome is None) == (self.error is None):
            raise ValueError("MoveResult needs exactly one of outcome or error.")
        if self.error is not None and self.player_id is not None:
            raise ValueError("A rejected move does not carry a player_id.")
        if self.outcome == Outcome.GAME_ONGOING and self.player_id is not None:
            raise ValueError("An ongoing game does not carry a player_id.")
        if self.outcome in (Outcome.WIN, Outcome.DRAW) and self.player_id is None:
            raise ValueError(f"Outcome {self.outcome} must carry a player_id.")
        return self

    @property
    def ok(self) -> bool:
        return self.error is None

    def to_code(self) -> int:
        """Single integer encoding: ids are >= 0, signals are negative."""
        if self.error is not None:
            return LEGACY_CODES[self.error]
        if self.outcome == Outcome.GAME_ONGOING:
            return GAME_ONGOING_CODE
        assert self.player_id is not None
        return self.player_id


class SessionResponse(BaseModel):
    session_id: int
    status: Status
    players: list[Optional[PlayerId]]
    moves: list[Coordinates]
    player_to_move: Optional[PlayerId]
    winner: Optional[PlayerId]
    board: str
