"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    AWAITING_PLAYERS = "awaiting players"
    IN_PROGRESS = "in progress"
    ENDED = "ended"


class Outcome(StrEnum):
    """What a successfully recorded move did to the session."""

    GAME_ONGOING = "game ongoing"
    WIN = "win"
    DRAW = "draw"


class ErrorKind(StrEnum):
    """
    Signals reported back to the caller instead of an id.
    Listed in order of precedence: if multiple apply, the higher one is reported.
    """

    SESSION_NOT_FOUND = "session not found"
    GAME_NOT_STARTED = "game not started"
    SESSION_ENDED = "session ended"
    SESSION_FULL = "session full"
    WRONG_TURN = "wrong turn"
    INVALID_LOCATION = "invalid location"


# --- Single-integer result space of the legacy API: real ids are >= 0, signals are negative
GAME_ONGOING_CODE = -5

LEGACY_CODES: dict[ErrorKind, int] = {
    ErrorKind.SESSION_NOT_FOUND: -2,
    ErrorKind.GAME_NOT_STARTED: -3,
    ErrorKind.SESSION_ENDED: -4,
    # joining a session that already started was reported as "game ongoing"
    ErrorKind.SESSION_FULL: GAME_ONGOING_CODE,
    ErrorKind.WRONG_TURN: -7,
    ErrorKind.INVALID_LOCATION: -8,
}
