"""
Exceptions raised by the domain and service layers.

Every exception that maps onto a documented signal carries its ErrorKind, so the registry can turn it into a tagged result.
GameStateError has no kind on purpose: it means a stored session is corrupt and must propagate.
"""

from typing import ClassVar, Optional

from src.core.shared_types import ErrorKind


class GameError(Exception):
    """Top-level exception for anything that went wrong while handling a game session."""

    kind: ClassVar[Optional[ErrorKind]] = None


class GameStateError(GameError):
    """Session data is inconsistent (programming defect, not a rule violation)."""


class RepositoryError(GameError):
    """Storage layer could not satisfy the request."""


class SessionNotFoundError(RepositoryError):
    kind = ErrorKind.SESSION_NOT_FOUND


class GameNotStartedError(GameError):
    kind = ErrorKind.GAME_NOT_STARTED


class SessionEndedError(GameError):
    kind = ErrorKind.SESSION_ENDED


class SessionFullError(GameError):
    kind = ErrorKind.SESSION_FULL


class NotYourTurnError(GameError):
    kind = ErrorKind.WRONG_TURN


class InvalidLocationError(GameError):
    kind = ErrorKind.INVALID_LOCATION
