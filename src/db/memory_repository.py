"""Implementation of (Session)Repository keeping GameModel snapshots in a dictionary"""

from copy import deepcopy
from itertools import count

from src.core.models import GameModel


class InMemorySessionRepository:
    """
    Data stored in a plain dict, keyed by session ID.
    Snapshots are copied on the way in and out, so a caller can never mutate stored state behind the repository's back.
    """

    def __init__(self) -> None:
        self._sessions: dict[int, GameModel] = {}
        self._ids = count()

    def get_session(self, session_id: int) -> GameModel | None:
        """Get session by ID, if record exists."""
        session = self._sessions.get(session_id)
        if session is None:
            return None
        return deepcopy(session)

    def create_session(self) -> int:
        """IDs are handed out monotonically, starting at 0, and never reused."""
        return next(self._ids)

    def store_session(self, game: GameModel) -> GameModel:
        """Store the session under its own ID (insert or overwrite)."""
        self._sessions[game.session_id] = deepcopy(game)
        return deepcopy(game)
