"""Protocol repository (sessions live in memory for the lifetime of the process, but the Service does not need to know that)"""

from typing import Protocol

from src.core.models import GameModel


class SessionRepository(Protocol):
    """Session storage orchestration"""

    def get_session(self, session_id: int) -> GameModel | None:
        """Get session by ID, if record exists."""
        ...

    def create_session(self) -> int:
        """Reserve a new, never used before, session ID."""
        ...

    def store_session(self, game: GameModel) -> GameModel:
        """Store the session under its own ID (insert or overwrite)."""
        ...
