"""Orchestration of communication from callers to business logic and session storage (and the reverse direction)."""

from threading import Lock
from typing import Optional

from src.api.models import JoinResult, MoveResult, SessionResponse
from src.core.exceptions import GameError, SessionNotFoundError
from src.core.logging import get_logger
from src.core.models import GameModel
from src.core.shared_types import Outcome
from src.db.memory_repository import InMemorySessionRepository
from src.db.repository import SessionRepository
from src.tictactoe.game import Game

logger = get_logger(__name__)


class SessionRegistry:
    """
    Orchestration of layers for tic-tac-toe sessions.

    Every operation on a session is a load -> mutate -> store round-trip, which runs under that session's lock.
    Rule violations come back as tagged results, never as exceptions.
    """

    def __init__(self, repository: Optional[SessionRepository] = None) -> None:
        self.repo = repository if repository is not None else InMemorySessionRepository()
        self._registry_lock = Lock()
        self._session_locks: dict[int, Lock] = {}

    # -- Session operations ---
    def create_session(self) -> int:
        """Allocate a new session, waiting for players."""
        with self._registry_lock:
            session_id = self.repo.create_session()
            new_game = Game.new_game(session_id)
            self.repo.store_session(new_game.to_model())
            self._session_locks[session_id] = Lock()

        logger.info("session_created", session_id=session_id)
        return session_id

    def join_session(self, session_id: int) -> JoinResult:
        """A player requested to join a session."""
        log = logger.bind(session_id=session_id)
        try:
            with self._lock_for(session_id):
                # Retrieve stored GameModel and rebuild the Game
                game = Game.from_model(self._fetch_game(session_id))

                # Register the player
                player_id = game.add_player()

                # store in repository
                self.repo.store_session(game.to_model())
        except GameError as error:
            # Only documented signals become results. Anything else is a bug and keeps propagating.
            if error.kind is None:
                raise
            log.info("join_rejected", error=str(error.kind), reason=str(error))
            return JoinResult(session_id=session_id, error=error.kind)

        log.info("player_joined", player_id=player_id, status=str(game.status))
        return JoinResult(session_id=session_id, player_id=player_id)

    def submit_move(self, session_id: int, player_id: int, x: int, y: int) -> MoveResult:
        """A player attempts to take the cell (x, y)."""
        log = logger.bind(session_id=session_id, player_id=player_id, cell=(x, y))
        try:
            with self._lock_for(session_id):
                # Retrieve stored GameModel and rebuild the Game
                game = Game.from_model(self._fetch_game(session_id))

                # Attempt the move
                move_outcome = game.make_move(player_id, x, y)

                # store in repository
                self.repo.store_session(game.to_model())
        except GameError as error:
            if error.kind is None:
                raise
            log.debug("move_rejected", error=str(error.kind), reason=str(error))
            return MoveResult(session_id=session_id, error=error.kind)

        if move_outcome.outcome == Outcome.WIN:
            log.info("game_won", winner=move_outcome.player_id, moves=len(game.moves))
        elif move_outcome.outcome == Outcome.DRAW:
            log.info("game_drawn", moves=len(game.moves))
        else:
            log.debug("move_accepted", moves=len(game.moves))

        return MoveResult(
            session_id=session_id,
            outcome=move_outcome.outcome,
            player_id=move_outcome.player_id,
        )

    def get_session(self, session_id: int) -> Optional[SessionResponse]:
        """
        Retrieve current session state.
        ----
        Sessions are kept after they end, so finished games can still be inspected.
        """
        model = self.repo.get_session(session_id)
        if model is None:
            return None
        game = Game.from_model(model)
        return SessionResponse(
            session_id=game.session_id,
            status=game.status,
            players=game.players,
            moves=[cell.to_tuple() for cell in game.moves],
            player_to_move=game.player_to_move,
            winner=game.winner,
            board=game.board.to_diagram(),
        )

    # -- Internal helpers --
    def _lock_for(self, session_id: int) -> Lock:
        """
        Lock of an existing session. Unknown IDs never get a lock (or any other side effect).
        NOTE: a repository handed in at construction may already hold sessions, those get their lock on first use.
        """
        with self._registry_lock:
            lock = self._session_locks.get(session_id)
            if lock is None:
                if self.repo.get_session(session_id) is None:
                    raise SessionNotFoundError(f"Session with {session_id=} not found.")
                lock = self._session_locks[session_id] = Lock()
        return lock

    def _fetch_game(self, session_id: int) -> GameModel:
        """Attempt to find the session in the repository and raise error if it fails."""
        game_model = self.repo.get_session(session_id)
        if game_model is None:
            raise SessionNotFoundError(f"Session with {session_id=} not found.")
        return game_model
