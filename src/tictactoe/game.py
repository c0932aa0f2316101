"""
The Game class will be the entrypoint into the domain layer for the service layer.
It owns a single session: who plays, which moves were made, and whether the session is still running -->
it validates every move, records it, and decides when the session is won or drawn.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import (
    GameNotStartedError,
    GameStateError,
    InvalidLocationError,
    NotYourTurnError,
    SessionEndedError,
    SessionFullError,
)
from src.core.models import GameModel
from src.core.shared_types import Outcome, Status
from src.tictactoe.board import Board
from src.tictactoe.cell import BOARD_DIMENSIONS, Cell

PLAYERS_PER_GAME = 2
MAX_MOVES = BOARD_DIMENSIONS[0] * BOARD_DIMENSIONS[1]
# Nobody can have three in a line before the first player placed a third mark
MIN_MOVES_FOR_WIN = 2 * BOARD_DIMENSIONS[0] - 1


@dataclass(frozen=True)
class MoveOutcome:
    """What happened to the session after a move got accepted."""

    outcome: Outcome
    player_id: Optional[int] = None


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    session_id: int
    players: list[Optional[int]]
    moves: list[Cell]
    board: Board
    status: Status
    next_player_id: int = 0
    winner: Optional[int] = None

    @classmethod
    def new_game(cls, session_id: int) -> Self:
        """A fresh session, waiting for both players to join."""
        return cls(
            session_id=session_id,
            players=[None] * PLAYERS_PER_GAME,
            moves=[],
            board=Board(),
            status=Status.AWAITING_PLAYERS,
        )

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.status not in [status.value for status in Status]:
            raise GameStateError(
                f"Invalid status: {model.status!r}. \nPick one from {','.join(Status)}"
            )
        if len(model.players) != PLAYERS_PER_GAME:
            raise GameStateError(
                f"Session {model.session_id} must have {PLAYERS_PER_GAME} player slots, got {len(model.players)}."
            )
        status = Status(model.status)
        if status != Status.AWAITING_PLAYERS and None in model.players:
            raise GameStateError(
                f"Session {model.session_id} is {status} but not all players joined."
            )

        moves = [Cell.from_tuple(coordinates) for coordinates in model.moves]
        if status == Status.AWAITING_PLAYERS and moves:
            raise GameStateError(
                f"Session {model.session_id} is {status} but already has {len(moves)} moves."
            )
        if len(moves) > MAX_MOVES:
            raise GameStateError(
                f"Session {model.session_id} has {len(moves)} moves, at most {MAX_MOVES} fit on the board."
            )
        off_board = [cell.to_tuple() for cell in moves if not cell.is_within_bounds()]
        if off_board:
            raise GameStateError(
                f"Session {model.session_id} has moves off the board: {off_board}."
            )
        if len(set(moves)) != len(moves):
            raise GameStateError(
                f"Session {model.session_id} has the same cell taken more than once."
            )

        # create the Game
        board = Board.from_moves(moves)

        return cls(
            session_id=model.session_id,
            players=list(model.players),
            moves=moves,
            board=board,
            status=status,
            next_player_id=model.next_player_id,
            winner=model.winner,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            session_id=self.session_id,
            status=str(self.status),
            players=list(self.players),
            moves=[cell.to_tuple() for cell in self.moves],
            next_player_id=self.next_player_id,
            winner=self.winner,
        )

    @property
    def player_to_move(self) -> Optional[int]:
        """Turn parity: the first player moves on even move counts, the second on odd ones."""
        if self.status != Status.IN_PROGRESS:
            return None
        return self.players[len(self.moves) % PLAYERS_PER_GAME]

    def add_player(self) -> int:
        """
        Register a player in the first free slot and hand out its id.
        The session starts as soon as the last slot is filled.
        """
        if self.status == Status.ENDED:
            raise SessionEndedError(f"Session {self.session_id} has ended.")
        if None not in self.players:
            raise SessionFullError(
                f"Session {self.session_id} already has {PLAYERS_PER_GAME} players."
            )

        player_id = self._mint_player_id()
        self.players[self.players.index(None)] = player_id

        if None not in self.players:
            self._change_status(Status.IN_PROGRESS)
        return player_id

    def make_move(self, player_id: int, x: int, y: int) -> MoveOutcome:
        """
        Attempt a move
        -----

        1. make sure the game is running
        2. make sure it is the player's turn
        3. make sure the cell is on the board and still empty
        4. record the move
        5. check for a win, then for a draw
        """
        if self.status == Status.AWAITING_PLAYERS:
            raise GameNotStartedError(
                f"Session {self.session_id} is still waiting for players."
            )
        if self.status == Status.ENDED:
            raise SessionEndedError(f"Session {self.session_id} has ended.")

        # make sure it is your turn
        self._assert_your_turn(player_id)

        # check if the cell can be taken
        cell = Cell(x, y)
        if not cell.is_within_bounds():
            raise InvalidLocationError(f"Cell {cell.to_tuple()} is not on the board.")
        if self.board.is_occupied(cell):
            raise InvalidLocationError(f"Cell {cell.to_tuple()} is already taken.")

        # NOTE: slot of the mover is determined BEFORE the move gets recorded
        slot = len(self.moves) % PLAYERS_PER_GAME
        self._update_moves(cell, slot)

        return self._update_game_status(slot)

    # -- PRIVATE HELPERS ---
    def _mint_player_id(self) -> int:
        player_id = self.next_player_id
        self.next_player_id += 1
        return player_id

    def _assert_your_turn(self, player_id: int) -> None:
        """Anyone but the player whose turn it is gets refused, ids unknown to this session included."""
        player_to_move = self.player_to_move
        if player_id != player_to_move:
            raise NotYourTurnError(
                f"It is not your turn. Waiting for player {player_to_move} to make a move first."
            )

    def _update_moves(self, cell: Cell, slot: int) -> None:
        self.moves.append(cell)
        self.board.place(cell, slot)

    def _update_game_status(self, slot: int) -> MoveOutcome:
        """Check for the end of the game after the player in `slot` moved."""
        mover = self.players[slot]

        if len(self.moves) >= MIN_MOVES_FOR_WIN and self.board.winning_line(slot):
            self.winner = mover
            self._change_status(Status.ENDED)
            return MoveOutcome(Outcome.WIN, mover)

        if self.board.is_full():
            self._change_status(Status.ENDED)
            # A draw is signalled with the id of the second player (who did not make the 9th move)
            return MoveOutcome(Outcome.DRAW, self.players[1])

        return MoveOutcome(Outcome.GAME_ONGOING)

    def _change_status(self, status: Status) -> None:
        self.status = status
