"""
Pytest will auto-discover / import this file called 'conftest.py'. ]
This file defines fixtures/variables required for testing multiple layers.
"""

import pytest

from src.db.memory_repository import InMemorySessionRepository
from src.services.session_registry import SessionRegistry
from src.tictactoe.game import Game


@pytest.fixture
def repository() -> InMemorySessionRepository:
    """A fresh repository per test, so tests stay independent of each other."""
    return InMemorySessionRepository()


@pytest.fixture
def registry(repository: InMemorySessionRepository) -> SessionRegistry:
    return SessionRegistry(repository)


@pytest.fixture
def started_game() -> Game:
    """Both players joined: player 0 moves first, player 1 second."""
    game = Game.new_game(session_id=0)
    game.add_player()
    game.add_player()
    return game
