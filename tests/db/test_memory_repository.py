"""Unit tests for src/db/memory_repository.py"""

from src.core.models import GameModel
from src.db.memory_repository import InMemorySessionRepository


def test_create_session_ids_are_monotonic(repository: InMemorySessionRepository) -> None:
    assert [repository.create_session() for _ in range(5)] == [0, 1, 2, 3, 4]


def test_reserved_id_is_not_stored_yet(repository: InMemorySessionRepository) -> None:
    session_id = repository.create_session()
    assert repository.get_session(session_id) is None


def test_store_and_get_session(repository: InMemorySessionRepository) -> None:
    session_id = repository.create_session()
    model = GameModel(session_id=session_id, status="awaiting players")
    repository.store_session(model)

    stored = repository.get_session(session_id)
    assert stored == model


def test_store_overwrites(repository: InMemorySessionRepository) -> None:
    session_id = repository.create_session()
    repository.store_session(GameModel(session_id=session_id, status="awaiting players"))
    updated = GameModel(session_id=session_id, status="in progress", players=[0, 1], next_player_id=2)
    repository.store_session(updated)

    assert repository.get_session(session_id) == updated


def test_unknown_session(repository: InMemorySessionRepository) -> None:
    assert repository.get_session(-1) is None
    assert repository.get_session(123) is None


def test_stored_snapshots_cannot_be_mutated_from_outside(repository: InMemorySessionRepository) -> None:
    session_id = repository.create_session()
    model = GameModel(session_id=session_id, status="in progress", players=[0, 1])
    repository.store_session(model)

    # mutate both the original and a retrieved copy
    model.moves.append((0, 0))
    retrieved = repository.get_session(session_id)
    assert retrieved is not None
    retrieved.moves.append((1, 1))

    assert repository.get_session(session_id).moves == []  # type: ignore[union-attr]
