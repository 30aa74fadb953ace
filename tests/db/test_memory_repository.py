"""Unit tests for src/db/memory_repository.py"""

from uuid import uuid4

from src.core.models import GameModel
from src.core.shared_types import GameState
from src.db.memory_repository import InMemoryGameRepository


def _model() -> GameModel:
    return GameModel(
        columns=1,
        rows=3,
        players=["player1", "player2"],
        board=[None, None, None],
        moves=[],
        current_player="player1",
        state=GameState.IN_PROGRESS,
    )


def test_create_and_get() -> None:
    repo = InMemoryGameRepository()
    stored, game_id = repo.create_game(_model())
    assert stored == _model()
    assert repo.get_game(game_id) == _model()
    assert repo.list_game_ids() == [game_id]


def test_reads_are_snapshots() -> None:
    """Changing a fetched model does not touch the stored record."""
    repo = InMemoryGameRepository()
    _, game_id = repo.create_game(_model())
    fetched = repo.get_game(game_id)
    assert fetched is not None
    fetched.board[0] = "player1"
    fetched.moves.append({"type": "MOVE", "player": "player1", "column": 1})
    assert repo.get_game(game_id) == _model()


def test_update_and_delete() -> None:
    repo = InMemoryGameRepository()
    _, game_id = repo.create_game(_model())
    after = _model()
    after.players = ["player2"]
    after.state = GameState.DONE
    after.winner = "player2"
    assert repo.update_game(game_id, after) == after
    assert repo.get_game(game_id) == after

    assert repo.delete_game(game_id) == after
    assert repo.get_game(game_id) is None


def test_unknown_game() -> None:
    repo = InMemoryGameRepository()
    assert repo.get_game(uuid4()) is None
    assert repo.update_game(uuid4(), _model()) is None
    assert repo.delete_game(uuid4()) is None
