"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.db.schema import GameState
from src.db.sql_repository import GameModel, SQLGameRepository


def _new_game_model() -> GameModel:
    return GameModel(
        columns=2,
        rows=2,
        players=["player1", "player2"],
        board=[None] * 4,
        moves=[],
        current_player="player1",
        state=GameState.IN_PROGRESS,
        winner=None,
    )


def _finished_game_model() -> GameModel:
    return GameModel(
        columns=2,
        rows=2,
        players=["player2"],
        board=["player1", None, None, None],
        moves=[
            {"type": "MOVE", "player": "player1", "column": 1},
            {"type": "QUIT", "player": "player1"},
        ],
        current_player=None,
        state=GameState.DONE,
        winner="player2",
    )


def test_create_game(db_session_repo: Session) -> None:
    """Conversion from a GameModel to DBGame for a new entry to the database."""
    model = _new_game_model()

    repo = SQLGameRepository(db_session_repo)
    record_in_db, _ = repo.create_game(model)
    assert isinstance(record_in_db, GameModel)
    assert record_in_db == model


def test_get_game_by_id(db_session_repo: Session) -> None:
    """Create a game, then fetch it from db."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(_finished_game_model())
    game_found = repo.get_game(game_id)
    assert isinstance(game_found, GameModel)
    assert game_found == expected_game


def test_get_game_for_update(db_session_repo: Session) -> None:
    """Locking read returns the same data (SQLite simply ignores the row lock)."""
    repo = SQLGameRepository(db_session_repo)
    expected_game, game_id = repo.create_game(_new_game_model())
    assert repo.get_game(game_id, for_update=True) == expected_game
    repo.release()
    assert repo.get_game(game_id) == expected_game


def test_get_unknown_game(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLGameRepository(db_session_repo)
    assert repo.get_game(uuid4()) is None

    # Now do it with creating a game, but retrieving from the wrong ID
    repo.create_game(_new_game_model())
    assert repo.get_game(uuid4()) is None


def test_list_game_ids(db_session_repo: Session) -> None:
    repo = SQLGameRepository(db_session_repo)
    assert repo.list_game_ids() == []
    _, first_id = repo.create_game(_new_game_model())
    _, second_id = repo.create_game(_new_game_model())
    assert set(repo.list_game_ids()) == {first_id, second_id}


def test_update_game(db_session_repo: Session) -> None:
    """
    Update an earlier created record.
    """
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(_new_game_model())

    after = _finished_game_model()
    updated_game = repo.update_game(game_id, after)
    assert updated_game is not None
    assert updated_game == after

    # moves keep their shape: QUIT records have no column
    assert updated_game.moves[1] == {"type": "QUIT", "player": "player1"}


def test_consecutive_game_updates(db_session_repo: Session) -> None:
    """Tests that we can successfully make multiple updates to the same game."""
    repo = SQLGameRepository(db_session_repo)
    _, game_id = repo.create_game(_new_game_model())

    first_update = _new_game_model()
    first_update.board = ["player1", None, None, None]
    first_update.moves = [{"type": "MOVE", "player": "player1", "column": 1}]
    first_update.current_player = "player2"

    second_update = _new_game_model()
    second_update.board = ["player1", None, "player2", None]
    second_update.moves = first_update.moves + [
        {"type": "MOVE", "player": "player2", "column": 2}
    ]

    repo.update_game(game_id, first_update)
    repo.update_game(game_id, second_update)

    after_all_updates = repo.get_game(game_id)
    assert after_all_updates is not None
    assert after_all_updates == second_update


def test_attempt_updating_unknown_game(db_session_repo: Session) -> None:
    """the update_game() method should break early and return None"""
    repo = SQLGameRepository(db_session_repo)
    assert repo.update_game(uuid4(), _finished_game_model()) is None


def test_delete_game(db_session_repo: Session) -> None:
    """Record of the game should no longer exist after deletion"""
    repo = SQLGameRepository(db_session_repo)
    created_game, game_id = repo.create_game(_new_game_model())
    deleted_game = repo.delete_game(game_id)

    # the correct game should be deleted
    assert deleted_game == created_game

    # The game should no longer be available in db
    assert repo.get_game(game_id) is None


def test_attempt_deleting_unknown_game(db_session_repo: Session) -> None:
    """the delete_game() method should break early and return None"""
    repo = SQLGameRepository(db_session_repo)
    assert repo.delete_game(uuid4()) is None
