"""Tests of the repository selection in src/api/deps.py"""

from typing import Generator, Optional

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

import src.api.deps as deps
from src.core.config import MEMORY_DATABASE_URL
from src.db.database import create_db_engine, get_db
from src.db.memory_repository import InMemoryGameRepository
from src.db.sql_repository import SQLGameRepository
from src.main import app


@pytest.fixture
def memory_client(monkeypatch: pytest.MonkeyPatch) -> Generator[TestClient, None, None]:
    """API client running without a database, as with DROP_TOKEN_DATABASE_URL=memory://"""
    monkeypatch.setattr(deps, "memory_repository", InMemoryGameRepository())

    def _override() -> Generator[Optional[Session], None, None]:
        yield None

    app.dependency_overrides[get_db] = _override
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


def test_no_engine_for_memory_url() -> None:
    assert create_db_engine(MEMORY_DATABASE_URL) is None
    assert create_db_engine("sqlite:///:memory:") is not None


def test_repository_without_session_is_in_memory() -> None:
    assert deps.get_repository(None) is deps.memory_repository


def test_repository_with_session_is_sql(db_session_repo: Session) -> None:
    assert isinstance(deps.get_repository(db_session_repo), SQLGameRepository)


def test_play_with_memory_repository(memory_client: TestClient) -> None:
    game_id = memory_client.post(
        "/drop_token", json={"players": ["player1", "player2"], "columns": 4, "rows": 4}
    ).json()["gameId"]
    assert memory_client.get("/drop_token").json() == {"games": [game_id]}

    response = memory_client.post(f"/drop_token/{game_id}/player1", json={"column": 1})
    assert response.json() == {"move": f"{game_id}/moves/0"}
    assert memory_client.delete(f"/drop_token/{game_id}/player2").status_code == 202
    assert memory_client.get(f"/drop_token/{game_id}").json() == {
        "players": ["player1"],
        "state": "DONE",
        "winner": "player1",
    }
    assert len(deps.memory_repository.list_game_ids()) == 1
