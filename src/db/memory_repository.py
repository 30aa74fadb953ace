"""Implementation of (Game)Repository keeping all games in a dictionary (single process only)."""

from copy import deepcopy
from threading import Lock
from uuid import UUID, uuid4

from src.core.models import GameModel


class InMemoryGameRepository:
    """Every read and write works on a copy, so callers never share state with the stored record."""

    def __init__(self) -> None:
        self._games: dict[UUID, GameModel] = {}
        self._guard = Lock()

    def get_game(self, game_id: UUID, for_update: bool = False) -> GameModel | None:
        # NOTE records are locked by the service's GameLockRegistry, `for_update` needs no extra work here
        with self._guard:
            game = self._games.get(game_id)
            return deepcopy(game) if game is not None else None

    def list_game_ids(self) -> list[UUID]:
        with self._guard:
            return list(self._games)

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        game_id = uuid4()
        with self._guard:
            self._games[game_id] = deepcopy(game)
        return deepcopy(game), game_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        with self._guard:
            if game_id not in self._games:
                return None
            self._games[game_id] = deepcopy(game)
        return deepcopy(game)

    def release(self) -> None:
        pass

    def delete_game(self, game_id: UUID) -> GameModel | None:
        with self._guard:
            return self._games.pop(game_id, None)
