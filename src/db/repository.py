"""Protocol repository (implemented for SQLAlchemy and for plain in-memory storage)"""

from typing import Protocol
from uuid import UUID

from src.core.models import GameModel


class GameRepository(Protocol):
    """Persistence layer orchestration"""

    def get_game(self, game_id: UUID, for_update: bool = False) -> GameModel | None:
        """Get game by ID, if record exists. `for_update` asks the store to lock the record until the next update."""
        ...

    def list_game_ids(self) -> list[UUID]:
        """IDs of all stored games."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        ...

    def release(self) -> None:
        """Give up a lock taken with `get_game(..., for_update=True)` without writing anything."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        ...
