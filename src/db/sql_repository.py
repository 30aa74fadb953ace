"""Implementation of (Game)Repository using SQLAlchemy"""

from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import GameModel
from src.db.schema import DBGame


class SQLGameRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_game(self, game_id: UUID, for_update: bool = False) -> GameModel | None:
        """Get game by ID, if record exists. With `for_update` the row stays locked until commit/rollback."""
        game_db = self._fetch_game(game_id, for_update=for_update)
        if game_db:
            return self._to_model(game_db)
        return None

    def list_game_ids(self) -> list[UUID]:
        query = select(DBGame.id).order_by(DBGame.created_at)
        return list(self.db.scalars(query))

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store new game and return the stored data + newly created game ID."""

        new_id = uuid4()
        game_db = DBGame(
            id=new_id,
            columns=game.columns,
            rows=game.rows,
            players=game.players,
            board=game.board,
            moves=game.moves,
            current_player=game.current_player,
            state=game.state,
            winner=game.winner,
        )
        self.db.add(game_db)
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db), new_id

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Add new info to existing record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_db.players = list(game.players)
        game_db.board = list(game.board)
        game_db.moves = list(game.moves)
        game_db.current_player = game.current_player
        game_db.state = game.state
        game_db.winner = game.winner
        self.db.commit()
        self.db.refresh(game_db)
        return self._to_model(game_db)

    def release(self) -> None:
        """End the open transaction (and with it any row lock) without writing."""
        self.db.rollback()

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Remove a game's record."""
        game_db = self._fetch_game(game_id)
        if not game_db:
            return None
        game_model = self._to_model(game_db)
        self.db.delete(game_db)
        self.db.commit()
        return game_model

    def _fetch_game(self, game_id: UUID, for_update: bool = False) -> DBGame | None:
        query = select(DBGame).where(DBGame.id == game_id)
        if for_update:
            query = query.with_for_update()
        return self.db.scalar(query)

    def _to_model(self, game_db: DBGame) -> GameModel:
        """Convert SQLAlchemy model to data transfer model."""
        return GameModel(
            columns=game_db.columns,
            rows=game_db.rows,
            players=list(game_db.players),
            board=list(game_db.board),
            moves=[dict(move) for move in game_db.moves],
            current_player=game_db.current_player,
            state=game_db.state,
            winner=game_db.winner,
        )
