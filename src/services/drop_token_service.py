"""Orchestration of communication from API router to business logic and persistence layers (and the reverse direction)."""

import logging
from contextlib import contextmanager
from typing import Iterator, Optional
from uuid import UUID

from src.api.models import (
    CreateGameRequest,
    CreateGameResponse,
    GameListResponse,
    GameStateResponse,
    MoveRecordResponse,
    MoveRequest,
    MoveResponse,
    MovesRangeRequest,
    MovesResponse,
)
from src.core.exceptions import GameError, GameNotFoundError, MoveNotFoundError
from src.core.models import GameModel
from src.db.repository import GameRepository
from src.drop_token.game import Game
from src.drop_token.moves import MoveRecord
from src.services.locks import GameLockRegistry, game_locks

logger = logging.getLogger(__name__)


class DropTokenService:
    """Orchestration of layers for drop token games."""

    def __init__(
        self, repository: GameRepository, locks: GameLockRegistry = game_locks
    ) -> None:
        self.repo = repository
        self.locks = locks

    # -- API routes logic ---
    def create_game(self, request: CreateGameRequest) -> CreateGameResponse:
        """Start a game with all players at once."""

        # Use info in CreateGameRequest to create a new Game, and convert into GameModel
        new_game = Game.new_game(
            columns=request.columns, rows=request.rows, players=request.players
        )

        # Store the GameModel in the repository
        _, game_id = self.repo.create_game(new_game.to_model())
        logger.info(
            "Created game %s (%dx%d) for players %s",
            game_id,
            request.columns,
            request.rows,
            ", ".join(request.players),
        )
        return CreateGameResponse(game_id=game_id)

    def list_game_ids(self) -> GameListResponse:
        return GameListResponse(games=self.repo.list_game_ids())

    def get_game(self, game_id: UUID) -> GameStateResponse:
        """
        Retrieve current game state.
        ----
        Used in "polling" loop by clients to check when it is the player's turn for instance.
        """
        model = self._fetch_game(game_id)
        return GameStateResponse(
            players=model.players, state=model.state, winner=model.winner
        )

    def get_moves(
        self, game_id: UUID, request: Optional[MovesRangeRequest] = None
    ) -> MovesResponse:
        """Part of the move log, indices `start` to `until` (inclusive)."""
        request = request or MovesRangeRequest()
        game = Game.from_model(self._fetch_game(game_id))
        moves = game.get_moves(request.start, request.until)
        return MovesResponse(moves=[self._move_response(move) for move in moves])

    def get_move(self, game_id: UUID, move_number: int) -> MoveRecordResponse:
        game = Game.from_model(self._fetch_game(game_id))
        move = game.get_move(move_number)
        if move is None:
            raise MoveNotFoundError(f"Game {game_id} has no move {move_number}.")
        return self._move_response(move)

    def make_move(
        self, game_id: UUID, player: str, request: MoveRequest
    ) -> MoveResponse:
        """Drop a token. Rejected moves leave the stored game untouched."""
        with self._locked_game(game_id) as game:
            game.make_move(request.column, player)
            move_number = game.current_move_number

        logger.info(
            "Game %s: move %d by %s in column %d",
            game_id,
            move_number,
            player,
            request.column,
        )
        self._log_if_finished(game_id, game)
        return MoveResponse(move=f"{game_id}/moves/{move_number}")

    def quit(self, game_id: UUID, player: str) -> None:
        """Player leaves the game. The last one standing wins."""
        with self._locked_game(game_id) as game:
            game.quit(player)

        logger.info("Game %s: player %s quit", game_id, player)
        self._log_if_finished(game_id, game)

    def delete_game(self, game_id: UUID) -> None:
        """Handle a request to delete a Game record."""
        with self.locks.game_lock(game_id):
            deleted = self.repo.delete_game(game_id)
        if deleted is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        logger.info("Deleted game %s", game_id)

    # -- Internal helpers --
    @contextmanager
    def _locked_game(self, game_id: UUID) -> Iterator[Game]:
        """
        Exclusive access to a single game
        ----

        1. take the lock for this game ID
        2. read the current state (locking the record as well, if the repository supports it)
        3. hand out the Game to be changed in memory
        4. write back only if no error occurred. Otherwise the stored state stays exactly as it was.
        """
        with self.locks.game_lock(game_id):
            model = self.repo.get_game(game_id, for_update=True)
            if model is None:
                self.repo.release()
                raise GameNotFoundError(f"Game with {game_id=} not found.")
            try:
                game = Game.from_model(model)
                yield game
            except GameError as error:
                self.repo.release()
                logger.debug("Game %s: rejected (%s) %s", game_id, error.code, error)
                raise
            self.repo.update_game(game_id, game.to_model())

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Attempt to find the game in the repository and raise error if it fails."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise GameNotFoundError(f"Game with {game_id=} not found.")
        return game_model

    def _move_response(self, move: MoveRecord) -> MoveRecordResponse:
        return MoveRecordResponse(type=move.type, player=move.player, column=move.column)

    def _log_if_finished(self, game_id: UUID, game: Game) -> None:
        if not game.is_done():
            return
        if game.winner is None:
            logger.info("Game %s ended in a draw", game_id)
        else:
            logger.info("Game %s won by %s", game_id, game.winner)
