"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of drop token -->
passes this information to the service layer, which can then pass it onwards to the API layer.
"""

from dataclasses import dataclass
from typing import Optional, Self

from src.core.exceptions import (
    GameError,
    GameIsDoneError,
    InvalidColumnError,
    InvalidPlayerError,
    NotPlayersTurnError,
    PlayerNotFoundError,
)
from src.core.models import GameModel
from src.core.shared_types import GameState
from src.drop_token.board import Board
from src.drop_token.moves import MoveRecord


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: list[str]
    moves: list[MoveRecord]
    current_player: Optional[str]
    state: GameState
    winner: Optional[str] = None

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        if model.state not in GameState.__members__:
            raise GameError(
                f"Invalid game state: {model.state!r}. \nPick one from {','.join(GameState)}"
            )
        if len(model.board) != model.columns * model.rows:
            raise GameError(
                f"Board of {len(model.board)} cells does not fit {model.columns} columns x {model.rows} rows."
            )

        return cls(
            board=Board(model.columns, model.rows, list(model.board)),
            players=list(model.players),
            moves=[MoveRecord.from_dict(move) for move in model.moves],
            current_player=model.current_player,
            state=GameState[model.state],
            winner=model.winner,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            columns=self.board.columns,
            rows=self.board.rows,
            players=list(self.players),
            board=list(self.board.cells),
            moves=[move.to_dict() for move in self.moves],
            current_player=self.current_player,
            state=self.state.value,
            winner=self.winner,
        )

    @classmethod
    def new_game(cls, columns: int, rows: int, players: list[str]) -> Self:
        """Empty board, the first player in the list gets to move first."""
        return cls(
            board=Board.empty(columns, rows),
            players=list(players),
            moves=[],
            current_player=players[0],
            state=GameState.IN_PROGRESS,
        )

    @property
    def columns(self) -> int:
        return self.board.columns

    @property
    def rows(self) -> int:
        return self.board.rows

    @property
    def current_move_number(self) -> int:
        """0-based number of the latest entry in the move log (never negative)."""
        return max(len(self.moves) - 1, 0)

    def is_done(self) -> bool:
        return self.state == GameState.DONE

    def validate_move(self, column: int, player: str) -> None:
        """
        The order of the checks decides which error the player gets to see:
        game done --> column out of range --> unknown player --> not your turn.
        A full column is only detected when actually dropping the token.
        """
        self._assert_in_progress()

        if not 1 <= column <= self.columns:
            raise InvalidColumnError(
                f"Column {column} does not exist. Pick a column between 1 and {self.columns}."
            )

        if player not in self.players:
            raise InvalidPlayerError(f"Player {player!r} is not part of this game.")

        if player != self.current_player:
            raise NotPlayersTurnError(
                f"It is not your turn. Waiting for player {self.current_player} to make a move first."
            )

    def make_move(self, column: int, player: str) -> MoveRecord:
        """
        Attempt to drop a token
        -----

        1. validate the move (nothing changes if any check fails)
        2. drop the token onto the board (nothing changes if the column is full)
        3. update the list of moves
        4. update game state: win, draw, or pass the turn on
        """
        self.validate_move(column, player)

        index = self.board.drop_token(column, player)

        move = MoveRecord.drop(player, column)
        self.moves.append(move)

        if self.board.is_winning_cell(index):
            self._finish(winner=player)
        elif self.board.is_full():
            self._finish(winner=None)
        else:
            self.current_player = self._next_player(player, self.players)
        return move

    def quit(self, player: str) -> MoveRecord:
        """
        A player withdraws from the game
        -----

        The turn goes to whoever follows the quitting player in the rotation, even if it was not their turn.
        When only one player is left, that player wins by attrition.
        """
        self._assert_in_progress()
        if player not in self.players:
            raise PlayerNotFoundError(f"Player {player!r} is not part of this game.")

        move = MoveRecord.quit(player)
        self.moves.append(move)

        rotation = list(self.players)
        self.players.remove(player)
        self.current_player = self._next_player(player, rotation)

        if len(self.players) <= 1:
            self._finish(winner=self.players[0] if self.players else None)
        return move

    def get_moves(self, start: Optional[int] = None, until: Optional[int] = None) -> list[MoveRecord]:
        """Moves with index in [start, until] (both inclusive). Bounds past the end of the log simply give fewer moves."""
        first = 0 if start is None else start
        stop = len(self.moves) if until is None else until + 1
        return self.moves[first:stop]

    def get_move(self, move_number: int) -> Optional[MoveRecord]:
        if 0 <= move_number < len(self.moves):
            return self.moves[move_number]
        return None

    # -- PRIVATE HELPERS ---
    def _assert_in_progress(self) -> None:
        if self.is_done():
            raise GameIsDoneError("Game is already done.")

    def _next_player(self, player: str, rotation: list[str]) -> Optional[str]:
        """First player after `player` in the rotation (wrapping around) that is still in the game."""
        position = rotation.index(player)
        for step in range(1, len(rotation) + 1):
            candidate = rotation[(position + step) % len(rotation)]
            if candidate in self.players:
                return candidate
        return None

    def _finish(self, winner: Optional[str]) -> None:
        """Game over. Nobody gets to move anymore."""
        self.state = GameState.DONE
        self.winner = winner
        self.current_player = None
