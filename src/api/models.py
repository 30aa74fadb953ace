"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.core.config import get_max_board_dimension
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import GameState, MoveType

PlayerName = str


def _assert_alphanumeric(value: str) -> None:
    if not value.isalnum():
        raise InvalidRequestError(
            f"Player name {value!r} may only contain letters and digits."
        )


def _assert_positive(value: int, name: str) -> None:
    if value <= 0:
        raise InvalidRequestError(f"{name} must be a positive integer, got {value}.")


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    players: list[PlayerName]
    columns: int
    rows: int

    @field_validator("players")
    @classmethod
    def validate_players(cls, value: list[PlayerName]) -> list[PlayerName]:
        if len(value) < 2:
            raise InvalidRequestError("A game needs at least 2 players.")
        if len(set(value)) != len(value):
            raise InvalidRequestError("Player names must be unique.")
        for name in value:
            _assert_alphanumeric(name)
        return value

    @field_validator(*["columns", "rows"])
    @classmethod
    def validate_dimensions(cls, value: int) -> int:
        _assert_positive(value, "Board dimension")
        max_dimension = get_max_board_dimension()
        if value > max_dimension:
            raise InvalidRequestError(
                f"Board dimension cannot exceed {max_dimension}, got {value}."
            )
        return value


class MoveRequest(BaseModel):
    column: int

    @field_validator("column")
    @classmethod
    def validate_column(cls, value: int) -> int:
        _assert_positive(value, "column")
        return value


class MovesRangeRequest(BaseModel):
    start: Optional[int] = None
    until: Optional[int] = None

    @field_validator(*["start", "until"])
    @classmethod
    def validate_bound(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 0:
            raise InvalidRequestError(f"Move range bounds cannot be negative, got {value}.")
        return value


# --- RESPONSE MODELS ---
class CreateGameResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    game_id: UUID = Field(alias="gameId")


class GameListResponse(BaseModel):
    games: list[UUID]


class GameStateResponse(BaseModel):
    """`winner` is left out of the response body while there is none (see the routes' response_model_exclude_none)."""

    players: list[PlayerName]
    state: GameState
    winner: Optional[PlayerName] = None


class MoveRecordResponse(BaseModel):
    """`column` only exists for MOVE records."""

    type: MoveType
    player: PlayerName
    column: Optional[int] = None


class MovesResponse(BaseModel):
    moves: list[MoveRecordResponse]


class MoveResponse(BaseModel):
    move: str


class ErrorResponse(BaseModel):
    code: str
