"""HTTP routes of the drop token service."""

from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Response, status

from src.api.deps import get_service
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
from src.services.drop_token_service import DropTokenService

router = APIRouter()


@router.get("/healthcheck")
def healthcheck() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/drop_token", response_model=GameListResponse)
def list_games(service: DropTokenService = Depends(get_service)) -> GameListResponse:
    return service.list_game_ids()


@router.post("/drop_token", response_model=CreateGameResponse, response_model_by_alias=True)
def create_game(
    payload: CreateGameRequest, service: DropTokenService = Depends(get_service)
) -> CreateGameResponse:
    return service.create_game(payload)


@router.get("/drop_token/{game_id}", response_model=GameStateResponse, response_model_exclude_none=True)
def get_game(
    game_id: UUID, service: DropTokenService = Depends(get_service)
) -> GameStateResponse:
    return service.get_game(game_id)


@router.get("/drop_token/{game_id}/moves", response_model=MovesResponse, response_model_exclude_none=True)
def get_moves(
    game_id: UUID,
    start: Optional[int] = None,
    until: Optional[int] = None,
    service: DropTokenService = Depends(get_service),
) -> MovesResponse:
    return service.get_moves(game_id, MovesRangeRequest(start=start, until=until))


@router.get(
    "/drop_token/{game_id}/moves/{move_number}",
    response_model=MoveRecordResponse,
    response_model_exclude_none=True,
)
def get_move(
    game_id: UUID, move_number: int, service: DropTokenService = Depends(get_service)
) -> MoveRecordResponse:
    return service.get_move(game_id, move_number)


@router.post("/drop_token/{game_id}/{player_id}", response_model=MoveResponse)
def make_move(
    game_id: UUID,
    player_id: str,
    payload: MoveRequest,
    service: DropTokenService = Depends(get_service),
) -> MoveResponse:
    return service.make_move(game_id, player_id, payload)


@router.delete("/drop_token/{game_id}/{player_id}", status_code=status.HTTP_202_ACCEPTED)
def quit_game(
    game_id: UUID, player_id: str, service: DropTokenService = Depends(get_service)
) -> Response:
    service.quit(game_id, player_id)
    return Response(content="{}", status_code=status.HTTP_202_ACCEPTED, media_type="application/json")
