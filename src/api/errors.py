"""Translate exceptions into HTTP responses. Every GameError subclass maps onto exactly one status code."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from src.core.exceptions import (
    ColumnFullError,
    GameError,
    GameIsDoneError,
    GameNotFoundError,
    InvalidColumnError,
    InvalidPlayerError,
    InvalidRequestError,
    MoveNotFoundError,
    NotPlayersTurnError,
    PlayerNotFoundError,
)

logger = logging.getLogger(__name__)

ERROR_STATUS: dict[type[GameError], int] = {
    InvalidRequestError: status.HTTP_400_BAD_REQUEST,
    GameNotFoundError: status.HTTP_404_NOT_FOUND,
    MoveNotFoundError: status.HTTP_404_NOT_FOUND,
    InvalidColumnError: status.HTTP_400_BAD_REQUEST,
    ColumnFullError: status.HTTP_400_BAD_REQUEST,
    InvalidPlayerError: status.HTTP_404_NOT_FOUND,
    PlayerNotFoundError: status.HTTP_404_NOT_FOUND,
    NotPlayersTurnError: status.HTTP_409_CONFLICT,
    GameIsDoneError: status.HTTP_410_GONE,
}


def status_for(error: GameError) -> int:
    """Status of the closest mapped class in the error's MRO (plain GameErrors are the client's fault)."""
    for cls in type(error).__mro__:
        if cls in ERROR_STATUS:
            return ERROR_STATUS[cls]
    return status.HTTP_400_BAD_REQUEST


async def game_error_handler(request: Request, exc: Exception) -> JSONResponse:
    assert isinstance(exc, GameError)
    status_code = status_for(exc)
    logger.debug("%s %s --> %d %s", request.method, request.url.path, status_code, exc)
    return JSONResponse(status_code=status_code, content={"code": exc.code})


async def validation_error_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.debug("%s %s --> malformed request: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"code": InvalidRequestError.code},
    )


def register_error_handlers(app: FastAPI) -> None:
    app.add_exception_handler(GameError, game_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)
