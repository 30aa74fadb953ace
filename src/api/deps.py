"""Dependency providers: DB session --> repository --> service."""

from typing import Optional

from fastapi import Depends
from sqlalchemy.orm import Session

from src.db.database import get_db
from src.db.memory_repository import InMemoryGameRepository
from src.db.repository import GameRepository
from src.db.sql_repository import SQLGameRepository
from src.services.drop_token_service import DropTokenService

# Used for every request when DROP_TOKEN_DATABASE_URL is memory://
memory_repository = InMemoryGameRepository()


def get_repository(db: Optional[Session] = Depends(get_db)) -> GameRepository:
    if db is None:
        return memory_repository
    return SQLGameRepository(db)


def get_service(repository: GameRepository = Depends(get_repository)) -> DropTokenService:
    return DropTokenService(repository)
