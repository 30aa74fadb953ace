"""Generate database session"""

from typing import Generator, Optional

from sqlalchemy import Engine, create_engine
from sqlalchemy.orm import Session, sessionmaker

from src.core.config import MEMORY_DATABASE_URL, get_database_url, get_sql_echo
from src.db.schema import Base

DATABASE_URL = get_database_url()


def create_db_engine(url: str) -> Optional[Engine]:
    """No engine when games are kept in memory."""
    if url == MEMORY_DATABASE_URL:
        return None
    return create_engine(
        url,
        echo=get_sql_echo(),
        # SQLite connections are used from FastAPI's worker threads
        connect_args={"check_same_thread": False} if url.startswith("sqlite") else {},
    )


engine = create_db_engine(DATABASE_URL)
SessionLocal = sessionmaker(bind=engine)


def init_db() -> None:
    """Ensure all tables are created"""
    if engine is not None:
        Base.metadata.create_all(bind=engine)


def get_db() -> Generator[Optional[Session], None, None]:
    """A session per request, or None when no database is configured."""
    if engine is None:
        yield None
        return
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
