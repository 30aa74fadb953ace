"""Settings read from the environment (with defaults for local development)."""

import os

DEFAULT_DATABASE_URL = "sqlite:///./drop_token.db"
# Keep all games in the memory of a single process instead of a database
MEMORY_DATABASE_URL = "memory://"
DEFAULT_LOG_LEVEL = "INFO"

# Amount of identical tokens in a row needed to win
WIN_LENGTH = 3


def get_database_url() -> str:
    return os.environ.get("DROP_TOKEN_DATABASE_URL", DEFAULT_DATABASE_URL)


def get_log_level() -> str:
    return os.environ.get("DROP_TOKEN_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()


def get_sql_echo() -> bool:
    """SQLAlchemy engine echoes all statements when set to 1/true/yes."""
    return os.environ.get("DROP_TOKEN_SQL_ECHO", "").lower() in {"1", "true", "yes"}


DEFAULT_MAX_BOARD_DIMENSION = 64


def get_max_board_dimension() -> int:
    """Largest amount of columns (or rows) a new game may ask for."""
    return int(
        os.environ.get("DROP_TOKEN_MAX_BOARD_DIMENSION", DEFAULT_MAX_BOARD_DIMENSION)
    )
