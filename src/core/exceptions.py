"""
Custom exceptions raised by the domain, service and API layers.

Every error carries a stable `code` tag. The API layer maps each class onto exactly one HTTP status.
"""


class GameError(Exception):
    """Top-level exception of the application."""

    code = "game_error"


# --- REQUEST ---
class InvalidRequestError(GameError):
    """Request data could not be interpreted."""

    code = "bad_request"


# --- REPOSITORY / LOOKUPS ---
class RepositoryError(GameError):
    code = "repository_error"


class GameNotFoundError(RepositoryError):
    code = "game_not_found"


class MoveNotFoundError(RepositoryError):
    code = "move_not_found"


# --- GAME RULES ---
class GameIsDoneError(GameError):
    """Mutation attempted on a game that already ended."""

    code = "game_is_done"


class InvalidColumnError(GameError):
    code = "invalid_column"


class InvalidPlayerError(GameError):
    """Acting player is not (or no longer) part of the game."""

    code = "invalid_player"


class NotPlayersTurnError(GameError):
    code = "not_players_turn"


class ColumnFullError(GameError):
    code = "column_full"


class PlayerNotFoundError(GameError):
    """Quit requested by someone who is not in the game."""

    code = "player_not_found"
