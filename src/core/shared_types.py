"""
Type definitions used across layers
"""

from enum import StrEnum


class GameState(StrEnum):
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"


class MoveType(StrEnum):
    MOVE = "MOVE"
    QUIT = "QUIT"
