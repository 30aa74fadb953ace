"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Hence, both the API layer (higher) and domain/db layers (lower) will use model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the DB layer, API layer, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make GameModel easier to read
PlayerName = str
Cell = Optional[PlayerName]
MoveRecordData = dict[str, str | int]


@dataclass
class GameModel:
    """Transport-safe representation of a drop token game used between API, Service, DB, and Game layers."""

    columns: int
    rows: int
    players: list[PlayerName]
    board: list[Cell]
    moves: list[MoveRecordData]
    current_player: Optional[PlayerName]
    state: str
    winner: Optional[PlayerName] = None
