"""Entries of the move log: either a token drop or a player quitting."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from src.core.exceptions import GameError
from src.core.models import MoveRecordData
from src.core.shared_types import MoveType


@dataclass(frozen=True)
class MoveRecord:
    type: MoveType
    player: str
    column: Optional[int] = None

    @classmethod
    def drop(cls, player: str, column: int) -> MoveRecord:
        return cls(MoveType.MOVE, player, column)

    @classmethod
    def quit(cls, player: str) -> MoveRecord:
        return cls(MoveType.QUIT, player)

    @classmethod
    def from_dict(cls, data: MoveRecordData) -> MoveRecord:
        """Read a persisted record: {"type": "MOVE", "player": ..., "column": ...} or {"type": "QUIT", "player": ...}"""
        move_type = str(data["type"])
        if move_type not in MoveType.__members__:
            raise GameError(
                f"Invalid move type: {move_type!r}. Pick one from {','.join(MoveType)}"
            )
        if move_type == MoveType.MOVE:
            return cls.drop(str(data["player"]), int(data["column"]))
        return cls.quit(str(data["player"]))

    def to_dict(self) -> MoveRecordData:
        """The column is only part of the record for token drops."""
        data: MoveRecordData = {"type": self.type.value, "player": self.player}
        if self.type == MoveType.MOVE:
            assert self.column is not None
            data["column"] = self.column
        return data
