"""
The Game board implements all rules that affect the `cells` (which player's token sits where).

The board is a single flat list in column-major order: every column is a stack that fills up from its lowest row.
For a board with 4 columns and 4 rows, the cell indices are laid out as:

 3  7  11  15
 2  6  10  14
 1  5   9  13
 0  4   8  12
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Self

from src.core.config import WIN_LENGTH
from src.core.exceptions import ColumnFullError

Cell = Optional[str]
Line = tuple[int, ...]

# (column step, row step): horizontal, vertical, and the two diagonals
DIRECTIONS = ((1, 0), (0, 1), (1, 1), (1, -1))


def cell_index(column: int, row: int, rows: int) -> int:
    """Human readable column number (starts at 1) and 0-based row (0 is the bottom) to position in the flat list."""
    return (column - 1) * rows + row


@lru_cache(maxsize=4096)
def win_lines(columns: int, rows: int, index: int, win_length: int = WIN_LENGTH) -> tuple[Line, ...]:
    """
    All lines of `win_length` cells on a board of the given shape that pass through the cell at `index`.
    ----

    Pure geometry, so cached per (shape, cell). Only the cell that just got filled is ever looked up.
    For each direction we slide a window of `win_length` cells over the cell and keep the windows that fit on the board.
    """
    column, row = index // rows + 1, index % rows
    lines: list[Line] = []
    for column_step, row_step in DIRECTIONS:
        for offset in range(win_length):
            start_column = column - offset * column_step
            start_row = row - offset * row_step
            window = [
                (start_column + k * column_step, start_row + k * row_step)
                for k in range(win_length)
            ]
            if all(1 <= c <= columns and 0 <= r < rows for c, r in window):
                lines.append(tuple(cell_index(c, r, rows) for c, r in window))
    return tuple(lines)


def move_wins_game(cells: list[Cell], columns: int, rows: int, index: int) -> bool:
    """A line wins when all of its cells hold a token of one and the same player."""
    for line in win_lines(columns, rows, index):
        tokens = {cells[i] for i in line}
        if None not in tokens and len(tokens) == 1:
            return True
    return False


@dataclass
class Board:
    columns: int
    rows: int
    cells: list[Cell]

    @classmethod
    def empty(cls, columns: int, rows: int) -> Self:
        return cls(columns, rows, [None] * (columns * rows))

    def column_cells(self, column: int) -> list[Cell]:
        """Cells of a single column, from bottom to top."""
        start = cell_index(column, 0, self.rows)
        return self.cells[start : start + self.rows]

    def lowest_empty_index(self, column: int) -> int:
        """Where a token dropped into the column would land."""
        for row, token in enumerate(self.column_cells(column)):
            if token is None:
                return cell_index(column, row, self.rows)
        raise ColumnFullError(f"Column {column} has no empty cell left.")

    def drop_token(self, column: int, player: str) -> int:
        """Place the player's token in the lowest empty cell of the column and return its index."""
        index = self.lowest_empty_index(column)
        self.cells[index] = player
        return index

    def is_winning_cell(self, index: int) -> bool:
        return move_wins_game(self.cells, self.columns, self.rows, index)

    def is_full(self) -> bool:
        return None not in self.cells
