# src/connectn/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Sequence

from connectn.config import ROWS, COLS
from connectn.types import Cell, Player, Move


@dataclass(slots=True)
class Board:
    """
    Column-major grid: grid[col][row], row 0 is the TOP of the board.
    Pieces drop to the highest row index that is still empty.
    """
    cols: int = COLS
    rows: int = ROWS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.grid:
            self.grid = [[None for _ in range(self.rows)] for _ in range(self.cols)]
        elif len(self.grid) != self.cols or any(len(col) != self.rows for col in self.grid):
            raise ValueError(f"Grid does not match a {self.cols}x{self.rows} board.")

    @classmethod
    def from_columns(cls, columns: Sequence[Sequence[Cell]]) -> "Board":
        grid = [list(col) for col in columns]
        rows = len(grid[0]) if grid else 0
        return cls(cols=len(grid), rows=rows, grid=grid)

    def copy(self) -> "Board":
        return Board(self.cols, self.rows, [col[:] for col in self.grid])

    def cell(self, col: int, row: int) -> Cell:
        return self.grid[col][row]

    def valid_moves(self) -> List[Move]:
        return [Move(c) for c in range(self.cols) if self.grid[c][0] is None]

    def is_full(self) -> bool:
        return all(self.grid[c][0] is not None for c in range(self.cols))

    def piece_count(self) -> int:
        return sum(1 for col in self.grid for cell in col if cell is not None)

    def drop(self, col: Move, player: Player) -> int:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        if self.grid[c][0] is not None:
            raise ValueError("Column is full.")

        column = self.grid[c]
        for r in range(self.rows - 1, -1, -1):
            if column[r] is None:
                column[r] = player
                return r

        raise ValueError("Column is full.")  # unreachable once the top check passed

    def undo(self, col: Move) -> None:
        """
        Remove the top-most piece from a column.
        Used by the search to restore the board after each simulated branch.
        """
        column = self.grid[int(col)]
        for r in range(self.rows):
            if column[r] is not None:
                column[r] = None
                return
        raise ValueError("Cannot undo: column is empty.")
