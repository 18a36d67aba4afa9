# src/connect4_tui/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from connect4_tui.config import ROWS, COLS
from connect4_tui.types import Cell, Player, Move


@dataclass(slots=True)
class Board:
    """
    Grid of cells with row 0 at the bottom.

    Tokens only ever enter through drop(), so every column is a stack:
    occupied cells from row 0 up, empty cells above them.
    """

    rows: int = ROWS
    cols: int = COLS
    grid: List[List[Cell]] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError("Board needs at least one row and one column.")
        if not self.grid:
            self.grid = [[None for _ in range(self.cols)] for _ in range(self.rows)]

    def landing_row(self, col: Move) -> Optional[int]:
        c = int(col)
        if c < 0 or c >= self.cols:
            raise ValueError("Column out of range.")
        for r in range(self.rows):
            if self.grid[r][c] is None:
                return r
        return None

    def drop(self, col: Move, player: Player) -> int:
        r = self.landing_row(col)
        if r is None:
            raise ValueError("Column is full.")
        self.grid[r][int(col)] = player
        return r

    def occupied(self) -> Iterator[Tuple[int, int, Player]]:
        """Yield (row, col, player) for every placed token, bottom row first."""
        for r, row in enumerate(self.grid):
            for c, p in enumerate(row):
                if p is not None:
                    yield r, c, p
