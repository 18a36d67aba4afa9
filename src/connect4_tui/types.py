# src/connect4_tui/types.py

from __future__ import annotations
from typing import Literal, Optional, NewType, Tuple

Player = Literal["red", "blue"]
Cell = Optional[Player]
Move = NewType("Move", int)   # column index 0..cols-1
Coord = Tuple[int, int]       # (row, col), row 0 is the bottom

PLAYERS: Tuple[Player, Player] = ("red", "blue")
