from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Optional

from connect4_tui.config import FIRST_PLAYER
from connect4_tui.core.board import Board
from connect4_tui.game.actions import other, parse_column
from connect4_tui.game.results import (
    COLUMN_FULL,
    OUT_OF_RANGE,
    PLACED,
    UNPARSABLE,
    TurnOutcome,
)
from connect4_tui.types import Coord, Move, Player

logger = logging.getLogger(__name__)

DIGITS = "0123456789"


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=Board)
    current: Player = FIRST_PLAYER
    pending: str = ""
    placed: int = 0
    last_move: Optional[Coord] = None

    def push_digit(self, d: str) -> None:
        if len(d) != 1 or d not in DIGITS:
            raise ValueError(f"Expected a single digit, got {d!r}.")
        self.pending += d

    def pop_digit(self) -> None:
        self.pending = self.pending[:-1]

    def commit_turn(self) -> TurnOutcome:
        """
        Try to play the pending buffer as a column number.

        Rejections change nothing at all: the board, the player to move
        and the buffer stay exactly as they were. Only a placement clears
        the buffer and hands the turn over.
        """
        n = parse_column(self.pending)
        if n is None:
            logger.debug("Ignoring commit of %r: not a number", self.pending)
            return UNPARSABLE

        if n < 1 or n > self.board.cols:
            logger.debug("Ignoring commit of %r: column out of range", self.pending)
            return OUT_OF_RANGE

        col = Move(n - 1)
        row = self.board.landing_row(col)
        if row is None:
            logger.debug("Ignoring commit of %r: column %d is full", self.pending, n)
            return COLUMN_FULL

        self.board.drop(col, self.current)
        logger.debug("Player %s dropped into column %d, row %d", self.current, n, row)

        self.last_move = (row, int(col))
        self.placed += 1
        self.pending = ""
        self.current = other(self.current)
        return PLACED
