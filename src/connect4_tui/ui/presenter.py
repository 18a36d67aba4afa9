from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple

from connect4_tui.config import BOARD_TITLE, CELL_PITCH, CELL_SIZE, PLAYER_TITLES
from connect4_tui.game.state import GameState
from connect4_tui.types import PLAYERS, Player
from connect4_tui.ui.colors import panel_color, player_color


@dataclass(frozen=True, slots=True)
class CellRect:
    x: float
    y: float
    width: float
    height: float
    color: str


@dataclass(frozen=True, slots=True)
class StatusPanel:
    player: Player
    title: str
    text: str
    color: str
    active: bool


@dataclass(frozen=True, slots=True)
class Frame:
    """Everything needed to draw one screen. Canvas y grows upward."""

    title: str
    x_bounds: Tuple[float, float]
    y_bounds: Tuple[float, float]
    cells: Tuple[CellRect, ...]
    panels: Tuple[StatusPanel, ...]


def cell_rect(row: int, col: int, color: str) -> CellRect:
    return CellRect(
        x=col * CELL_PITCH,
        y=row * CELL_PITCH,
        width=CELL_SIZE,
        height=CELL_SIZE,
        color=color,
    )


def status_panel(state: GameState, player: Player) -> StatusPanel:
    active = player == state.current
    return StatusPanel(
        player=player,
        title=PLAYER_TITLES[player],
        text=state.pending if active else "",
        color=panel_color(player, state.current),
        active=active,
    )


def present(state: GameState) -> Frame:
    """
    Project a game state onto a drawable frame.

    Read-only: calling it any number of times on the same state gives
    equal frames. Empty cells produce no rectangle.
    """
    board = state.board
    cells = tuple(cell_rect(r, c, player_color(p)) for r, c, p in board.occupied())
    return Frame(
        title=BOARD_TITLE,
        x_bounds=(0.0, board.cols * CELL_PITCH),
        y_bounds=(0.0, board.rows * CELL_PITCH),
        cells=cells,
        panels=tuple(status_panel(state, p) for p in PLAYERS),
    )
