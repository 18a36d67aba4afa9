from __future__ import annotations

import pytest

from connect4_tui.core.board import Board
from connect4_tui.game.state import GameState


@pytest.fixture()
def state() -> GameState:
    return GameState(board=Board())
