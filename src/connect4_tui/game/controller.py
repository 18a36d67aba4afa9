from __future__ import annotations
import logging
import time
from typing import Optional

from rich.console import Console
from rich.live import Live

from connect4_tui.config import QUIT_KEY, TICK_RATE_SEC
from connect4_tui.game.results import PLACED
from connect4_tui.game.state import GameState
from connect4_tui.ui.presenter import present
from connect4_tui.ui.render import build_layout
from connect4_tui.ui.terminal import BACKSPACE, ENTER, KeySource

logger = logging.getLogger(__name__)


def handle_key(state: GameState, key: str, quit_key: str = QUIT_KEY) -> bool:
    """Apply one key press to the game. Returns False when the player quits."""
    if key == quit_key:
        return False

    if len(key) == 1 and key in "0123456789":
        state.push_digit(key)
    elif key == BACKSPACE:
        state.pop_digit()
    elif key == ENTER:
        player = state.current
        outcome = state.commit_turn()
        if outcome == PLACED:
            logger.info("Move %d: %s -> %s", state.placed, player, state.last_move)
        else:
            logger.debug("Move by %s rejected (%s)", player, outcome)
    return True


def run_game(
    state: GameState,
    keys: KeySource,
    console: Optional[Console] = None,
    tick: float = TICK_RATE_SEC,
    screen: bool = True,
) -> None:
    """
    Draw, wait up to one tick for a key, apply it, repeat.

    Returns when the quit key is pressed. Terminal errors propagate.
    """
    logger.info("Game started on a %dx%d board", state.board.rows, state.board.cols)

    with Live(
        build_layout(present(state)),
        console=console,
        screen=screen,
        auto_refresh=False,
        redirect_stdout=False,
        redirect_stderr=False,
    ) as live:
        last_tick = time.monotonic()
        while True:
            live.update(build_layout(present(state)), refresh=True)

            timeout = max(0.0, tick - (time.monotonic() - last_tick))
            key = keys.read_key(timeout)
            if key is not None and not handle_key(state, key):
                break

            if time.monotonic() - last_tick >= tick:
                last_tick = time.monotonic()

    logger.info("Game ended after %d placements", state.placed)
