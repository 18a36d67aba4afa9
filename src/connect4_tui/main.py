from __future__ import annotations

import argparse
import logging
import sys

from rich.console import Console

from connect4_tui.config import COLS, LOG_FORMAT, LOG_LEVEL, ROWS, TICK_RATE_SEC
from connect4_tui.core.board import Board
from connect4_tui.game.controller import run_game
from connect4_tui.game.state import GameState
from connect4_tui.ui.terminal import KeyReader, raw_terminal

logger = logging.getLogger(__name__)


def _positive_int(raw: str) -> int:
    try:
        n = int(raw)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {raw!r}")
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be positive: {n}")
    return n


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="connect4-tui",
        description="Two-player 4-in-a-row in the terminal. Type a column number, "
        "press Enter to drop, Backspace to edit, q to quit.",
    )
    ap.add_argument("--rows", type=_positive_int, default=ROWS, help=f"Board rows (default {ROWS}).")
    ap.add_argument("--cols", type=_positive_int, default=COLS, help=f"Board columns (default {COLS}).")
    ap.add_argument(
        "--tick-ms",
        type=_positive_int,
        default=int(TICK_RATE_SEC * 1000),
        help="Longest wait for a key between redraws, in milliseconds.",
    )
    ap.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="Write logs to this file. Logging is off otherwise since the game owns the screen.",
    )
    ap.add_argument(
        "--log-level",
        type=str.upper,
        default=LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
    )
    return ap


def configure_logging(log_file: str | None, level: str = LOG_LEVEL) -> None:
    if log_file:
        logging.basicConfig(filename=log_file, level=level, format=LOG_FORMAT, force=True)
    else:
        logging.basicConfig(handlers=[logging.NullHandler()], force=True)


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)
    configure_logging(args.log_file, args.log_level)

    if not sys.stdin.isatty():
        print("connect4-tui: stdin is not a terminal", file=sys.stderr)
        return 1

    state = GameState(board=Board(args.rows, args.cols))

    try:
        with raw_terminal(sys.stdin):
            run_game(state, KeyReader(sys.stdin), console=Console(), tick=args.tick_ms / 1000)
    except KeyboardInterrupt:
        logger.info("Interrupted")
    except EOFError:
        logger.info("Input closed")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
