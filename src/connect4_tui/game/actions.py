from __future__ import annotations
from typing import Optional

from connect4_tui.types import Player


def other(player: Player) -> Player:
    return "blue" if player == "red" else "red"


def parse_column(raw: str) -> Optional[int]:
    """
    Parse the pending buffer as a 1-based column number.

    Returns None when the text is not a plain run of ASCII digits.
    Range checks are left to the caller, which knows the board width.
    """
    if not raw or not raw.isascii() or not raw.isdigit():
        return None
    return int(raw)
