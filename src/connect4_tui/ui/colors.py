from __future__ import annotations

from connect4_tui.config import NEUTRAL_COLOR, PLAYER_COLORS
from connect4_tui.types import Player


def player_color(player: Player) -> str:
    return PLAYER_COLORS[player]


def panel_color(player: Player, current: Player) -> str:
    # Only the player to move gets their color; the waiting panel stays neutral.
    if player == current:
        return player_color(player)
    return NEUTRAL_COLOR


def style(fg: str | None, bg: str | None = None) -> str:
    """Build a rich style string from optional foreground/background colors."""
    if fg and bg:
        return f"{fg} on {bg}"
    if bg:
        return f"on {bg}"
    return fg or ""
