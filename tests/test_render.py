from __future__ import annotations

import io

from rich.console import Console

from connect4_tui.game.state import GameState
from connect4_tui.ui.presenter import present
from connect4_tui.ui.render import (
    FULL_BLOCK,
    BoardCanvas,
    build_layout,
    rasterize,
)


def _console(width: int = 60, height: int = 24) -> Console:
    return Console(file=io.StringIO(), width=width, height=height, color_system=None, force_terminal=False)


def _drop(state: GameState, col: str) -> None:
    state.push_digit(col)
    state.commit_turn()


def test_rasterize_empty_board(state: GameState) -> None:
    pixels = rasterize(present(state), 35, 15)
    assert len(pixels) == 30
    assert all(len(row) == 35 for row in pixels)
    assert all(p is None for row in pixels for p in row)


def test_rasterize_places_bottom_left_cell(state: GameState) -> None:
    _drop(state, "1")
    # 10 canvas units per pixel in both directions
    pixels = rasterize(present(state), 35, 15)

    filled = {(y, x) for y, row in enumerate(pixels) for x, p in enumerate(row) if p}
    assert filled == {(y, x) for y in range(26, 30) for x in range(4)}
    assert pixels[29][0] == "red"


def test_rasterize_second_token_sits_above(state: GameState) -> None:
    _drop(state, "1")
    _drop(state, "1")
    pixels = rasterize(present(state), 35, 15)
    assert pixels[25][0] is None  # gap between cells
    assert pixels[24][0] == "blue"
    assert pixels[21][0] == "blue"
    assert pixels[20][0] is None
    assert pixels[22][4] is None


def test_rasterize_degenerate_sizes(state: GameState) -> None:
    assert rasterize(present(state), 0, 10) == []
    assert rasterize(present(state), 10, 0) == []


def test_canvas_draws_blocks(state: GameState) -> None:
    _drop(state, "1")
    console = _console(width=35)
    console.print(BoardCanvas(present(state)), height=15)
    lines = console.file.getvalue().splitlines()

    assert lines[-1].startswith(FULL_BLOCK * 4)
    assert lines[-2].startswith(FULL_BLOCK * 4)
    assert FULL_BLOCK not in "".join(lines[:-2])


def test_layout_shows_title_and_panels(state: GameState) -> None:
    state.push_digit("7")
    console = _console()
    console.print(build_layout(present(state)))
    out = console.file.getvalue()

    assert "4 in a row" in out
    assert "Red player" in out
    assert "Blue player" in out
    assert "7" in out


def test_layout_regions(state: GameState) -> None:
    layout = build_layout(present(state))
    assert layout["board"].ratio == 19
    assert layout["controls"].ratio == 1
    assert [child.name for child in layout["controls"].children] == ["red", "blue"]
