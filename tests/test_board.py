from __future__ import annotations

import pytest

from connect4_tui.core.board import Board
from connect4_tui.types import Move


def _column_is_stacked(board: Board, col: int) -> bool:
    cells = [board.grid[r][col] for r in range(board.rows)]
    seen_empty = False
    for cell in cells:
        if cell is None:
            seen_empty = True
        elif seen_empty:
            return False
    return True


def test_new_board_is_empty() -> None:
    b = Board()
    assert (b.rows, b.cols) == (6, 7)
    assert list(b.occupied()) == []
    assert all(b.landing_row(Move(c)) == 0 for c in range(7))


def test_drop_lands_on_bottom_row_first() -> None:
    b = Board()
    assert b.drop(Move(3), "red") == 0
    assert b.drop(Move(3), "blue") == 1
    assert b.grid[0][3] == "red"
    assert b.grid[1][3] == "blue"
    assert list(b.occupied()) == [(0, 3, "red"), (1, 3, "blue")]


def test_full_column_rejects_drop() -> None:
    b = Board(rows=2, cols=3)
    b.drop(Move(1), "red")
    b.drop(Move(1), "blue")
    assert b.landing_row(Move(1)) is None
    assert b.landing_row(Move(0)) == 0
    with pytest.raises(ValueError, match="full"):
        b.drop(Move(1), "red")


def test_column_out_of_range() -> None:
    b = Board()
    with pytest.raises(ValueError, match="out of range"):
        b.landing_row(Move(7))
    with pytest.raises(ValueError, match="out of range"):
        b.drop(Move(-1), "red")


@pytest.mark.parametrize("rows, cols", [(0, 7), (6, 0), (-1, 3)])
def test_board_size_must_be_positive(rows: int, cols: int) -> None:
    with pytest.raises(ValueError):
        Board(rows=rows, cols=cols)


def test_odd_sizes_fill_up() -> None:
    b = Board(rows=1, cols=1)
    assert b.drop(Move(0), "blue") == 0
    assert b.landing_row(Move(0)) is None


def test_columns_stay_stacked() -> None:
    b = Board(rows=4, cols=3)
    for i, col in enumerate([0, 2, 2, 1, 0, 2, 2, 1]):
        b.drop(Move(col), "red" if i % 2 == 0 else "blue")
    assert all(_column_is_stacked(b, c) for c in range(b.cols))
