from __future__ import annotations
import math
from typing import List, Optional

from rich.console import Console, ConsoleOptions, RenderResult
from rich.layout import Layout
from rich.panel import Panel
from rich.text import Text

from connect4_tui.config import (
    BOARD_RATIO,
    CONTROLS_MIN_HEIGHT,
    CONTROLS_RATIO,
    NEUTRAL_COLOR,
)
from connect4_tui.ui.colors import style
from connect4_tui.ui.presenter import Frame, StatusPanel

Pixels = List[List[Optional[str]]]

UPPER_HALF = "▀"
LOWER_HALF = "▄"
FULL_BLOCK = "█"


def _span(lo: float, hi: float, origin: float, scale: float, limit: int) -> range:
    # Pixel indices whose centers (origin + (i + 0.5) * scale) fall in [lo, hi).
    start = math.ceil((lo - origin) / scale - 0.5)
    stop = math.ceil((hi - origin) / scale - 0.5)
    return range(max(start, 0), min(stop, limit))


def rasterize(frame: Frame, width: int, height: int) -> Pixels:
    """
    Map the frame's canvas onto width x (2 * height) pixels.

    Each terminal row holds two pixels stacked vertically. Row 0 of the
    result is the top of the screen, i.e. the top of the canvas.
    """
    if width <= 0 or height <= 0:
        return []

    px_rows = height * 2
    pixels: Pixels = [[None] * width for _ in range(px_rows)]

    x0, x1 = frame.x_bounds
    y0, y1 = frame.y_bounds
    sx = (x1 - x0) / width
    sy = (y1 - y0) / px_rows

    for rect in frame.cells:
        cols = _span(rect.x, rect.x + rect.width, x0, sx, width)
        # screen rows count down from the top edge of the canvas
        rows = _span(y1 - rect.y - rect.height, y1 - rect.y, 0.0, sy, px_rows)
        for py in rows:
            line = pixels[py]
            for px in cols:
                line[px] = rect.color

    return pixels


def _text_row(top: List[Optional[str]], bottom: List[Optional[str]]) -> Text:
    line = Text(no_wrap=True, overflow="crop")
    for t, b in zip(top, bottom):
        if t is None and b is None:
            line.append(" ")
        elif t == b:
            line.append(FULL_BLOCK, style=style(t))
        elif t is None:
            line.append(LOWER_HALF, style=style(b))
        else:
            line.append(UPPER_HALF, style=style(t, b))
    return line


class BoardCanvas:
    """Half-block canvas that fills whatever space it is rendered into."""

    def __init__(self, frame: Frame) -> None:
        self.frame = frame

    def __rich_console__(self, console: Console, options: ConsoleOptions) -> RenderResult:
        width = options.max_width
        height = options.height if options.height is not None else options.max_height
        pixels = rasterize(self.frame, width, height)
        rows = [_text_row(pixels[2 * i], pixels[2 * i + 1]) for i in range(height)]
        yield Text("\n", no_wrap=True, overflow="crop").join(rows)


def board_renderable(frame: Frame) -> Panel:
    return Panel(
        BoardCanvas(frame),
        title=frame.title,
        border_style=NEUTRAL_COLOR,
        padding=0,
    )


def status_renderable(panel: StatusPanel) -> Panel:
    return Panel(
        Text(panel.text, justify="center", no_wrap=True, overflow="ellipsis"),
        title=panel.title,
        border_style=panel.color,
    )


def build_layout(frame: Frame) -> Layout:
    layout = Layout(name="root")
    layout.split_column(
        Layout(board_renderable(frame), name="board", ratio=BOARD_RATIO),
        Layout(name="controls", ratio=CONTROLS_RATIO, minimum_size=CONTROLS_MIN_HEIGHT),
    )
    layout["controls"].split_row(
        *(Layout(status_renderable(p), name=p.player) for p in frame.panels)
    )
    return layout
