from __future__ import annotations
import logging
import os
import select
import sys
import termios
import tty
from collections import deque
from contextlib import contextmanager
from typing import Deque, Iterator, List, Optional, Protocol, TextIO

logger = logging.getLogger(__name__)

ENTER = "enter"
BACKSPACE = "backspace"
ESCAPE = "escape"

ESC = "\x1b"


class KeySource(Protocol):
    def read_key(self, timeout: float) -> Optional[str]:
        ...


def decode_keys(data: bytes) -> List[str]:
    """
    Turn raw terminal bytes into key names.

    Printable characters come through as themselves. CR/LF become "enter",
    DEL/BS become "backspace", a lone ESC becomes "escape". CSI/SS3 escape
    sequences (arrow keys and friends) and other control bytes are dropped.
    """
    text = data.decode("utf-8", errors="replace")
    keys: List[str] = []
    i = 0
    while i < len(text):
        ch = text[i]
        i += 1
        if ch in "\r\n":
            keys.append(ENTER)
        elif ch in "\x7f\x08":
            keys.append(BACKSPACE)
        elif ch == ESC:
            if i < len(text) and text[i] in "[O":
                i += 1
                # parameters and intermediates, then one final byte in @..~
                while i < len(text) and not ("@" <= text[i] <= "~"):
                    i += 1
                i += 1
            else:
                keys.append(ESCAPE)
        elif ch.isprintable():
            keys.append(ch)
    return keys


class KeyReader:
    """Reads key presses from a terminal file descriptor with a bounded wait."""

    def __init__(self, stream: TextIO = sys.stdin) -> None:
        self._fd = stream.fileno()
        self._pending: Deque[str] = deque()

    def read_key(self, timeout: float) -> Optional[str]:
        if not self._pending:
            ready, _, _ = select.select([self._fd], [], [], max(timeout, 0.0))
            if not ready:
                return None
            data = os.read(self._fd, 64)
            if not data:
                raise EOFError("Input stream closed.")
            self._pending.extend(decode_keys(data))
        if not self._pending:
            return None
        return self._pending.popleft()


@contextmanager
def raw_terminal(stream: TextIO = sys.stdin) -> Iterator[None]:
    """
    Switch the terminal to cbreak mode (no echo, no line buffering) for
    the duration of the block and restore the saved mode on every exit.

    Output processing stays on so the display's newlines still work,
    and Ctrl-C still raises KeyboardInterrupt.
    """
    fd = stream.fileno()
    saved = termios.tcgetattr(fd)
    tty.setcbreak(fd)
    logger.debug("Terminal on fd %d switched to cbreak mode", fd)
    try:
        yield
    finally:
        termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        logger.debug("Terminal on fd %d restored", fd)
