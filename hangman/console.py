"""Terminal control: clearing the screen and setting colours with ANSI codes."""

from __future__ import annotations

import enum
from typing import TextIO


class Color(enum.IntEnum):
    """Terminal colours; values 8-15 are the bright variants."""

    BLACK = 0
    RED = 1
    GREEN = 2
    YELLOW = 3
    BLUE = 4
    MAGENTA = 5
    CYAN = 6
    WHITE = 7
    BRIGHT_BLACK = 8
    BRIGHT_RED = 9
    BRIGHT_GREEN = 10
    BRIGHT_YELLOW = 11
    BRIGHT_BLUE = 12
    BRIGHT_MAGENTA = 13
    BRIGHT_CYAN = 14
    BRIGHT_WHITE = 15


CLEAR_SEQUENCE = "\x1b[2J\x1b[H"


def clear_screen(stream: TextIO) -> None:
    """Clear the terminal and move the cursor to the top left."""
    stream.flush()
    stream.write(CLEAR_SEQUENCE)
    stream.flush()


def _sgr(color: Color | None, base: int, bright_base: int, default: int) -> int:
    if color is None:
        return default
    color = Color(color)
    if color >= Color.BRIGHT_BLACK:
        return bright_base + color - Color.BRIGHT_BLACK
    return base + color


def set_colors(
    stream: TextIO, foreground: Color | None = None, background: Color | None = None
) -> None:
    """Set the text colours; ``None`` restores the terminal default."""
    fg = _sgr(foreground, 30, 90, 39)
    bg = _sgr(background, 40, 100, 49)
    stream.write(f"\x1b[{fg};{bg}m")
    stream.flush()