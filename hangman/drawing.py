"""ASCII art for the gallows and the end-of-round animations."""

from __future__ import annotations

import itertools
from collections.abc import Iterator

_GALLOWS: tuple[str, ...] = (
    "   -------------    \n"
    "   |                \n"
    "   |                \n"
    "   |                \n"
    "   |                \n"
    "   |     \n"
    " -----   \n",
    "   -------------    \n"
    "   |           |    \n"
    "   |                \n"
    "   |                \n"
    "   |                \n"
    "   |     \n"
    " -----   \n",
    "   -------------    \n"
    "   |           |    \n"
    "   |           O    \n"
    "   |                \n"
    "   |                \n"
    "   |     \n"
    " -----   \n",
    "   -------------    \n"
    "   |           |    \n"
    "   |           O    \n"
    "   |           |    \n"
    "   |                \n"
    "   |     \n"
    " -----   \n",
    "   -------------    \n"
    "   |           |    \n"
    "   |           O    \n"
    "   |          /|    \n"
    "   |                \n"
    "   |     \n"
    " -----   \n",
    "   -------------    \n"
    "   |           |    \n"
    "   |           O    \n"
    "   |          /|\\  \n"
    "   |                \n"
    "   |     \n"
    " -----   \n",
    "   -------------    \n"
    "   |           |    \n"
    "   |           O    \n"
    "   |          /|\\  \n"
    "   |          /     \n"
    "   |     \n"
    " -----   \n",
    "   -------------    \n"
    "   |           |    \n"
    "   |           O    \n"
    "   |          /|\\  \n"
    "   |          / \\  \n"
    "   |     \n"
    " -----   \n",
)

_HANGMAN: tuple[str, ...] = (
    "   ------------+    \n"
    "   |          /     \n"
    "   |         O      \n"
    "   |        /|\\    \n"
    "   |        / \\    \n"
    "   |        \n"
    " -----      \n",
    "   ------------+     \n"
    "   |           |     \n"
    "   |           O     \n"
    "   |          /|\\   \n"
    "   |          / \\   \n"
    "   |        \n"
    " -----      \n",
    "   ------------+      \n"
    "   |            \\    \n"
    "   |            O     \n"
    "   |           /|\\   \n"
    "   |           / \\   \n"
    "   |      \n"
    " -----    \n",
    "   ------------+     \n"
    "   |           |     \n"
    "   |           O     \n"
    "   |          /|\\   \n"
    "   |          / \\   \n"
    "   |        \n"
    " -----      \n",
)

_STANDINGMAN: tuple[str, ...] = (
    "           \n"
    "     O     \n"
    "    /|\\   \n"
    "    | |    \n",
    "           \n"
    "     O     \n"
    "    /|\\   \n"
    "    / \\   \n",
    "           \n"
    "   __O__   \n"
    "     |     \n"
    "    / \\   \n",
    "           \n"
    "    \\O/   \n"
    "     |     \n"
    "    / \\   \n",
    "           \n"
    "   __O__   \n"
    "     |     \n"
    "    / \\   \n",
    "           \n"
    "     O     \n"
    "    /|\\   \n"
    "    / \\   \n",
    "           \n"
    "    O     \n"
    "    /|\\   \n"
    "    / \\   \n",
    "           \n"
    "     O     \n"
    "    /|\\   \n"
    "    / \\   \n",
)

GALLOWS_STAGES = len(_GALLOWS)


def get_drawing(index: int) -> str:
    """Return the gallows drawing for the given number of mistakes (wrapping around)."""
    return _GALLOWS[index % len(_GALLOWS)]


def _frames_from_second(figures: tuple[str, ...]) -> Iterator[str]:
    return itertools.cycle(figures[1:] + figures[:1])


def hangman_frames() -> Iterator[str]:
    """Yield the swinging-hangman animation frames endlessly."""
    return _frames_from_second(_HANGMAN)


def standingman_frames() -> Iterator[str]:
    """Yield the celebrating-man animation frames endlessly."""
    return _frames_from_second(_STANDINGMAN)