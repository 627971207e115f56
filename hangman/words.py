"""Loading word lists and choosing words from them."""

from __future__ import annotations

import random
from collections.abc import Sequence
from os import PathLike


class WordListError(Exception):
    """Raised when a word list file cannot be opened."""


def read_word_list(path: str | PathLike[str]) -> list[str]:
    """Return the whitespace-separated words in the file at ``path``."""
    try:
        with open(path, encoding="utf-8") as handle:
            return handle.read().split()
    except OSError as exc:
        raise WordListError(f"Unable to open file: {path}") from exc


def choose_word(words: Sequence[str], rng: random.Random | None = None) -> str:
    """Pick a random word, lower-cased; return an empty string for no words."""
    if not words:
        return ""
    chooser = rng if rng is not None else random
    return chooser.choice(words).lower()


def is_char_in_word(ch: str, word: str) -> bool:
    """Return whether the single character ``ch`` occurs in ``word``."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch in word