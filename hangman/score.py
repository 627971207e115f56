"""Persistent tally of games played, won and lost."""

from __future__ import annotations

import contextlib
from dataclasses import dataclass
from os import PathLike

_RULE = "-" * 31


@dataclass
class Score:
    """Running totals of games."""

    total_games: int = 0
    wins: int = 0
    losses: int = 0

    def record(self, won: bool) -> None:
        """Count one finished game as a win or a loss."""
        self.total_games += 1
        if won:
            self.wins += 1
        else:
            self.losses += 1


def read_score(path: str | PathLike[str]) -> Score:
    """Read a score file; missing or unreadable fields count as zero."""
    try:
        with open(path, encoding="utf-8") as handle:
            tokens = handle.read().split()
    except OSError:
        return Score()
    values: list[int] = []
    for token in tokens[:3]:
        try:
            values.append(int(token))
        except ValueError:
            break
    return Score(*values)


def write_score(path: str | PathLike[str], score: Score) -> None:
    """Overwrite the score file with ``score``; failures to write are ignored."""
    with contextlib.suppress(OSError), open(path, "w", encoding="utf-8") as handle:
        handle.write(f"{score.total_games} {score.wins} {score.losses}")


def reset_score(path: str | PathLike[str]) -> None:
    """Overwrite the score file with zeros."""
    write_score(path, Score())


def format_score(score: Score) -> str:
    """Return the score banner shown above the game."""
    return (
        f"{_RULE}\n"
        f"Games played: {score.total_games}"
        f" | Wins: {score.wins}"
        f" | Losses: {score.losses}\n"
        f"{_RULE}\n\n"
    )