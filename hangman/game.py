"""The hangman game: rounds, screen rendering and the interactive loop."""

from __future__ import annotations

import argparse
import sys
import time
from collections import deque
from collections.abc import Callable, Sequence
from os import PathLike
from pathlib import Path

from hangman.console import CLEAR_SEQUENCE, Color, clear_screen, set_colors
from hangman.drawing import get_drawing, hangman_frames, standingman_frames
from hangman.score import Score, format_score, read_score, reset_score, write_score
from hangman.words import WordListError, choose_word, is_char_in_word, read_word_list

MAX_MISTAKES = 8
ANIMATION_FRAMES = 22
ANIMATION_DELAY = 0.125
SCORE_FILE = "score.txt"
WORD_DIRECTORY = "WordList"

TOPICS: dict[int, str] = {
    1: "Colors.txt",
    2: "Foods.txt",
    3: "Animals.txt",
    4: "general.txt",
}


class Round:
    """One word to guess and the guesses made so far."""

    def __init__(self, word: str) -> None:
        self.word = word
        self.secret_word = "-" * len(word)
        self.incorrect_guesses = 0
        self.correct_chars = ""
        self.incorrect_chars = ""

    def guess(self, ch: str) -> bool:
        """Apply one guessed character; return whether it occurs in the word."""
        ch = ch.lower()
        if is_char_in_word(ch, self.word):
            self.secret_word = "".join(
                letter if letter == ch else shown
                for letter, shown in zip(self.word, self.secret_word)
            )
            self.correct_chars += f"{ch} "
            return True
        self.incorrect_guesses += 1
        self.incorrect_chars += f"{ch} "
        return False

    def is_won(self) -> bool:
        """Whether every letter has been revealed."""
        return self.secret_word == self.word

    def is_lost(self) -> bool:
        """Whether the player has run out of mistakes."""
        return self.incorrect_guesses == MAX_MISTAKES - 1

    def is_over(self) -> bool:
        """Whether the round has ended either way."""
        return self.is_won() or self.is_lost()


def render_stats(round_: Round, score: Score) -> str:
    """Return the score banner, the guesses so far and the prompt or verdict."""
    text = (
        format_score(score)
        + f"Current word: {round_.secret_word}"
        + f"\nCorrect guesses: {round_.correct_chars}"
        + f"    Incorrect guesses: {round_.incorrect_chars}"
    )
    if round_.is_won():
        return text + f"\nWell done :D   The word is: {round_.word}\n"
    if round_.is_lost():
        return text + f"\nYou lose :(   The word is: {round_.word}\n"
    return text + "\nChoose a character: "


def render_screen(round_: Round, score: Score) -> str:
    """Return the gallows drawing followed by the round's statistics."""
    return get_drawing(round_.incorrect_guesses) + render_stats(round_, score)


def topic_file(choice: int, directory: str | PathLike[str] = WORD_DIRECTORY) -> Path:
    """Return the word list file for a topic number from 1 to 4."""
    try:
        name = TOPICS[choice]
    except KeyError:
        raise ValueError(f"no topic numbered {choice!r}") from None
    return Path(directory) / name


def play_round(
    round_: Round,
    read_char: Callable[[], str],
    write: Callable[[str], object],
    score_path: str | PathLike[str],
) -> Score:
    """Play a round to its end, animate the result and record it in the score file."""
    shown_score = read_score(score_path)
    write(CLEAR_SEQUENCE + render_screen(round_, shown_score))
    while not round_.is_over():
        ch = read_char()
        if not ch:
            raise EOFError("input ended before the round was over")
        round_.guess(ch)
        write(CLEAR_SEQUENCE + render_screen(round_, shown_score))

    frames = standingman_frames() if round_.is_won() else hangman_frames()
    for _ in range(ANIMATION_FRAMES):
        write(CLEAR_SEQUENCE + next(frames) + render_stats(round_, shown_score))
        time.sleep(ANIMATION_DELAY)

    score = read_score(score_path)
    score.record(round_.is_won())
    write_score(score_path, score)
    return score


class _StdinChars:
    """Read non-blank characters from standard input one at a time."""

    def __init__(self) -> None:
        self._pending: deque[str] = deque()

    def __call__(self) -> str:
        while not self._pending:
            line = sys.stdin.readline()
            if not line:
                return ""
            self._pending.extend(c for c in line if not c.isspace())
        return self._pending.popleft()


def _getch() -> str:
    """Read one key without waiting for Enter when attached to a terminal."""
    stream = sys.stdin
    if stream.isatty():
        try:
            import msvcrt
        except ImportError:
            import termios
            import tty

            fd = stream.fileno()
            saved = termios.tcgetattr(fd)
            try:
                tty.setraw(fd)
                return stream.read(1)
            finally:
                termios.tcsetattr(fd, termios.TCSADRAIN, saved)
        return msvcrt.getwch()
    return stream.read(1)


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _parse_choice(line: str) -> int:
    parts = line.split()
    if not parts:
        return 0
    try:
        return int(parts[0])
    except ValueError:
        return 0


def _ask_topic(score_path: Path) -> int | None:
    """Ask for a topic until a valid one is given; ``None`` means quit."""
    while True:
        if read_score(score_path).total_games:
            _write(format_score(read_score(score_path)))
            _write("Press letter C or N or E to (C)ontinue or (N)ewgame or (E)xit?")
            while True:
                key = _getch()
                if not key or key in "eE":
                    return None
                if key in "cC":
                    break
                if key in "nN":
                    reset_score(score_path)
                    break
        clear_screen(sys.stdout)
        _write(
            "Choose Word Topic: \n"
            "1: Colors || 2: Foods || 3: Animals || 4: General\n"
            "Your Choose: "
        )
        line = sys.stdin.readline()
        if not line:
            return None
        choice = _parse_choice(line)
        clear_screen(sys.stdout)
        if choice in TOPICS:
            return choice
        _write("Wrong choice! Press ENTER to choose again! \n")
        if not sys.stdin.readline():
            return None


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive game; return the process exit status."""
    parser = argparse.ArgumentParser(prog="hangman", description="Play hangman.")
    parser.add_argument("--words-dir", default=WORD_DIRECTORY, help="word list directory")
    parser.add_argument("--score-file", default=SCORE_FILE, help="score file path")
    args = parser.parse_args(argv)
    score_path = Path(args.score_file)
    read_char = _StdinChars()

    set_colors(sys.stdout, Color.BLACK, Color.BRIGHT_WHITE)
    try:
        clear_screen(sys.stdout)
        while True:
            choice = _ask_topic(score_path)
            if choice is None:
                return 1
            vocabulary = topic_file(choice, args.words_dir)
            try:
                words = read_word_list(vocabulary)
            except WordListError:
                _write(f"\nError: in reading vocabulary file: {vocabulary}\n")
                return 1
            word = choose_word(words)
            if not word:
                _write("Error: Could not choose a random word.\n")
                return 1
            try:
                play_round(Round(word), read_char, _write, score_path)
            except EOFError:
                return 1
    finally:
        set_colors(sys.stdout)