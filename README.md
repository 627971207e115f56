# hangman

A hangman game that runs in the terminal. Pick a topic, guess the hidden word
one letter at a time, and try to finish before the figure on the gallows is
complete. Wins, losses and games played are kept in a score file between runs.

## Installing

```
pip install .
```

## Playing

```
hangman
```

Options:

- `--words-dir DIR`: the directory holding the word lists (default `WordList`).
- `--score-file PATH`: the score file (default `score.txt`).

The terminal is switched to black text on a bright white background while the
game runs, and back to its default colours afterwards.

If games have already been played, the score is shown first and you press a
key: **C** to continue with it, **N** to start a new tally (the score goes back
to zero), or **E** to exit. On a terminal the key is read without waiting for
Enter.

Next, choose a topic by typing its number and pressing Enter:

1. Colors
2. Foods
3. Animals
4. General

Any other answer shows "Wrong choice!" and asks again after Enter is pressed.

Each topic is a word list file in the words directory: `Colors.txt`,
`Foods.txt`, `Animals.txt` or `general.txt`. Words in a list are separated by
whitespace. One word is picked at random and used in lower case. If the file
cannot be opened, or holds no words, the game prints an error and stops.

Every letter of the word starts hidden behind a `-`. Type letters and press
Enter; each non-blank character on the line counts as one guess, in lower case:

- If the letter is in the word, every place it occurs is uncovered and the
  letter is added to your correct guesses.
- If it is not, another part of the hangman is drawn and the letter is added
  to your incorrect guesses.

The round is won when the whole word is uncovered, and lost on the seventh
wrong guess. Either way a short animation plays, the word is shown, and the
result is added to the score file. Then the next round begins with the score
prompt.

The command exits with status 1 when you choose to exit, when input ends, or
on an error.

## What is not included

No word lists come with the package. Before playing, create the words
directory with the four topic files named above, or point `--words-dir` at a
directory that has them.

## Using it as a library

- `hangman.words`: `read_word_list` (raises `WordListError` when the file
  cannot be opened), `choose_word` (accepts an optional `random.Random`) and
  `is_char_in_word`.
- `hangman.score`: the `Score` dataclass (`total_games`, `wins`, `losses`,
  and `record(won)`), with `read_score`, `write_score`, `reset_score` and
  `format_score`.
- `hangman.drawing`: `get_drawing(index)` for the gallows at each stage, and
  the endless animation frame iterators `hangman_frames()` and
  `standingman_frames()`.
- `hangman.console`: `clear_screen(stream)`, `set_colors(stream, foreground,
  background)` with the `Color` enum, using ANSI escape codes.
- `hangman.game`: `Round`, which tracks the guesses in one game (`guess`,
  `is_won`, `is_lost`, `is_over`), with `render_screen`, `render_stats`,
  `topic_file`, `play_round` and `main`.

```python
from hangman.game import Round

round_ = Round("cat")
round_.guess("a")
print(round_.secret_word, round_.is_won(), round_.is_over())  # -a- False False
```

## Running the tests

```
pip install ".[test]"
pytest
```