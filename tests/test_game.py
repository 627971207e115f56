import io
import sys
from pathlib import Path
from unittest import mock

import pytest

from hangman.console import CLEAR_SEQUENCE
from hangman.drawing import get_drawing
from hangman.game import (
    MAX_MISTAKES,
    Round,
    main,
    play_round,
    render_screen,
    render_stats,
    topic_file,
)
from hangman.score import Score, format_score, read_score, write_score


def test_new_round_hides_every_letter():
    round_ = Round("apple")
    assert round_.secret_word == "-----"
    assert round_.incorrect_guesses == 0
    assert not round_.is_over()


def test_correct_guess_reveals_all_occurrences():
    round_ = Round("apple")
    assert round_.guess("p") is True
    assert round_.secret_word == "-pp--"
    assert round_.correct_chars == "p "
    assert round_.incorrect_guesses == 0


def test_incorrect_guess_counts_a_mistake():
    round_ = Round("apple")
    assert round_.guess("z") is False
    assert round_.incorrect_guesses == 1
    assert round_.incorrect_chars == "z "
    assert round_.secret_word == "-----"


def test_guess_is_lower_cased():
    round_ = Round("cat")
    assert round_.guess("C") is True
    assert round_.secret_word == "c--"


def test_guess_rejects_multiple_characters():
    with pytest.raises(ValueError):
        Round("cat").guess("ca")


def test_round_won_when_all_letters_found():
    round_ = Round("cat")
    for ch in "tac":
        round_.guess(ch)
    assert round_.is_won()
    assert round_.is_over()
    assert not round_.is_lost()


def test_round_lost_after_maximum_mistakes():
    round_ = Round("cat")
    for ch in "bdefghi"[: MAX_MISTAKES - 1]:
        round_.guess(ch)
    assert round_.incorrect_guesses == MAX_MISTAKES - 1
    assert round_.is_lost()
    assert round_.is_over()


def test_render_stats_prompts_while_playing():
    round_ = Round("cat")
    text = render_stats(round_, Score())
    assert text.startswith(format_score(Score()))
    assert "Current word: ---" in text
    assert text.endswith("\nChoose a character: ")


def test_render_stats_announces_win():
    round_ = Round("cat")
    for ch in "cat":
        round_.guess(ch)
    assert render_stats(round_, Score()).endswith("Well done :D   The word is: cat\n")


def test_render_stats_announces_loss():
    round_ = Round("cat")
    for ch in "bdefghi":
        round_.guess(ch)
    assert render_stats(round_, Score()).endswith("You lose :(   The word is: cat\n")


def test_render_screen_starts_with_gallows_for_mistakes():
    round_ = Round("cat")
    round_.guess("x")
    round_.guess("y")
    score = Score(3, 2, 1)
    assert render_screen(round_, score) == get_drawing(2) + render_stats(round_, score)


@pytest.mark.parametrize(
    "choice, name",
    [(1, "Colors.txt"), (2, "Foods.txt"), (3, "Animals.txt"), (4, "general.txt")],
)
def test_topic_file_maps_choices(choice, name):
    assert topic_file(choice, "WordList") == Path("WordList") / name


@pytest.mark.parametrize("choice", [0, 5, -1])
def test_topic_file_rejects_unknown_choice(choice):
    with pytest.raises(ValueError):
        topic_file(choice, "WordList")


@mock.patch("time.sleep")
def test_play_round_records_win(_sleep, tmp_path):
    score_path = tmp_path / "score.txt"
    write_score(score_path, Score(2, 1, 1))
    guesses = iter("cat")
    output = []
    result = play_round(Round("cat"), lambda: next(guesses), output.append, score_path)
    assert result == Score(3, 2, 1)
    assert read_score(score_path) == Score(3, 2, 1)
    assert all(chunk.startswith(CLEAR_SEQUENCE) for chunk in output)
    assert "Well done :D   The word is: cat" in output[-1]


@mock.patch("time.sleep")
def test_play_round_records_loss(_sleep, tmp_path):
    score_path = tmp_path / "score.txt"
    guesses = iter("bdefghi")
    output = []
    result = play_round(Round("cat"), lambda: next(guesses), output.append, score_path)
    assert result == Score(1, 0, 1)
    assert read_score(score_path) == Score(1, 0, 1)
    assert "You lose :(   The word is: cat" in output[-1]


def test_play_round_raises_on_end_of_input(tmp_path):
    with pytest.raises(EOFError):
        play_round(Round("cat"), lambda: "", lambda text: None, tmp_path / "score.txt")


@mock.patch("time.sleep")
def test_main_plays_a_round_then_exits(_sleep, tmp_path, monkeypatch, capsys):
    words_dir = tmp_path / "words"
    words_dir.mkdir()
    (words_dir / "Colors.txt").write_text("RED\n", encoding="utf-8")
    score_path = tmp_path / "score.txt"
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\nr e d\ne"))
    status = main(["--words-dir", str(words_dir), "--score-file", str(score_path)])
    assert status == 1
    assert read_score(score_path) == Score(1, 1, 0)
    assert "Well done :D   The word is: red" in capsys.readouterr().out


def test_main_reports_missing_word_list(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n"))
    status = main(
        ["--words-dir", str(tmp_path / "absent"), "--score-file", str(tmp_path / "s.txt")]
    )
    assert status == 1
    assert "Error: in reading vocabulary file" in capsys.readouterr().out