"""A terminal hangman game with topic word lists, ASCII art and a persistent score."""

__version__ = "1.0.0"