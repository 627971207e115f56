[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hangman"
version = "1.0.0"
description = "A terminal game of hangman with word topics, ASCII art and a persistent score."
requires-python = ">=3.10"
dependencies = []
keywords = ["hangman", "game", "terminal", "word game", "puzzle"]
classifiers = [
    "Development Status :: 5 - Production/Stable",
    "Environment :: Console",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Puzzle Games",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
hangman = "hangman.game:main"

[tool.hatch.build.targets.wheel]
packages = ["hangman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
