[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "hangman"
version = "0.1.0"
description = "Word stock, game state and leaderboard management for a hangman game"
requires-python = ">=3.10"
dependencies = []
keywords = ["hangman", "game", "words", "leaderboard", "puzzle"]
classifiers = [
    "Development Status :: 4 - Beta",
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
hangman-admin = "hangman.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["hangman"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
