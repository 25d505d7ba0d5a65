"""Reading and writing the plain-text word list, history and leaderboard."""

from __future__ import annotations

import os
from collections.abc import Iterable
from pathlib import Path
from typing import Union

from hangman.word import Word

PathLike = Union[str, "os.PathLike[str]"]
_FIELDS = 4


def _format_word(word: Word) -> str:
    return f"{word.id} {word.text} {word.category} {word.difficulty}\n"


def load_words(path: PathLike) -> list[Word]:
    """Read a word list: a count, then that many ``id text category difficulty`` records."""
    tokens = Path(path).read_text().split()
    if not tokens:
        raise ValueError(f"{path}: missing word count")
    try:
        count = max(int(tokens[0]), 0)
    except ValueError:
        raise ValueError(f"{path}: invalid word count {tokens[0]!r}") from None
    records = tokens[1 : 1 + _FIELDS * count]
    if len(records) < _FIELDS * count:
        raise ValueError(f"{path}: expected {count} words")
    fields = iter(records)
    words = []
    for word_id, text, category, difficulty in zip(fields, fields, fields, fields):
        try:
            level = int(difficulty)
        except ValueError:
            raise ValueError(f"{path}: invalid difficulty {difficulty!r}") from None
        words.append(Word(word_id, text, category, level))
    return words


def save_words(path: PathLike, words: Iterable[Word]) -> None:
    """Write a complete word list, replacing the file."""
    words = list(words)
    with Path(path).open("w") as file:
        file.write(f"{len(words)}\n")
        file.writelines(_format_word(word) for word in words)


def append_word(path: PathLike, word: Word) -> None:
    """Append one record to the word list; the count line is left as it is."""
    with Path(path).open("a") as file:
        file.write(_format_word(word))


def read_history(path: PathLike) -> list[str]:
    """Return the lines of the game history file."""
    return Path(path).read_text().splitlines()


def read_leaderboard(path: PathLike) -> list[tuple[str, int]]:
    """Return ``(name, wins)`` pairs, stopping at the first malformed entry."""
    tokens = iter(Path(path).read_text().split())
    entries = []
    for name, wins in zip(tokens, tokens):
        try:
            entries.append((name, int(wins)))
        except ValueError:
            break
    return entries


def write_leaderboard(path: PathLike, entries: Iterable[tuple[str, int]]) -> None:
    """Write ``(name, wins)`` pairs, one per line, replacing the file."""
    with Path(path).open("w") as file:
        file.writelines(f"{name} {wins}\n" for name, wins in entries)