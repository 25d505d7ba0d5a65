"""Command-line administration of the word list, history and leaderboard."""

from __future__ import annotations

import sys
from pathlib import Path

from hangman.store import (
    PathLike,
    append_word,
    load_words,
    read_history,
    read_leaderboard,
    save_words,
)
from hangman.word import Word

RESET = "\033[0m"
RED = "\033[31m"
GREEN = "\033[32m"
YELLOW = "\033[33m"

WORDS_FILE = "words.txt"
HISTORY_FILE = "history.txt"
LEADERBOARD_FILE = "leaderboard.txt"


def _out(color: str, message: str) -> None:
    print(f"{color}{message}{RESET}")


def _err(message: str) -> None:
    print(f"{RED}{message}{RESET}", file=sys.stderr)


def _cannot_open(name: str) -> None:
    _err(f"Error: Could not open {name}")


def view_words(directory: PathLike) -> None:
    """Print every word in the list."""
    try:
        words = load_words(Path(directory) / WORDS_FILE)
    except OSError:
        _cannot_open(WORDS_FILE)
        return
    _out(GREEN, "Words in stock:")
    for word in words:
        _out(
            YELLOW,
            f"ID: {word.id}, Text: {word.text}, "
            f"Category: {word.category}, Difficulty: {word.difficulty}",
        )


def add_word(
    directory: PathLike, word_id: str, text: str, category: str, difficulty: int
) -> None:
    """Validate a word and append it to the list."""
    try:
        word = Word(word_id, text, category, difficulty)
    except ValueError as exc:
        _err(f"Error: {exc}")
        return
    try:
        append_word(Path(directory) / WORDS_FILE, word)
    except OSError:
        _cannot_open(WORDS_FILE)
        return
    _out(GREEN, "Word added successfully!")


def delete_word(directory: PathLike, word_id: str) -> None:
    """Remove every word with the given identifier."""
    path = Path(directory) / WORDS_FILE
    try:
        words = load_words(path)
    except OSError:
        _cannot_open(WORDS_FILE)
        return
    kept = [word for word in words if word.id != word_id]
    save_words(path, kept)
    if len(kept) < len(words):
        _out(GREEN, "Word deleted successfully!")
    else:
        _out(RED, "Word not found!")


def _apply(word: Word, field: str, new_value: str) -> None:
    if field == "text":
        word.text = new_value
    elif field == "difficulty":
        word.difficulty = int(new_value)
    else:
        raise ValueError("Invalid field")


def modify_word(directory: PathLike, field: str, word_id: str, new_value: str) -> None:
    """Change the text or difficulty of the words with the given identifier."""
    path = Path(directory) / WORDS_FILE
    try:
        words = load_words(path)
    except OSError:
        _cannot_open(WORDS_FILE)
        return
    matches = [word for word in words if word.id == word_id]
    if not matches:
        _err("Error: Word not found")
        return
    try:
        for word in matches:
            _apply(word, field, new_value)
    except ValueError as exc:
        _err(f"Error: {exc}")
        return
    save_words(path, words)
    _out(GREEN, "Word modified successfully!")


def view_history(directory: PathLike) -> None:
    """Print the game history."""
    try:
        lines = read_history(Path(directory) / HISTORY_FILE)
    except OSError:
        _cannot_open(HISTORY_FILE)
        return
    _out(GREEN, "Game history:")
    for line in lines:
        _out(YELLOW, line)


def view_leaderboard(directory: PathLike) -> None:
    """Print the leaderboard."""
    try:
        entries = read_leaderboard(Path(directory) / LEADERBOARD_FILE)
    except OSError:
        _cannot_open(LEADERBOARD_FILE)
        return
    _out(GREEN, "Leaderboard:")
    for name, wins in entries:
        _out(YELLOW, f"{name}: {wins} wins")


def main(argv: list[str] | None = None) -> int:
    """Run one administration command in the current directory."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        _err("Usage: hangman <command> [args]")
        return 1
    command, rest = args[0], args[1:]
    directory = Path.cwd()
    try:
        if command == "view_words":
            view_words(directory)
        elif command == "add_word" and len(rest) == 4:
            add_word(directory, rest[0], rest[1], rest[2], int(rest[3]))
        elif command == "delete_word" and len(rest) == 1:
            delete_word(directory, rest[0])
        elif command == "modify_word" and len(rest) == 3:
            modify_word(directory, rest[0], rest[1], rest[2])
        elif command == "view_history":
            view_history(directory)
        elif command == "view_leaderboard":
            view_leaderboard(directory)
        else:
            _err("Invalid command or arguments")
            return 1
    except (ValueError, OSError) as exc:
        _err(f"Error: {exc}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())