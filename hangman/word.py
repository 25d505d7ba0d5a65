"""Dictionary entries used as hangman puzzles."""

from __future__ import annotations

MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 3


def _difficulty_ok(difficulty: int) -> bool:
    return MIN_DIFFICULTY <= difficulty <= MAX_DIFFICULTY


class Word:
    """A puzzle word with an identifier, a category and a difficulty from 1 to 3."""

    __slots__ = ("id", "category", "_text", "_difficulty")

    def __init__(self, word_id: str, text: str, category: str, difficulty: int) -> None:
        if not text:
            raise ValueError("Word text cannot be empty")
        if not _difficulty_ok(difficulty):
            raise ValueError("Difficulty must be between 1 and 3")
        self.id = word_id
        self.category = category
        self._text = text
        self._difficulty = difficulty

    @property
    def text(self) -> str:
        return self._text

    @text.setter
    def text(self, new_text: str) -> None:
        if not new_text:
            raise ValueError("New word text cannot be empty")
        self._text = new_text

    @property
    def difficulty(self) -> int:
        return self._difficulty

    @difficulty.setter
    def difficulty(self, new_difficulty: int) -> None:
        if not _difficulty_ok(new_difficulty):
            raise ValueError("New difficulty must be between 1 and 3")
        self._difficulty = new_difficulty

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Word):
            return NotImplemented
        return (self.id, self._text, self.category, self._difficulty) == (
            other.id,
            other._text,
            other.category,
            other._difficulty,
        )

    def __repr__(self) -> str:
        return (
            f"Word(word_id={self.id!r}, text={self._text!r}, "
            f"category={self.category!r}, difficulty={self._difficulty!r})"
        )