"""State of a single hangman round."""

from __future__ import annotations

from dataclasses import dataclass, field

from hangman.store import PathLike, read_leaderboard, write_leaderboard
from hangman.word import Word

MAX_ATTEMPTS = 6


@dataclass
class GameState:
    """One player's attempt at guessing a word."""

    attempt_id: str
    player_name: str
    word: Word
    date: str
    guessed_letters: str = field(default="", init=False)
    attempts_left: int = field(default=MAX_ATTEMPTS, init=False)

    def __post_init__(self) -> None:
        if self.word is None:
            raise ValueError("Word cannot be null")
        if not self.player_name:
            raise ValueError("Player name cannot be empty")

    def guess_letter(self, letter: str) -> None:
        """Record a guess; a letter not in the word costs one attempt."""
        if len(letter) != 1:
            raise ValueError("Guess must be a single character")
        letter = letter.lower()
        if letter in self.guessed_letters:
            return
        self.guessed_letters += letter
        if letter not in self.word.text:
            self.attempts_left -= 1

    def is_won(self) -> bool:
        return all(c.lower() in self.guessed_letters for c in self.word.text)

    def is_lost(self) -> bool:
        return self.attempts_left <= 0

    def update_leaderboard(self, path: PathLike) -> None:
        """Credit the player with a win in the leaderboard file if the game is won."""
        if not self.is_won():
            return
        try:
            entries = read_leaderboard(path)
        except FileNotFoundError:
            entries = []
        found = any(name == self.player_name for name, _ in entries)
        entries = [
            (name, wins + 1 if name == self.player_name else wins) for name, wins in entries
        ]
        if not found:
            entries.append((self.player_name, 1))
        write_leaderboard(path, entries)