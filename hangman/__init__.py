"""Hangman word stock, game state, text-file storage and an admin command."""

__version__ = "0.1.0"