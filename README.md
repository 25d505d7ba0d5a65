# hangman

Tools for a hangman game: a stock of words with categories and difficulty
levels, the state of a single round, a game history file and a leaderboard
of wins.

All data lives in plain text files:

- `words.txt` — a count on the first line, then one word per line:
  `<id> <text> <category> <difficulty>`, where difficulty is 1, 2 or 3.
- `history.txt` — one line per game attempt.
- `leaderboard.txt` — one `<name> <wins>` pair per line.

## Installation

```
pip install .
```

## Command line

The `hangman-admin` command works on the files in the current directory:

```
hangman-admin view_words
hangman-admin add_word <id> <text> <category> <difficulty>
hangman-admin delete_word <id>
hangman-admin modify_word text <id> <new text>
hangman-admin modify_word difficulty <id> <1-3>
hangman-admin view_history
hangman-admin view_leaderboard
```

Output is coloured with ANSI escape codes; errors go to standard error.

- `add_word` validates the word and appends a line to `words.txt`. It does not
  change the count on the first line, so the new word is only read back once
  the count is brought up to date (for example by a later `delete_word` or
  `modify_word`, which rewrite the whole file from the counted words).
- `delete_word` removes every word with the given id.
- `modify_word` changes the text or the difficulty of every word with the
  given id; any other field name is rejected.

The command exits with status 1 when it is given no command, an unknown
command, the wrong number of arguments, a difficulty that is not an integer,
or a word list it cannot parse. Other problems, such as a missing file or a
difficulty outside 1–3, are reported and the command exits with status 0.

## Library

- `hangman.word.Word(word_id, text, category, difficulty)` — a puzzle word.
  Empty text and any difficulty outside 1–3 raise `ValueError`, both when the
  word is made and when `text` or `difficulty` is set.
- `hangman.store` — `load_words`, `save_words`, `append_word`,
  `read_history`, `read_leaderboard` and `write_leaderboard` read and write
  the files above.
- `hangman.game_state.GameState(attempt_id, player_name, word, date)` — one
  round. It allows six wrong guesses; guesses are case-insensitive and
  repeating a letter has no effect.

```python
from hangman.game_state import GameState
from hangman.store import load_words

words = load_words("words.txt")
game = GameState("attempt_1", "alice", words[0], "today")
for letter in "hangman":
    game.guess_letter(letter)
    if game.is_won() or game.is_lost():
        break

game.update_leaderboard("leaderboard.txt")  # adds a win only if the game was won
```

## What is not included

There is no interactive command for playing a round, and nothing in the
package writes entries to `history.txt`; it can only be read and shown. A
round is played by driving `GameState` from your own code.