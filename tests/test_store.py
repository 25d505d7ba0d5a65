import pytest

from hangman.store import (
    append_word,
    load_words,
    read_history,
    read_leaderboard,
    save_words,
    write_leaderboard,
)
from hangman.word import Word


def test_save_then_load_round_trip(tmp_path):
    path = tmp_path / "words.txt"
    words = [Word("w1", "cat", "animal", 1), Word("w2", "pear", "fruit", 3)]
    save_words(path, words)
    assert load_words(path) == words


def test_save_format(tmp_path):
    path = tmp_path / "words.txt"
    save_words(path, [Word("w1", "cat", "animal", 1)])
    assert path.read_text() == "1\nw1 cat animal 1\n"


def test_load_respects_count(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("1\nw1 cat animal 1\nw2 dog animal 2\n")
    assert [w.id for w in load_words(path)] == ["w1"]


def test_load_empty_list(tmp_path):
    path = tmp_path / "words.txt"
    save_words(path, [])
    assert load_words(path) == []


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_words(tmp_path / "absent.txt")


@pytest.mark.parametrize(
    "content",
    ["", "x\n", "2\nw1 cat animal 1\n", "1\nw1 cat animal hard\n", "1\nw1 cat animal 9\n"],
)
def test_load_malformed(tmp_path, content):
    path = tmp_path / "words.txt"
    path.write_text(content)
    with pytest.raises(ValueError):
        load_words(path)


def test_append_keeps_count_line(tmp_path):
    path = tmp_path / "words.txt"
    original = Word("w1", "cat", "animal", 1)
    save_words(path, [original])
    append_word(path, Word("w2", "dog", "animal", 2))
    assert path.read_text().endswith("w2 dog animal 2\n")
    assert load_words(path) == [original]


def test_read_history(tmp_path):
    path = tmp_path / "history.txt"
    path.write_text("first game\nsecond game\n")
    assert read_history(path) == ["first game", "second game"]


def test_leaderboard_round_trip(tmp_path):
    path = tmp_path / "leaderboard.txt"
    entries = [("alice", 3), ("bob", 1)]
    write_leaderboard(path, entries)
    assert read_leaderboard(path) == entries


def test_leaderboard_stops_at_bad_entry(tmp_path):
    path = tmp_path / "leaderboard.txt"
    path.write_text("alice 3\nbob many\ncarol 2\n")
    assert read_leaderboard(path) == [("alice", 3)]


def test_leaderboard_ignores_dangling_name(tmp_path):
    path = tmp_path / "leaderboard.txt"
    path.write_text("alice 3\nbob\n")
    assert read_leaderboard(path) == [("alice", 3)]