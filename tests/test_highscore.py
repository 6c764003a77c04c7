import logging
import random

from wallsnake.highscore import HighScoreStore
from wallsnake.model import GameModel


def test_missing_file_reads_zero(tmp_path):
    assert HighScoreStore(tmp_path / "snakeHighScore").load() == 0


def test_corrupt_file_reads_zero(tmp_path, caplog):
    path = tmp_path / "snakeHighScore"
    path.write_text("not a number")
    with caplog.at_level(logging.WARNING):
        assert HighScoreStore(path).load() == 0
    assert "unparseable" in caplog.text


def test_negative_value_reads_zero(tmp_path):
    path = tmp_path / "snakeHighScore"
    path.write_text("-40")
    assert HighScoreStore(path).load() == 0


def test_save_writes_plain_integer(tmp_path):
    path = tmp_path / "data" / "snakeHighScore"
    store = HighScoreStore(path)
    store.save(120)
    assert path.read_text() == "120"
    assert store.load() == 120


def test_whitespace_is_tolerated(tmp_path):
    path = tmp_path / "snakeHighScore"
    path.write_text(" 70\n")
    assert HighScoreStore(path).load() == 70


def test_unwritable_path_does_not_raise(tmp_path, caplog):
    with caplog.at_level(logging.WARNING):
        HighScoreStore(tmp_path).save(10)
    assert "could not save" in caplog.text


def test_game_over_persists_new_best(tmp_path):
    path = tmp_path / "snakeHighScore"
    path.write_text("5")
    m = GameModel(grid_size=20, highscores=HighScoreStore(path), rng=random.Random(9))
    m.start()
    m.walls = frozenset()
    m.food = (10, 14)
    m.tick()
    m.walls = frozenset({(10, 13)})
    m.tick()
    assert path.read_text() == "10"
    assert GameModel(highscores=HighScoreStore(path)).high_score == 10
