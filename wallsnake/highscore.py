"""
highscore.py — Best-score persistence.

The best score is a single named value (`snakeHighScore`) kept as plain
integer text. Reading never fails: a missing or corrupt value counts as 0.
"""

import logging
from pathlib import Path
from typing import Union

from .config import HIGHSCORE_FILE

log = logging.getLogger(__name__)


class HighScoreStore:
    """File-backed store; one integer per file."""

    def __init__(self, path: Union[str, Path] = HIGHSCORE_FILE):
        self.path = Path(path)

    def load(self) -> int:
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return 0
        except OSError as exc:
            log.warning("could not read high score from %s: %s", self.path, exc)
            return 0

        try:
            value = int(text.strip())
        except ValueError:
            log.warning("ignoring unparseable high score %r in %s", text, self.path)
            return 0
        return max(0, value)

    def save(self, value: int) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(str(int(value)), encoding="utf-8")
        except OSError as exc:
            log.warning("could not save high score to %s: %s", self.path, exc)
            return
        log.info("high score %d saved to %s", value, self.path)


class MemoryHighScoreStore:
    """Keeps the best score for the lifetime of the process only."""

    def __init__(self, value: int = 0):
        self.value = value
        self.saves = 0

    def load(self) -> int:
        return self.value

    def save(self, value: int) -> None:
        self.value = int(value)
        self.saves += 1
