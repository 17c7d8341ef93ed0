"""
highscores.py: Persistence layer for the top-N high score list.
Plain text file, one integer per line.
"""

import logging
from pathlib import Path
from typing import List, Tuple, Union

from .constants import HIGHSCORE_FILE, MAX_HIGH_SCORES

logger = logging.getLogger(__name__)


class HighScoreLedger:
    """Handles loading, updating and saving the best scores."""

    def __init__(self, path: Union[str, Path] = HIGHSCORE_FILE, capacity: int = MAX_HIGH_SCORES):
        self.path = Path(path)
        self.capacity = capacity
        self._scores: List[int] = []

    @property
    def scores(self) -> Tuple[int, ...]:
        return tuple(self._scores)

    @property
    def best(self) -> int:
        return self._scores[0] if self._scores else 0

    def __len__(self):
        return len(self._scores)

    def _keep_top(self):
        self._scores.sort(reverse=True)
        del self._scores[self.capacity:]

    def load(self) -> Tuple[int, ...]:
        """
        Reads every integer in the file, in any order, and keeps the top ones.
        A missing, unreadable or empty file gives an empty ledger.
        """
        self._scores = []
        try:
            text = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            logger.info("No high score file at %s, starting empty", self.path)
            return self.scores
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read high scores from %s: %s", self.path, e)
            return self.scores

        for token in text.split():
            try:
                self._scores.append(int(token))
            except ValueError:
                logger.warning("Skipping invalid high score entry %r in %s", token, self.path)

        self._keep_top()
        logger.debug("Loaded high scores %s", self._scores)
        return self.scores

    def record(self, score: int) -> Tuple[int, ...]:
        """Inserts a finished game's score."""
        self._scores.append(int(score))
        self._keep_top()
        return self.scores

    def save(self) -> bool:
        """Overwrites the file with the current list. Failures are logged, not raised."""
        try:
            self.path.write_text("".join(f"{s}\n" for s in self._scores), encoding="utf-8")
        except OSError as e:
            logger.error("Could not save high scores to %s: %s", self.path, e)
            return False
        logger.debug("Saved %d high scores to %s", len(self._scores), self.path)
        return True
