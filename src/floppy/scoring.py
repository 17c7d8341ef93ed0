"""
scoring.py: Score awards and the score -> scroll speed difficulty tiers.
"""

import bisect
from dataclasses import dataclass, field
from typing import Sequence, Tuple

from .constants import SCORE_AWARD, SPEED_TIERS
from .data_models import ScoreState


@dataclass
class ScorePolicy:
    """
    Maps cumulative score to a scroll speed through an ascending
    (threshold, speed) table: the last threshold not above the score wins.
    """
    award_points: int = SCORE_AWARD
    tiers: Sequence[Tuple[int, float]] = SPEED_TIERS
    _thresholds: list = field(init=False, repr=False)

    def __post_init__(self):
        if not self.tiers:
            raise ValueError("at least one speed tier is required")
        self.tiers = tuple(sorted(self.tiers))
        self._thresholds = [threshold for threshold, _ in self.tiers]

    @property
    def base_speed(self) -> float:
        return self.tiers[0][1]

    def speed_for(self, score: int) -> float:
        idx = bisect.bisect_right(self._thresholds, score) - 1
        # Scores below the first threshold ride the first tier
        return self.tiers[max(idx, 0)][1]

    def award(self, state: ScoreState) -> ScoreState:
        """Applies one passed pair to the score state."""
        state.current += self.award_points
        state.speed = self.speed_for(state.current)
        if state.current > state.all_time_high:
            state.all_time_high = state.current
        return state

    def reset(self, state: ScoreState) -> ScoreState:
        """New session: score and speed go back to the start, the best stays."""
        state.current = 0
        state.speed = self.base_speed
        return state
