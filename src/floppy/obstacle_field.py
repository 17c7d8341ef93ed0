"""
obstacle_field.py: The scrolling set of tube pairs the floppy has to fly through.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import List, Optional, Set

from .constants import (
    TUBE_COUNT, TUBE_SPACING, TUBE_START_X, TUBE_MAX_OFFSET, TUBE_WIDTH,
    FLOPPY_START_X
)
from .data_models import ObstaclePair, Player
from .physics_core import PhysicsCore

logger = logging.getLogger(__name__)


@dataclass
class ObstacleField(PhysicsCore):
    """
    Fixed-capacity, ordered collection of obstacle pairs.
    Inherits circle/rectangle collision from PhysicsCore.
    """
    rng: Optional[random.Random] = None
    base_x: float = TUBE_START_X
    spacing: float = TUBE_SPACING
    pairs: List[ObstaclePair] = field(default_factory=list)

    def __post_init__(self):
        if self.rng is None:
            self.rng = random.Random()

    def _random_offset(self) -> float:
        return -float(self.rng.randint(0, TUBE_MAX_OFFSET))

    def init(self, count: int = TUBE_COUNT, spacing: Optional[float] = None,
             floppy_x: float = FLOPPY_START_X):
        """
        Places `count` pairs at base_x + spacing * i, each with its own random
        vertical offset. Pairs that start behind the floppy count as already passed.
        """
        if spacing is not None:
            self.spacing = spacing

        self.pairs = []
        for i in range(count):
            gap_x = float(self.base_x + self.spacing * i)
            self.pairs.append(ObstaclePair(
                gap_x=gap_x,
                offset_y=self._random_offset(),
                scored=gap_x < floppy_x,
            ))
        logger.debug("Obstacle field initialised with %d pairs", count)

    def advance(self, speed: float):
        """Scrolls every pair left by `speed`. Rects follow gap_x automatically."""
        for pair in self.pairs:
            pair.gap_x -= speed

    def recycle(self) -> List[int]:
        """
        Replaces pairs that have fully left the screen with fresh pairs placed
        after the rightmost one. Returns the recycled slot indices.
        """
        recycled = []
        for i, pair in enumerate(self.pairs):
            if pair.gap_x + TUBE_WIDTH >= 0:
                continue
            rightmost = max(p.gap_x for p in self.pairs)
            self.pairs[i] = ObstaclePair(
                gap_x=rightmost + self.spacing,
                offset_y=self._random_offset(),
            )
            recycled.append(i)
        return recycled

    def check_collision(self, player: Player) -> bool:
        """True if the floppy overlaps any top or bottom tube."""
        for pair in self.pairs:
            for rect in pair.rects:
                if self.player_hits(player, rect):
                    return True
        return False

    def check_scoring(self, player: Player) -> Set[int]:
        """
        Marks and returns the indices of pairs whose gap_x went past the
        floppy for the first time.
        """
        newly_scored = set()
        for i, pair in enumerate(self.pairs):
            if not pair.scored and pair.gap_x < player.x:
                pair.scored = True
                newly_scored.add(i)
        return newly_scored

    def visible_pairs(self, screen_width: float) -> List[ObstaclePair]:
        return [p for p in self.pairs if p.gap_x + TUBE_WIDTH >= 0 and p.gap_x <= screen_width]
