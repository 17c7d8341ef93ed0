"""
data_models.py: Data structures for the game state.
"""

from dataclasses import dataclass
from enum import Enum
from typing import FrozenSet

from .constants import (
    FLOPPY_RADIUS, FLOPPY_START_X, FLOPPY_START_Y,
    TUBE_WIDTH, TUBE_HEIGHT, TUBE_BASE_OFFSET
)


class Mode(Enum):
    """The single active screen of the game."""
    TITLE_SCREEN = "title_screen"
    PLAYING = "playing"
    PAUSED = "paused"
    GAME_OVER = "game_over"


class Key(Enum):
    """Abstract game keys; backends map physical keys onto these."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    START = "start"
    PAUSE = "pause"


@dataclass(frozen=True)
class InputState:
    """Snapshot of the input for one tick."""
    held: FrozenSet[Key] = frozenset()      # Keys currently down
    pressed: FrozenSet[Key] = frozenset()   # Keys that went down this frame

    def is_down(self, key: Key) -> bool:
        return key in self.held

    def was_pressed(self, key: Key) -> bool:
        return key in self.pressed

    @classmethod
    def capture(cls, backend) -> "InputState":
        """Reads every game key from a presentation backend."""
        return cls(
            held=frozenset(k for k in Key if backend.is_key_down(k)),
            pressed=frozenset(k for k in Key if backend.is_key_pressed(k)),
        )


@dataclass(frozen=True)
class Rect:
    x: float
    y: float
    width: float
    height: float

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height


@dataclass
class Player:
    """The floppy: a circle moved by gravity and the direction keys."""
    x: float = FLOPPY_START_X
    y: float = FLOPPY_START_Y
    radius: int = FLOPPY_RADIUS


@dataclass
class ObstaclePair:
    """A top and a bottom tube sharing one x-coordinate."""
    gap_x: float
    offset_y: float                 # y of the top tube, in [-TUBE_MAX_OFFSET, 0]
    scored: bool = False

    @property
    def top_rect(self) -> Rect:
        return Rect(self.gap_x, self.offset_y, TUBE_WIDTH, TUBE_HEIGHT)

    @property
    def bottom_rect(self) -> Rect:
        return Rect(self.gap_x, TUBE_BASE_OFFSET + self.offset_y - TUBE_HEIGHT,
                    TUBE_WIDTH, TUBE_HEIGHT)

    @property
    def rects(self) -> tuple:
        return self.top_rect, self.bottom_rect


@dataclass
class ScoreState:
    current: int = 0
    all_time_high: int = 0
    speed: float = 0.0
