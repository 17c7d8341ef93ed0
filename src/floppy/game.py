"""
game.py: The game controller. Owns the floppy, the obstacle field, the score
and the high score ledger, and runs the title/playing/paused/game-over modes.
"""

import logging
import random
from typing import Dict, Optional, Set

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FLOPPY_TEXTURE, FLOPPY_TEXTURE_SIZE,
    BACKGROUND_TEXTURE, TITLE_TEXTURE, TUBE_COUNT, TUBE_SPACING,
    WHITE, BLACK, GRAY, GREEN, RAYWHITE, SKY_BLUE, FLOPPY_COLOR, TITLE_BACKGROUND
)
from .data_models import InputState, Key, Mode, Player, ScoreState
from .highscores import HighScoreLedger
from .obstacle_field import ObstacleField
from .physics_core import PhysicsCore
from .presentation import Presentation
from .scoring import ScorePolicy

logger = logging.getLogger(__name__)

# Texture slot -> (file name, forced size)
TEXTURES = {
    "floppy": (FLOPPY_TEXTURE, FLOPPY_TEXTURE_SIZE),
    "background": (BACKGROUND_TEXTURE, None),
    "title": (TITLE_TEXTURE, None),
}


class FloppyGame:
    def __init__(self, ledger: HighScoreLedger, policy: Optional[ScorePolicy] = None,
                 rng: Optional[random.Random] = None, tube_count: int = TUBE_COUNT):
        self.ledger = ledger
        self.policy = policy or ScorePolicy()
        self.physics = PhysicsCore()
        self.field = ObstacleField(rng=rng)
        self.tube_count = tube_count

        self.mode = Mode.TITLE_SCREEN
        self.player = Player()
        self.score = ScoreState(all_time_high=ledger.best, speed=self.policy.base_speed)
        self.flash = False

        # Presentation resources
        self.textures: Dict[str, object] = {}
        self.degraded = False

    # ----------------- Resources -----------------

    def init(self, backend: Presentation):
        """Acquires textures. Missing ones put the game in degraded drawing mode."""
        for slot, (name, size) in TEXTURES.items():
            handle = backend.load_texture(name, size)
            if handle is None:
                logger.warning("Texture %r unavailable, drawing %s with primitives", name, slot)
                self.degraded = True
                continue
            self.textures[slot] = handle

    def shutdown(self, backend: Presentation):
        """Releases textures and flushes the ledger."""
        for handle in self.textures.values():
            backend.unload_texture(handle)
        self.textures.clear()
        self.ledger.save()

    # ----------------- Mode transitions -----------------

    def _start_session(self):
        """Fresh floppy, fresh tubes, score back to zero. Ledger and best survive."""
        self.player = Player()
        self.field.init(self.tube_count, TUBE_SPACING, self.player.x)
        self.policy.reset(self.score)
        self.flash = False
        self._set_mode(Mode.PLAYING)

    def _game_over(self):
        self.ledger.record(self.score.current)
        if self.score.current > self.score.all_time_high:
            self.score.all_time_high = self.score.current
        logger.info("Game over with score %d (best %d)", self.score.current, self.score.all_time_high)
        self._set_mode(Mode.GAME_OVER)

    def _set_mode(self, mode: Mode):
        logger.debug("Mode %s -> %s", self.mode.name, mode.name)
        self.mode = mode

    # ----------------- Update -----------------

    def update(self, inputs: InputState):
        """Advances the game by one tick."""
        self.flash = False

        if self.mode in (Mode.TITLE_SCREEN, Mode.GAME_OVER):
            if inputs.was_pressed(Key.START):
                self._start_session()
            return

        if self.mode is Mode.PAUSED:
            if inputs.was_pressed(Key.PAUSE):
                self._set_mode(Mode.PLAYING)
            return

        # Mode.PLAYING
        if inputs.was_pressed(Key.PAUSE):
            self._set_mode(Mode.PAUSED)
            return

        # 1. Scroll tubes and move the floppy
        self.field.advance(self.score.speed)
        self.field.recycle()
        self.physics.step_player(self.player, inputs)

        # 2. Collision ends the session
        if self.field.check_collision(self.player):
            self._game_over()
            return

        # 3. Scoring
        scored = self.field.check_scoring(self.player)
        self._award(scored)

    def _award(self, scored: Set[int]):
        for _ in scored:
            self.policy.award(self.score)
        if scored:
            self.flash = True
            logger.debug("Score %d, speed %.1f", self.score.current, self.score.speed)

    # ----------------- Draw -----------------

    def draw(self, backend: Presentation):
        """Renders the current state. Does not change it."""
        if self.mode is Mode.TITLE_SCREEN:
            backend.begin_frame(TITLE_BACKGROUND)
            self._draw_title(backend)
            backend.end_frame()
            return

        backend.begin_frame(RAYWHITE)
        self._draw_background(backend)

        if self.mode is Mode.GAME_OVER:
            self._draw_high_scores(backend)
            self._draw_centered(backend, "PRESS [ENTER] TO PLAY AGAIN", SCREEN_HEIGHT / 2 + 150, 20, GRAY)
        else:
            for pair in self.field.visible_pairs(SCREEN_WIDTH):
                for rect in pair.rects:
                    backend.draw_rectangle(rect.x, rect.y, rect.width, rect.height, GREEN)

            if self.flash:
                backend.draw_rectangle(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, WHITE)

            if self.mode is Mode.PAUSED:
                self._draw_centered(backend, "GAME PAUSED", SCREEN_HEIGHT / 2 - 40, 40, BLACK)

            self._draw_floppy(backend)

        self._draw_score(backend)
        backend.end_frame()

    def _draw_centered(self, backend: Presentation, text: str, y: float, size: int, color):
        backend.draw_text(text, SCREEN_WIDTH / 2 - backend.measure_text(text, size) / 2, y, size, color)

    def _draw_title(self, backend: Presentation):
        title = self.textures.get("title")
        if title is not None:
            width, height = backend.texture_size(title)
            backend.draw_texture(title, SCREEN_WIDTH / 2 - width / 2, SCREEN_HEIGHT / 4 - height / 4)
            prompt_y = SCREEN_HEIGHT / 2 + height / 2
        else:
            self._draw_centered(backend, "FLOPPY", SCREEN_HEIGHT / 4 - 40, 40, GRAY)
            prompt_y = SCREEN_HEIGHT / 2
        self._draw_centered(backend, "PRESS [ENTER] TO START", prompt_y, 20, WHITE)

        # Ledger, top right
        if self.ledger.scores:
            x = SCREEN_WIDTH - 160
            backend.draw_text("HIGH SCORES", x, 20, 20, WHITE)
            for i, value in enumerate(self.ledger.scores):
                backend.draw_text(f"{i + 1}. {value}", x, 50 + i * 25, 20, WHITE)

    def _draw_background(self, backend: Presentation):
        background = self.textures.get("background")
        if background is not None:
            backend.draw_texture(background, 0, 0)
        else:
            backend.draw_rectangle(0, 0, SCREEN_WIDTH, SCREEN_HEIGHT, SKY_BLUE)

    def _draw_floppy(self, backend: Presentation):
        p = self.player
        texture = self.textures.get("floppy")
        if texture is not None:
            backend.draw_texture(texture, p.x - p.radius, p.y - p.radius)
        else:
            backend.draw_circle(p.x, p.y, p.radius, FLOPPY_COLOR)

    def _draw_high_scores(self, backend: Presentation):
        y = SCREEN_HEIGHT / 2 - 100
        self._draw_centered(backend, "Your Highest Score:", y, 20, BLACK)
        self._draw_centered(backend, f"{self.score.all_time_high}", y + 30, 20, BLACK)
        self._draw_centered(backend, "Your Score:", y + 70, 20, BLACK)
        self._draw_centered(backend, f"{self.score.current}", y + 100, 20, BLACK)

    def _draw_score(self, backend: Presentation):
        backend.draw_text(f"{self.score.current:04d}", 10, 10, 30, WHITE)
