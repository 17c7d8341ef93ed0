"""
pygame_backend.py

Window, texture, text and keyboard backend built on pygame.
"""

import logging
import os
from typing import Dict, Optional, Set, Tuple

import pygame

from .constants import (
    SCREEN_WIDTH, SCREEN_HEIGHT, WINDOW_TITLE, TARGET_FPS, ASSETS_DIR, WHITE
)
from .data_models import Key

logger = logging.getLogger(__name__)

# Physical keys for every game key
KEY_BINDINGS: Dict[Key, Tuple[int, ...]] = {
    Key.UP: (pygame.K_w, pygame.K_UP),
    Key.DOWN: (pygame.K_s, pygame.K_DOWN),
    Key.LEFT: (pygame.K_a, pygame.K_LEFT),
    Key.RIGHT: (pygame.K_d, pygame.K_RIGHT),
    Key.START: (pygame.K_RETURN, pygame.K_KP_ENTER),
    Key.PAUSE: (pygame.K_p,),
}


class PygameBackend:
    def __init__(self, assets_dir: str = ASSETS_DIR, width: int = SCREEN_WIDTH,
                 height: int = SCREEN_HEIGHT, title: str = WINDOW_TITLE, fps: int = TARGET_FPS):
        pygame.init()
        self.assets_dir = assets_dir
        self.fps = fps
        self.screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(title)

        self.clock = pygame.time.Clock()
        self.fonts: Dict[int, pygame.font.Font] = {}

        # Input state for the current frame
        self.pressed: Set[int] = set()
        self.should_close = False

    # ----------------- Resources -----------------

    def load_texture(self, name: str, size: Optional[Tuple[int, int]] = None) -> Optional[pygame.Surface]:
        path = os.path.join(self.assets_dir, name)
        try:
            surface = pygame.image.load(path).convert_alpha()
        except (pygame.error, OSError) as e:
            logger.warning("Failed to load texture %s: %s", path, e)
            return None
        if size is not None:
            surface = pygame.transform.scale(surface, size)
        return surface

    def unload_texture(self, handle: pygame.Surface) -> None:
        # Surfaces are freed by the garbage collector once unreferenced
        pass

    def texture_size(self, handle: pygame.Surface) -> Tuple[int, int]:
        return handle.get_size()

    def _font(self, size: int) -> pygame.font.Font:
        font = self.fonts.get(size)
        if font is None:
            font = pygame.font.Font(None, size)
            self.fonts[size] = font
        return font

    # ----------------- Drawing -----------------

    def begin_frame(self, clear_color) -> None:
        self.screen.fill(clear_color)

    def end_frame(self) -> None:
        pygame.display.flip()
        self.clock.tick(self.fps)

    def draw_texture(self, handle: pygame.Surface, x: float, y: float, tint=WHITE) -> None:
        if tint != WHITE:
            handle = handle.copy()
            handle.fill(tint, special_flags=pygame.BLEND_RGBA_MULT)
        self.screen.blit(handle, (int(x), int(y)))

    def draw_rectangle(self, x: float, y: float, width: float, height: float, color) -> None:
        pygame.draw.rect(self.screen, color, pygame.Rect(int(x), int(y), int(width), int(height)))

    def draw_circle(self, x: float, y: float, radius: float, color) -> None:
        pygame.draw.circle(self.screen, color, (int(x), int(y)), int(radius))

    def draw_text(self, text: str, x: float, y: float, size: int, color) -> None:
        surf = self._font(size).render(text, True, color)
        self.screen.blit(surf, (int(x), int(y)))

    def measure_text(self, text: str, size: int) -> int:
        return self._font(size).size(text)[0]

    # ----------------- Input / window -----------------

    def poll_events(self) -> None:
        """Drains the pygame event queue. Call once per frame before reading keys."""
        self.pressed.clear()
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.should_close = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    self.should_close = True
                self.pressed.add(event.key)

    def is_key_down(self, key: Key) -> bool:
        state = pygame.key.get_pressed()
        return any(state[code] for code in KEY_BINDINGS[key])

    def is_key_pressed(self, key: Key) -> bool:
        return any(code in self.pressed for code in KEY_BINDINGS[key])

    def window_should_close(self) -> bool:
        return self.should_close

    def close(self) -> None:
        pygame.quit()
