"""
presentation.py: The drawing/input surface the game core talks to.
"""

from typing import Any, Optional, Protocol, Tuple

from .constants import WHITE
from .data_models import Key

Color = Tuple[int, int, int]
TextureHandle = Any


class Presentation(Protocol):
    """
    Window, texture and input backend. The core only calls these methods;
    `floppy.pygame_backend.PygameBackend` is the shipped implementation.
    """

    # --- Resources ---
    def load_texture(self, name: str, size: Optional[Tuple[int, int]] = None) -> Optional[TextureHandle]:
        """Returns a handle, or None when the texture could not be loaded."""
        ...

    def unload_texture(self, handle: TextureHandle) -> None: ...

    def texture_size(self, handle: TextureHandle) -> Tuple[int, int]: ...

    # --- Drawing ---
    def begin_frame(self, clear_color: Color) -> None: ...

    def end_frame(self) -> None: ...

    def draw_texture(self, handle: TextureHandle, x: float, y: float, tint: Color = WHITE) -> None: ...

    def draw_rectangle(self, x: float, y: float, width: float, height: float, color: Color) -> None: ...

    def draw_circle(self, x: float, y: float, radius: float, color: Color) -> None: ...

    def draw_text(self, text: str, x: float, y: float, size: int, color: Color) -> None: ...

    def measure_text(self, text: str, size: int) -> int: ...

    # --- Input / window ---
    def poll_events(self) -> None: ...

    def is_key_down(self, key: Key) -> bool: ...

    def is_key_pressed(self, key: Key) -> bool: ...

    def window_should_close(self) -> bool: ...

    def close(self) -> None: ...
