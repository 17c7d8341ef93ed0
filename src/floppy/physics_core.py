"""
physics_core.py: The deterministic per-tick movement and collision logic.
"""

from .constants import GRAVITY, MOVE_STEP, SCREEN_HEIGHT
from .data_models import InputState, Key, Player, Rect


class PhysicsCore:
    """
    Shared deterministic physics used by the obstacle field and the game controller.
    """

    SCREEN_HEIGHT = SCREEN_HEIGHT
    GRAVITY = GRAVITY
    MOVE_STEP = MOVE_STEP

    def floor_y(self, player: Player) -> float:
        """Lowest y the player's center may reach."""
        return self.SCREEN_HEIGHT - player.radius

    def step_player(self, player: Player, inputs: InputState):
        """
        Single-tick update of the player. Gravity and held directions are
        summed, then the position is clamped to the floor. Mutates the player.
        """
        # 1. Gravity
        player.y += self.GRAVITY

        # 2. Manual override
        if inputs.is_down(Key.UP):
            player.y -= self.MOVE_STEP
        if inputs.is_down(Key.DOWN):
            player.y += self.MOVE_STEP
        if inputs.is_down(Key.LEFT):
            player.x -= self.MOVE_STEP
        if inputs.is_down(Key.RIGHT):
            player.x += self.MOVE_STEP

        # 3. Floor clamp (no ceiling)
        floor = self.floor_y(player)
        if player.y >= floor:
            player.y = floor

    @staticmethod
    def circle_intersects_rect(cx: float, cy: float, radius: float, rect: Rect) -> bool:
        """
        Circle vs axis-aligned rectangle. The closest point of the rectangle
        to the center is found by clamping; a circle that only touches the
        edge does not intersect.
        """
        closest_x = min(max(cx, rect.x), rect.right)
        closest_y = min(max(cy, rect.y), rect.bottom)
        dx = cx - closest_x
        dy = cy - closest_y
        return dx * dx + dy * dy < radius * radius

    def player_hits(self, player: Player, rect: Rect) -> bool:
        return self.circle_intersects_rect(player.x, player.y, player.radius, rect)
