"""
tomato.py
---------
Chaser enemy that waits off-canvas for its entry delay, then accelerates
toward the cheese every frame.

States
------
- dormant: entry_count < entry_delay, position frozen
- active:  entry_count >= entry_delay, homing with friction
"""

from cracker_chase.core.debug.debug_logger import DebugLogger
from cracker_chase.entities.base_entity import BaseEntity


class Tomato(BaseEntity):
    """Chaser entity. Touching the cheese while active ends the game."""

    __slots__ = ('entry_delay', 'entry_count', 'acceleration', 'friction', 'x_speed', 'y_speed')

    def __init__(self, game, image_path, entry_delay, base_acceleration=0.1, friction=0.99):
        """
        Args:
            game: Owning Game
            image_path: Image location relative to the asset root
            entry_delay: Frames to wait before chasing
            base_acceleration: Acceleration before the entry-delay bonus
            friction: Per-frame velocity multiplier
        """
        size = game.canvas_width / 12
        super().__init__(game, image_path, size, size)

        self.entry_delay = entry_delay
        # Later tomatoes hunt harder
        self.acceleration = base_acceleration + entry_delay / 10000
        self.friction = friction

        self.entry_count = 0
        self.x_speed = 0.0
        self.y_speed = 0.0

    @property
    def is_active(self) -> bool:
        return self.entry_count >= self.entry_delay

    def reset(self):
        self.pos.update(-self.width, -self.height)
        self.x_speed = 0.0
        self.y_speed = 0.0
        self.entry_count = 0

    def update(self, frame_input):
        self.entry_count += 1
        if not self.is_active:
            return

        if self.entry_count == self.entry_delay:
            DebugLogger.state(f"Tomato entering after {self.entry_delay} frames", category="entity")

        cheese = self.game.cheese
        self.x_speed += self.acceleration if cheese.pos.x > self.pos.x else -self.acceleration
        self.y_speed += self.acceleration if cheese.pos.y > self.pos.y else -self.acceleration

        self.x_speed *= self.friction
        self.y_speed *= self.friction

        self.pos.x += self.x_speed
        self.pos.y += self.y_speed

        if self.intersects_with(cheese):
            DebugLogger.trace(f"Tomato caught the cheese at ({self.pos.x:.0f}, {self.pos.y:.0f})")
            self.game.end()
