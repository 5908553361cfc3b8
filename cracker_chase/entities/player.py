"""
player.py
---------
The cheese: the keyboard-controlled player entity.

Responsibilities
----------------
- Translate key press/release edges into a per-axis velocity.
- Integrate position and keep the bounding box on the canvas.
"""

from cracker_chase.core.runtime.game_settings import Keys
from cracker_chase.entities.base_entity import BaseEntity


class Cheese(BaseEntity):
    """Player entity. Each held arrow key sets one velocity axis."""

    __slots__ = ('speed', 'x_speed', 'y_speed', '_key_axes')

    def __init__(self, game, image_path, speed=5):
        size = game.canvas_width / 15
        super().__init__(game, image_path, size, size)

        self.speed = speed
        self.x_speed = 0
        self.y_speed = 0

        # key -> (axis, sign)
        self._key_axes = {
            Keys.MOVE_LEFT: ("x", -1),
            Keys.MOVE_RIGHT: ("x", 1),
            Keys.MOVE_UP: ("y", -1),
            Keys.MOVE_DOWN: ("y", 1),
        }

    def reset(self):
        self.pos.update(
            (self.game.canvas_width - self.width) / 2.0,
            (self.game.canvas_height - self.height) / 2.0,
        )
        self.x_speed = 0
        self.y_speed = 0

    # ===========================================================
    # Input
    # ===========================================================

    def apply_input(self, frame_input):
        """Apply this frame's key edges in arrival order."""
        for transition in frame_input.transitions:
            binding = self._key_axes.get(transition.key)
            if binding is None:
                continue
            axis, sign = binding
            value = sign * self.speed if transition.pressed else 0
            if axis == "x":
                self.x_speed = value
            else:
                self.y_speed = value

    # ===========================================================
    # Update
    # ===========================================================

    def update(self, frame_input):
        self.apply_input(frame_input)

        self.pos.x += self.x_speed
        self.pos.y += self.y_speed
        self.clamp_to_canvas()

    def clamp_to_canvas(self):
        """Stop at the canvas edges. Velocity is left untouched."""
        max_x = self.game.canvas_width - self.width
        max_y = self.game.canvas_height - self.height
        self.pos.x = max(0, min(self.pos.x, max_x))
        self.pos.y = max(0, min(self.pos.y, max_y))
