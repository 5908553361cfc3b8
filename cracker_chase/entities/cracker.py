"""
cracker.py
----------
Collectible that scores points and jumps to a new random spot when the
cheese touches it.
"""

import math

from cracker_chase.core.debug.debug_logger import DebugLogger
from cracker_chase.entities.base_entity import BaseEntity


class Cracker(BaseEntity):
    """Collectible entity with an audio cue played on capture."""

    __slots__ = ('audio_cue', 'audio_path', 'reward')

    def __init__(self, game, image_path, audio_cue, audio_path, reward=10):
        super().__init__(game, image_path, game.canvas_width / 20, game.canvas_height / 20)
        self.audio_cue = audio_cue
        self.audio_path = audio_path
        self.reward = reward

    async def load_assets(self, loader):
        await super().load_assets(loader)

        sounds = self.game.sounds
        if sounds.enabled and not sounds.has_bfx(self.audio_cue):
            sounds.add_bfx(self.audio_cue, await loader.load_sound(self.audio_path))

    def reset(self):
        """Move to a uniformly random integer position fully on the canvas."""
        rng = self.game.rng
        max_x = max(0, math.floor(self.game.canvas_width - self.width))
        max_y = max(0, math.floor(self.game.canvas_height - self.height))
        self.pos.update(rng.randint(0, max_x), rng.randint(0, max_y))

    def update(self, frame_input):
        if not self.intersects_with(self.game.cheese):
            return

        self.game.add_score(self.reward)
        DebugLogger.trace(
            f"Cracker captured at ({self.pos.x:.0f}, {self.pos.y:.0f}) -> score {self.game.score}"
        )
        self.reset()
        self.game.sounds.play_bfx(self.audio_cue)
