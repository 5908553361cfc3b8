import pygame

from cracker_chase.core.debug.debug_logger import DebugLogger


class SoundManager:
    """Named sound-effect registry. Plays are fire-and-forget."""

    def __init__(self, enabled=True):
        self.bfx = {}
        self.master_level = 100
        self.master_volume = 1.0
        self.enabled = enabled and self._init_mixer()

    def _init_mixer(self):
        if pygame.mixer.get_init():
            return True
        try:
            pygame.mixer.init()
        except pygame.error as e:
            DebugLogger.warn(f"Audio disabled: {e}", category="system")
            return False
        return True

    def volume_scale(self, level):  # log scale volume control (0-100)
        if level < 0:
            return 0.0
        return min(max((level / 100) ** 2, 0.0), 1.0)

    def add_bfx(self, name, sound):
        """Register a loaded sound under name (first registration wins)."""
        if name in self.bfx:
            return
        sound.set_volume(self.master_volume)
        self.bfx[name] = sound
        DebugLogger.system(f"Registered cue '{name}'", category="audio")

    def has_bfx(self, name):
        return name in self.bfx

    def play_bfx(self, name):
        """Play a cue from the start, cutting off a previous play of it."""
        if not self.enabled:
            return
        sound = self.bfx.get(name)
        if sound is None:
            DebugLogger.warn(f"Unknown cue '{name}'", category="audio")
            return
        sound.stop()
        sound.play()

    def set_master_volume(self, level):  # 0 - 100
        self.master_level = level
        self.master_volume = self.volume_scale(level)
        for sound in self.bfx.values():
            sound.set_volume(self.master_volume)
