"""
helpers.py
----------
Test doubles and input builders shared across test modules.
"""

from unittest.mock import MagicMock

import pygame

from cracker_chase.core.services.asset_loader import ResourceLoadError
from cracker_chase.core.services.input_manager import FrameInput, KeyTransition


class FakeLoader:
    """Asset loader returning blank surfaces; paths in `missing` fail."""

    def __init__(self, missing=()):
        self.missing = set(missing)
        self.image_requests = []
        self.sound_requests = []

    async def load_image(self, path, size=None):
        self.image_requests.append((path, size))
        if path in self.missing:
            raise ResourceLoadError(path, "missing in test")
        width, height = size or (10, 10)
        return pygame.Surface((max(1, round(width)), max(1, round(height))))

    async def load_sound(self, path):
        self.sound_requests.append(path)
        if path in self.missing:
            raise ResourceLoadError(path, "missing in test")
        return MagicMock(name=f"Sound({path})")


def press(*keys):
    return FrameInput(frozenset(keys), tuple(KeyTransition(k, True) for k in keys))


def release(*keys):
    return FrameInput(frozenset(), tuple(KeyTransition(k, False) for k in keys))


NO_INPUT = FrameInput()
