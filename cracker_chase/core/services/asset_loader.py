"""
asset_loader.py
---------------
Asynchronous image and sound loading.

Responsibilities
----------------
- Decode files off the event loop (asyncio.to_thread).
- Share one load task per (path, size) so entities using the same
  image or sound do not decode it twice.
- Convert every failure into ResourceLoadError.
"""

import asyncio
import os

import pygame

from cracker_chase.core.debug.debug_logger import DebugLogger


class ResourceLoadError(RuntimeError):
    """Raised when an image or sound cannot be fetched or decoded."""

    def __init__(self, path, reason=None):
        self.path = path
        message = f"Could not load {path}"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)


class AssetLoader:
    """Loads game resources relative to a root directory."""

    def __init__(self, root="."):
        self.root = root
        self._tasks = {}

    def resolve(self, path):
        if os.path.isabs(path):
            return path
        return os.path.join(self.root, path)

    # ===========================================================
    # Public API
    # ===========================================================

    async def load_image(self, path, size=None):
        """
        Load an image, optionally scaled to size.

        Args:
            path: File path relative to the loader root
            size: (width, height) in pixels; floats are rounded

        Returns:
            pygame.Surface

        Raises:
            ResourceLoadError: if the file is missing or cannot be decoded
        """
        if size is not None:
            size = (max(1, round(size[0])), max(1, round(size[1])))
        return await self._shared(("image", path, size), self._read_image, path, size)

    async def load_sound(self, path):
        """Load a sound effect. Requires an initialized mixer."""
        return await self._shared(("sound", path), self._read_sound, path)

    # ===========================================================
    # Internals
    # ===========================================================

    async def _shared(self, key, reader, *args):
        task = self._tasks.get(key)
        if task is None:
            task = asyncio.ensure_future(asyncio.to_thread(reader, *args))
            self._tasks[key] = task
        try:
            return await asyncio.shield(task)
        except ResourceLoadError:
            # Allow a later initialize() to retry the same resource
            self._tasks.pop(key, None)
            raise

    def _read_image(self, path, size):
        full_path = self.resolve(path)
        try:
            image = pygame.image.load(full_path)
        except (FileNotFoundError, pygame.error, OSError) as e:
            raise ResourceLoadError(full_path, e) from e

        # convert_alpha() needs a display mode; skip it when headless
        if pygame.display.get_surface() is not None:
            image = image.convert_alpha()

        if size is not None and image.get_size() != size:
            image = pygame.transform.scale(image, size)

        DebugLogger.system(f"Loaded image '{path}' {image.get_size()}", category="loading")
        return image

    def _read_sound(self, path):
        full_path = self.resolve(path)
        if not os.path.exists(full_path):
            raise ResourceLoadError(full_path, "file not found")
        try:
            sound = pygame.mixer.Sound(full_path)
        except (pygame.error, OSError) as e:
            raise ResourceLoadError(full_path, e) from e

        DebugLogger.system(f"Loaded sound '{path}'", category="loading")
        return sound
