"""
base_entity.py
--------------
Foundational class for all in-game entities (Background, Cheese, Cracker,
Tomato).

Coordinate System
-----------------
Entities use top-left coordinates in canvas space:
- self.pos is the top-left corner of the bounding box
- self.width / self.height are fixed per variant (derived from the canvas)
- Positions are real-valued; draw() blits at the float position
"""

import pygame
from typing import Optional

from cracker_chase.core.debug.debug_logger import DebugLogger


class BaseEntity:
    """
    Base class for all game entities.

    Subclasses override reset(), update() and draw() as needed.
    """

    __slots__ = ('game', 'image_path', 'image', 'pos', 'width', 'height')

    # ===================================================================
    # Initialization
    # ===================================================================

    def __init__(self, game, image_path: str, width: float, height: float):
        """
        Args:
            game: Owning Game (back-reference for shared state)
            image_path: Image location relative to the asset root
            width: Bounding box width in pixels
            height: Bounding box height in pixels
        """
        self.game = game
        self.image_path = image_path
        self.image: Optional[pygame.Surface] = None
        self.pos = pygame.Vector2(0, 0)
        self.width = width
        self.height = height

    # ===================================================================
    # Lifecycle
    # ===================================================================

    def reset(self):
        """Return to the default position. Override in subclasses."""
        self.pos.update(0, 0)

    async def load_assets(self, loader):
        """
        Load this entity's image scaled to its size, then reset it.

        Raises:
            ResourceLoadError: if the image cannot be fetched
        """
        self.image = await loader.load_image(self.image_path, (self.width, self.height))
        self.reset()

    # ===================================================================
    # Core Update Loop
    # ===================================================================

    def update(self, frame_input):
        """
        Per-frame update. Override in subclasses.

        Args:
            frame_input: FrameInput snapshot for this frame
        """
        pass

    def draw(self, surface):
        if self.image is None:
            DebugLogger.warn(f"{type(self).__name__} drawn before its image loaded", category="render")
            return
        surface.blit(self.image, (self.pos.x, self.pos.y))

    # ===================================================================
    # Collision
    # ===================================================================

    def intersects_with(self, other: "BaseEntity") -> bool:
        """Inclusive axis-aligned bounding box overlap test."""
        if self.pos.x + self.width < other.pos.x:
            return False
        if self.pos.y + self.height < other.pos.y:
            return False
        if self.pos.x > other.pos.x + other.width:
            return False
        if self.pos.y > other.pos.y + other.height:
            return False
        return True

    def __repr__(self) -> str:
        return (
            f"<{type(self).__name__} "
            f"pos=({self.pos.x:.1f}, {self.pos.y:.1f}) "
            f"size=({self.width:.1f}, {self.height:.1f})>"
        )
