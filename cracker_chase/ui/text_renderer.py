"""
text_renderer.py
----------------
Font cache and text drawing helpers for the start screen and score overlay.
"""

import pygame

from cracker_chase.core.runtime.game_settings import Colors, Fonts


class TextRenderer:
    """Draws text onto a target surface with cached fonts."""

    SHADOW_OFFSET = 2

    def __init__(self, family=Fonts.FAMILY):
        self.family = family
        self._fonts = {}

    def get_font(self, size: int) -> pygame.font.Font:
        font = self._fonts.get(size)
        if font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            if self.family is None:
                font = pygame.font.Font(None, size)
            else:
                font = pygame.font.SysFont(self.family, size)
            self._fonts[size] = font
        return font

    def measure(self, text: str, size: int) -> int:
        """Width in pixels of text at size."""
        return self.get_font(size).size(text)[0]

    def draw_text(self, surface, text, x, y, size=Fonts.BODY_SIZE, color=Colors.TEXT):
        """
        Draw text with its baseline at y, like a canvas fillText.
        """
        font = self.get_font(size)
        rendered = font.render(text, True, color)
        surface.blit(rendered, (x, y - font.get_ascent()))

    def display_message(self, surface, text, y, size=Fonts.BODY_SIZE):
        """Draw text horizontally centered, shadow first then the red copy offset by 2px."""
        x = (surface.get_width() - self.measure(text, size)) / 2.0
        self.draw_text(surface, text, x, y, size, Colors.SHADOW)
        self.draw_text(surface, text, x + self.SHADOW_OFFSET, y + self.SHADOW_OFFSET, size, Colors.TEXT)
