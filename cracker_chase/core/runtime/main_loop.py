"""
main_loop.py
------------
Window ownership and the per-refresh tick.

Responsibilities:
- Open the pygame window
- Pump pygame events into the InputManager
- Run the FrameScheduler once per tick, then flip the display
"""

import pygame

from cracker_chase.core.debug.debug_logger import DebugLogger
from cracker_chase.core.runtime.game_settings import Display, Keys


class MainLoop:
    """Drives a Game's FrameScheduler at Display.FPS until the window closes."""

    def __init__(self, game, clock=None, fps=Display.FPS):
        self.game = game
        self.clock = clock or pygame.time.Clock()
        self.fps = fps
        self.running = True

    @staticmethod
    def open_window(width=Display.WIDTH, height=Display.HEIGHT, caption=Display.CAPTION):
        """Initialize pygame and create the display surface."""
        pygame.init()
        screen = pygame.display.set_mode((width, height))
        pygame.display.set_caption(caption)
        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub(f"Window {width}x{height}")
        return screen

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self, max_ticks=None):
        """
        Tick until quit.

        Args:
            max_ticks: Stop after this many ticks (None runs until quit)
        """
        DebugLogger.section("Game Loop")
        ticks = 0

        while self.running:
            self._handle_events()
            if not self.running:
                break

            self.game.scheduler.run_pending(pygame.time.get_ticks())
            pygame.display.flip()
            self.clock.tick(self.fps)

            ticks += 1
            if max_ticks is not None and ticks >= max_ticks:
                break

        pygame.quit()
        DebugLogger.system("Pygame terminated")

    def _handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT or (event.type == pygame.KEYDOWN and event.key == Keys.QUIT):
                self.running = False
                DebugLogger.action("Quit signal received")
                return
            self.game.input.handle_event(event)
