"""
game_settings.py
----------------
Centralized constants for all game systems.

Values here are defaults; the "gameplay" section of game.json overrides the
Gameplay entries at runtime (see Game.__init__).
"""

import pygame


# ===========================================================
# Display & Timing
# ===========================================================

class Display:
    """Canvas and window configuration."""
    WIDTH: int = 1280
    HEIGHT: int = 720
    FPS: int = 60
    CAPTION: str = "Cracker Chase"


# ===========================================================
# Font Configuration
# ===========================================================

class Fonts:
    # None selects pygame's bundled default font
    FAMILY: str = "arial"
    TITLE_SIZE: int = 50
    BODY_SIZE: int = 40


# ===========================================================
# Gameplay Defaults
# ===========================================================

class Gameplay:
    """Tunable gameplay values. Speeds are in pixels per frame."""
    CRACKER_COUNT: int = 30
    CRACKER_REWARD: int = 10

    TOMATO_COUNT: int = 5
    FIRST_ENTRY_DELAY: int = 300
    ENTRY_DELAY_STEP: int = 600

    ACCELERATION: float = 0.1
    FRICTION: float = 0.99

    CHEESE_SPEED: float = 5

    @classmethod
    def as_dict(cls) -> dict:
        return {
            "cracker_count": cls.CRACKER_COUNT,
            "cracker_reward": cls.CRACKER_REWARD,
            "tomato_count": cls.TOMATO_COUNT,
            "first_entry_delay": cls.FIRST_ENTRY_DELAY,
            "entry_delay_step": cls.ENTRY_DELAY_STEP,
            "acceleration": cls.ACCELERATION,
            "friction": cls.FRICTION,
            "cheese_speed": cls.CHEESE_SPEED,
            "seed": None,
        }


# ===========================================================
# Asset Paths
# ===========================================================

class Assets:
    """Resource locations, relative to ROOT."""
    ROOT: str = "assets"

    BACKGROUND: str = "picnic.jpeg"
    CHEESE: str = "cheese.png"
    CRACKER: str = "cracker.png"
    TOMATO: str = "tomato.png"

    BURP_CUE: str = "burp"
    BURP_SOUND: str = "sounds/burp.wav"


# ===========================================================
# Key Bindings
# ===========================================================

class Keys:
    MOVE_LEFT: int = pygame.K_LEFT
    MOVE_RIGHT: int = pygame.K_RIGHT
    MOVE_UP: int = pygame.K_UP
    MOVE_DOWN: int = pygame.K_DOWN
    START: int = pygame.K_g
    QUIT: int = pygame.K_ESCAPE


# ===========================================================
# Colors
# ===========================================================

class Colors:
    SHADOW = (0, 0, 0)
    TEXT = (255, 0, 0)


def default_settings() -> dict:
    """Settings tree that game.json is merged over."""
    return {
        "gameplay": Gameplay.as_dict(),
        "assets": {"root": Assets.ROOT},
        "audio": {"enabled": True, "volume": 100},
    }
