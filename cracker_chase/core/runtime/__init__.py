"""
Runtime exports.

Provides game-wide constants, score tracking and frame scheduling.
"""

from cracker_chase.core.runtime.game_settings import (
    Display,
    Fonts,
    Gameplay,
    Assets,
    Keys,
    Colors,
    default_settings,
)
from cracker_chase.core.runtime.session_stats import SessionStats
from cracker_chase.core.runtime.frame_scheduler import FrameScheduler

__all__ = [
    'Display',
    'Fonts',
    'Gameplay',
    'Assets',
    'Keys',
    'Colors',
    'default_settings',
    'SessionStats',
    'FrameScheduler',
]
