"""
Core services exports.

Provides configuration loading, asset loading and keyboard input.
"""

from cracker_chase.core.services.config_manager import load_config
from cracker_chase.core.services.asset_loader import AssetLoader, ResourceLoadError
from cracker_chase.core.services.input_manager import InputManager, FrameInput, KeyTransition

__all__ = [
    # Config
    'load_config',
    # Assets
    'AssetLoader',
    'ResourceLoadError',
    # Input
    'InputManager',
    'FrameInput',
    'KeyTransition',
]
