"""
conftest.py
-----------
Shared pytest configuration and fixtures for Cracker Chase tests.

Contains:
- Headless pygame setup (dummy video/audio drivers)
- Game factory with injected mocks for audio and text
- Pytest markers
"""

import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random
from unittest.mock import MagicMock

import pygame
import pytest

from cracker_chase.core.debug.debug_logger import LoggerConfig
from cracker_chase.core.runtime.frame_scheduler import FrameScheduler
from cracker_chase.core.runtime.game_settings import default_settings
from cracker_chase.core.services.input_manager import InputManager
from cracker_chase.game import Game
from tests.helpers import FakeLoader

LoggerConfig.ENABLE_LOGGING = False

CANVAS_SIZE = (800, 600)


# ===========================================================
# Mock Services
# ===========================================================

@pytest.fixture
def mock_sounds():
    """SoundManager stand-in with audio disabled."""
    sounds = MagicMock()
    sounds.enabled = False
    sounds.has_bfx.return_value = False
    return sounds


@pytest.fixture
def mock_text():
    """TextRenderer stand-in; assertions read its call list."""
    return MagicMock()


@pytest.fixture
def fake_loader():
    return FakeLoader()


# ===========================================================
# Game Factory
# ===========================================================

@pytest.fixture
def make_game(mock_sounds, mock_text, fake_loader):
    """Build a Game on an off-screen surface with optional gameplay overrides."""

    def _make(size=CANVAS_SIZE, seed=1234, **gameplay):
        settings = default_settings()
        settings["gameplay"].update(gameplay)
        return Game(
            pygame.Surface(size),
            settings,
            input_manager=InputManager(),
            scheduler=FrameScheduler(),
            loader=fake_loader,
            sounds=mock_sounds,
            text=mock_text,
            rng=random.Random(seed),
        )

    return _make


@pytest.fixture
def game(make_game):
    """Small game (3 crackers, 2 tomatoes) with every entity reset."""
    g = make_game(cracker_count=3, tomato_count=2)
    g.reset()
    return g


# ===========================================================
# Pytest configuration
# ===========================================================

def pytest_configure(config):
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Mark everything outside integration tests as unit tests."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
