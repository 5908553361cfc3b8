"""
cracker_chase/entities/__init__.py
----------------------------------
Entity exports.

Exports:
    BaseEntity - Shared position, size, image and collision test
    Background - Full-canvas backdrop
    Cheese     - Keyboard-controlled player
    Cracker    - Collectible worth points
    Tomato     - Delayed chaser that ends the game on contact
"""

from cracker_chase.entities.base_entity import BaseEntity
from cracker_chase.entities.background import Background
from cracker_chase.entities.player import Cheese
from cracker_chase.entities.cracker import Cracker
from cracker_chase.entities.tomato import Tomato

__all__ = [
    'BaseEntity',
    'Background',
    'Cheese',
    'Cracker',
    'Tomato',
]
