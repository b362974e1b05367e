"""
Autopilot players for arcade Snake.

Players pick direction intents from the game state; they are used by the
headless runner and can stand in for the keyboard.
"""

from .base import Player
from .random_player import RandomPlayer
from .straight_player import StraightPlayer
from .variant_registry import get_player_class, list_variants, AVAILABLE_VARIANTS

__all__ = [
    'Player',
    'RandomPlayer',
    'StraightPlayer',
    'get_player_class',
    'list_variants',
    'AVAILABLE_VARIANTS',
]
