"""
Domain entities for the arcade Snake game.

This module contains the core game entities that are independent of
platform concerns (window, fonts, input devices, frame pacing).
"""

from .constants import UP, DOWN, LEFT, RIGHT, NONE, VALID_MOVES, OPPOSITES
from .config import GameConfig
from .snake import Snake, Food
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'NONE', 'VALID_MOVES', 'OPPOSITES',
    'GameConfig',
    'Snake',
    'Food',
    'GameState',
]
