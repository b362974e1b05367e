"""
Straight player - keeps the current heading.
"""

from domain.constants import RIGHT, NONE
from domain.game_state import GameState
from .base import Player


class StraightPlayer(Player):
    """Holds the current direction, starting with a fixed one when idle."""

    def __init__(self, initial_direction: str = RIGHT, rng=None):
        super().__init__(rng)
        self.initial_direction = initial_direction

    def get_move(self, game_state: GameState) -> str:
        if game_state.direction == NONE:
            return self.initial_direction
        return game_state.direction
