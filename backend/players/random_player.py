"""
Random player implementation - picks random safe moves.
"""

from typing import List

from domain.constants import DELTAS, OPPOSITES, VALID_MOVES, NONE
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random autopilot that picks a direction avoiding walls, reversals and
    self-collisions.
    """

    def get_move(self, game_state: GameState) -> str:
        snake = game_state.snake
        head_x, head_y = snake.head

        # Filter out moves that:
        # 1. Reverse into the neck
        # 2. Hit walls
        # 3. Hit own body (except tail, which will move)
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if OPPOSITES[move] == snake.direction:
                continue

            dx, dy = DELTAS[move]
            target = (head_x + dx, head_y + dy)
            if not game_state.in_bounds(target):
                continue

            if snake.blocks(target):
                continue

            valid_moves.append(move)

        # If no valid moves, keep going (we'll die anyway)
        if not valid_moves:
            if snake.direction != NONE:
                return snake.direction
            return self.rng.choice(sorted(VALID_MOVES))

        return self.rng.choice(valid_moves)
