"""
GameState - the single-player game core.

Holds the snake, the food, the score and the round flags, and advances
them one discrete tick at a time. Nothing here raises for game outcomes:
wall and self hits set game_over, illegal inputs are ignored.
"""

import logging
import random
from typing import Any, Dict, Optional

from .config import GameConfig
from .constants import (
    OPPOSITES,
    VALID_MOVES,
    STATUS_IDLE,
    STATUS_RUNNING,
    STATUS_GAME_OVER,
)
from .snake import Snake, Food, Position

logger = logging.getLogger(__name__)


class GameState:
    """
    Mutable state of one game.

    Attributes:
        config: board geometry, pacing and scoring settings
        rng: random source used for food placement (randrange + random)
        snake: the Snake, head first
        food: the current Food
        score: points collected this round
        game_over: True once the snake hit a wall or itself
        started: True once a direction has been accepted
    """

    def __init__(self, config: Optional[GameConfig] = None, rng: Optional[random.Random] = None):
        self.config = config or GameConfig()
        self.rng = rng or random.Random()
        self._reset()

    def _reset(self):
        self.snake = Snake([self.config.center])
        self.food = Food(self.config.center)  # replaced by place_food below
        self.score = 0
        self.game_over = False
        self.started = False
        self.place_food()

    @property
    def direction(self) -> str:
        return self.snake.direction

    @property
    def status(self) -> str:
        if self.game_over:
            return STATUS_GAME_OVER
        if self.started:
            return STATUS_RUNNING
        return STATUS_IDLE

    def place_food(self) -> Food:
        """
        Put a new food on a random free cell.

        The position is drawn first, then a separate draw decides whether
        the food is bonus food. Loops until it finds a cell outside the
        snake, so a board completely filled by the snake never returns.
        """
        width, height = self.config.grid_width, self.config.grid_height
        while True:
            candidate = (self.rng.randrange(width), self.rng.randrange(height))
            if candidate in self.snake:
                continue
            is_bonus = self.rng.random() < self.config.bonus_probability
            timer = self.config.bonus_duration if is_bonus else 0.0
            self.food = Food(candidate, is_bonus=is_bonus, timer=timer)
            logger.debug(f"Placed {self.food}")
            return self.food

    def apply_input(self, direction: str) -> bool:
        """
        Steer the snake.

        Returns True when the direction was accepted. Inputs are ignored once
        the game is over, and a direction opposite to the current heading is
        rejected even for a single-segment snake.
        """
        if self.game_over or direction not in VALID_MOVES:
            return False
        if OPPOSITES.get(self.snake.direction) == direction:
            return False

        self.snake.direction = direction
        if not self.started:
            logger.info(f"Game started heading {direction}")
        self.started = True
        return True

    def tick(self, dt: float):
        """
        Advance the game by one step.

        dt is the time accumulated since the previous tick; it only drives
        the bonus food countdown; movement is always exactly one cell.
        """
        if self.game_over or not self.started:
            return

        if self.food.is_bonus:
            self.food.timer -= dt
            if self.food.expired:
                logger.debug(f"Bonus food at {self.food.position} expired")
                self.place_food()

        new_head = self.snake.next_head()
        if new_head is None:
            return

        if not self.in_bounds(new_head):
            self._end("wall", new_head)
            return

        eats_food = new_head == self.food.position
        if self.snake.blocks(new_head, growing=eats_food):
            self._end("self", new_head)
            return

        self.snake.positions.appendleft(new_head)

        if eats_food:
            self.score += self.config.bonus_score if self.food.is_bonus else self.config.normal_score
            self.place_food()
        else:
            self.snake.positions.pop()

    def restart(self):
        """Throw the current round away and start a fresh one."""
        logger.info(f"Restarting game (previous score: {self.score})")
        self._reset()

    def in_bounds(self, position: Position) -> bool:
        x, y = position
        return 0 <= x < self.config.grid_width and 0 <= y < self.config.grid_height

    def _end(self, reason: str, position: Position):
        self.game_over = True
        logger.info(f"Game over: {reason} collision at {position}, score {self.score}")

    def snapshot(self) -> Dict[str, Any]:
        """Return the render read model as a JSON-friendly dict."""
        return {
            "snake": [list(p) for p in self.snake.positions],
            "direction": self.snake.direction,
            "food": {
                "position": list(self.food.position),
                "is_bonus": self.food.is_bonus,
                "timer": self.food.timer,
            },
            "score": self.score,
            "game_over": self.game_over,
            "started": self.started,
            "status": self.status,
            "width": self.config.grid_width,
            "height": self.config.grid_height,
        }

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food, B = bonus food
        H = snake head
        S = snake body
        Row 0 is printed first, matching the window's top row.
        """
        board = [['.' for _ in range(self.config.grid_width)] for _ in range(self.config.grid_height)]

        fx, fy = self.food.position
        board[fy][fx] = 'B' if self.food.is_bonus else 'F'

        for idx, (x, y) in enumerate(self.snake.positions):
            board[y][x] = 'H' if idx == 0 else 'S'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        return "\n".join(result)

    def __repr__(self):
        return (
            f"<GameState status={self.status}, score={self.score}, "
            f"length={len(self.snake)}, food={self.food.position}>"
        )
