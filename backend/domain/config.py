"""
Startup configuration for the game.

Values come from the defaults in constants.py, optionally overridden by
environment variables (a .env file is loaded first).
"""

import os
from dataclasses import dataclass
from typing import Optional, Tuple

from dotenv import load_dotenv

from .constants import (
    GRID_WIDTH,
    GRID_HEIGHT,
    BLOCK_SIZE,
    FRAME_RATE,
    UPDATES_PER_SECOND,
    BONUS_PROBABILITY,
    BONUS_DURATION,
    BONUS_SCORE,
    NORMAL_SCORE,
)


@dataclass(frozen=True)
class GameConfig:
    """
    Board geometry, pacing and scoring settings.

    Attributes:
        grid_width, grid_height: board dimensions in cells
        cell_size: pixel size of one cell in the window
        frame_rate: render frames per second
        updates_per_second: simulation ticks per second
        bonus_probability: chance that newly placed food is bonus food
        bonus_duration: seconds a bonus food stays before it is replaced
        bonus_score, normal_score: points for eating bonus / normal food
        font_path: optional TrueType font for the score and game over text
    """

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    cell_size: int = BLOCK_SIZE
    frame_rate: int = FRAME_RATE
    updates_per_second: float = UPDATES_PER_SECOND
    bonus_probability: float = BONUS_PROBABILITY
    bonus_duration: float = BONUS_DURATION
    bonus_score: int = BONUS_SCORE
    normal_score: int = NORMAL_SCORE
    font_path: Optional[str] = None

    def __post_init__(self):
        self.validate()

    def validate(self):
        if self.grid_width <= 0 or self.grid_height <= 0:
            raise ValueError(
                f"Grid must be at least 1x1, got {self.grid_width}x{self.grid_height}"
            )
        if self.grid_width * self.grid_height < 2:
            # The starting snake takes one cell, food needs another
            raise ValueError(
                f"Grid needs at least 2 cells, got {self.grid_width}x{self.grid_height}"
            )
        if self.cell_size <= 0:
            raise ValueError(f"cell_size must be positive, got {self.cell_size}")
        if self.frame_rate <= 0:
            raise ValueError(f"frame_rate must be positive, got {self.frame_rate}")
        if self.updates_per_second <= 0:
            raise ValueError(
                f"updates_per_second must be positive, got {self.updates_per_second}"
            )
        if not 0.0 <= self.bonus_probability <= 1.0:
            raise ValueError(
                f"bonus_probability must be within [0, 1], got {self.bonus_probability}"
            )
        if self.bonus_duration < 0:
            raise ValueError(f"bonus_duration cannot be negative, got {self.bonus_duration}")
        if self.bonus_score < 0 or self.normal_score < 0:
            raise ValueError("Score values cannot be negative")

    @property
    def tick_interval(self) -> float:
        """Seconds between two simulation ticks."""
        return 1.0 / self.updates_per_second

    @property
    def window_size(self) -> Tuple[int, int]:
        return (self.grid_width * self.cell_size, self.grid_height * self.cell_size)

    @property
    def center(self) -> Tuple[int, int]:
        return (self.grid_width // 2, self.grid_height // 2)

    @classmethod
    def from_env(cls, **overrides) -> "GameConfig":
        """
        Build a config from SNAKE_* environment variables.

        Keyword overrides win over the environment (used by the CLI flags).
        """
        load_dotenv()

        values = {
            'grid_width': _env('SNAKE_GRID_WIDTH', int, GRID_WIDTH),
            'grid_height': _env('SNAKE_GRID_HEIGHT', int, GRID_HEIGHT),
            'cell_size': _env('SNAKE_CELL_SIZE', int, BLOCK_SIZE),
            'frame_rate': _env('SNAKE_FRAME_RATE', int, FRAME_RATE),
            'updates_per_second': _env('SNAKE_UPDATES_PER_SECOND', float, UPDATES_PER_SECOND),
            'bonus_probability': _env('SNAKE_BONUS_PROBABILITY', float, BONUS_PROBABILITY),
            'bonus_duration': _env('SNAKE_BONUS_DURATION', float, BONUS_DURATION),
            'bonus_score': _env('SNAKE_BONUS_SCORE', int, BONUS_SCORE),
            'normal_score': _env('SNAKE_NORMAL_SCORE', int, NORMAL_SCORE),
            'font_path': os.getenv('SNAKE_FONT_PATH') or None,
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)


def _env(name: str, cast, default):
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ValueError(f"Invalid value for {name}: {raw!r}") from None
