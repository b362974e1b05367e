"""
Snake and Food entities for the game engine.
"""

from collections import deque
from typing import Iterable, Optional, Tuple

from .constants import DELTAS, NONE

Position = Tuple[int, int]


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        positions: deque of (x, y) from head at index 0 to tail at the end
        direction: current heading, NONE until the first accepted input
    """

    def __init__(self, positions: Iterable[Position], direction: str = NONE):
        self.positions = deque(positions)
        if not self.positions:
            raise ValueError("A snake needs at least one segment.")
        self.direction = direction

    @property
    def head(self) -> Position:
        """Return the head position (first element)."""
        return self.positions[0]

    @property
    def tail(self) -> Position:
        return self.positions[-1]

    def next_head(self) -> Optional[Position]:
        """Cell the head moves into on the next step, or None while idle."""
        delta = DELTAS.get(self.direction)
        if delta is None:
            return None
        return (self.head[0] + delta[0], self.head[1] + delta[1])

    def blocks(self, position: Position, growing: bool = False) -> bool:
        """
        Whether moving the head into position runs into the body.

        The tail cell counts as free unless the snake grows this step,
        since only then does the tail stay where it is.
        """
        if position not in self.positions:
            return False
        return growing or position != self.tail

    def __len__(self):
        return len(self.positions)

    def __contains__(self, position):
        return position in self.positions

    def __repr__(self):
        return f"<Snake head={self.head}, length={len(self)}, direction={self.direction}>"


class Food:
    """
    A single food item.

    Bonus food carries a countdown timer in seconds; normal food keeps
    timer at 0.0 and never expires.
    """

    def __init__(self, position: Position, is_bonus: bool = False, timer: float = 0.0):
        self.position = position
        self.is_bonus = is_bonus
        self.timer = timer

    @property
    def expired(self) -> bool:
        return self.is_bonus and self.timer <= 0.0

    def __repr__(self):
        kind = "bonus" if self.is_bonus else "normal"
        return f"<Food {kind} at {self.position}, timer={self.timer:.2f}>"
