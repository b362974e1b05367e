"""
Fixed-timestep accumulator that decouples simulation from frame rate.
"""

from typing import Optional


class TickAccumulator:
    """
    Collects frame deltas until one tick interval has passed.

    Once the accumulated time is strictly greater than the interval,
    advance() hands back the whole accumulated amount and starts over
    from zero. Any overshoot is dropped rather than carried into the next
    interval, so a slow frame stretches the following one.
    """

    def __init__(self, interval: float):
        if interval <= 0:
            raise ValueError(f"Tick interval must be positive, got {interval}")
        self.interval = interval
        self.elapsed = 0.0

    def advance(self, dt: float) -> Optional[float]:
        """
        Add one frame's delta.

        Returns:
            The accumulated time to pass to GameState.tick, or None when no
            tick is due yet.
        """
        if dt < 0:
            raise ValueError(f"Frame delta cannot be negative, got {dt}")

        self.elapsed += dt
        if self.elapsed > self.interval:
            due = self.elapsed
            self.elapsed = 0.0
            return due
        return None

    def reset(self):
        self.elapsed = 0.0
