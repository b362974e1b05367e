"""
pygame window driving one GameState.

The window owns the game state and a fixed-timestep accumulator. Each
frame it turns pygame events into direction intents or a restart, feeds
the elapsed time to the accumulator, ticks the game when an interval has
passed and blits the rendered frame.
"""

import logging
from typing import Optional

import pygame

from domain.config import GameConfig
from domain.constants import UP, DOWN, LEFT, RIGHT
from domain.game_state import GameState
from services.frame_renderer import FrameRenderer, restart_button_rect, point_in_rect
from services.tick_clock import TickAccumulator

logger = logging.getLogger(__name__)

WINDOW_TITLE = "Snake Game"

KEY_DIRECTIONS = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


class ArcadeWindow:
    """
    Manages:
      - the GameState being played
      - the tick accumulator
      - the pygame display and clock
    """

    def __init__(self, config: Optional[GameConfig] = None, state: Optional[GameState] = None):
        self.config = config or GameConfig()
        self.state = state or GameState(self.config)
        self.accumulator = TickAccumulator(self.config.tick_interval)
        self.renderer = FrameRenderer(self.config)
        self.running = True
        self.screen = None

    def handle_event(self, event):
        """Apply one pygame event to the game."""
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                self.running = False
                return
            direction = KEY_DIRECTIONS.get(event.key)
            if direction is not None:
                self.state.apply_input(direction)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.state.game_over and point_in_rect(event.pos, restart_button_rect(self.config)):
                self.state.restart()
                self.accumulator.reset()

    def update(self, dt: float) -> bool:
        """
        Feed one frame's elapsed seconds.

        Returns True when a game tick ran.
        """
        due = self.accumulator.advance(dt)
        if due is None:
            return False
        self.state.tick(due)
        return True

    def draw(self):
        frame = self.renderer.render_frame(self.state)
        surface = pygame.image.frombuffer(frame.tobytes(), frame.size, frame.mode)
        self.screen.blit(surface, (0, 0))
        pygame.display.flip()

    def run(self):
        """Open the window and play until it is closed."""
        pygame.init()
        try:
            self.screen = pygame.display.set_mode(self.config.window_size)
            pygame.display.set_caption(WINDOW_TITLE)
            clock = pygame.time.Clock()
            logger.info(
                f"Window opened at {self.config.window_size[0]}x{self.config.window_size[1]}, "
                f"{self.config.updates_per_second} updates/s"
            )

            while self.running:
                for event in pygame.event.get():
                    self.handle_event(event)

                dt = clock.tick(self.config.frame_rate) / 1000.0
                self.update(dt)
                self.draw()
        finally:
            pygame.quit()

        return self.state
