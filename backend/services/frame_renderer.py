"""
Frame Rendering Service for arcade Snake

Draws the game's read model (snake body, food, score, game over overlay)
into a Pillow image. The pygame window blits these frames to the screen
and the headless runner saves them as PNG snapshots.
"""

import logging
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from domain.config import GameConfig
from domain.game_state import GameState

logger = logging.getLogger(__name__)

Rect = Tuple[float, float, float, float]

RESTART_BUTTON_WIDTH = 100
RESTART_BUTTON_HEIGHT = 40


class ColorScheme:
    """Colour configuration for the arcade window"""

    BACKGROUND = "#000000"
    SNAKE = "#00FF00"
    FOOD = "#FF0000"
    BONUS_FOOD = "#FFFF00"
    TEXT = "#FFFFFF"
    BUTTON = "#333333"


def hex_to_rgb(hex_color: str) -> Tuple[int, int, int]:
    """Convert hex color to RGB tuple"""
    hex_color = hex_color.lstrip('#')
    return tuple(int(hex_color[i:i+2], 16) for i in (0, 2, 4))


def restart_button_rect(config: GameConfig) -> Rect:
    """Pixel rectangle (x, y, w, h) of the restart button, below the window centre."""
    width, height = config.window_size
    return (
        width / 2.0 - RESTART_BUTTON_WIDTH / 2.0,
        height / 2.0 + 40.0,
        float(RESTART_BUTTON_WIDTH),
        float(RESTART_BUTTON_HEIGHT),
    )


def point_in_rect(point: Tuple[float, float], rect: Rect) -> bool:
    """Inclusive hit test, edges count as inside."""
    px, py = point
    x, y, w, h = rect
    return x <= px <= x + w and y <= py <= y + h


class FrameRenderer:
    """Render GameState frames with Pillow"""

    def __init__(self, config: GameConfig):
        self.config = config
        self.width, self.height = config.window_size
        self.cell_size = config.cell_size

        self.font_score = self._load_font(24)
        self.font_title = self._load_font(32)
        self.font_button = self._load_font(20)

    def _load_font(self, size: int):
        if self.config.font_path:
            try:
                return ImageFont.truetype(self.config.font_path, size)
            except OSError as e:
                logger.warning(f"Could not load font {self.config.font_path}: {e}; using default font")
        return ImageFont.load_default()

    def render_frame(self, state: GameState) -> Image.Image:
        """Render a single frame of the game"""
        img = Image.new('RGB', (self.width, self.height), hex_to_rgb(ColorScheme.BACKGROUND))
        draw = ImageDraw.Draw(img)

        for x, y in state.snake.positions:
            self._draw_cell(draw, x, y, hex_to_rgb(ColorScheme.SNAKE))

        food_color = ColorScheme.BONUS_FOOD if state.food.is_bonus else ColorScheme.FOOD
        fx, fy = state.food.position
        self._draw_cell(draw, fx, fy, hex_to_rgb(food_color))

        draw.text(
            (10, 10),
            f"Score: {state.score}",
            fill=hex_to_rgb(ColorScheme.TEXT),
            font=self.font_score
        )

        if state.game_over:
            self._draw_game_over(draw)

        return img

    def _draw_cell(self, draw: ImageDraw.ImageDraw, x: int, y: int, color: Tuple[int, int, int]):
        """Fill one grid cell"""
        left = x * self.cell_size
        top = y * self.cell_size
        draw.rectangle(
            [left, top, left + self.cell_size - 1, top + self.cell_size - 1],
            fill=color
        )

    def _draw_game_over(self, draw: ImageDraw.ImageDraw):
        """Draw the game over caption and the restart button"""
        draw.text(
            (self.width / 2.0 - 80, self.height / 2.0 - 32),
            "Game Over!",
            fill=hex_to_rgb(ColorScheme.TEXT),
            font=self.font_title
        )

        bx, by, bw, bh = restart_button_rect(self.config)
        draw.rectangle([bx, by, bx + bw, by + bh], fill=hex_to_rgb(ColorScheme.BUTTON))
        draw.text(
            (bx + 20, by + 8),
            "Restart",
            fill=hex_to_rgb(ColorScheme.TEXT),
            font=self.font_button
        )

    def save_snapshot(self, state: GameState, path: str, image: Optional[Image.Image] = None) -> str:
        """
        Render the state and write it as PNG

        Returns:
            The path written to
        """
        image = image or self.render_frame(state)
        image.save(path, format="PNG")
        logger.info(f"Saved frame snapshot to {path}")
        return path
