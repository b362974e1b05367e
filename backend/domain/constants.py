"""
Game constants for arcade Snake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
NONE = "NONE"  # idle, before the first accepted input
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITES = {
    UP: DOWN,
    DOWN: UP,
    LEFT: RIGHT,
    RIGHT: LEFT,
}

# Screen coordinates: (0, 0) is the top-left cell, so UP => y - 1
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Game settings
GRID_WIDTH = 30
GRID_HEIGHT = 20
BLOCK_SIZE = 25
FRAME_RATE = 60
UPDATES_PER_SECOND = 10

BONUS_PROBABILITY = 0.1
BONUS_DURATION = 7.0
BONUS_SCORE = 5
NORMAL_SCORE = 1

# Game status values exposed by GameState.status
STATUS_IDLE = "idle"
STATUS_RUNNING = "running"
STATUS_GAME_OVER = "game_over"
