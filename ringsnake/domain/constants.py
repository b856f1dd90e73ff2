"""
Game constants for ringsnake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

# Screen coordinates: y grows downward
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}
OPPOSITES = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# Non-movement intents
RESTART = "RESTART"
QUIT = "QUIT"
VALID_INTENTS = VALID_MOVES | {RESTART, QUIT}

# Crash reasons
CRASH_WALL = "wall"
CRASH_SELF = "self"

# Game settings
DEFAULT_GRID_WIDTH = 15
DEFAULT_GRID_HEIGHT = 10
DEFAULT_FRAME_PERIOD_MS = 200
