"""
Domain entities for the ringsnake game engine.

This module contains the core game state and rules, independent of any
input, rendering or timing concerns.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITES,
    RESTART, QUIT, VALID_INTENTS,
)
from .errors import InvariantViolation
from .ring_buffer import RingBuffer
from .game_state import Cell, GameState
from .game_core import (
    GameCore,
    tick,
    apply_intent,
    move_snake,
    respawn_food,
    restart,
    get_direction,
    body_links,
    snake_collides_with_snake,
    food_collides_with_snake,
    would_be_out_of_bounds,
)

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITES',
    'RESTART', 'QUIT', 'VALID_INTENTS',
    'InvariantViolation',
    'RingBuffer',
    'Cell',
    'GameState',
    'GameCore',
    'tick',
    'apply_intent',
    'move_snake',
    'respawn_food',
    'restart',
    'get_direction',
    'body_links',
    'snake_collides_with_snake',
    'food_collides_with_snake',
    'would_be_out_of_bounds',
]
