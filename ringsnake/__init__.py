"""
ringsnake - a grid snake game engine whose body lives in a fixed-size ring.
"""

from .domain import GameCore, GameState, RingBuffer, InvariantViolation

__version__ = "0.1.0"

__all__ = [
    'GameCore',
    'GameState',
    'RingBuffer',
    'InvariantViolation',
]
