"""
Player implementations for ringsnake.

This module contains the input side of the game: things that decide which
intent to feed the engine on each tick.
"""

from .base import Player
from .random_player import RandomPlayer
from .keyboard import intent_for_key, intent_for_keys

__all__ = [
    'Player',
    'RandomPlayer',
    'intent_for_key',
    'intent_for_keys',
]
