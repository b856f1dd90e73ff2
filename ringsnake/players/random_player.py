"""
Random player implementation - picks random safe turns.
"""

import random
from typing import List, Optional

from ringsnake.domain.constants import DELTAS, OPPOSITES, RESTART, VALID_MOVES
from ringsnake.domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a direction that avoids walls and self-collisions.

    Attributes:
        rng: random source, so simulations can be replayed from a seed
        restart_on_crash: ask for a new game once the current one is over
    """

    def __init__(self, rng: Optional[random.Random] = None, restart_on_crash: bool = False):
        self.rng = rng if rng is not None else random.Random()
        self.restart_on_crash = restart_on_crash

    def get_intent(self, game_state: GameState) -> Optional[str]:
        if game_state.is_over:
            return RESTART if self.restart_on_crash else None

        body = game_state.body()
        head_x, head_y = body[0]
        # The tail cell frees up this tick unless the snake eats
        blocked = set(body[:-1])

        # Filter out moves that:
        # 1. Reverse into the neck (the engine ignores them anyway)
        # 2. Hit walls
        # 3. Hit own body
        valid_moves: List[str] = []
        for move in sorted(VALID_MOVES):
            if move == OPPOSITES[game_state.direction]:
                continue
            dx, dy = DELTAS[move]
            new_cell = (head_x + dx, head_y + dy)
            if not game_state.in_bounds(new_cell):
                continue
            if new_cell in blocked:
                continue
            valid_moves.append(move)

        # If no valid moves, just keep going (we'll crash anyway)
        if not valid_moves:
            return None

        return self.rng.choice(valid_moves)
