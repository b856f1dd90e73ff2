"""
Base player interface for the game engine.
"""

from typing import Optional

from ringsnake.domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at the current game state once per tick and returns the
    intent to feed into that tick.
    """

    def get_intent(self, game_state: GameState) -> Optional[str]:
        """
        Return the intent for the next tick given the current game state.

        Args:
            game_state: Current state of the game (read only)

        Returns:
            One of "UP", "DOWN", "LEFT", "RIGHT", "RESTART", "QUIT", or None
        """
        raise NotImplementedError
