"""
Keyboard mapping - turns raw key names into engine intents.

The windowing layer owns the event loop; it only needs to pass each key
name through intent_for_key() and hand the result to GameCore.tick().
"""

from typing import Iterable, Optional

from ringsnake.domain.constants import UP, DOWN, LEFT, RIGHT, OPPOSITES, RESTART, QUIT

QUIT_KEYS = {"escape", "q"}

ARROW_KEYS = {
    "up": UP,
    "down": DOWN,
    "left": LEFT,
    "right": RIGHT,
}


def intent_for_key(key: str, crashed: bool) -> Optional[str]:
    """
    Map one key press to an intent.

    Escape and q always quit. While crashed, any other key restarts.
    Otherwise the arrow keys turn and everything else is ignored.
    """
    key = key.lower()
    if key in QUIT_KEYS:
        return QUIT
    if crashed:
        return RESTART
    return ARROW_KEYS.get(key)


def intent_for_keys(
    keys: Iterable[str],
    crashed: bool,
    direction: Optional[str] = None,
) -> Optional[str]:
    """
    Pick the single intent for a tick from all keys pressed since the last.

    The first key that maps to an intent wins, so only one turn is taken
    per tick. When the current `direction` is given, a reverse turn does not
    use up the tick and the next key gets a chance.
    """
    for key in keys:
        intent = intent_for_key(key, crashed)
        if intent is None:
            continue
        if direction is not None and intent == OPPOSITES.get(direction):
            continue
        return intent
    return None
