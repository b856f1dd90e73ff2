"""
Exceptions raised by the game engine.
"""


class InvariantViolation(AssertionError):
    """
    Internal state is corrupt: a ring slot out of range, an unknown
    direction, or two body segments that are not adjacent.

    Never caught by the engine; continuing would simulate garbage.
    """
