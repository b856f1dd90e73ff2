"""
Game rules: movement, growth, collisions, food placement and restart.

Every rule is a plain function that takes the GameState it works on, plus
the random source where one is needed. GameCore bundles one state with one
random source for callers that want a single object to drive.
"""

import logging
import random
from typing import List, Optional, Tuple

from .constants import (
    UP, DOWN, LEFT, RIGHT, DELTAS, OPPOSITES,
    RESTART, QUIT, VALID_INTENTS,
    CRASH_WALL, CRASH_SELF,
    DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT,
)
from .errors import InvariantViolation
from .game_state import Cell, GameState

logger = logging.getLogger(__name__)


def step(cell: Cell, direction: str) -> Cell:
    """Return the cell one step from `cell` in `direction`."""
    try:
        dx, dy = DELTAS[direction]
    except KeyError:
        raise InvariantViolation(f"Unknown direction {direction!r}") from None
    return (cell[0] + dx, cell[1] + dy)


def would_be_out_of_bounds(state: GameState) -> bool:
    """Would advancing the head one cell take it off the board?"""
    return not state.in_bounds(step(state.head_cell, state.direction))


def snake_collides_with_snake(state: GameState) -> bool:
    """Does the head share a cell with any other live segment?"""
    if state.head == state.tail:
        return False
    head_cell = state.head_cell
    slot = state.head
    while slot != state.tail:
        slot = state.ring.next(slot)
        if state.ring[slot] == head_cell:
            return True
    return False


def food_collides_with_snake(state: GameState) -> bool:
    """Is the food on any live segment, head included?"""
    if state.food is None:
        return False
    for cell in state.cells():
        if cell == state.food:
            return True
    return False


def respawn_food(state: GameState, rng: random.Random) -> Optional[Cell]:
    """
    Move the food to a random cell the body does not cover.

    Re-rolls until a free cell comes up, so it slows down as the body fills
    the board. When no free cell is left the food is removed and the game
    is won.
    """
    if state.length >= state.width * state.height:
        state.food = None
        state.won = True
        logger.info(f"Board filled after {state.tick_count} ticks, score {state.score}")
        return None

    while True:
        state.food = (rng.randrange(state.width), rng.randrange(state.height))
        if not food_collides_with_snake(state):
            break

    logger.debug(f"Food respawned at {state.food}")
    return state.food


def move_snake(state: GameState, rng: random.Random) -> None:
    """
    Advance the snake by one cell.

    The new head goes into the free slot before the current head. Unless the
    snake eats, the tail slot moves the same way, so the length stays put.
    A self collision is detected after the move and the move is kept.
    """
    if state.won:
        return
    if would_be_out_of_bounds(state):
        if not state.crashed:
            state.crash_reason = CRASH_WALL
            logger.info(
                f"Crashed into the wall at {state.head_cell} heading {state.direction}"
            )
        state.crashed = True
    if state.crashed:
        return

    new_head = state.ring.prev(state.head)
    state.ring[new_head] = step(state.head_cell, state.direction)
    state.head = new_head
    state.tick_count += 1

    did_eat = state.head_cell == state.food
    if did_eat:
        state.score += 1
        logger.debug(f"Ate food at {state.head_cell}, length now {state.length}")
        respawn_food(state, rng)
    else:
        state.tail = state.ring.prev(state.tail)

    if snake_collides_with_snake(state):
        state.crashed = True
        state.crash_reason = CRASH_SELF
        logger.info(f"Crashed into own body at {state.head_cell}, score {state.score}")


def restart(state: GameState, rng: random.Random) -> None:
    """Start a new game in the same state, reusing its ring."""
    state.head = 0
    state.tail = 0
    state.ring[state.head] = (rng.randrange(state.width), rng.randrange(state.height))

    state.crashed = False
    state.crash_reason = None
    state.won = False
    state.score = 0
    state.tick_count = 0

    respawn_food(state, rng)

    # Face away from the nearer side wall
    if state.head_cell[0] > state.width // 2:
        state.direction = LEFT
    else:
        state.direction = RIGHT

    logger.info(
        f"New game: head at {state.head_cell} heading {state.direction}, food at {state.food}"
    )


def get_direction(a: Cell, b: Cell) -> str:
    """
    Deduce the heading that produced segment `a` from segment `b`.

    `a` is the segment nearer the head. The two must be orthogonal
    neighbours; anything else means the body is corrupt.
    """
    ax, ay = a
    bx, by = b
    if ay == by and ax == bx + 1:
        return RIGHT
    elif ay == by and ax == bx - 1:
        return LEFT
    elif ax == bx and ay == by + 1:
        return DOWN
    elif ax == bx and ay == by - 1:
        return UP
    raise InvariantViolation(f"Segments {a} and {b} are not adjacent")


def body_links(state: GameState) -> List[Tuple[Cell, Cell, str]]:
    """(nearer-head cell, nearer-tail cell, heading) for each adjacent pair."""
    body = state.body()
    return [(a, b, get_direction(a, b)) for a, b in zip(body, body[1:])]


def apply_intent(state: GameState, intent: Optional[str], rng: random.Random) -> bool:
    """
    Apply one input intent.

    Returns False when the intent used up the tick (a restart), True when
    the snake should still advance.
    """
    if intent is None:
        return True
    if intent not in VALID_INTENTS:
        raise ValueError(f"Unknown intent {intent!r}")

    if intent == QUIT:
        # Quitting is the caller's business
        return True

    if intent == RESTART:
        if state.is_over:
            restart(state, rng)
            return False
        logger.debug("Ignoring restart while the game is running")
        return True

    if state.is_over:
        logger.debug(f"Ignoring {intent} while the game is over")
    elif intent == OPPOSITES[state.direction]:
        logger.debug(f"Ignoring {intent}, reverse of {state.direction}")
    else:
        state.direction = intent
    return True


def tick(state: GameState, intent: Optional[str], rng: random.Random) -> None:
    """Apply at most one intent, then advance the game by one tick."""
    if apply_intent(state, intent, rng) and not state.is_over:
        move_snake(state, rng)


class GameCore:
    """
    One game: a GameState plus the random source that drives it.

    This is the object an input/render loop talks to: call tick() once per
    frame with the pending intent, then read body(), food and crashed.
    """

    def __init__(
        self,
        width: int = DEFAULT_GRID_WIDTH,
        height: int = DEFAULT_GRID_HEIGHT,
        rng: Optional[random.Random] = None,
        seed: Optional[int] = None,
    ):
        self.rng = rng if rng is not None else random.Random(seed)
        self.state = GameState(width, height)
        restart(self.state, self.rng)

    def tick(self, intent: Optional[str] = None) -> None:
        tick(self.state, intent, self.rng)

    def restart(self) -> None:
        restart(self.state, self.rng)

    def body(self) -> List[Cell]:
        """Body cells from head to tail."""
        return self.state.body()

    def links(self) -> List[Tuple[Cell, Cell, str]]:
        return body_links(self.state)

    @property
    def width(self) -> int:
        return self.state.width

    @property
    def height(self) -> int:
        return self.state.height

    @property
    def head(self) -> Cell:
        return self.state.head_cell

    @property
    def food(self) -> Optional[Cell]:
        """Food position; only meaningful while not crashed."""
        return self.state.food

    @property
    def direction(self) -> str:
        return self.state.direction

    @property
    def crashed(self) -> bool:
        return self.state.crashed

    @property
    def won(self) -> bool:
        return self.state.won

    @property
    def is_over(self) -> bool:
        return self.state.is_over

    @property
    def score(self) -> int:
        return self.state.score

    @property
    def length(self) -> int:
        return self.state.length

    def print_board(self) -> str:
        return self.state.print_board()

    def __repr__(self):
        return f"<GameCore {self.state!r}>"
