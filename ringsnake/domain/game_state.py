"""
GameState entity - the single owned value the engine mutates each tick.
"""

from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

from .constants import RIGHT, VALID_MOVES
from .ring_buffer import RingBuffer

Cell = Tuple[int, int]


class GameState:
    """
    Everything the engine knows about one game.

    The body lives in `ring` between the `head` and `tail` slot indices:
    walking from `head` with ring.next() reaches `tail` after length - 1
    steps. Slots outside that run hold stale cells and are never read.

    Attributes:
        width, height: board dimensions, fixed for the life of the state
        ring: body storage, capacity width * height
        head, tail: slot indices of the newest and oldest segment
        food: (x, y) of the food, or None once the board is full
        direction: current heading (UP, DOWN, LEFT, RIGHT)
        crashed: set by a wall or self collision, cleared by restart
        crash_reason: 'wall' or 'self' while crashed
        won: set when the body fills the whole board
        score: food eaten since the last restart
        tick_count: ticks advanced since the last restart
    """

    def __init__(self, width: int, height: int):
        if width < 1 or height < 1:
            raise ValueError(f"Board must be at least 1x1, got {width}x{height}.")
        self.width = width
        self.height = height
        self.ring = RingBuffer(width * height, fill=(0, 0))
        assert self.ring.capacity == width * height
        self.head = 0
        self.tail = 0
        self.food: Optional[Cell] = None
        self.direction = RIGHT
        self.crashed = False
        self.crash_reason: Optional[str] = None
        self.won = False
        self.score = 0
        self.tick_count = 0

    @property
    def head_cell(self) -> Cell:
        return self.ring[self.head]

    @property
    def tail_cell(self) -> Cell:
        return self.ring[self.tail]

    @property
    def length(self) -> int:
        """Number of live segments, from the head/tail distance on the ring."""
        return (self.tail - self.head) % self.ring.capacity + 1

    @property
    def is_over(self) -> bool:
        return self.crashed or self.won

    def in_bounds(self, cell: Cell) -> bool:
        x, y = cell
        return 0 <= x < self.width and 0 <= y < self.height

    def slots(self) -> Iterator[int]:
        """Yield the live slot indices from head to tail inclusive."""
        slot = self.head
        while True:
            yield slot
            if slot == self.tail:
                return
            slot = self.ring.next(slot)

    def cells(self) -> Iterator[Cell]:
        """Yield the live body cells from head to tail inclusive."""
        for slot in self.slots():
            yield self.ring[slot]

    def body(self) -> List[Cell]:
        return list(self.cells())

    def load_body(self, cells: Sequence[Cell], direction: Optional[str] = None) -> None:
        """
        Place an explicit body on the board, head first.

        The cells are written to slots 0..len-1 so that head is slot 0 and
        tail is the last one. Used to set up positions directly instead of
        going through restart().
        """
        if not cells:
            raise ValueError("Body needs at least one cell.")
        cells = [tuple(cell) for cell in cells]
        if len(cells) > self.ring.capacity:
            raise ValueError(
                f"Body of {len(cells)} cells does not fit a {self.width}x{self.height} board."
            )
        if len(set(cells)) != len(cells):
            raise ValueError("Body cells must be distinct.")
        for cell in cells:
            if not self.in_bounds(cell):
                raise ValueError(f"Body cell out of bounds at {cell}.")
        if direction is not None:
            if direction not in VALID_MOVES:
                raise ValueError(f"Unknown direction {direction!r}.")
            self.direction = direction

        for slot, cell in enumerate(cells):
            self.ring[slot] = cell
        self.head = 0
        self.tail = len(cells) - 1

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        H = snake head (X once crashed)
        o = snake body
        (0,0) is the top left, rows are printed top to bottom.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None and not self.crashed:
            fx, fy = self.food
            board[fy][fx] = 'F'

        # Draw tail first so the head wins if the body is corrupt
        for pos_idx, (x, y) in reversed(list(enumerate(self.cells()))):
            if pos_idx == 0:
                board[y][x] = 'X' if self.crashed else 'H'
            else:
                board[y][x] = 'o'

        result = []
        for y in range(self.height):
            result.append(f"{y:2d} {' '.join(board[y])}")
        result.append("   " + " ".join(str(i % 10) for i in range(self.width)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """Plain snapshot for renderers and summaries."""
        return {
            "width": self.width,
            "height": self.height,
            "body": self.body(),
            "food": self.food,
            "direction": self.direction,
            "crashed": self.crashed,
            "crash_reason": self.crash_reason,
            "won": self.won,
            "score": self.score,
            "tick_count": self.tick_count,
        }

    def __repr__(self):
        return (
            f"<GameState {self.width}x{self.height} length={self.length}, "
            f"head={self.head_cell}, food={self.food}, direction={self.direction}, "
            f"crashed={self.crashed}>"
        )
