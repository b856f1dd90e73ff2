"""
RingBuffer - fixed-capacity storage with wraparound slot navigation.
"""

from typing import Any, List

from .errors import InvariantViolation


class RingBuffer:
    """
    A fixed number of slots addressed by index, where the slot after the
    last one is the first one.

    The ring knows nothing about which slots are in use. Callers keep their
    own head/tail indices and only ever move them with next() and prev().

    Attributes:
        capacity: number of slots, fixed at construction
    """

    def __init__(self, count: int, fill: Any = None):
        if isinstance(count, bool) or not isinstance(count, int):
            raise ValueError(f"Ring size must be an integer, got {count!r}.")
        if count < 1:
            raise ValueError(f"Ring size must be at least 1, got {count}.")
        self._slots: List[Any] = [fill] * count
        self._count = count

    @property
    def capacity(self) -> int:
        return self._count

    def __len__(self) -> int:
        return self._count

    def _check(self, slot: int) -> None:
        if isinstance(slot, bool) or not isinstance(slot, int):
            raise InvariantViolation(f"Ring slot must be an integer, got {slot!r}")
        if not 0 <= slot < self._count:
            raise InvariantViolation(
                f"Ring slot {slot} outside [0, {self._count})"
            )

    def next(self, slot: int) -> int:
        """Return the slot after `slot`, wrapping from the last to the first."""
        self._check(slot)
        if slot == self._count - 1:
            return 0
        return slot + 1

    def prev(self, slot: int) -> int:
        """Return the slot before `slot`, wrapping from the first to the last."""
        self._check(slot)
        if slot == 0:
            return self._count - 1
        return slot - 1

    def __getitem__(self, slot: int) -> Any:
        self._check(slot)
        return self._slots[slot]

    def __setitem__(self, slot: int, value: Any) -> None:
        self._check(slot)
        self._slots[slot] = value

    def __repr__(self):
        return f"<RingBuffer capacity={self._count}>"
