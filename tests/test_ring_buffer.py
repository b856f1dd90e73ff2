"""
Tests for ring_buffer.py - wraparound slot navigation.
"""

import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ringsnake.domain.errors import InvariantViolation
from ringsnake.domain.ring_buffer import RingBuffer


class TestRingBufferConstruction:
    """Tests for allocating a ring."""

    def test_capacity_matches_count(self):
        """A ring has exactly the requested number of slots."""
        ring = RingBuffer(150)
        assert ring.capacity == 150
        assert len(ring) == 150

    def test_slots_start_with_fill_value(self):
        """Every slot starts out holding the fill value."""
        ring = RingBuffer(3, fill=(0, 0))
        assert [ring[i] for i in range(3)] == [(0, 0)] * 3

    @pytest.mark.parametrize("count", [0, -3])
    def test_non_positive_count_raises(self, count):
        """A ring needs at least one slot."""
        with pytest.raises(ValueError):
            RingBuffer(count)

    @pytest.mark.parametrize("count", [2.5, "4", None, True])
    def test_non_integer_count_raises(self, count):
        """Ring sizes must be plain integers."""
        with pytest.raises(ValueError):
            RingBuffer(count)


class TestRingBufferNavigation:
    """Tests for next() and prev()."""

    @pytest.mark.parametrize("count", [1, 2, 7, 150, 255 * 255])
    def test_next_and_prev_are_inverses(self, count):
        """prev(next(s)) == s and next(prev(s)) == s for every slot."""
        ring = RingBuffer(count)
        for slot in range(count):
            assert ring.prev(ring.next(slot)) == slot
            assert ring.next(ring.prev(slot)) == slot

    def test_next_wraps_last_to_first(self):
        """next() on the last slot returns the first."""
        ring = RingBuffer(5)
        assert ring.next(3) == 4
        assert ring.next(4) == 0

    def test_prev_wraps_first_to_last(self):
        """prev() on the first slot returns the last."""
        ring = RingBuffer(5)
        assert ring.prev(1) == 0
        assert ring.prev(0) == 4

    def test_single_slot_ring_maps_to_itself(self):
        """With one slot, both neighbours are the slot itself."""
        ring = RingBuffer(1)
        assert ring.next(0) == 0
        assert ring.prev(0) == 0

    def test_full_cycle_visits_every_slot_once(self):
        """Walking next() N times from any slot visits each slot once and returns."""
        ring = RingBuffer(6)
        slot = 2
        seen = []
        for _ in range(6):
            seen.append(slot)
            slot = ring.next(slot)
        assert slot == 2
        assert sorted(seen) == list(range(6))


class TestRingBufferGuards:
    """Out-of-range slots are invariant violations, not recoverable errors."""

    @pytest.mark.parametrize("slot", [-1, 5, 100])
    def test_out_of_range_slot_rejected(self, slot):
        """next, prev and item access reject slots outside [0, N)."""
        ring = RingBuffer(5)
        with pytest.raises(InvariantViolation):
            ring.next(slot)
        with pytest.raises(InvariantViolation):
            ring.prev(slot)
        with pytest.raises(InvariantViolation):
            ring[slot]
        with pytest.raises(InvariantViolation):
            ring[slot] = (0, 0)

    @pytest.mark.parametrize("slot", ["0", None, 1.0, False])
    def test_non_integer_slot_rejected(self, slot):
        """Slots must be integers."""
        ring = RingBuffer(5)
        with pytest.raises(InvariantViolation):
            ring.next(slot)

    def test_invariant_violation_is_an_assertion(self):
        """Invariant violations behave like failed assertions."""
        assert issubclass(InvariantViolation, AssertionError)


class TestRingBufferStorage:
    """Tests for reading and writing slots."""

    def test_set_and_get_slot(self):
        """Values written to a slot can be read back."""
        ring = RingBuffer(4)
        ring[2] = (7, 8)
        assert ring[2] == (7, 8)
        assert ring[1] is None

    def test_repr_mentions_capacity(self):
        """RingBuffer has a useful string representation."""
        assert "capacity=4" in repr(RingBuffer(4))
