"""
Tests for game_state.py - the state value the engine mutates.
"""

import json
import os
import sys

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from ringsnake.domain import GameState, UP, RIGHT


class TestGameStateInitialization:
    """Tests for constructing a GameState."""

    def test_ring_capacity_is_board_area(self):
        """The ring holds exactly one slot per board cell."""
        state = GameState(15, 10)
        assert state.ring.capacity == 150
        assert state.width == 15
        assert state.height == 10

    def test_initial_flags(self):
        """A new state is not crashed, not won and has no food yet."""
        state = GameState(4, 4)
        assert state.crashed is False
        assert state.won is False
        assert state.crash_reason is None
        assert state.food is None
        assert state.score == 0
        assert state.tick_count == 0
        assert state.length == 1

    @pytest.mark.parametrize("width,height", [(0, 5), (5, 0), (-1, 3)])
    def test_empty_board_raises(self, width, height):
        """Boards need at least one cell in each dimension."""
        with pytest.raises(ValueError):
            GameState(width, height)


class TestLoadBody:
    """Tests for placing an explicit body."""

    def test_body_is_head_first(self):
        """load_body() puts the head in slot 0 and the tail last."""
        state = GameState(5, 5)
        state.load_body([(2, 2), (2, 3), (2, 4)], direction=UP)
        assert state.body() == [(2, 2), (2, 3), (2, 4)]
        assert state.head == 0
        assert state.tail == 2
        assert state.head_cell == (2, 2)
        assert state.tail_cell == (2, 4)
        assert state.direction == UP

    def test_empty_body_raises(self):
        """A body needs at least one cell."""
        with pytest.raises(ValueError):
            GameState(5, 5).load_body([])

    def test_out_of_bounds_cell_raises(self):
        """Every cell must be on the board."""
        with pytest.raises(ValueError):
            GameState(5, 5).load_body([(5, 0)])

    def test_duplicate_cells_raise(self):
        """A live body never repeats a cell."""
        with pytest.raises(ValueError):
            GameState(5, 5).load_body([(1, 1), (1, 2), (1, 1)])

    def test_oversized_body_raises(self):
        """A body longer than the board cannot fit the ring."""
        with pytest.raises(ValueError):
            GameState(1, 2).load_body([(0, 0), (0, 1), (0, 2)])

    def test_unknown_direction_raises(self):
        """Only the four headings are accepted."""
        with pytest.raises(ValueError):
            GameState(5, 5).load_body([(1, 1)], direction="NORTH")

    def test_list_cells_are_accepted(self):
        """A body read back from JSON, with cells as lists, loads as tuples."""
        source = GameState(5, 5)
        source.load_body([(1, 1), (1, 2), (2, 2)], direction=UP)
        cells = json.loads(json.dumps(source.to_dict()))["body"]
        assert cells == [[1, 1], [1, 2], [2, 2]]

        state = GameState(5, 5)
        state.load_body(cells, direction=UP)
        assert state.body() == [(1, 1), (1, 2), (2, 2)]
        assert state.head_cell == (1, 1)

    def test_duplicate_list_cells_raise(self):
        """List cells are still checked for repeats."""
        with pytest.raises(ValueError):
            GameState(5, 5).load_body([[1, 1], [1, 2], [1, 1]])


class TestGameStateWalk:
    """Tests for walking the body on the ring."""

    def test_length_across_wraparound(self):
        """Length comes from the head/tail distance, even when wrapped."""
        state = GameState(3, 3)
        state.ring[7] = (0, 0)
        state.ring[8] = (1, 0)
        state.ring[0] = (2, 0)
        state.head = 7
        state.tail = 0
        assert state.length == 3
        assert state.body() == [(0, 0), (1, 0), (2, 0)]
        assert list(state.slots()) == [7, 8, 0]

    def test_full_ring_length(self):
        """A body covering every slot has length equal to the capacity."""
        state = GameState(2, 2)
        state.load_body([(0, 0), (1, 0), (1, 1), (0, 1)])
        assert state.length == 4
        assert len(state.body()) == 4


class TestPrintBoard:
    """Tests for the text rendering."""

    def test_print_board_marks_head_body_and_food(self):
        """Head, body and food each get their own marker."""
        state = GameState(4, 3)
        state.load_body([(1, 1), (0, 1)], direction=RIGHT)
        state.food = (3, 2)

        lines = state.print_board().split("\n")

        assert lines[0] == " 0 . . . ."
        assert lines[1] == " 1 o H . ."
        assert lines[2] == " 2 . . . F"
        assert lines[3] == "   0 1 2 3"

    def test_crashed_board_hides_food(self):
        """Once crashed, the head shows as X and food is not drawn."""
        state = GameState(3, 1)
        state.load_body([(2, 0)], direction=RIGHT)
        state.food = (0, 0)
        state.crashed = True

        board = state.print_board()

        assert "X" in board
        assert "F" not in board


class TestSnapshot:
    """Tests for to_dict() and repr()."""

    def test_to_dict_contents(self):
        """to_dict() exposes everything a renderer needs."""
        state = GameState(4, 4)
        state.load_body([(1, 1), (1, 2)], direction=UP)
        state.food = (3, 3)

        snapshot = state.to_dict()

        assert snapshot == {
            "width": 4,
            "height": 4,
            "body": [(1, 1), (1, 2)],
            "food": (3, 3),
            "direction": UP,
            "crashed": False,
            "crash_reason": None,
            "won": False,
            "score": 0,
            "tick_count": 0,
        }

    def test_repr(self):
        """GameState has a useful string representation."""
        state = GameState(4, 4)
        state.load_body([(1, 1)])
        repr_str = repr(state)
        assert "4x4" in repr_str
        assert "length=1" in repr_str
