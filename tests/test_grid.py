"""Test coordinate helpers and the two formulations of the 2x2 open-area test."""

import itertools

import pytest

from src.checker import Coord, Direction8, is_oversized, is_oversized_window, neighbors4, neighbors8
from src.checker.grid import ORTHOGONAL_DIRECTIONS


CENTER = Coord(1, 1)


def neighbourhood(bits):
    """Open cells around CENTER, one bit per neighbour clockwise from north."""
    opened = {CENTER}
    for bit, coord in zip(bits, neighbors8(CENTER)):
        if bit:
            opened.add(coord)
    return opened


def in_open_square(opened, coord):
    """Brute force: is coord a corner of some fully open 2x2 square?"""
    for left in (coord.x - 1, coord.x):
        for top in (coord.y - 1, coord.y):
            square = [Coord(left + dx, top + dy) for dx in (0, 1) for dy in (0, 1)]
            if all(cell in opened for cell in square):
                return True
    return False


ALL_PATTERNS = list(itertools.product([False, True], repeat=8))


class TestDirections:
    """Compass directions and their rotation."""

    def test_rotate_clockwise(self):
        """Rotation steps through the compass clockwise."""
        assert Direction8.NORTH.rotate_by(1) == Direction8.NORTH_EAST
        assert Direction8.NORTH.rotate_by(2) == Direction8.EAST
        assert Direction8.WEST.rotate_by(2) == Direction8.NORTH
        assert Direction8.NORTH_WEST.rotate_by(1) == Direction8.NORTH

    def test_rotate_backwards(self):
        """Negative steps rotate anticlockwise."""
        assert Direction8.NORTH.rotate_by(-1) == Direction8.NORTH_WEST
        assert Direction8.EAST.rotate_by(-10) == Direction8.NORTH

    def test_orthogonal(self):
        """Exactly the four cardinal directions are orthogonal."""
        orthogonal = [d for d in Direction8 if d.is_orthogonal]
        assert tuple(orthogonal) == ORTHOGONAL_DIRECTIONS

    def test_north_is_up(self):
        """North decreases y."""
        assert Direction8.NORTH.deltas == (0, -1)
        assert Direction8.SOUTH_EAST.deltas == (1, 1)


class TestNeighbours:
    """Neighbour enumeration."""

    def test_neighbors4_may_leave_board(self):
        """Probes are not bounds-checked."""
        assert neighbors4(Coord(0, 0)) == [Coord(0, -1), Coord(1, 0), Coord(0, 1), Coord(-1, 0)]

    def test_neighbors8_clockwise(self):
        """Eight probes, clockwise from north."""
        ring = neighbors8(CENTER)
        assert ring[0] == Coord(1, 0)
        assert ring[1] == Coord(2, 0)
        assert ring[7] == Coord(0, 0)
        assert len(set(ring)) == 8

    def test_offset(self):
        """Offsets may produce negative probes."""
        assert Coord(0, 2).offset(-1, 1) == Coord(-1, 3)


class TestOversizedEquivalence:
    """The elbow test and the sliding-window test agree on every neighbourhood."""

    @pytest.mark.parametrize("bits", ALL_PATTERNS)
    def test_elbow_matches_brute_force(self, bits):
        """The elbow test finds exactly the 2x2 squares."""
        opened = neighbourhood(bits)
        assert is_oversized(opened.__contains__, CENTER) == in_open_square(opened, CENTER)

    @pytest.mark.parametrize("bits", ALL_PATTERNS)
    def test_window_matches_elbow(self, bits):
        """The cyclic window gives the same answer as the elbow test."""
        opened = neighbourhood(bits)
        assert is_oversized_window(opened.__contains__, CENTER) == is_oversized(opened.__contains__, CENTER)

    def test_run_centred_on_orthogonal_is_not_square(self):
        """NE, E, SE open is three in a row but no square with the centre."""
        opened = neighbourhood([False, True, True, True, False, False, False, False])
        assert not in_open_square(opened, CENTER)
        assert not is_oversized(opened.__contains__, CENTER)
        assert not is_oversized_window(opened.__contains__, CENTER)

    def test_wraparound_run(self):
        """The window wraps from north-west back to north."""
        opened = neighbourhood([True, False, False, False, False, False, True, True])
        assert is_oversized_window(opened.__contains__, CENTER)
        assert is_oversized(opened.__contains__, CENTER)

    def test_isolated_diagonals(self):
        """Diagonals alone never make a square."""
        opened = neighbourhood([False, True, False, True, False, True, False, True])
        assert not is_oversized(opened.__contains__, CENTER)
