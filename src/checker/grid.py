"""Coordinate and neighbourhood utilities."""

from enum import Enum
from typing import Callable, List, Tuple

from .models import Coord


class Direction8(Enum):
    """The eight compass directions, clockwise from north. North is -y."""
    NORTH = (0, -1)
    NORTH_EAST = (1, -1)
    EAST = (1, 0)
    SOUTH_EAST = (1, 1)
    SOUTH = (0, 1)
    SOUTH_WEST = (-1, 1)
    WEST = (-1, 0)
    NORTH_WEST = (-1, -1)

    @property
    def deltas(self) -> Tuple[int, int]:
        return self.value

    @property
    def is_orthogonal(self) -> bool:
        dx, dy = self.value
        return dx == 0 or dy == 0

    def rotate_by(self, steps: int) -> "Direction8":
        """Rotate clockwise by ``steps`` eighths of a turn."""
        members = list(Direction8)
        return members[(members.index(self) + steps) % len(members)]


ORTHOGONAL_DIRECTIONS: Tuple[Direction8, ...] = (
    Direction8.NORTH,
    Direction8.EAST,
    Direction8.SOUTH,
    Direction8.WEST,
)


def step(coord: Coord, direction: Direction8) -> Coord:
    """Probe one cell over. The result may lie off the board."""
    dx, dy = direction.deltas
    return coord.offset(dx, dy)


def neighbors4(coord: Coord) -> List[Coord]:
    """Orthogonal neighbour probes (N, E, S, W), unchecked against bounds."""
    return [step(coord, d) for d in ORTHOGONAL_DIRECTIONS]


def neighbors8(coord: Coord) -> List[Coord]:
    """All eight neighbour probes in clockwise order from north."""
    return [step(coord, d) for d in Direction8]


def is_oversized(is_open: Callable[[Coord], bool], coord: Coord) -> bool:
    """
    Whether an open cell is a corner of a fully open 2x2 square.

    For each orthogonal direction, the cell in that direction, the diagonal
    after it and the next orthogonal cell form an elbow which, together with
    ``coord``, makes a square. ``is_open`` must report off-board probes as
    closed.
    """
    for orthogonal in ORTHOGONAL_DIRECTIONS:
        elbow = (orthogonal, orthogonal.rotate_by(1), orthogonal.rotate_by(2))
        if all(is_open(step(coord, d)) for d in elbow):
            return True
    return False


def is_oversized_window(is_open: Callable[[Coord], bool], coord: Coord) -> bool:
    """
    Sliding-window formulation of :func:`is_oversized`.

    Walks the eight neighbours cyclically and looks for three consecutive
    open cells. Only runs starting on an orthogonal neighbour count: a run
    centred on an orthogonal neighbour (diagonal, orthogonal, diagonal)
    does not form a square with ``coord``.
    """
    ring = [is_open(n) for n in neighbors8(coord)]
    for start, direction in enumerate(Direction8):
        if not direction.is_orthogonal:
            continue
        if all(ring[(start + i) % len(ring)] for i in range(3)):
            return True
    return False
