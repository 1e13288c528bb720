"""Treasure room search around a single chest."""

from typing import Iterator, List, Union

from .models import Coord, Failure, Puzzle
from .solution import Solution
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)

ROOM_SIZE = 3


def room_cells(corner: Coord) -> List[Coord]:
    """The nine cells of a room with the given top-left corner, row-major."""
    return [
        corner.offset(dx, dy)
        for dy in range(ROOM_SIZE)
        for dx in range(ROOM_SIZE)
    ]


def border_ring(corner: Coord) -> Iterator[Coord]:
    """
    The 12 cells edge-adjacent to a room: top and bottom rows first, then
    left and right columns. The four diagonal corners are never visited.
    Probes may lie off the board.
    """
    for dx in range(ROOM_SIZE):
        yield corner.offset(dx, -1)
        yield corner.offset(dx, ROOM_SIZE)
    for dy in range(ROOM_SIZE):
        yield corner.offset(-1, dy)
        yield corner.offset(ROOM_SIZE, dy)


def candidate_corners(puzzle: Puzzle, chest: Coord) -> Iterator[Coord]:
    """Top-left corners of every on-board 3x3 window holding the chest, row-major."""
    min_x = max(chest.x - (ROOM_SIZE - 1), 0)
    max_x = min(chest.x, puzzle.width - ROOM_SIZE)
    min_y = max(chest.y - (ROOM_SIZE - 1), 0)
    max_y = min(chest.y, puzzle.height - ROOM_SIZE)
    LOGGER.debug("scanning corners x in %s..=%s, y in %s..=%s", min_x, max_x, min_y, max_y)
    for y in range(min_y, max_y + 1):
        for x in range(min_x, max_x + 1):
            yield Coord(x, y)


def has_single_entrance(puzzle: Puzzle, solution: Solution, corner: Coord) -> bool:
    """Whether exactly one border cell of the room is open."""
    found_entrance = False
    for border in border_ring(corner):
        blocked = not puzzle.contains(border) or solution.is_wall(border)
        LOGGER.debug("    border %s (blocked=%s)", border, blocked)
        if blocked:
            continue
        if found_entrance:
            LOGGER.debug("    second opening in the border, trying next corner")
            return False
        found_entrance = True
    return found_entrance


def check_chest(puzzle: Puzzle, solution: Solution, chest: Coord) -> Union[Failure, List[Coord]]:
    """
    Find a treasure room for the chest.

    A treasure room is a fully open 3x3 block containing the chest whose
    border has exactly one open cell, the entrance. Returns the nine room
    cells of the first matching corner, or a ``NO_TREASURE_ROOM`` failure.
    """
    LOGGER.debug("checking chest at %s", chest)
    for corner in candidate_corners(puzzle, chest):
        LOGGER.debug("  trying corner %s", corner)
        cells = room_cells(corner)
        # Other tiles inside the room are allowed here; monsters can't sit
        # in an open 3x3 anyway since they need a dead end.
        walled = next((cell for cell in cells if solution.is_wall(cell)), None)
        if walled is not None:
            LOGGER.debug("    wall at %s, trying next corner", walled)
            continue
        if has_single_entrance(puzzle, solution, corner):
            LOGGER.debug("room found at %s, claims %s", corner, cells)
            return cells
    return Failure(reason="NO_TREASURE_ROOM", pos=chest)
