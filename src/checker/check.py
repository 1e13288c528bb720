"""
Solution checking for dungeon diagram puzzles.

Checks, in order:
1. Shape: no wall over a fixed tile, open cells connected, every dead end
   holds a monster and every monster sits in a dead end
2. Treasure rooms: each chest is in a fully open 3x3 room with exactly one
   entrance
3. Ownership: outside of treasure rooms there are no 2x2 open areas

The first violation found is returned; nothing is aggregated.
"""

from typing import Iterable, List, Optional, Set

from .chest import check_chest
from .models import Coord, Failure, Puzzle
from .shape import check_shape
from .solution import Solution
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def reconcile_ownership(oversized: List[Coord], claimed: Iterable[Coord]) -> Optional[Failure]:
    """Every oversized open cell must belong to some treasure room."""
    claimed_set: Set[Coord] = set(claimed)
    unclaimed = [coord for coord in oversized if coord not in claimed_set]
    if unclaimed:
        LOGGER.debug("these were not owned by any room: %s", unclaimed)
        return Failure(reason="LARGE_AREA_OUTSIDE_OF_TREASURE_ROOM", pos=unclaimed[0])
    return None


def check_solution(puzzle: Puzzle, solution: Solution) -> Optional[Failure]:
    """
    Check a candidate wall layout against the puzzle rules.

    Returns None if the layout is a legal solution, otherwise the first
    Failure found. Neither the puzzle nor the solution is modified.
    """
    shape = check_shape(puzzle, solution)
    if isinstance(shape, Failure):
        return shape

    claimed: Set[Coord] = set()
    for chest in shape.chests:
        room = check_chest(puzzle, solution, chest)
        if isinstance(room, Failure):
            return room
        claimed.update(room)

    return reconcile_ownership(shape.oversized, claimed)
