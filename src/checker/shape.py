"""
Shape validation: tile overlap, connectivity, oversized areas and dead ends.

This is the board-wide pass of the checker. It finds every open cell once,
then walks them in row-major order and reports the first rule broken.
"""

from typing import List, Set, Union

from .grid import is_oversized, neighbors4
from .models import Coord, Failure, Puzzle, ShapeSummary
from .solution import Solution
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


def flood_fill(start: Coord, openings: Set[Coord]) -> Set[Coord]:
    """Every opening 4-connected to ``start``."""
    reached: Set[Coord] = set()
    todo = [start]
    while todo:
        here = todo.pop()
        if here in reached:
            continue
        reached.add(here)
        todo.extend(n for n in neighbors4(here) if n in openings)
    return reached


def count_blocked_sides(coord: Coord, openings: Set[Coord]) -> int:
    """Orthogonal neighbours that are walls or off the board."""
    return sum(1 for n in neighbors4(coord) if n not in openings)


def check_shape(puzzle: Puzzle, solution: Solution) -> Union[Failure, ShapeSummary]:
    """
    Check that:
    - No wall covers a fixed tile
    - All open cells are connected
    - Dead end <=> monster

    Also collects chest locations and the cells sitting in a 2x2 open area,
    which must later be claimed by treasure rooms.
    """
    order: List[Coord] = []
    openings: Set[Coord] = set()
    monsters: Set[Coord] = set()
    chests: List[Coord] = []

    for coord in puzzle.coords():
        tile = puzzle.get_tile(coord)
        if tile == "MONSTER":
            monsters.add(coord)
        elif tile == "TREASURE_CHEST":
            chests.append(coord)

        if solution.is_wall(coord):
            if tile is not None:
                return Failure(reason="WALL_OVERLAPS_FILLED_TILE", pos=coord, tile=tile)
        else:
            order.append(coord)
            openings.add(coord)

    if not order:
        # No walls overlap anything, so there are no tiles at all and
        # filling the whole board is technically correct.
        LOGGER.debug("board is entirely walls, nothing to check")
        return ShapeSummary(chests=chests)

    reachable = flood_fill(order[0], openings)

    oversized: List[Coord] = []
    for coord in order:
        if coord not in reachable:
            return Failure(reason="DISCONTIGUOUS_AREAS", pos=coord)

        if is_oversized(openings.__contains__, coord):
            LOGGER.debug("%s marked as part of a 2x2 open area", coord)
            oversized.append(coord)

        # Dead ends have 3 blocked sides (4 for a lone cell)
        blocked = count_blocked_sides(coord, openings)
        if blocked in (0, 1, 2):
            if coord in monsters:
                return Failure(reason="MONSTER_WITHOUT_DEAD_END", pos=coord)
        elif blocked in (3, 4):
            if coord not in monsters:
                return Failure(reason="DEAD_END_WITHOUT_MONSTER", pos=coord)
        else:
            raise AssertionError(f"{coord} has {blocked} blocked sides")

    return ShapeSummary(chests=chests, oversized=oversized)
