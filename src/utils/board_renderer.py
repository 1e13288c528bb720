from typing import Dict, List, Optional

from ..checker.models import Coord, Level
from ..checker.solution import Solution

TILE_CHARS = {"MONSTER": "@", "TREASURE_CHEST": "$"}
MARKING_CHARS = {"WALL": "#", "EMPTY": "*"}
HINT_MARKS = {"MET": "=", "OVER": "!", "UNDER": " "}
BLANK = "."


def render_board(
    level: Level,
    markings: Optional[Dict[Coord, str]] = None,
    cursor: Optional[Coord] = None,
    col_status: Optional[List[str]] = None,
    row_status: Optional[List[str]] = None,
) -> str:
    """
    Render a level to a string grid.

    The first line holds the column hints and each row starts with its hint.
    Tiles win over markings. The cursor cell is preceded by ``>``. When hint
    statuses are given, rows end with a status mark and a final line marks
    the columns (``=`` met, ``!`` over).
    """
    puzzle = level.puzzle
    markings = markings or {}

    lines = [level.title] if level.title else []
    lines.append("  " + " ".join(str(h) for h in puzzle.top_hints))

    for y in range(puzzle.height):
        row = str(puzzle.side_hints[y])
        for x in range(puzzle.width):
            coord = Coord(x, y)
            tile = puzzle.get_tile(coord)
            if tile is not None:
                char = TILE_CHARS[tile]
            else:
                char = MARKING_CHARS.get(markings.get(coord), BLANK)
            row += (">" if coord == cursor else " ") + char
        if row_status is not None:
            row += " " + HINT_MARKS[row_status[y]]
        lines.append(row.rstrip())

    if col_status is not None:
        footer = "  " + " ".join(HINT_MARKS[s] for s in col_status)
        if footer.strip():
            lines.append(footer.rstrip())

    return '\n'.join(lines)


def render_solution(level: Level, solution: Solution) -> str:
    """Render a level with the walls of a solution filled in."""
    walls = {
        coord: "WALL" for coord in level.puzzle.coords() if solution.is_wall(coord)
    }
    return render_board(level, markings=walls)
