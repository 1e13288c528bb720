"""Level file parsing utilities."""

import re
from typing import Dict, List, Optional, Tuple

from .models import Coord, Level, ParseError, Puzzle, Tile


SEPARATOR = "---"

TILE_CHARS: Dict[str, Optional[Tile]] = {
    "@": "MONSTER",
    "$": "TREASURE_CHEST",
    ".": None,
}

HEADER_PATTERN = re.compile(r'^ (\d+)[ \t]*$')


def parse_level(text: str) -> Tuple[Optional[Level], List[ParseError]]:
    """
    Parse a level file into a Level with error collection.

    The format is a title line, free-form comment lines up to a ``---``
    separator, a hint header (a space, then one digit per column) and one
    line per row (its hint digit, then ``@`` monster, ``$`` chest or ``.``).

    Returns a tuple of (level, errors); level is None when errors occurred.
    """
    errors: List[ParseError] = []

    if not text.strip():
        errors.append(ParseError(
            code="EMPTY_LEVEL",
            message="Level file is empty"
        ))
        return None, errors

    lines = text.splitlines()
    title = lines[0].strip()

    sep_index = next(
        (i for i, line in enumerate(lines[1:], start=1) if SEPARATOR in line),
        None
    )
    if sep_index is None:
        errors.append(ParseError(
            code="MISSING_SEPARATOR",
            message=f"No '{SEPARATOR}' line between the title and the puzzle"
        ))
        return None, errors

    after_sep = lines[sep_index].split(SEPARATOR, 1)[1]
    header_index = sep_index + 1
    header = lines[header_index] if header_index < len(lines) else ""
    header_match = HEADER_PATTERN.match(header)
    if after_sep.strip() or not header_match:
        errors.append(ParseError(
            code="INVALID_HINT_HEADER",
            message=f"Expected a space followed by column hints, got: '{header}'",
            line=header_index + 1
        ))
        return None, errors

    top_hints = [int(c) for c in header_match.group(1)]
    width = len(top_hints)
    row_pattern = re.compile(r'^(\d)([@$.]{%d})[ \t]*$' % width)

    side_hints: List[int] = []
    tiles: Dict[Coord, Tile] = {}
    finished_rows = False
    for i, line in enumerate(lines[header_index + 1:], start=header_index + 2):
        if not line.strip():
            finished_rows = True
            continue
        if finished_rows:
            errors.append(ParseError(
                code="TRAILING_CONTENT",
                message=f"Unexpected content after the puzzle: '{line.strip()}'",
                line=i
            ))
            continue

        match = row_pattern.match(line)
        if not match:
            errors.append(ParseError(
                code="INVALID_ROW",
                message=f"Expected a hint digit and {width} tiles, got: '{line}'",
                line=i
            ))
            continue

        y = len(side_hints)
        side_hints.append(int(match.group(1)))
        for x, char in enumerate(match.group(2)):
            tile = TILE_CHARS[char]
            if tile is not None:
                tiles[Coord(x, y)] = tile

    if errors:
        return None, errors
    if not side_hints:
        errors.append(ParseError(
            code="EMPTY_LEVEL",
            message="Level has a hint header but no rows",
            line=header_index + 1
        ))
        return None, errors

    puzzle = Puzzle(
        width=width,
        height=len(side_hints),
        tiles=tiles,
        top_hints=top_hints,
        side_hints=side_hints,
    )
    return Level(puzzle=puzzle, title=title), errors


def load_level(text: str) -> Level:
    """
    Parse a level file, raising ValueError if it is malformed.
    """
    level, errors = parse_level(text)
    if errors:
        raise ValueError(f"Parse errors: {[e.message for e in errors]}")
    return level
