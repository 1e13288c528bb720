"""Solution checking for tombcrawler puzzles."""

from .check import check_solution, reconcile_ownership
from .shape import check_shape
from .chest import check_chest
from .models import Coord, Tile, Puzzle, Level, Failure, FailureReason, ShapeSummary, ParseError
from .solution import Solution, WallGrid
from .parsing import parse_level, load_level
from .grid import Direction8, neighbors4, neighbors8, is_oversized, is_oversized_window

__all__ = [
    # Main checking
    "check_solution",
    "check_shape",
    "check_chest",
    "reconcile_ownership",
    # Models
    "Coord",
    "Tile",
    "Puzzle",
    "Level",
    "Failure",
    "FailureReason",
    "ShapeSummary",
    "ParseError",
    # Solutions
    "Solution",
    "WallGrid",
    # Parsing
    "parse_level",
    "load_level",
    # Grid utilities
    "Direction8",
    "neighbors4",
    "neighbors8",
    "is_oversized",
    "is_oversized_window",
]
