"""
Play session state for solving a level interactively.

Tracks the player's markings and cursor, and re-checks the board after
every action so feedback is always current.
"""

from typing import Dict, List, Optional, Tuple
from pydantic import BaseModel, Field

from .models import HintStatus, Marking, MoveDirection, SolvedState
from ..checker.check import check_solution
from ..checker.models import Coord, Failure, Level


class PlaySession(BaseModel):
    """
    Manages the board state of one player solving one level.

    The session is itself a Solution: walls are cells marked WALL, and both
    unmarked and EMPTY cells count as open.

    Attributes:
        level: The level being solved
        cursor: Currently selected cell
        markings: Player markings keyed by coordinate
        solved: Result of the most recent check
        failure: The failure from the most recent check, if any
        actions: Number of actions taken
    """

    level: Level
    cursor: Coord = Coord(0, 0)
    markings: Dict[Coord, Marking] = Field(default_factory=dict)
    solved: SolvedState = "JUST_STARTED"
    failure: Optional[Failure] = None
    actions: int = 0

    @classmethod
    def create(cls, level: Level) -> "PlaySession":
        """Start a fresh session with no markings and the cursor at the origin."""
        puzzle = level.puzzle
        if puzzle.width == 0 or puzzle.height == 0:
            raise ValueError(f"Cannot play a {puzzle.width}x{puzzle.height} board")
        return cls(level=level)

    @property
    def width(self) -> int:
        return self.level.puzzle.width

    @property
    def height(self) -> int:
        return self.level.puzzle.height

    def is_wall(self, coord: Coord) -> bool:
        return self.markings.get(coord) == "WALL"

    def move(self, direction: MoveDirection, snap: bool = False) -> None:
        """
        Move the cursor one cell, wrapping around the board edges.

        With ``snap`` the cursor jumps to the edge in that direction instead.
        """
        x, y = self.cursor
        if direction == "WEST":
            x = 0 if snap else (x - 1) % self.width
        elif direction == "EAST":
            x = self.width - 1 if snap else (x + 1) % self.width
        elif direction == "NORTH":
            y = 0 if snap else (y - 1) % self.height
        elif direction == "SOUTH":
            y = self.height - 1 if snap else (y + 1) % self.height
        else:
            raise ValueError(f"Unknown direction: {direction}")
        self.cursor = Coord(x, y)
        self._after_action()

    def set_cursor(self, coord: Coord) -> None:
        """Place the cursor on a specific cell."""
        if not self.level.puzzle.contains(coord):
            raise ValueError(f"Cursor position {coord} is outside the board")
        self.cursor = Coord(*coord)
        self._after_action()

    def toggle_wall(self) -> None:
        """Toggle a wall under the cursor. Cells holding a tile can't be marked."""
        if self.level.puzzle.get_tile(self.cursor) is None:
            current = self.markings.get(self.cursor)
            self._set_marking(None if current == "WALL" else "WALL")
        self._after_action()

    def toggle_empty(self) -> None:
        """Toggle a 'known free' marking under the cursor; clears any other marking."""
        if self.level.puzzle.get_tile(self.cursor) is None:
            current = self.markings.get(self.cursor)
            self._set_marking("EMPTY" if current is None else None)
        self._after_action()

    def _set_marking(self, marking: Optional[Marking]) -> None:
        if marking is None:
            self.markings.pop(self.cursor, None)
        else:
            self.markings[self.cursor] = marking

    def _after_action(self) -> None:
        self.actions += 1
        self.recheck()

    def recheck(self) -> Optional[Failure]:
        """Run the checker against the current markings and record the verdict."""
        failure = check_solution(self.level.puzzle, self)
        self.failure = failure
        self.solved = "SUCCESS" if failure is None else "FAIL"
        return failure

    def wall_counts(self) -> Tuple[List[int], List[int]]:
        """Number of walls marked in each column and each row."""
        col_counts = [0] * self.width
        row_counts = [0] * self.height
        for coord, marking in self.markings.items():
            if marking == "WALL":
                col_counts[coord.x] += 1
                row_counts[coord.y] += 1
        return col_counts, row_counts

    def hint_status(self) -> Tuple[List[HintStatus], List[HintStatus]]:
        """
        Compare wall counts against the hints.

        This is feedback only; hints play no part in whether the board is
        solved.
        """
        col_counts, row_counts = self.wall_counts()
        puzzle = self.level.puzzle
        return (
            [_classify(count, hint) for count, hint in zip(col_counts, puzzle.top_hints)],
            [_classify(count, hint) for count, hint in zip(row_counts, puzzle.side_hints)],
        )


def _classify(count: int, hint: int) -> HintStatus:
    if count == hint:
        return "MET"
    if count > hint:
        return "OVER"
    return "UNDER"
