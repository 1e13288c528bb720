"""Candidate solutions the checker can read."""

import textwrap
from typing import FrozenSet, List, Protocol

from pydantic import BaseModel, ConfigDict, Field

from .models import Coord


WALL_CHAR = "#"


class Solution(Protocol):
    """
    Read-only view of a candidate wall layout.

    The checker only ever asks about on-board coordinates and never keeps a
    reference past the call, so any storage (a set, a live play session,
    a generated candidate) can be checked without copying.
    """

    def is_wall(self, coord: Coord) -> bool:
        ...


class WallGrid(BaseModel):
    """A solution stored as the set of wall coordinates."""

    model_config = ConfigDict(frozen=True)

    walls: FrozenSet[Coord] = Field(default_factory=frozenset)

    def is_wall(self, coord: Coord) -> bool:
        return coord in self.walls

    @classmethod
    def from_rows(cls, rows: List[str]) -> "WallGrid":
        """Build from text rows where ``#`` marks a wall and anything else is open."""
        walls = {
            Coord(x, y)
            for y, row in enumerate(rows)
            for x, char in enumerate(row)
            if char == WALL_CHAR
        }
        return cls(walls=frozenset(walls))

    @classmethod
    def from_text(cls, text: str) -> "WallGrid":
        """
        Build from a block of text.

        Indentation shared by every row and blank lines around the block are
        removed. Spaces at the start of a single row are open cells, so a
        fully open first row should be written with dots.
        """
        lines = textwrap.dedent(text).splitlines()
        while lines and not lines[0].strip():
            lines.pop(0)
        while lines and not lines[-1].strip():
            lines.pop()
        return cls.from_rows(lines)
