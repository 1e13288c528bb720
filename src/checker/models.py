"""Data models for puzzle checking."""

from types import MappingProxyType
from typing import Dict, Iterator, List, Literal, Mapping, NamedTuple, Optional, Tuple
from pydantic import BaseModel, ConfigDict, Field, field_serializer, field_validator, model_validator


Tile = Literal["MONSTER", "TREASURE_CHEST"]

FailureReason = Literal[
    "ENTIRELY_FILLED_WITH_WALLS",  # declared, never produced by the checker
    "WALL_OVERLAPS_FILLED_TILE",
    "DISCONTIGUOUS_AREAS",
    "DEAD_END_WITHOUT_MONSTER",
    "MONSTER_WITHOUT_DEAD_END",
    "NO_TREASURE_ROOM",
    "LARGE_AREA_OUTSIDE_OF_TREASURE_ROOM",
]


class Coord(NamedTuple):
    """
    A cell position on the board.

    Components may be negative or past the board edge when the coordinate
    is used as a probe; ``Puzzle.contains`` tells whether it is on the board.
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Coord":
        """Return the coordinate shifted by the given delta."""
        return Coord(self.x + dx, self.y + dy)

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"


class Puzzle(BaseModel):
    """
    An immutable puzzle board.

    Hints are stored as tuples and tiles as a read-only mapping, so neither
    the fields nor their contents can change after validation.

    Attributes:
        width: Number of columns
        height: Number of rows
        tiles: Fixed tiles keyed by coordinate; absent cells are plain floor
        top_hints: Wall count hint for each column
        side_hints: Wall count hint for each row
    """

    model_config = ConfigDict(frozen=True)

    width: int = Field(..., ge=0)
    height: int = Field(..., ge=0)
    tiles: Mapping[Coord, Tile] = Field(default_factory=dict, validate_default=True)
    top_hints: Tuple[int, ...] = ()
    side_hints: Tuple[int, ...] = ()

    @field_validator("tiles", mode="after")
    @classmethod
    def freeze_tiles(cls, tiles: Mapping[Coord, Tile]) -> Mapping[Coord, Tile]:
        return MappingProxyType(dict(tiles))

    @field_serializer("tiles")
    def dump_tiles(self, tiles: Mapping[Coord, Tile]) -> Dict[Coord, Tile]:
        return dict(tiles)

    @model_validator(mode="after")
    def check_dimensions(self) -> "Puzzle":
        if len(self.top_hints) != self.width:
            raise ValueError(
                f"Expected {self.width} column hints, got {len(self.top_hints)}"
            )
        if len(self.side_hints) != self.height:
            raise ValueError(
                f"Expected {self.height} row hints, got {len(self.side_hints)}"
            )
        if any(hint < 0 for hint in self.top_hints + self.side_hints):
            raise ValueError("Hints must be non-negative")
        for coord in self.tiles:
            if not self.contains(coord):
                raise ValueError(f"Tile at {coord} lies outside the {self.width}x{self.height} board")
        return self

    def contains(self, coord: Coord) -> bool:
        """Whether the coordinate lies on the board."""
        return 0 <= coord.x < self.width and 0 <= coord.y < self.height

    def get_tile(self, coord: Coord) -> Optional[Tile]:
        """Fixed tile at the coordinate, if any."""
        return self.tiles.get(coord)

    def coords(self) -> Iterator[Coord]:
        """Yield every board coordinate in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield Coord(x, y)


class Level(BaseModel):
    """A titled puzzle, as loaded from a level file."""
    puzzle: Puzzle
    title: str = ""


class Failure(BaseModel):
    """The first rule violation found while checking a solution."""
    reason: FailureReason
    pos: Coord
    tile: Optional[Tile] = None  # Only set for WALL_OVERLAPS_FILLED_TILE

    @property
    def message(self) -> str:
        """Human readable description of the failure."""
        if self.reason == "WALL_OVERLAPS_FILLED_TILE":
            return f"Wall covers a {self.tile} tile at {self.pos}"
        return f"{self.reason} at {self.pos}"


class ShapeSummary(BaseModel):
    """What the shape pass hands on to the treasure room search."""
    chests: List[Coord] = Field(default_factory=list)
    oversized: List[Coord] = Field(default_factory=list)


class ParseError(BaseModel):
    """A single level parsing error."""
    code: str
    message: str
    line: Optional[int] = None
