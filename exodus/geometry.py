"""Grid positions and compass directions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(frozen=True)
class Position:
    """A location on the tile grid."""

    x: int = 0
    y: int = 0

    def coordinates(self) -> tuple[int, int]:
        return (self.x, self.y)

    def __add__(self, other: object) -> Position:
        if not isinstance(other, Position):
            return NotImplemented
        return Position(self.x + other.x, self.y + other.y)


class Direction(Enum):
    """The eight compass directions a step on the grid can take."""

    NORTH = (0, 1)
    NORTH_EAST = (1, 1)
    EAST = (1, 0)
    SOUTH_EAST = (1, -1)
    SOUTH = (0, -1)
    SOUTH_WEST = (-1, -1)
    WEST = (-1, 0)
    NORTH_WEST = (-1, 1)

    def to_coords(self) -> tuple[int, int]:
        """Return the (x, y) offset of one step in this direction."""
        return self.value

    @property
    def offset(self) -> Position:
        """The offset of one step in this direction, as a position."""
        return Position(*self.value)