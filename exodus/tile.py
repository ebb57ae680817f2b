"""Tiles that make up the game world."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Matter(Enum):
    """The type of matter that makes up a tile."""

    # Can be traversed by the player (unless blocked), and broken down
    # (unless indestructible).
    SOLID = "solid"


@dataclass
class Tile:
    """A single grid cell of the world."""

    revealed: bool = False
    accessible: bool = False
    matter: Matter = Matter.SOLID

    @classmethod
    def solid(cls) -> Tile:
        return cls(matter=Matter.SOLID)