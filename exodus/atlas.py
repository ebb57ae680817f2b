"""The sprite sheet used to draw tiles."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

DEFAULT_TEXTURE = "sprite_64x64.png"
DEFAULT_SPRITE_SIZE = 64
DEFAULT_GRID = 16


class TileSprite(Enum):
    """Sprites in the tile sheet, valued by their index."""

    TREE = 5
    GRASS = 249

    @property
    def index(self) -> int:
        return self.value


@dataclass(frozen=True)
class TileSetAtlas:
    """A grid-shaped sprite sheet of square sprites."""

    texture: str = DEFAULT_TEXTURE
    sprite_size: int = DEFAULT_SPRITE_SIZE
    columns: int = DEFAULT_GRID
    rows: int = DEFAULT_GRID

    def __post_init__(self) -> None:
        if not 0 < self.sprite_size <= 0xFF:
            raise ValueError(f"sprite size must be between 1 and 255, got {self.sprite_size}")
        if self.columns < 1 or self.rows < 1:
            raise ValueError("atlas must have at least one row and one column")

    @property
    def sprite_count(self) -> int:
        return self.columns * self.rows

    def sprite_rect(self, index: int) -> tuple[int, int, int, int]:
        """Return the (x, y, width, height) of a sprite in the texture."""
        if not 0 <= index < self.sprite_count:
            raise IndexError(f"sprite index {index} out of range")
        row, col = divmod(index, self.columns)
        size = self.sprite_size
        return (col * size, row * size, size, size)