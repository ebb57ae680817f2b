"""The grid of tiles that makes up the world, and its tracked entities."""

from __future__ import annotations

import itertools
from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field

from exodus.geometry import Position
from exodus.tile import Tile

Entity = Hashable

DEFAULT_TILE_COUNT = 101


@dataclass(frozen=True)
class TileSetTile:
    """A tile stored in a tile set, with its place in the grid."""

    entity: Entity
    position: Position


@dataclass
class TileSet:
    """Columns of tiles, plus the grid positions of tracked entities."""

    tiles: list[list[TileSetTile]] = field(default_factory=list)
    entities: dict[Entity, Position] = field(default_factory=dict)

    @classmethod
    def from_columns(cls, columns: Iterable[Iterable[Entity]]) -> TileSet:
        """Build a tile set from columns of entities, column by column."""
        tiles = [
            [
                TileSetTile(entity=entity, position=Position(col, row))
                for row, entity in enumerate(column)
            ]
            for col, column in enumerate(columns)
        ]
        return cls(tiles=tiles)

    def tile(self, entity: Entity) -> TileSetTile | None:
        """Return the tile belonging to an entity, if any."""
        return next(
            (tile for column in self.tiles for tile in column if tile.entity == entity),
            None,
        )

    def tile_at(self, position: Position) -> TileSetTile | None:
        """Return the tile at a position measured from the grid's centre."""
        if not self.tiles:
            return None
        x, y = position.coordinates()
        col = (len(self.tiles) - 1) // 2 + x
        if not 0 <= col < len(self.tiles):
            return None
        column = self.tiles[col]
        if not column:
            return None
        row = (len(column) - 1) // 2 + y
        if not 0 <= row < len(column):
            return None
        return column[row]

    def track(self, entity: Entity, position: Position) -> None:
        """Record the current grid position of an entity."""
        self.entities[entity] = position


def spawn_tiles(tile_count: int = DEFAULT_TILE_COUNT) -> tuple[TileSet, dict[int, Tile]]:
    """Create a square grid of solid tiles.

    Returns the tile set and a mapping of each new entity to its tile. The
    count should be odd so that (0, 0) is the centre.
    """
    if tile_count < 0:
        raise ValueError(f"tile count must not be negative, got {tile_count}")
    ids = itertools.count()
    columns = [[next(ids) for _ in range(tile_count)] for _ in range(tile_count)]
    tiles = {entity: Tile.solid() for column in columns for entity in column}
    return TileSet.from_columns(columns), tiles