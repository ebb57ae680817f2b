"""The running game world: player movement, camera and tile rendering."""

from __future__ import annotations

import logging
import random
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

from exodus.assets import DataLoadError
from exodus.atlas import TileSetAtlas, TileSprite
from exodus.datatypes import Plant
from exodus.geometry import Direction, Position
from exodus.tile import Tile
from exodus.tileset import DEFAULT_TILE_COUNT, Entity, TileSet, spawn_tiles

log = logging.getLogger(__name__)

Color = tuple[float, float, float, float]

BLACK: Color = (0.0, 0.0, 0.0, 1.0)
GREEN: Color = (0.0, 1.0, 0.0, 1.0)
DARK_GREEN: Color = (0.0, 0.5, 0.0, 1.0)
ORANGE_RED: Color = (1.0, 0.27, 0.0, 1.0)
YELLOW: Color = (1.0, 1.0, 0.0, 1.0)

PLAYER = "player"
CAMERA = "camera"

PLAYER_SPRITE_INDEX = 2
TREE_CHANCE = 20
ZOOM_STEP = 0.02
MIN_ZOOM = 1.0
MAX_ZOOM = 4.0
CAMERA_Z = 999.9

_KEY_DIRECTIONS: dict[str, Direction] = {
    "w": Direction.NORTH,
    "e": Direction.NORTH_EAST,
    "d": Direction.EAST,
    "c": Direction.SOUTH_EAST,
    "x": Direction.SOUTH,
    "z": Direction.SOUTH_WEST,
    "a": Direction.WEST,
    "q": Direction.NORTH_WEST,
}


class AppState(Enum):
    """The phases the game moves through."""

    LOADING = auto()
    RUNNING = auto()


class AppStage(Enum):
    """The ordered stages of one frame."""

    UPDATE = auto()
    PHYSICS = auto()
    VIEW = auto()


class ZoomDirection(Enum):
    """Which way the camera zooms."""

    IN = auto()
    OUT = auto()

    @property
    def step(self) -> float:
        return -ZOOM_STEP if self is ZoomDirection.IN else ZOOM_STEP


class _Random(Protocol):
    def randrange(self, stop: int) -> int: ...


@dataclass
class Camera:
    """The view onto the world."""

    position: Position = field(default_factory=Position)
    scale: float = MIN_ZOOM
    translation: tuple[float, float, float] = (0.0, 0.0, CAMERA_Z)


@dataclass
class Sprite:
    """A drawable sprite from the tile atlas."""

    index: int
    color: Color
    translation: tuple[float, float, float]


def next_state(
    state: AppState, atlas_loaded: bool, atlas_failed: bool, plants: Iterable[Plant]
) -> AppState:
    """Decide the state after a loading step.

    Moves from loading to running once the tile texture is loaded and plant
    data exists; a failed texture raises DataLoadError.
    """
    if state is not AppState.LOADING:
        return state
    if atlas_failed:
        raise DataLoadError("tileset texture failed to load")
    if not atlas_loaded or not any(True for _ in plants):
        return state
    return AppState.RUNNING


def _with_green(color: Color, green: float) -> Color:
    red, _, blue, alpha = color
    return (red, green, blue, alpha)


class World:
    """The tile grid, the player standing on it and the camera following it."""

    def __init__(
        self,
        atlas: TileSetAtlas | None = None,
        plants: Iterable[Plant] = (),
        *,
        tile_count: int = DEFAULT_TILE_COUNT,
        rng: _Random | None = None,
        tileset: TileSet | None = None,
        tiles: Mapping[Entity, Tile] | None = None,
    ) -> None:
        if tileset is None:
            tileset, spawned = spawn_tiles(tile_count)
            if tiles is None:
                tiles = spawned
        elif tiles is None:
            raise ValueError("tiles must be given together with a tile set")

        self.atlas = atlas if atlas is not None else TileSetAtlas()
        self.plants = sorted(plants, key=lambda plant: (str(plant.name), str(plant.id)))
        self.rng: _Random = rng if rng is not None else random.Random()
        self.tileset = tileset
        self.tiles: dict[Entity, Tile] = dict(tiles)
        self.player_position = Position()
        self.camera = Camera()
        self.sprites: dict[Entity, Sprite] = {
            PLAYER: Sprite(PLAYER_SPRITE_INDEX, YELLOW, (0.0, 0.0, 1.0))
        }
        self._tile_index = {tile.entity: tile for column in tileset.tiles for tile in column}
        self._moved: set[str] = {PLAYER, CAMERA}
        self._dirty: dict[Entity, None] = dict.fromkeys(self.tiles)
        self.tileset.track(PLAYER, self.player_position)
        self.tileset.track(CAMERA, self.camera.position)

    def handle_key(self, key: str) -> bool:
        """React to a pressed key; return whether the player moved."""
        direction = _KEY_DIRECTIONS.get(key.lower())
        if direction is None:
            # "s" sleeps in place; every other key is ignored.
            return False
        return self.move_player(direction)

    def move_player(self, direction: Direction) -> bool:
        """Step the player one tile if the target is accessible."""
        new_position = self.player_position + direction.offset
        log.info("player position x=%d y=%d", new_position.x, new_position.y)

        target = self.tileset.tile_at(new_position)
        if target is None:
            return False
        tile = self.tiles.get(target.entity)
        if tile is None or not tile.accessible:
            return False

        self.player_position = new_position
        self._moved.add(PLAYER)
        self.tileset.track(PLAYER, new_position)
        return True

    def zoom(self, direction: ZoomDirection) -> float:
        """Zoom the camera one step, within its limits; return the new scale."""
        self.camera.scale = min(max(self.camera.scale + direction.step, MIN_ZOOM), MAX_ZOOM)
        return self.camera.scale

    def focus_camera(self) -> None:
        """Move the camera onto the player if the player has moved."""
        if PLAYER not in self._moved:
            return
        self.camera.position = self.player_position
        self._moved.add(CAMERA)
        self.tileset.track(CAMERA, self.camera.position)

    def update_translation(self) -> None:
        """Bring screen translations in line with changed grid positions."""
        size = self.atlas.sprite_size
        for entity in self._moved:
            if entity == PLAYER:
                sprite = self.sprites[PLAYER]
                pos = self.player_position
                sprite.translation = (
                    float(pos.x * size),
                    float(pos.y * size),
                    sprite.translation[2],
                )
            elif entity == CAMERA:
                pos = self.camera.position
                self.camera.translation = (
                    float(pos.x * size),
                    float(pos.y * size),
                    self.camera.translation[2],
                )
        self._moved.clear()

    def render_tiles(self) -> int:
        """Give every changed tile a sprite; return how many were drawn."""
        if not self._dirty:
            return 0

        size = self.atlas.sprite_size
        half = len(self.tileset.tiles) // 2
        drawn = 0

        for entity in self._dirty:
            placed = self._tile_index.get(entity)
            if placed is None:
                log.warning("tried to fetch non-existing tile in tileset")
                continue

            is_tree = self.rng.randrange(TREE_CHANCE) == 0
            if is_tree:
                index, color = TileSprite.TREE.index, self._tree_color()
            else:
                index, color = TileSprite.GRASS.index, DARK_GREEN

            tile = self.tiles[entity]
            tile.revealed = True
            tile.accessible = not is_tree

            x = placed.position.x * size - half * size
            y = placed.position.y * size - half * size
            self.sprites[entity] = Sprite(index, color, (float(x), float(y), 0.0))
            drawn += 1

        self._dirty.clear()
        return drawn

    def _tree_color(self) -> Color:
        if not self.plants:
            raise ValueError("cannot pick a plant: no plant data")
        plant = self.plants[self.rng.randrange(len(self.plants))]
        match str(plant.name):
            case "Dandelion":
                return ORANGE_RED
            case "Stinging Nettle":
                return _with_green(GREEN, 1.0)
            case _:
                return _with_green(GREEN, 0.5)