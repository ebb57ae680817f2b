import random
import uuid

import pytest

from exodus.assets import DataLoadError
from exodus.atlas import TileSetAtlas, TileSprite
from exodus.datatypes import Habit, Plant
from exodus.geometry import Direction, Position
from exodus.properties import MaxHeight, Name
from exodus.tileset import spawn_tiles
from exodus.world import (
    CAMERA,
    DARK_GREEN,
    GREEN,
    MAX_ZOOM,
    MIN_ZOOM,
    ORANGE_RED,
    PLAYER,
    AppState,
    World,
    ZoomDirection,
    next_state,
)


class _AlwaysZero:
    def randrange(self, stop):
        return 0


def _plant(name):
    return Plant(
        id=uuid.uuid4(),
        name=Name(name),
        habit=Habit.HERB,
        max_height=MaxHeight(30),
    )


def _open_world(count=3):
    tileset, tiles = spawn_tiles(count)
    for tile in tiles.values():
        tile.accessible = True
    return World(plants=[_plant("Dandelion")], tileset=tileset, tiles=tiles)


def test_next_state_moves_to_running():
    assert next_state(AppState.LOADING, True, False, [_plant("Dandelion")]) is AppState.RUNNING


def test_next_state_waits_for_atlas_and_plants():
    assert next_state(AppState.LOADING, False, False, [_plant("Dandelion")]) is AppState.LOADING
    assert next_state(AppState.LOADING, True, False, []) is AppState.LOADING


def test_next_state_failed_atlas_raises():
    with pytest.raises(DataLoadError):
        next_state(AppState.LOADING, False, True, [_plant("Dandelion")])


def test_next_state_running_stays_running():
    assert next_state(AppState.RUNNING, False, False, []) is AppState.RUNNING


def test_move_onto_accessible_tile():
    world = _open_world()
    assert world.move_player(Direction.NORTH) is True
    assert world.player_position == Position() + Direction.NORTH.offset
    assert world.tileset.entities[PLAYER] == world.player_position


def test_move_onto_inaccessible_tile_is_blocked():
    tileset, tiles = spawn_tiles(3)
    world = World(plants=[_plant("Oak")], tileset=tileset, tiles=tiles)
    assert world.move_player(Direction.EAST) is False
    assert world.player_position == Position()


def test_move_off_the_grid_is_blocked():
    world = _open_world(1)
    assert world.move_player(Direction.SOUTH_WEST) is False
    assert world.player_position == Position()


def test_handle_key_maps_directions():
    world = _open_world()
    assert world.handle_key("q") is True
    assert world.player_position == Direction.NORTH_WEST.offset


def test_handle_key_sleep_and_unknown_do_nothing():
    world = _open_world()
    assert world.handle_key("s") is False
    assert world.handle_key("m") is False
    assert world.player_position == Position()


def test_zoom_is_clamped():
    world = _open_world()
    assert world.zoom(ZoomDirection.IN) == MIN_ZOOM
    for _ in range(500):
        world.zoom(ZoomDirection.OUT)
    assert world.camera.scale == MAX_ZOOM


def test_zoom_out_then_in_returns():
    world = _open_world()
    world.zoom(ZoomDirection.OUT)
    assert world.camera.scale > MIN_ZOOM
    assert world.zoom(ZoomDirection.IN) == pytest.approx(MIN_ZOOM)


def test_camera_follows_player_and_translations_update():
    world = _open_world()
    world.move_player(Direction.NORTH)
    world.focus_camera()
    world.update_translation()
    size = world.atlas.sprite_size
    assert world.camera.position == world.player_position
    assert world.tileset.entities[CAMERA] == world.player_position
    assert world.sprites[PLAYER].translation[:2] == (0.0, float(size))
    assert world.camera.translation[:2] == (0.0, float(size))


def test_player_sprite_keeps_depth():
    world = _open_world()
    world.move_player(Direction.EAST)
    world.update_translation()
    assert world.sprites[PLAYER].translation[2] == 1.0


def test_render_tiles_reveals_every_tile_once():
    world = World(plants=[_plant("Oak")], tile_count=5, rng=random.Random(7))
    assert world.render_tiles() == len(world.tiles)
    assert all(tile.revealed for tile in world.tiles.values())
    for entity, tile in world.tiles.items():
        sprite = world.sprites[entity]
        assert sprite.index in (TileSprite.TREE.index, TileSprite.GRASS.index)
        assert tile.accessible == (sprite.index == TileSprite.GRASS.index)
    assert world.render_tiles() == 0


def test_render_tiles_is_deterministic_for_a_seed():
    first = World(plants=[_plant("Oak")], tile_count=5, rng=random.Random(3))
    second = World(plants=[_plant("Oak")], tile_count=5, rng=random.Random(3))
    first.render_tiles()
    second.render_tiles()
    assert [s.index for s in first.sprites.values()] == [
        s.index for s in second.sprites.values()
    ]


def test_grass_tiles_are_dark_green():
    world = World(plants=[_plant("Oak")], tile_count=5, rng=random.Random(11))
    world.render_tiles()
    grass = [s for e, s in world.sprites.items() if e != PLAYER and s.index == TileSprite.GRASS.index]
    assert grass
    assert all(s.color == DARK_GREEN for s in grass)


def test_dandelion_trees_are_orange_red():
    world = World(plants=[_plant("Dandelion")], tile_count=3, rng=_AlwaysZero())
    world.render_tiles()
    assert all(world.sprites[e].color == ORANGE_RED for e in world.tiles)
    assert not any(tile.accessible for tile in world.tiles.values())


def test_other_trees_are_darker_green():
    world = World(plants=[_plant("Oak")], tile_count=3, rng=_AlwaysZero())
    world.render_tiles()
    expected = (GREEN[0], 0.5, GREEN[2], GREEN[3])
    assert all(world.sprites[e].color == expected for e in world.tiles)


def test_stinging_nettle_trees_stay_green():
    world = World(plants=[_plant("Stinging Nettle")], tile_count=1, rng=_AlwaysZero())
    world.render_tiles()
    assert world.sprites[0].color == GREEN


def test_tree_without_plants_raises():
    world = World(plants=[], tile_count=1, rng=_AlwaysZero())
    with pytest.raises(ValueError):
        world.render_tiles()


def test_centre_tile_sits_at_origin():
    world = World(plants=[_plant("Oak")], tile_count=3, rng=random.Random(1))
    world.render_tiles()
    centre = world.tileset.tile_at(Position())
    assert world.sprites[centre.entity].translation == (0.0, 0.0, 0.0)


def test_tiles_required_with_tileset():
    tileset, _ = spawn_tiles(1)
    with pytest.raises(ValueError):
        World(tileset=tileset)


def test_custom_atlas_scales_translation():
    tileset, tiles = spawn_tiles(3)
    for tile in tiles.values():
        tile.accessible = True
    atlas = TileSetAtlas(sprite_size=32)
    world = World(atlas, [_plant("Oak")], tileset=tileset, tiles=tiles)
    world.move_player(Direction.WEST)
    world.update_translation()
    assert world.sprites[PLAYER].translation[0] == -float(atlas.sprite_size)