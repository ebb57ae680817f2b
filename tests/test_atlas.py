import pytest

from exodus.atlas import TileSetAtlas, TileSprite


def test_sprite_indices():
    atlas = TileSetAtlas()
    assert TileSprite.TREE.index == 5
    assert TileSprite.GRASS.index == 249
    assert atlas.sprite_rect(TileSprite.TREE.index) == atlas.sprite_rect(5)
    assert atlas.sprite_rect(TileSprite.GRASS.index) == atlas.sprite_rect(249)


def test_default_atlas():
    atlas = TileSetAtlas()
    assert atlas.texture == "sprite_64x64.png"
    assert atlas.sprite_size == 64
    assert atlas.sprite_count == 16 * 16


def test_first_sprite_rect():
    assert TileSetAtlas().sprite_rect(0) == (0, 0, 64, 64)


def test_rects_are_unique_and_inside_texture():
    atlas = TileSetAtlas()
    width = atlas.columns * atlas.sprite_size
    height = atlas.rows * atlas.sprite_size
    rects = [atlas.sprite_rect(i) for i in range(atlas.sprite_count)]
    assert len(set(rects)) == atlas.sprite_count
    for x, y, w, h in rects:
        assert 0 <= x and x + w <= width
        assert 0 <= y and y + h <= height
        assert w == h == atlas.sprite_size


def test_tile_sprites_have_rects():
    atlas = TileSetAtlas()
    for sprite in TileSprite:
        assert atlas.sprite_rect(sprite.index)[2:] == (64, 64)


@pytest.mark.parametrize("index", [-1, 256])
def test_sprite_rect_out_of_range(index):
    with pytest.raises(IndexError):
        TileSetAtlas().sprite_rect(index)


@pytest.mark.parametrize("size", [0, 256])
def test_invalid_sprite_size(size):
    with pytest.raises(ValueError):
        TileSetAtlas(sprite_size=size)