"""The game application: loading assets and running the frame loop."""

from __future__ import annotations

import argparse
import logging
import random
import sys
from dataclasses import dataclass
from pathlib import Path

import pygame

from exodus.assets import DataLoadError, find_data_files, load_plants
from exodus.atlas import TileSetAtlas
from exodus.datatypes import Plant
from exodus.tileset import DEFAULT_TILE_COUNT
from exodus.world import BLACK, AppState, Color, Sprite, World, ZoomDirection, next_state

log = logging.getLogger(__name__)

DEFAULT_ASSETS_DIR = "assets"
DEFAULT_SEED = "<random seed>"
LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class WindowSettings:
    """How the game window looks."""

    title: str = "Exodus: The Morning Star"
    width: int = 1080
    height: int = 675
    vsync: bool = False
    resizable: bool = True
    clear_color: Color = BLACK


def _to_rgb(color: Color) -> tuple[int, int, int, int]:
    return tuple(round(max(0.0, min(channel, 1.0)) * 255) for channel in color)  # type: ignore[return-value]


class Game:
    """Loads game data, then runs the world until the player quits.

    A headless game runs a single frame without opening a window.
    """

    def __init__(
        self,
        assets_dir: str | Path = DEFAULT_ASSETS_DIR,
        *,
        headless: bool = False,
        seed: object = DEFAULT_SEED,
        tile_count: int = DEFAULT_TILE_COUNT,
        window: WindowSettings | None = None,
        atlas: TileSetAtlas | None = None,
    ) -> None:
        self.assets_dir = Path(assets_dir)
        self.headless = headless
        self.seed = seed
        self.tile_count = tile_count
        self.window = window if window is not None else WindowSettings()
        self.atlas = atlas if atlas is not None else TileSetAtlas()
        self.state = AppState.LOADING
        self.world: World | None = None
        self._plants: set[Plant] | None = None
        self._texture: pygame.Surface | None = None
        self._sprite_cache: dict[tuple[int, Color, int], pygame.Surface] = {}

    def run(self) -> AppState:
        """Run the game and return the state it ended in."""
        if self.headless:
            self._frame([], None)
            return self.state

        pygame.init()
        try:
            flags = pygame.RESIZABLE if self.window.resizable else 0
            screen = pygame.display.set_mode(
                (self.window.width, self.window.height), flags, vsync=int(self.window.vsync)
            )
            pygame.display.set_caption(self.window.title)
            while True:
                keys: list[str] = []
                for event in pygame.event.get():
                    if event.type == pygame.QUIT:
                        return self.state
                    if event.type == pygame.KEYDOWN:
                        if event.key == pygame.K_ESCAPE:
                            return self.state
                        keys.append(pygame.key.name(event.key))

                pressed = pygame.key.get_pressed()
                zoom = None
                if pressed[pygame.K_CARET]:
                    zoom = ZoomDirection.OUT if pressed[pygame.K_LSHIFT] else ZoomDirection.IN

                self._frame(keys, zoom)
                self._draw(screen)
                pygame.display.flip()
        finally:
            pygame.quit()

    def _frame(self, keys: list[str], zoom: ZoomDirection | None) -> None:
        if self.state is AppState.LOADING:
            self._load_step()
        if self.state is AppState.RUNNING and self.world is not None:
            world = self.world
            for key in keys:
                world.handle_key(key)
            if zoom is not None:
                world.zoom(zoom)
            world.focus_camera()
            world.update_translation()
            world.render_tiles()

    def _load_step(self) -> None:
        if self._plants is None:
            self._plants = load_plants(find_data_files(self.assets_dir / "data"))

        texture_path = self.assets_dir / self.atlas.texture
        if self.headless:
            loaded = texture_path.is_file()
            failed = not loaded
        else:
            failed = False
            if self._texture is None:
                try:
                    self._texture = pygame.image.load(str(texture_path)).convert_alpha()
                except (pygame.error, OSError) as exc:
                    log.error("failed to load tileset texture: %s", exc)
                    failed = True
            loaded = self._texture is not None

        self.state = next_state(self.state, loaded, failed, self._plants)
        if self.state is AppState.RUNNING:
            self.world = World(
                self.atlas,
                self._plants,
                tile_count=self.tile_count,
                rng=random.Random(self.seed),
            )

    def _draw(self, screen: pygame.Surface) -> None:
        screen.fill(_to_rgb(self.window.clear_color))
        world = self.world
        if world is None or self._texture is None:
            return

        width, height = screen.get_size()
        scale = world.camera.scale
        size = max(1, round(world.atlas.sprite_size / scale))
        cam_x, cam_y, _ = world.camera.translation

        for sprite in sorted(world.sprites.values(), key=lambda s: s.translation[2]):
            x, y, _ = sprite.translation
            left = width / 2 + (x - cam_x) / scale - size / 2
            top = height / 2 - (y - cam_y) / scale - size / 2
            if left + size < 0 or top + size < 0 or left > width or top > height:
                continue
            screen.blit(self._sprite_surface(sprite, size), (left, top))

    def _sprite_surface(self, sprite: Sprite, size: int) -> pygame.Surface:
        key = (sprite.index, sprite.color, size)
        surface = self._sprite_cache.get(key)
        if surface is None:
            assert self._texture is not None
            rect = pygame.Rect(self.atlas.sprite_rect(sprite.index))
            surface = pygame.transform.scale(self._texture.subsurface(rect).copy(), (size, size))
            surface.fill(_to_rgb(sprite.color), special_flags=pygame.BLEND_RGBA_MULT)
            self._sprite_cache[key] = surface
        return surface


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Run the game.")
    parser.add_argument("--assets", default=DEFAULT_ASSETS_DIR)
    parser.add_argument("--headless", action="store_true")
    parser.add_argument("--seed", default=DEFAULT_SEED)
    parser.add_argument("--tile-count", type=int, default=DEFAULT_TILE_COUNT)
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format=LOG_FORMAT)
    game = Game(
        args.assets, headless=args.headless, seed=args.seed, tile_count=args.tile_count
    )
    try:
        game.run()
    except (DataLoadError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())