# Exodus: The Morning Star

A small tile-based exploration game. The player walks across a square map of
tiles. Some tiles hold trees, and trees block the way. The game reads its plant
catalogue from TOML data files. A second command exports that catalogue from an
SQLite database.

## Installation

```
pip install .
```

To run the tests, install the `test` extra and run `pytest`:

```
pip install .[test]
pytest
```

## Playing

```
exodus
```

Options:

| Option              | Default           | Meaning                                         |
|---------------------|-------------------|-------------------------------------------------|
| `--assets DIR`      | `assets`          | directory that holds the sprite sheet and data  |
| `--headless`        | off               | run a single frame without opening a window     |
| `--seed SEED`       | `<random seed>`   | seed for the random placement of trees          |
| `--tile-count N`    | `101`             | width and height of the map, in tiles           |

The game needs two things in the assets directory:

- `sprite_64x64.png`: a sprite sheet of 16 × 16 sprites, each 64 pixels square.
  The player uses sprite 2, trees use sprite 5 and grass uses sprite 249.
- at least one plant file: a `*.toml` file anywhere below `data/`.

The game waits in its loading state until both are there. If the sprite sheet
cannot be loaded, or a data file is malformed, the command prints an error and
exits with status 1.

When loading is done, the map opens with the player at its centre. Each tile
has a 1 in 20 chance of holding a tree. Each tree is coloured by a plant picked
at random from the catalogue: orange-red for "Dandelion", bright green for
"Stinging Nettle" and a paler green for any other plant. All other tiles are grass.

Controls:

| Key         | Action             |
|-------------|--------------------|
| `W`         | move north         |
| `E`         | move north-east    |
| `D`         | move east          |
| `C`         | move south-east    |
| `X`         | move south         |
| `Z`         | move south-west    |
| `A`         | move west          |
| `Q`         | move north-west    |
| `^`         | zoom in            |
| `Shift`+`^` | zoom out           |
| `Esc`       | quit               |

The player cannot move onto a tree or off the map. The camera follows the player.
The zoom scale stays between 1 and 4 and starts at 1, the closest view, so you
must zoom out before you can zoom in again. `S` and every other key do nothing.

## Managing game data

The plant catalogue lives in an SQLite database. Each table whose name begins
with `type_` holds one kind of object. The only kind is plant, in a table named
`type_plant` or `type_plants`. Each row has these columns:

- `id`: a random (version 4) UUID
- `name`: the plant's name
- `habit`: one of `tree`, `shrub`, `grass`, `vine` or `herb`
- `max_height_cm`: a height in centimetres, from 1 to 65535

To write the database out as TOML files, run:

```
exodus-data
```

Options:

| Option            | Default                     |
|-------------------|-----------------------------|
| `--database PATH` | `./data/database.sqlite3`   |
| `--assets DIR`    | `./assets/data`             |

Each object is written to `<assets>/<kind>/<name in lower case>.toml`, where
`<kind>` is the table name without the `type_` prefix. A file is rewritten only
if its content has changed. Any other file under the assets directory is
deleted. If a row is invalid, the command prints an error and exits with status 1.

## Using the library

```python
import random

from exodus.datatypes import Habit, Plant, deserialize, serialize
from exodus.geometry import Direction, Position
from exodus.tileset import spawn_tiles
from exodus.world import World

tileset, tiles = spawn_tiles(101)            # tile set, and entity -> Tile
centre = tileset.tile_at(Position(0, 0))     # positions count from the centre
step = Position(0, 0) + Direction.NORTH.offset

world = World(plants=[...], tile_count=11, rng=random.Random(1))
world.render_tiles()                         # places trees and grass
world.move_player(Direction.NORTH)           # True if the player moved
```

Modules:

- `exodus.datatypes`: `Plant`, `Habit`, `DataType`, and `serialize` /
  `deserialize`. They convert between a plant and its mapping form, which holds a
  `"type"` key. `deserialize` raises `DataError` for an unknown or missing
  `type`. `Habit.parse` raises `PlantError` for an unknown habit.
- `exodus.properties`: `Name` and `MaxHeight`.
- `exodus.errors`: `DataError` and its subclass `PlantError`.
- `exodus.sqlrows`: `parse_id`, `plant_from_row` and `data_from_row`. They build
  data from database rows.
- `exodus.datamanager`: `type_tables`, `objects` and `sync`, which do the work of
  the `exodus-data` command.
- `exodus.assets`: `find_data_files` and `load_plants`. `load_plants` raises
  `DataLoadError` for a bad file.
- `exodus.geometry`: `Position` and `Direction`.
- `exodus.tile`: `Tile` and `Matter`.
- `exodus.tileset`: `TileSet`, `TileSetTile` and `spawn_tiles`.
- `exodus.atlas`: `TileSetAtlas` and `TileSprite`.
- `exodus.world`: `World`, `Camera`, `Sprite`, `AppState`, `AppStage`,
  `ZoomDirection` and `next_state`.
- `exodus.game`: `Game`, `WindowSettings` and `main`.

## What it does not do

The package ships no sprite sheet, data files or database; you supply them.
The map has no fog of war: every tile is shown once the game starts. Sleeping,
or waiting a turn, is not implemented. Apart from walking and zooming, the game
has no other actions, goals or saved games.