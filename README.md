# polytopia

The game model of a small tile-based, turn-based strategy game. It covers
terrain and resource identifiers, tiles, units, players with their own
discovered area, a technology tree, and random map generation.

The package has no dependencies outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Overview

- `polytopia.ids`: the `IntEnum`s `TerrainID`, `TerrainAlterationID`,
  `ResourceID`, `BuildingID` and `UnitID`, each with a `NONE` member.
  `id_of()` gives one flat index for any identifier (`-1` for `NONE`, and
  `TypeError` for anything that is not one of these enums).
  `possible_alterations()` and `possible_resources()` list what may be placed
  on a given terrain.
- `polytopia.vec`: `Vec2`, an immutable, ordered 2D vector with `x` and `y`.
  It supports `+`, `-`, multiplication by a number or component-wise by
  another `Vec2`, `to_tuple()` and unpacking. Integer vectors stay integer:
  scaling truncates. `str()` gives `( x, y )`. The constants `UNIT`,
  `UNIT_X` and `UNIT_Y` are provided.
- `polytopia.techtree`: `TechTree`, whose `parent_node` is an unnamed
  `TechNode`. Each `TechNode` has a `name`, an `available` flag and
  `children`; `add_child(name)` creates, appends and returns a new node.
- `polytopia.tile`: `Tile`, a dataclass holding `terrain` (field by default),
  `alteration`, `resource`, `building` and `unit` for one square.
  `unit_type()` returns the kind of the unit there, or `UnitID.NONE`.
- `polytopia.unit`: `Unit`, with `game_map`, `owner`, `kind` and `health`
  (0 by default). `attack(target)` takes 10 health from the target and
  returns whether it died; `is_dead()` is true at 0 health or below.
- `polytopia.gamemap`: `GameMap(side, rng=None)`, a square grid of tiles
  indexed by column `i` and row `j`. It has random generation
  (`set_random_map()`, `set_random_map_naive()`, `set_random_terrains()`),
  a weighted random pick `prand(probas)`, the coordinate helpers
  `linearise()`, `delinearise()` and `is_in_bounds()`, `tile_at()` (which
  raises `IndexError` outside the map) and `move_unit()` (which raises
  `ValueError` if the destination already holds a unit). Pass a
  `random.Random` as `rng` for reproducible maps.
- `polytopia.player`: `Player(game_map)`. It tracks which tiles the player
  has discovered (`discover()`, `is_discovered()`), moves its own units with
  `move_unit()` and attacks with `attack_from()`, removing a defender that
  dies. Both raise `ValueError` when the expected units are missing.

`set_random_map()` places capitals every 6 tiles, each surrounded by fields,
grows land and water outward from them, turns water with no adjacent field
into ocean, and scatters forests, mountains and resources over the fields.

## Example

```python
import random

from polytopia.gamemap import GameMap
from polytopia.ids import UnitID
from polytopia.player import Player
from polytopia.unit import Unit

world = GameMap(20, rng=random.Random(1))
world.set_random_map()

me = Player(world)
for i in range(10):
    for j in range(20):
        me.discover(i, j)

world.tile_at(1, 1).unit = Unit(world, me, UnitID.WARRIOR)
me.move_unit(1, 1, 2, 1)
print(world.tile_at(2, 1).unit_type().name)  # WARRIOR
```

## What it does not do

This package is the game model only. It has no window, drawing or images, no
input handling and no command to start a game; turns, rendering of the map,
borders and the technology tree are left to the program that uses it.