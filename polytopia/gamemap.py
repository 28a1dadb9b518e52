"""The square game map and its random generators."""

from __future__ import annotations

import random
from collections import deque
from typing import Optional, Sequence

from .ids import (
    NUMBER_OF_TERRAINS,
    BuildingID,
    ResourceID,
    TerrainAlterationID,
    TerrainID,
    possible_alterations,
    possible_resources,
)
from .tile import Tile
from .vec import Vec2

CAPITAL_SPACING = 6
UNCERTAIN_SPACING = 1
MARGIN = UNCERTAIN_SPACING + 1

_ORTHOGONAL = ((-1, 0), (1, 0), (0, -1), (0, 1))
_AROUND = tuple((k, l) for k in (-1, 0, 1) for l in (-1, 0, 1))


class GameMap:
    """A square grid of tiles, indexed by column i and row j."""

    def __init__(self, side: int = 0, rng: Optional[random.Random] = None) -> None:
        if side < 0:
            raise ValueError(f"map side must not be negative: {side}")
        self.size = side
        self.tiles: list[Tile] = [Tile() for _ in range(side * side)]
        self._rng = rng if rng is not None else random.Random()

    def prand(self, probas: Sequence[int]) -> int:
        """Pick an index at random, weighted by the given probabilities."""
        total = sum(probas)
        if total <= 0:
            raise ValueError("probabilities must have a positive sum")
        r = self._rng.randrange(total)
        cumulative = 0
        for index, weight in enumerate(probas):
            cumulative += weight
            if r < cumulative:
                return index
        return 0

    def set_random_terrains(self) -> None:
        """Give every tile a uniformly random terrain."""
        for tile in self.tiles:
            tile.terrain = TerrainID(1 + self._rng.randrange(NUMBER_OF_TERRAINS))

    def set_random_map_naive(self) -> None:
        """Fill every tile with random, mutually consistent contents."""
        probas = [25] * NUMBER_OF_TERRAINS
        for tile in self.tiles:
            tile.terrain = TerrainID(1 + self.prand(probas))
            tile.alteration = self._rng.choice(possible_alterations(tile.terrain))
            tile.resource = self._rng.choice(
                possible_resources(tile.terrain, tile.alteration)
            )

    def set_random_map(self) -> None:
        """Generate a map of capitals surrounded by grown land and water."""
        for tile in self.tiles:
            tile.terrain = TerrainID.NONE
            tile.alteration = TerrainAlterationID.NONE
            tile.resource = ResourceID.NONE
            tile.building = BuildingID.NONE

        exploration: deque[tuple[int, int]] = deque()
        visited: set[tuple[int, int]] = set()
        self._place_capitals(exploration, visited)
        self._grow_land(exploration, visited)
        self._mark_oceans()
        self._decorate_fields()

    def _place_capitals(
        self, exploration: deque[tuple[int, int]], visited: set[tuple[int, int]]
    ) -> None:
        spread = 2 * UNCERTAIN_SPACING + 1
        for i in range(MARGIN, self.size - MARGIN, CAPITAL_SPACING):
            for j in range(MARGIN, self.size - MARGIN, CAPITAL_SPACING):
                ci = i + self._rng.randrange(spread) - UNCERTAIN_SPACING
                cj = j + self._rng.randrange(spread) - UNCERTAIN_SPACING
                self.tile_at(ci, cj).building = BuildingID.CAPITAL
                for k in range(-2, 3):
                    for l in range(-2, 3):
                        pos = (ci + k, cj + l)
                        if k * k + l * l < 4:
                            self.tile_at(*pos).terrain = TerrainID.FIELD
                            visited.add(pos)
                        else:
                            exploration.append(pos)

    def _grow_land(
        self, exploration: deque[tuple[int, int]], visited: set[tuple[int, int]]
    ) -> None:
        while exploration:
            pos = exploration.popleft()
            if pos in visited or not self.is_in_bounds(*pos):
                continue
            i, j = pos
            nb_field = 0
            nb_water = 0
            for k, l in _ORTHOGONAL:
                neighbour = (i + k, j + l)
                if neighbour not in visited:
                    continue
                terrain = self.tile_at(*neighbour).terrain
                if terrain is TerrainID.FIELD:
                    nb_field += 1
                elif terrain is TerrainID.WATER:
                    nb_water += 1
            chosen = self.prand([6 + nb_field * 3, 3 + nb_water * 10])
            self.tile_at(i, j).terrain = (
                TerrainID.FIELD if chosen == 0 else TerrainID.WATER
            )
            visited.add(pos)
            exploration.extend((i + k, j + l) for k, l in _AROUND)

    def _mark_oceans(self) -> None:
        """Turn water with no orthogonally adjacent field into ocean."""
        for i in range(self.size):
            for j in range(self.size):
                tile = self.tile_at(i, j)
                if tile.terrain is not TerrainID.WATER:
                    continue
                has_field = any(
                    self.is_in_bounds(i + k, j + l)
                    and self.tile_at(i + k, j + l).terrain is TerrainID.FIELD
                    for k, l in _ORTHOGONAL
                )
                if not has_field:
                    tile.terrain = TerrainID.OCEAN

    def _decorate_fields(self) -> None:
        """Randomly add forests, mountains and resources to plain fields."""
        for i in range(self.size):
            for j in range(self.size):
                tile = self.tile_at(i, j)
                if (
                    tile.terrain is not TerrainID.FIELD
                    or tile.building is BuildingID.CAPITAL
                ):
                    continue
                alteration = self.prand([20, 5, 2])
                if alteration == 1:
                    tile.alteration = TerrainAlterationID.FOREST
                    if self.prand([1, 1]) == 1:
                        tile.resource = ResourceID.WILD_ANIMAL
                elif alteration == 2:
                    tile.terrain = TerrainID.MOUNTAIN
                    if self.prand([1, 1]) == 1:
                        tile.resource = ResourceID.METAL
                else:
                    tile.resource = ResourceID(self.prand([6, 3, 1]))

    def delinearise(self, a: int) -> Vec2:
        """Map coordinates of the tile at flat index a."""
        return Vec2(a % self.size, a // self.size)

    def linearise(self, i: int, j: int) -> int:
        """Flat index of the tile at (i, j)."""
        return i + self.size * j

    def tile_at(self, i: int, j: int) -> Tile:
        """The tile at (i, j); raises IndexError outside the map."""
        if not self.is_in_bounds(i, j):
            raise IndexError(
                f"index out of range: ({i}, {j}), size: {self.size}"
            )
        return self.tiles[self.linearise(i, j)]

    def move_unit(self, i: int, j: int, i_dest: int, j_dest: int) -> None:
        """Move the unit at (i, j) to an empty destination tile."""
        tile = self.tile_at(i, j)
        destination = self.tile_at(i_dest, j_dest)
        if destination.unit is not None:
            raise ValueError("destination tile already has a unit")
        destination.unit = tile.unit
        tile.unit = None

    def is_in_bounds(self, i: int, j: int) -> bool:
        return 0 <= i < self.size and 0 <= j < self.size