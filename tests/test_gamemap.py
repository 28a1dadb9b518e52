import random

import pytest

from polytopia.gamemap import CAPITAL_SPACING, MARGIN, GameMap
from polytopia.ids import (
    BuildingID,
    ResourceID,
    TerrainAlterationID,
    TerrainID,
    UnitID,
    possible_alterations,
    possible_resources,
)
from polytopia.unit import Unit
from polytopia.vec import Vec2

_REAL_TERRAINS = {
    TerrainID.FIELD,
    TerrainID.MOUNTAIN,
    TerrainID.WATER,
    TerrainID.OCEAN,
}


def _random_map(seed, side=20):
    game_map = GameMap(side, rng=random.Random(seed))
    game_map.set_random_map()
    return game_map


def _cells(game_map):
    return [(i, j) for i in range(game_map.size) for j in range(game_map.size)]


def test_new_map_tiles_are_fields():
    game_map = GameMap(5)
    assert len(game_map.tiles) == 25
    assert all(t.terrain is TerrainID.FIELD for t in game_map.tiles)


def test_negative_side_rejected():
    with pytest.raises(ValueError):
        GameMap(-1)


@pytest.mark.parametrize("a", range(0, 42, 5))
def test_linearise_round_trip(a):
    game_map = GameMap(7)
    pos = game_map.delinearise(a)
    assert game_map.linearise(pos.x, pos.y) == a


def test_delinearise_value():
    game_map = GameMap(7)
    assert game_map.delinearise(7 * 3 + 2) == Vec2(2, 3)


def test_is_in_bounds():
    game_map = GameMap(4)
    assert game_map.is_in_bounds(0, 0)
    assert game_map.is_in_bounds(3, 3)
    assert not game_map.is_in_bounds(4, 0)
    assert not game_map.is_in_bounds(0, -1)


@pytest.mark.parametrize("pos", [(-1, 0), (0, -1), (4, 0), (0, 4)])
def test_tile_at_out_of_range(pos):
    with pytest.raises(IndexError):
        GameMap(4).tile_at(*pos)


def test_tile_at_matches_linear_storage():
    game_map = GameMap(4)
    assert game_map.tile_at(1, 2) is game_map.tiles[game_map.linearise(1, 2)]


def test_prand_single_weight():
    game_map = GameMap(1, rng=random.Random(1))
    assert all(game_map.prand([0, 5, 0]) == 1 for _ in range(50))


def test_prand_range():
    game_map = GameMap(1, rng=random.Random(2))
    results = {game_map.prand([1, 1, 1]) for _ in range(300)}
    assert results == {0, 1, 2}


def test_prand_zero_total():
    with pytest.raises(ValueError):
        GameMap(1).prand([0, 0])


def test_random_terrains_are_real_terrains():
    game_map = GameMap(10, rng=random.Random(3))
    game_map.set_random_terrains()
    assert len(game_map.tiles) == 100
    assert {t.terrain for t in game_map.tiles} <= _REAL_TERRAINS


def test_naive_map_is_consistent():
    game_map = GameMap(12, rng=random.Random(4))
    game_map.set_random_map_naive()
    for tile in game_map.tiles:
        assert tile.terrain in _REAL_TERRAINS
        assert tile.alteration in possible_alterations(tile.terrain)
        assert tile.resource in possible_resources(tile.terrain, tile.alteration)


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_random_map_fills_every_tile(seed):
    game_map = _random_map(seed)
    assert len(game_map.tiles) == 400
    assert {t.terrain for t in game_map.tiles} <= _REAL_TERRAINS


@pytest.mark.parametrize("seed", [0, 5])
def test_random_map_contents_consistent(seed):
    game_map = _random_map(seed)
    for tile in game_map.tiles:
        assert tile.alteration in possible_alterations(tile.terrain)
        assert tile.resource in possible_resources(tile.terrain, tile.alteration)


@pytest.mark.parametrize("seed", [0, 7])
def test_random_map_capitals(seed):
    game_map = _random_map(seed)
    anchors = range(MARGIN, game_map.size - MARGIN, CAPITAL_SPACING)
    capitals = [
        (i, j)
        for i, j in _cells(game_map)
        if game_map.tile_at(i, j).building is BuildingID.CAPITAL
    ]
    assert len(capitals) == len(anchors) ** 2
    for i, j in capitals:
        tile = game_map.tile_at(i, j)
        assert tile.terrain is TerrainID.FIELD
        assert tile.resource is ResourceID.NONE
        assert tile.alteration is TerrainAlterationID.NONE
        assert any(abs(i - a) <= 1 for a in anchors)
        assert any(abs(j - a) <= 1 for a in anchors)


@pytest.mark.parametrize("seed", [0, 9])
def test_water_touches_field_and_ocean_does_not(seed):
    game_map = _random_map(seed)

    def touches_field(i, j):
        return any(
            game_map.is_in_bounds(i + k, j + l)
            and game_map.tile_at(i + k, j + l).terrain is TerrainID.FIELD
            for k, l in ((-1, 0), (1, 0), (0, -1), (0, 1))
        )

    for i, j in _cells(game_map):
        terrain = game_map.tile_at(i, j).terrain
        if terrain is TerrainID.OCEAN:
            assert not touches_field(i, j)


def test_random_map_reproducible():
    first = _random_map(11)
    second = _random_map(11)
    assert first.tiles == second.tiles


def test_random_map_too_small_has_no_capital():
    game_map = _random_map(0, side=3)
    assert all(t.terrain is TerrainID.NONE for t in game_map.tiles)
    assert all(t.building is BuildingID.NONE for t in game_map.tiles)


def test_random_map_keeps_units():
    game_map = GameMap(20, rng=random.Random(6))
    unit = Unit(game_map, kind=UnitID.WARRIOR)
    game_map.tile_at(1, 1).unit = unit
    game_map.set_random_map()
    assert game_map.tile_at(1, 1).unit is unit


def test_move_unit():
    game_map = GameMap(5)
    unit = Unit(game_map, kind=UnitID.ARCHER)
    game_map.tile_at(0, 0).unit = unit
    game_map.move_unit(0, 0, 2, 3)
    assert game_map.tile_at(2, 3).unit is unit
    assert game_map.tile_at(0, 0).unit is None


def test_move_unit_to_occupied_tile():
    game_map = GameMap(5)
    first = Unit(game_map, kind=UnitID.ARCHER)
    second = Unit(game_map, kind=UnitID.GIANT)
    game_map.tile_at(0, 0).unit = first
    game_map.tile_at(1, 0).unit = second
    with pytest.raises(ValueError):
        game_map.move_unit(0, 0, 1, 0)
    assert game_map.tile_at(0, 0).unit is first
    assert game_map.tile_at(1, 0).unit is second