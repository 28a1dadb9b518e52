"""Identifiers for terrains, alterations, resources, buildings and units."""

from __future__ import annotations

from enum import IntEnum


class TerrainID(IntEnum):
    NONE = 0
    FIELD = 1
    MOUNTAIN = 2
    WATER = 3
    OCEAN = 4


class TerrainAlterationID(IntEnum):
    NONE = 0
    FOREST = 1


class ResourceID(IntEnum):
    NONE = 0
    FRUIT = 1
    CROP = 2
    WILD_ANIMAL = 3
    METAL = 4
    FISH = 5
    WHALE = 6


class BuildingID(IntEnum):
    NONE = 0
    CAPITAL = 1
    FARM = 2
    FORGE = 3
    LUMBER_HUT = 4
    MINE = 5
    PORT = 6
    SAWMILL = 7
    WINDMILL = 8


class UnitID(IntEnum):
    NONE = 0
    WARRIOR = 1
    ARCHER = 2
    CATAPULT = 3
    RIDER = 4
    KNIGHT = 5
    DEFENDER = 6
    CLOAK = 7
    SWORDSMAN = 8
    MIND_BENDER = 9
    GIANT = 10


NUMBER_OF_TERRAINS = 4
NUMBER_OF_ALTERATIONS = 1
NUMBER_OF_RESOURCES = 6
NUMBER_OF_BUILDINGS = 8
NUMBER_OF_UNITS = 10
NUMBER_OF_IDS = (
    NUMBER_OF_TERRAINS
    + NUMBER_OF_ALTERATIONS
    + NUMBER_OF_RESOURCES
    + NUMBER_OF_BUILDINGS
    + NUMBER_OF_UNITS
)

_OFFSETS: dict[type, int] = {
    TerrainID: 0,
    TerrainAlterationID: NUMBER_OF_TERRAINS,
    ResourceID: NUMBER_OF_TERRAINS + NUMBER_OF_ALTERATIONS,
    BuildingID: NUMBER_OF_TERRAINS + NUMBER_OF_ALTERATIONS + NUMBER_OF_RESOURCES,
    UnitID: NUMBER_OF_TERRAINS
    + NUMBER_OF_ALTERATIONS
    + NUMBER_OF_RESOURCES
    + NUMBER_OF_BUILDINGS,
}


def id_of(ident: IntEnum) -> int:
    """Return the global index of an identifier, or -1 for a NONE value."""
    offset = _OFFSETS.get(type(ident))
    if offset is None:
        raise TypeError(f"not a game identifier: {ident!r}")
    if ident.value == 0:
        return -1
    return ident.value - 1 + offset


def possible_alterations(terrain: TerrainID) -> list[TerrainAlterationID]:
    """Alterations that may appear on the given terrain."""
    if terrain is TerrainID.FIELD:
        return [TerrainAlterationID.NONE, TerrainAlterationID.FOREST]
    return [TerrainAlterationID.NONE]


def possible_resources(
    terrain: TerrainID, alteration: TerrainAlterationID
) -> list[ResourceID]:
    """Resources that may appear on the given terrain and alteration."""
    if terrain is TerrainID.NONE:
        return [ResourceID.NONE]
    if terrain is TerrainID.FIELD:
        if alteration is TerrainAlterationID.FOREST:
            return [ResourceID.NONE, ResourceID.WILD_ANIMAL]
        return [ResourceID.NONE, ResourceID.FRUIT, ResourceID.CROP]
    if terrain is TerrainID.MOUNTAIN:
        return [ResourceID.NONE, ResourceID.METAL]
    if terrain is TerrainID.WATER:
        return [ResourceID.NONE, ResourceID.FISH]
    if terrain is TerrainID.OCEAN:
        return [ResourceID.NONE, ResourceID.FISH, ResourceID.WHALE]
    return []