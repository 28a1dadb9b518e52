"""A single square of the map and what it contains."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .ids import BuildingID, ResourceID, TerrainAlterationID, TerrainID, UnitID
from .unit import Unit


@dataclass
class Tile:
    """Terrain, alteration, resource, building and unit of one square."""

    terrain: TerrainID = TerrainID.FIELD
    alteration: TerrainAlterationID = TerrainAlterationID.NONE
    resource: ResourceID = ResourceID.NONE
    building: BuildingID = BuildingID.NONE
    unit: Optional[Unit] = None

    def unit_type(self) -> UnitID:
        """Kind of the unit standing here, or UnitID.NONE."""
        if self.unit is None:
            return UnitID.NONE
        return self.unit.kind