"""A player and what it knows of the map."""

from __future__ import annotations

from .gamemap import GameMap


class Player:
    """A player acting on a shared map, with its own discovered tiles."""

    def __init__(self, game_map: GameMap) -> None:
        self.game_map = game_map
        self._discovered = [False] * (game_map.size * game_map.size)

    def _index(self, i: int, j: int) -> int:
        if not self.game_map.is_in_bounds(i, j):
            raise IndexError(
                f"index out of range: ({i}, {j}), size: {self.game_map.size}"
            )
        return self.game_map.linearise(i, j)

    def is_discovered(self, i: int, j: int) -> bool:
        return self._discovered[self._index(i, j)]

    def discover(self, i: int, j: int) -> None:
        self._discovered[self._index(i, j)] = True

    def attack_from(
        self, i_attacker: int, j_attacker: int, i_defender: int, j_defender: int
    ) -> None:
        """Let the unit at the first position attack the one at the second."""
        attacker = self.game_map.tile_at(i_attacker, j_attacker).unit
        defender_tile = self.game_map.tile_at(i_defender, j_defender)
        defender = defender_tile.unit
        if attacker is None or defender is None:
            raise ValueError("both tiles must hold a unit")
        attacker.attack(defender)
        if defender.is_dead():
            defender_tile.unit = None

    def move_unit(self, i: int, j: int, i_dest: int, j_dest: int) -> None:
        """Move one of this player's units to another tile."""
        source = self.game_map.tile_at(i, j)
        destination = self.game_map.tile_at(i_dest, j_dest)
        unit = source.unit
        if unit is None or unit.owner is not self:
            raise ValueError("no unit of this player on the source tile")
        destination.unit = unit
        source.unit = None