"""Units placed on the map."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from .ids import UnitID

if TYPE_CHECKING:
    from .player import Player

ATTACK_DAMAGE = 10


@dataclass(eq=False)
class Unit:
    """A unit on a map, belonging to an optional owner."""

    game_map: Any
    owner: Optional["Player"] = None
    kind: UnitID = UnitID.NONE
    health: int = 0

    def is_dead(self) -> bool:
        return self.health <= 0

    def attack(self, target: Optional[Unit]) -> bool:
        """Damage the target; return whether it died."""
        if target is None:
            raise ValueError("target unit is missing")
        target.health -= ATTACK_DAMAGE
        return target.is_dead()