"""Read-only views of a world for renderers and trace writers.

Provides ``EntityState`` (frozen dataclass) and ``Snapshot`` (type alias),
plus ``occupancy_array`` which encodes the blocking layer as an int8 grid
indexed ``[y, x]``.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from zombie_outbreak.domain.entities import EntityKind, Human
from zombie_outbreak.domain.world import WorldState

EMPTY_CODE = 0
KIND_CODES: dict[EntityKind, int] = {
    EntityKind.HUMAN: 1,
    EntityKind.ZOMBIE: 2,
    EntityKind.OBSTACLE: 3,
    EntityKind.WEAPON: 4,
}
ARMED_HUMAN_CODE = 5


@dataclass(frozen=True)
class EntityState:
    """Immutable snapshot of a single entity or pickup at one tick."""

    entity_id: int
    kind: str
    x: int
    y: int
    armed: bool = False
    weapon_cooldown: int = 0
    attacked_this_tick: bool = False


Snapshot = tuple[EntityState, ...]
"""Entities then pickups, each in registry order."""


def snapshot(world: WorldState, include_obstacles: bool = True) -> Snapshot:
    """Capture every entity and pickup as immutable rows."""
    rows: list[EntityState] = []
    for entity in world.entities.values():
        if entity.kind is EntityKind.OBSTACLE and not include_obstacles:
            continue
        if isinstance(entity, Human):
            rows.append(
                EntityState(
                    entity_id=entity.entity_id,
                    kind=entity.kind.value,
                    x=entity.x,
                    y=entity.y,
                    armed=entity.armed,
                    weapon_cooldown=entity.weapon_cooldown,
                    attacked_this_tick=entity.attacked_this_tick,
                )
            )
        else:
            rows.append(EntityState(entity.entity_id, entity.kind.value, entity.x, entity.y))
    for weapon in world.items.values():
        rows.append(EntityState(weapon.entity_id, weapon.kind.value, weapon.x, weapon.y))
    return tuple(rows)


def occupancy_array(world: WorldState, show_weapons: bool = True) -> np.ndarray:
    """Return a ``(height, width)`` int8 array of cell codes.

    Blocking occupants win over weapons lying in the same cell.
    """
    grid = np.full((world.height, world.width), EMPTY_CODE, dtype=np.int8)
    if show_weapons:
        for weapon in world.items.values():
            grid[weapon.y, weapon.x] = KIND_CODES[EntityKind.WEAPON]
    for (x, y), occupant in world.grid.items():
        code = KIND_CODES[occupant.kind]
        if isinstance(occupant, Human) and occupant.armed:
            code = ARMED_HUMAN_CODE
        grid[y, x] = code
    return grid
