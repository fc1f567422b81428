"""Deterministic resolution of simultaneous move intentions.

Intentions are grouped by destination cell and each cell is settled against
the occupant indexed there *before* anyone moves:

- an obstacle rejects every contender;
- a lone zombie enters an empty cell, or a human's cell (infecting it);
- a lone human enters only an empty cell;
- among several contenders only the first zombie aiming at a human wins;
  otherwise nobody moves.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from zombie_outbreak.domain.entities import EntityKind
from zombie_outbreak.domain.grid import Cell
from zombie_outbreak.domain.intents import Intention
from zombie_outbreak.domain.world import WorldState


@dataclass(frozen=True)
class Move:
    """A move that passed conflict resolution."""

    entity_id: int
    new_x: int
    new_y: int


@dataclass
class ConflictResolution:
    """Successful moves plus human IDs queued for infection (insertion-ordered)."""

    moves: list[Move] = field(default_factory=list)
    infections: dict[int, None] = field(default_factory=dict)

    @property
    def infected_ids(self) -> list[int]:
        return list(self.infections)


def group_by_destination(
    world: WorldState, intentions: Iterable[Intention]
) -> dict[Cell, list[int]]:
    """Map each wrapped destination to its contenders, in intention order."""
    groups: dict[Cell, list[int]] = {}
    for intent in intentions:
        cell = world.grid.wrap(intent.target_x, intent.target_y)
        groups.setdefault(cell, []).append(intent.entity_id)
    return groups


def resolve_conflicts(world: WorldState, intentions: Iterable[Intention]) -> ConflictResolution:
    """Decide which intentions succeed and which humans get infected."""
    result = ConflictResolution()
    for (x, y), contender_ids in group_by_destination(world, intentions).items():
        occupant = world.occupant_at(x, y)
        if occupant is not None and occupant.kind is EntityKind.OBSTACLE:
            continue

        if len(contender_ids) == 1:
            mover = world.entities.get(contender_ids[0])
            if mover is None:
                continue
            if mover.kind is EntityKind.ZOMBIE:
                if occupant is None:
                    result.moves.append(Move(mover.entity_id, x, y))
                elif occupant.kind is EntityKind.HUMAN:
                    result.moves.append(Move(mover.entity_id, x, y))
                    result.infections[occupant.entity_id] = None
            elif mover.kind is EntityKind.HUMAN and occupant is None:
                result.moves.append(Move(mover.entity_id, x, y))
            continue

        if occupant is None or occupant.kind is not EntityKind.HUMAN:
            continue
        for entity_id in contender_ids:
            mover = world.entities.get(entity_id)
            if mover is not None and mover.kind is EntityKind.ZOMBIE:
                result.moves.append(Move(entity_id, x, y))
                result.infections[occupant.entity_id] = None
                break
    return result
