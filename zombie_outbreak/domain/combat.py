"""Melee combat: armed humans strike adjacent zombies before anyone moves."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from zombie_outbreak.config.constants import WEAPON_COOLDOWN
from zombie_outbreak.domain.entities import EntityKind, Human
from zombie_outbreak.domain.grid import adjacent_cells
from zombie_outbreak.domain.world import WorldState

logger = logging.getLogger(__name__)


@dataclass
class CombatReport:
    """Attacker -> defeated zombie pairs for one combat phase."""

    kills: dict[int, int] = field(default_factory=dict)

    @property
    def defeated_ids(self) -> list[int]:
        return list(self.kills.values())


def resolve_combat(
    world: WorldState, cooldown: int = WEAPON_COOLDOWN, diagonal: bool = False
) -> CombatReport:
    """Let each ready armed human kill at most one adjacent, unclaimed zombie.

    Candidate order is shuffled to avoid positional bias; a zombie can be
    claimed by only one human per tick. Defeated zombies are removed after
    every candidate has acted.
    """
    report = CombatReport()
    claimed: set[int] = set()

    candidates = [
        human
        for human in world.humans()
        if human.armed and human.weapon_cooldown == 0 and not human.attacked_this_tick
    ]
    world.rng.shuffle(candidates)

    for human in candidates:
        zombie_id = _first_unclaimed_zombie(world, human, claimed, diagonal)
        if zombie_id is None:
            continue
        claimed.add(zombie_id)
        report.kills[human.entity_id] = zombie_id
        human.weapon_cooldown = cooldown
        human.attacked_this_tick = True
        logger.debug("Human %s defeats zombie %s", human.entity_id, zombie_id)

    for zombie_id in report.kills.values():
        world.remove_entity(zombie_id)
    return report


def _first_unclaimed_zombie(
    world: WorldState, human: Human, claimed: set[int], diagonal: bool
) -> int | None:
    for x, y in adjacent_cells(human.x, human.y, world.width, world.height, diagonal):
        occupant = world.occupant_at(x, y)
        if (
            occupant is not None
            and occupant.kind is EntityKind.ZOMBIE
            and occupant.entity_id not in claimed
        ):
            return occupant.entity_id
    return None
