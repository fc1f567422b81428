"""Tick engine: one strictly ordered simulation step over a shared world.

Phases run to completion in order: reset -> combat -> intentions ->
conflict resolution -> state application. A fault inside a tick is logged
and the tick is abandoned where it stopped; nothing is rolled back.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from zombie_outbreak.config.types import RuleConfig
from zombie_outbreak.domain.combat import resolve_combat
from zombie_outbreak.domain.conflicts import ConflictResolution, resolve_conflicts
from zombie_outbreak.domain.entities import Human, Zombie
from zombie_outbreak.domain.intents import IntentResolver
from zombie_outbreak.domain.world import WorldState
from zombie_outbreak.errors import TickInProgressError

logger = logging.getLogger(__name__)


@dataclass
class TickReport:
    """What happened during one tick."""

    tick: int
    ok: bool = True
    kills: dict[int, int] = field(default_factory=dict)
    moves: int = 0
    pickups: list[tuple[int, int]] = field(default_factory=list)
    infections: list[int] = field(default_factory=list)


class TickEngine:
    """Drives one world through successive ticks."""

    def __init__(self, world: WorldState, rules: RuleConfig | None = None) -> None:
        self.world = world
        self.rules = rules or RuleConfig()
        self.intents = IntentResolver(self.rules)
        self.tick_count = 0
        self._running = False

    def tick(self) -> TickReport:
        """Advance the world by one step; never raises on a tick fault."""
        if self._running:
            raise TickInProgressError("tick() called while a tick is already running")
        self._running = True
        report = TickReport(tick=self.tick_count)
        try:
            self._reset()
            combat = resolve_combat(
                self.world,
                cooldown=self.rules.weapon_cooldown,
                diagonal=self.rules.diagonal_combat,
            )
            report.kills = combat.kills
            intentions = self.intents.gather(self.world)
            resolution = resolve_conflicts(self.world, intentions)
            self._apply(resolution, report)
        except Exception:
            report.ok = False
            logger.exception("Tick %d abandoned after an unexpected fault", self.tick_count)
        finally:
            self._running = False
            self.tick_count += 1
        return report

    def _reset(self) -> None:
        for entity in self.world.entities.values():
            if isinstance(entity, Human):
                entity.attacked_this_tick = False
                if entity.weapon_cooldown > 0:
                    entity.weapon_cooldown -= 1
                entity.pending_action = None
            elif isinstance(entity, Zombie):
                entity.pending_action = None

    def _apply(self, resolution: ConflictResolution, report: TickReport) -> None:
        world = self.world
        movers: list[Human | Zombie] = []
        origins: dict[int, tuple[int, int]] = {}
        for move in resolution.moves:
            entity = world.entities.get(move.entity_id)
            if not isinstance(entity, (Human, Zombie)):
                continue
            origins[entity.entity_id] = (entity.x, entity.y)
            world.move_entity(entity, move.new_x, move.new_y)
            movers.append(entity)
        report.moves = len(movers)

        for entity in movers:
            if not isinstance(entity, Human) or entity.armed:
                continue
            weapons = world.weapons_at(entity.x, entity.y)
            if weapons:
                entity.armed = True
                world.remove_weapon(weapons[0].entity_id)
                report.pickups.append((entity.entity_id, weapons[0].entity_id))
                logger.debug("Human %s picked up weapon %s", entity.entity_id, weapons[0].entity_id)

        for human_id in resolution.infected_ids:
            victim = world.entities.get(human_id)
            if isinstance(victim, Human):
                # A victim that stayed put now shares its cell with the biter;
                # it rises in the cell the biter just vacated.
                biter = world.occupant_at(victim.x, victim.y)
                if biter is not None and biter is not victim and biter.entity_id in origins:
                    victim.x, victim.y = origins[biter.entity_id]
            if world.infect_human(human_id) is not None:
                report.infections.append(human_id)
                logger.debug("Human %s infected", human_id)


def tick(world: WorldState, rules: RuleConfig | None = None) -> WorldState:
    """Advance ``world`` by one tick in place and return it."""
    TickEngine(world, rules).tick()
    return world
