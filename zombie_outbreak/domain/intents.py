"""Per-tick intention generation for humans and zombies.

Each acting entity produces exactly one :class:`PendingAction` per tick. The
action is a destination cell; a human whose destination equals its own cell
is attacking in place. Destinations are not validated here: the conflict
resolver decides which moves succeed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from zombie_outbreak.config.constants import CARDINAL_DIRECTIONS, DIAGONAL_DIRECTIONS
from zombie_outbreak.config.types import RuleConfig, ZombieMovement
from zombie_outbreak.domain.entities import (
    Direction,
    EntityKind,
    Human,
    PendingAction,
    Zombie,
)
from zombie_outbreak.domain.grid import adjacent_cells, toroidal_delta
from zombie_outbreak.domain.pathfinding import shortest_first_step
from zombie_outbreak.domain.world import WorldState

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Intention:
    """One entity's requested destination for this tick."""

    entity_id: int
    target_x: int
    target_y: int


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _is_armed(entity: object) -> bool:
    return isinstance(entity, Human) and entity.armed


class IntentResolver:
    """Decision logic for every acting entity, dispatched on entity kind."""

    def __init__(self, rules: RuleConfig | None = None) -> None:
        self.rules = rules or RuleConfig()

    def gather(self, world: WorldState) -> list[Intention]:
        """Assign ``pending_action`` to every actor and return the intentions.

        Humans that attacked this tick are skipped: the attack was their turn.
        """
        intentions: list[Intention] = []
        for entity in list(world.entities.values()):
            if isinstance(entity, Human):
                if entity.attacked_this_tick:
                    continue
                action = self.human_action(world, entity)
            elif isinstance(entity, Zombie):
                action = self.zombie_action(world, entity)
            else:
                continue
            entity.pending_action = action
            intentions.append(Intention(entity.entity_id, action.target_x, action.target_y))
        return intentions

    # -- zombies ------------------------------------------------------------

    def zombie_action(self, world: WorldState, zombie: Zombie) -> PendingAction:
        target = world.find_nearest(zombie.x, zombie.y, EntityKind.HUMAN)
        if target is None:
            directions = CARDINAL_DIRECTIONS
            if self.rules.zombie_movement is ZombieMovement.DIAGONAL:
                directions = CARDINAL_DIRECTIONS + DIAGONAL_DIRECTIONS
            dx, dy = world.rng.choice(directions)
            logger.debug("Zombie %s wandering: no humans left", zombie.entity_id)
            return self._step(world, zombie.x, zombie.y, dx, dy)

        dx, dy = toroidal_delta(zombie.x, zombie.y, target.x, target.y, world.width, world.height)
        move_x, move_y = self._greedy_step(dx, dy)

        if not self._blocked(world, zombie.x + move_x, zombie.y + move_y):
            return self._step(world, zombie.x, zombie.y, move_x, move_y)

        logger.debug(
            "Zombie %s: greedy step (%d, %d) blocked by obstacle",
            zombie.entity_id,
            move_x,
            move_y,
        )
        if move_x != 0 and not self._blocked(world, zombie.x + move_x, zombie.y):
            return self._step(world, zombie.x, zombie.y, move_x, 0)
        if move_y != 0 and not self._blocked(world, zombie.x, zombie.y + move_y):
            return self._step(world, zombie.x, zombie.y, 0, move_y)
        return PendingAction(zombie.x, zombie.y)

    def _greedy_step(self, dx: int, dy: int) -> Direction:
        if self.rules.zombie_movement is ZombieMovement.DIAGONAL:
            return _sign(dx), _sign(dy)
        if abs(dx) > abs(dy):
            return _sign(dx), 0
        if dy != 0:
            return 0, _sign(dy)
        return _sign(dx), 0

    @staticmethod
    def _blocked(world: WorldState, x: int, y: int) -> bool:
        occupant = world.occupant_at(x, y)
        return occupant is not None and occupant.kind is EntityKind.OBSTACLE

    @staticmethod
    def _step(world: WorldState, x: int, y: int, dx: int, dy: int) -> PendingAction:
        return PendingAction(*world.grid.wrap(x + dx, y + dy))

    # -- humans -------------------------------------------------------------

    def human_action(self, world: WorldState, human: Human) -> PendingAction:
        if human.armed:
            return self._armed_action(world, human)

        ally = world.find_nearest(
            human.x, human.y, EntityKind.HUMAN, exclude_id=human.entity_id, predicate=_is_armed
        )
        if ally is not None:
            step = shortest_first_step(world, (human.x, human.y), (ally.x, ally.y))
            if step is not None:
                return PendingAction(*step)
        return self.biased_random_walk(world, human)

    def _armed_action(self, world: WorldState, human: Human) -> PendingAction:
        if human.weapon_cooldown == 0 and self._zombie_adjacent(world, human):
            return PendingAction(human.x, human.y)

        limit = self.rules.detection_range
        zombie = world.find_nearest(human.x, human.y, EntityKind.ZOMBIE, max_distance=limit)
        if zombie is not None:
            step = shortest_first_step(world, (human.x, human.y), (zombie.x, zombie.y))
            if step is not None:
                return PendingAction(*step)

        ally = world.find_nearest(
            human.x,
            human.y,
            EntityKind.HUMAN,
            max_distance=limit,
            exclude_id=human.entity_id,
            predicate=_is_armed,
        )
        if ally is not None:
            step = shortest_first_step(world, (human.x, human.y), (ally.x, ally.y))
            if step is not None:
                return PendingAction(*step)

        return self.biased_random_walk(world, human)

    @staticmethod
    def _zombie_adjacent(world: WorldState, human: Human) -> bool:
        for x, y in adjacent_cells(human.x, human.y, world.width, world.height):
            occupant = world.occupant_at(x, y)
            if occupant is not None and occupant.kind is EntityKind.ZOMBIE:
                return True
        return False

    def biased_random_walk(self, world: WorldState, human: Human) -> PendingAction:
        """Keep heading the same way most of the time, never turning straight back."""
        last = human.last_direction
        if last is not None and world.rng.random() >= self.rules.change_direction_probability:
            direction = last
        else:
            allowed = list(CARDINAL_DIRECTIONS)
            if last is not None:
                allowed = [d for d in CARDINAL_DIRECTIONS if d != (-last[0], -last[1])]
                if not allowed:
                    allowed = list(CARDINAL_DIRECTIONS)
            direction = world.rng.choice(allowed)
        human.last_direction = direction
        return self._step(world, human.x, human.y, *direction)
