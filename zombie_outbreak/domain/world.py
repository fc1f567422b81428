"""World aggregate: spatial index, entity registry, pickups, ID counter and RNG."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from random import Random

from zombie_outbreak.domain.entities import (
    BLOCKING_KINDS,
    BlockingEntity,
    EntityKind,
    Human,
    Obstacle,
    Weapon,
    Zombie,
    infect,
)
from zombie_outbreak.domain.grid import SpatialIndex, toroidal_manhattan

logger = logging.getLogger(__name__)


@dataclass
class WorldState:
    """Toroidal world owned by the simulation driver.

    ``entities`` holds humans, zombies and obstacles and owns their lifetime;
    ``items`` holds weapon pickups, which may share a cell with each other
    and with any blocking entity.
    """

    width: int
    height: int
    rng: Random = field(default_factory=Random)
    grid: SpatialIndex = field(init=False)
    entities: dict[int, BlockingEntity] = field(default_factory=dict)
    items: dict[int, Weapon] = field(default_factory=dict)
    next_id: int = 0

    def __post_init__(self) -> None:
        self.grid = SpatialIndex(self.width, self.height)

    # -- creation -----------------------------------------------------------

    def allocate_id(self) -> int:
        entity_id = self.next_id
        self.next_id += 1
        return entity_id

    def spawn_human(self, x: int, y: int, armed: bool = False) -> Human:
        x, y = self.grid.wrap(x, y)
        human = Human(entity_id=self.allocate_id(), x=x, y=y, armed=armed)
        self._register(human)
        return human

    def spawn_zombie(self, x: int, y: int) -> Zombie:
        x, y = self.grid.wrap(x, y)
        zombie = Zombie(entity_id=self.allocate_id(), x=x, y=y)
        self._register(zombie)
        return zombie

    def spawn_obstacle(self, x: int, y: int) -> Obstacle:
        x, y = self.grid.wrap(x, y)
        obstacle = Obstacle(entity_id=self.allocate_id(), x=x, y=y)
        self._register(obstacle)
        return obstacle

    def spawn_weapon(self, x: int, y: int) -> Weapon:
        x, y = self.grid.wrap(x, y)
        weapon = Weapon(entity_id=self.allocate_id(), x=x, y=y)
        self.items[weapon.entity_id] = weapon
        return weapon

    def _register(self, entity: BlockingEntity) -> None:
        # Index first so a failed placement leaves the registry untouched.
        self.grid.place(entity)
        self.entities[entity.entity_id] = entity

    # -- removal / transformation -------------------------------------------

    def remove_entity(self, entity_id: int) -> BlockingEntity | None:
        """Drop an entity from both the registry and the index."""
        entity = self.entities.pop(entity_id, None)
        if entity is not None:
            self.grid.clear(entity.x, entity.y, entity)
        return entity

    def remove_weapon(self, weapon_id: int) -> Weapon | None:
        return self.items.pop(weapon_id, None)

    def move_entity(self, entity: Human | Zombie, x: int, y: int) -> None:
        """Relocate an agent, overwriting whatever the target cell indexes."""
        self.grid.clear(entity.x, entity.y, entity)
        entity.x, entity.y = self.grid.wrap(x, y)
        self.grid.put(entity)

    def infect_human(self, human_id: int) -> Zombie | None:
        """Swap a human for a zombie under the same ID, in both maps."""
        human = self.entities.get(human_id)
        if not isinstance(human, Human):
            logger.warning("Infection target %s is missing or no longer human", human_id)
            return None
        zombie = infect(human)
        self.entities[human_id] = zombie
        self.grid.put(zombie)
        return zombie

    # -- queries ------------------------------------------------------------

    def occupant_at(self, x: int, y: int) -> BlockingEntity | None:
        return self.grid.occupant_at(x, y)

    def humans(self) -> Iterator[Human]:
        for entity in list(self.entities.values()):
            if isinstance(entity, Human):
                yield entity

    def zombies(self) -> Iterator[Zombie]:
        for entity in list(self.entities.values()):
            if isinstance(entity, Zombie):
                yield entity

    def count(self, kind: EntityKind) -> int:
        if kind is EntityKind.WEAPON:
            return len(self.items)
        return sum(1 for entity in self.entities.values() if entity.kind is kind)

    def weapons_at(self, x: int, y: int) -> list[Weapon]:
        return [weapon for weapon in self.items.values() if (weapon.x, weapon.y) == (x, y)]

    def distance(self, x1: int, y1: int, x2: int, y2: int) -> int:
        return toroidal_manhattan(x1, y1, x2, y2, self.width, self.height)

    def find_nearest(
        self,
        x: int,
        y: int,
        kind: EntityKind,
        max_distance: float = float("inf"),
        exclude_id: int | None = None,
        predicate: Callable[[BlockingEntity], bool] | None = None,
    ) -> BlockingEntity | None:
        """Nearest entity of ``kind`` strictly closer than ``max_distance``.

        Ties go to the first entity in registry order.
        """
        nearest: BlockingEntity | None = None
        best = max_distance
        for entity in self.entities.values():
            if entity.kind is not kind or entity.entity_id == exclude_id:
                continue
            if predicate is not None and not predicate(entity):
                continue
            d = self.distance(x, y, entity.x, entity.y)
            if d < best:
                best = d
                nearest = entity
        return nearest

    def check_invariants(self) -> list[str]:
        """Return human-readable violations of the world invariants."""
        problems: list[str] = []
        for entity_id, entity in self.entities.items():
            if entity.kind not in BLOCKING_KINDS:
                problems.append(f"entity {entity_id} has non-blocking kind {entity.kind.value}")
                continue
            if not (0 <= entity.x < self.width and 0 <= entity.y < self.height):
                problems.append(f"entity {entity_id} out of bounds at ({entity.x}, {entity.y})")
            if self.grid.occupant_at(entity.x, entity.y) is not entity:
                problems.append(f"entity {entity_id} not indexed at ({entity.x}, {entity.y})")
            if isinstance(entity, Human) and not entity.armed and entity.weapon_cooldown > 0:
                problems.append(f"human {entity_id} unarmed with cooldown {entity.weapon_cooldown}")
        for cell, occupant in self.grid.items():
            if self.entities.get(occupant.entity_id) is not occupant:
                problems.append(f"cell {cell} indexes dead entity {occupant.entity_id}")
            elif (occupant.x, occupant.y) != cell:
                problems.append(f"cell {cell} indexes misplaced entity {occupant.entity_id}")
        shared = set(self.entities) & set(self.items)
        if shared:
            problems.append(f"ids shared by entities and items: {sorted(shared)}")
        return problems
