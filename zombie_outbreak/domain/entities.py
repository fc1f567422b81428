"""Entity records for the outbreak world.

Every entity shares an ``entity_id, x, y`` record and carries a ``kind`` tag;
decision logic dispatches on the tag rather than on methods of the classes.
``attacked_this_tick`` and ``pending_action`` are per-tick scratch fields:
the tick engine resets them before any decision logic runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar, TypeAlias


class EntityKind(Enum):
    """Tag identifying an entity variant."""

    HUMAN = "human"
    ZOMBIE = "zombie"
    OBSTACLE = "obstacle"
    WEAPON = "weapon"


Direction: TypeAlias = tuple[int, int]
"""Unit step ``(dx, dy)``."""


@dataclass(frozen=True)
class PendingAction:
    """Intended destination for the current tick.

    A target equal to the entity's own cell means "attack in place".
    """

    target_x: int
    target_y: int


@dataclass
class Human:
    """A living human; may carry a weapon."""

    entity_id: int
    x: int
    y: int
    armed: bool = False
    weapon_cooldown: int = 0
    attacked_this_tick: bool = False
    last_direction: Direction | None = None
    pending_action: PendingAction | None = None

    kind: ClassVar[EntityKind] = EntityKind.HUMAN


@dataclass
class Zombie:
    """A zombie; infects humans by moving onto them."""

    entity_id: int
    x: int
    y: int
    pending_action: PendingAction | None = None

    kind: ClassVar[EntityKind] = EntityKind.ZOMBIE


@dataclass(frozen=True)
class Obstacle:
    """Permanent wall cell."""

    entity_id: int
    x: int
    y: int

    kind: ClassVar[EntityKind] = EntityKind.OBSTACLE


@dataclass(frozen=True)
class Weapon:
    """Pickup lying on the ground; never occupies the spatial index."""

    entity_id: int
    x: int
    y: int

    kind: ClassVar[EntityKind] = EntityKind.WEAPON


Agent: TypeAlias = Human | Zombie
BlockingEntity: TypeAlias = Human | Zombie | Obstacle
Entity: TypeAlias = Human | Zombie | Obstacle | Weapon

BLOCKING_KINDS: frozenset[EntityKind] = frozenset(
    {EntityKind.HUMAN, EntityKind.ZOMBIE, EntityKind.OBSTACLE}
)


def infect(human: Human) -> Zombie:
    """Return the zombie a human turns into: same ID, same cell."""
    return Zombie(entity_id=human.entity_id, x=human.x, y=human.y)
