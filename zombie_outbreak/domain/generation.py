"""Initial world generation: walled houses, then zombies, humans and weapons.

Placement failures never abort generation: the affected house or entity is
skipped with a warning and the rest of the world is still built.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from random import Random

from zombie_outbreak.config.constants import WEAPON_PLACEMENT_ATTEMPTS
from zombie_outbreak.config.types import WorldConfig
from zombie_outbreak.domain.entities import EntityKind
from zombie_outbreak.domain.grid import Cell
from zombie_outbreak.domain.world import WorldState
from zombie_outbreak.errors import PlacementExhaustedError

logger = logging.getLogger(__name__)


def create_world(config: WorldConfig, rng: Random) -> WorldState:
    """Build a world satisfying every occupancy invariant."""
    world = WorldState(width=config.grid_width, height=config.grid_height, rng=rng)

    houses = place_houses(world, config)
    zombies = _spawn_agents(world, config.n_zombies, world.spawn_zombie, "zombie")
    humans = _spawn_agents(world, config.n_humans, world.spawn_human, "human")
    weapons = place_weapons(world, config.n_weapons)

    logger.info(
        "Generated %dx%d world: %d/%d houses, %d zombies, %d humans, %d weapons",
        config.grid_width,
        config.grid_height,
        houses,
        config.n_houses,
        zombies,
        humans,
        weapons,
    )
    return world


def random_empty_cell(world: WorldState, max_attempts: int | None = None) -> Cell:
    """Sample cells until one has no blocking occupant.

    Raises :exc:`PlacementExhaustedError` after ``max_attempts`` misses
    (default ``2 * width * height``).
    """
    attempts = max_attempts if max_attempts is not None else 2 * world.width * world.height
    for _ in range(attempts):
        x = world.rng.randrange(world.width)
        y = world.rng.randrange(world.height)
        if world.grid.is_free(x, y):
            return x, y
    raise PlacementExhaustedError(f"no empty cell found after {attempts} attempts")


def _spawn_agents(
    world: WorldState, count: int, spawn: Callable[[int, int], object], label: str
) -> int:
    placed = 0
    for i in range(count):
        try:
            x, y = random_empty_cell(world)
        except PlacementExhaustedError as exc:
            logger.warning("Skipping %s %d of %d: %s", label, i + 1, count, exc)
            continue
        spawn(x, y)
        placed += 1
    return placed


def place_houses(world: WorldState, config: WorldConfig) -> int:
    """Place rectangular walled houses with a door in the top wall.

    Houses are laid out without wrapping and only on fully empty footprints.
    """
    w, h = config.house_width, config.house_height
    placed = 0
    for i in range(config.n_houses):
        for _ in range(config.house_attempts):
            start_x = world.rng.randrange(world.width - w + 1)
            start_y = world.rng.randrange(world.height - h + 1)
            footprint = [
                (x, y) for y in range(start_y, start_y + h) for x in range(start_x, start_x + w)
            ]
            if any(not world.grid.is_free(x, y) for x, y in footprint):
                continue
            door = (start_x + w // 2, start_y)
            for x, y in footprint:
                on_wall = x in (start_x, start_x + w - 1) or y in (start_y, start_y + h - 1)
                if on_wall and (x, y) != door:
                    world.spawn_obstacle(x, y)
            placed += 1
            break
        else:
            logger.warning(
                "Could not place house %d after %d attempts", i + 1, config.house_attempts
            )
    return placed


def place_weapons(
    world: WorldState, count: int, max_attempts: int = WEAPON_PLACEMENT_ATTEMPTS
) -> int:
    """Scatter weapons on non-obstacle cells; weapons may stack."""
    placed = 0
    for i in range(count):
        for _ in range(max_attempts):
            x = world.rng.randrange(world.width)
            y = world.rng.randrange(world.height)
            occupant = world.occupant_at(x, y)
            if occupant is None or occupant.kind is not EntityKind.OBSTACLE:
                world.spawn_weapon(x, y)
                placed += 1
                break
        else:
            logger.warning(
                "Skipping weapon %d of %d: no open cell after %d attempts",
                i + 1,
                count,
                max_attempts,
            )
    return placed
