"""Breadth-first pathfinding on the toroidal grid.

Only obstacles block the search; cells holding humans or zombies are
traversable because those occupants may have moved by the time the path is
walked. Neighbour order is shuffled at every expansion so that equally short
paths are chosen without directional bias.
"""

from __future__ import annotations

from collections import deque

from zombie_outbreak.config.constants import CARDINAL_DIRECTIONS
from zombie_outbreak.domain.entities import EntityKind
from zombie_outbreak.domain.grid import Cell
from zombie_outbreak.domain.world import WorldState


def _traversable(world: WorldState, x: int, y: int) -> bool:
    occupant = world.occupant_at(x, y)
    return occupant is None or occupant.kind is not EntityKind.OBSTACLE


def shortest_first_step(world: WorldState, start: Cell, goal: Cell) -> Cell | None:
    """Return the first cell of some shortest path from ``start`` to ``goal``.

    Returns ``None`` when ``start == goal`` or when the goal is unreachable
    within ``width * height`` expansions.
    """
    start = world.grid.wrap(*start)
    goal = world.grid.wrap(*goal)
    if start == goal:
        return None

    parents: dict[Cell, Cell | None] = {start: None}
    queue: deque[Cell] = deque([start])
    max_expansions = world.width * world.height
    expansions = 0
    found = False

    while queue and expansions < max_expansions:
        current = queue.popleft()
        expansions += 1
        if current == goal:
            found = True
            break
        moves = list(CARDINAL_DIRECTIONS)
        world.rng.shuffle(moves)
        for dx, dy in moves:
            nxt = world.grid.wrap(current[0] + dx, current[1] + dy)
            if nxt in parents or not _traversable(world, *nxt):
                continue
            parents[nxt] = current
            queue.append(nxt)

    if not found:
        return None

    # Walk back until the node whose parent is the start cell.
    step = goal
    parent = parents[step]
    while parent is not None and parent != start:
        step = parent
        parent = parents[step]
    return step
