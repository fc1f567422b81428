"""Tests for zombie_outbreak.domain.pathfinding module."""

from __future__ import annotations

from random import Random

from zombie_outbreak.domain.pathfinding import shortest_first_step
from zombie_outbreak.domain.world import WorldState


def _world(width: int = 10, height: int = 10, seed: int = 0) -> WorldState:
    return WorldState(width=width, height=height, rng=Random(seed))


class TestShortestFirstStep:
    def test_start_equals_goal(self) -> None:
        assert shortest_first_step(_world(), (3, 3), (3, 3)) is None

    def test_straight_line(self) -> None:
        assert shortest_first_step(_world(), (0, 0), (3, 0)) == (1, 0)

    def test_goes_round_the_edge(self) -> None:
        assert shortest_first_step(_world(), (0, 0), (8, 0)) == (9, 0)
        assert shortest_first_step(_world(), (0, 0), (0, 9)) == (0, 9)

    def test_detours_around_wall_through_wrap(self) -> None:
        world = _world(5, 5)
        for y in range(5):
            world.spawn_obstacle(2, y)
        assert shortest_first_step(world, (1, 0), (3, 0)) == (0, 0)

    def test_enclosed_goal_is_unreachable(self) -> None:
        world = _world()
        for x, y in ((5, 4), (5, 6), (4, 5), (6, 5)):
            world.spawn_obstacle(x, y)
        assert shortest_first_step(world, (0, 0), (5, 5)) is None

    def test_agents_do_not_block(self) -> None:
        world = _world()
        world.spawn_human(1, 0)
        assert shortest_first_step(world, (0, 0), (2, 0)) == (1, 0)

    def test_diagonal_goal_takes_either_axis_first(self) -> None:
        for seed in range(10):
            step = shortest_first_step(_world(seed=seed), (0, 0), (1, 1))
            assert step in {(1, 0), (0, 1)}
