"""Tests for zombie_outbreak.simulation.engine module."""

from __future__ import annotations

import logging
from random import Random

import pytest

from zombie_outbreak.config.types import RuleConfig, WorldConfig
from zombie_outbreak.domain.combat import CombatReport
from zombie_outbreak.domain.entities import EntityKind, Zombie
from zombie_outbreak.domain.generation import create_world
from zombie_outbreak.domain.world import WorldState
from zombie_outbreak.errors import TickInProgressError
from zombie_outbreak.simulation.engine import TickEngine, tick

STEADY = RuleConfig(change_direction_probability=0.0)


def _world(width: int = 10, height: int = 10, seed: int = 0) -> WorldState:
    return WorldState(width=width, height=height, rng=Random(seed))


class TestCombatPhase:
    def test_attacker_stays_put(self) -> None:
        world = _world()
        human = world.spawn_human(2, 2, armed=True)
        zombie = world.spawn_zombie(3, 2)
        report = TickEngine(world).tick()
        assert report.ok
        assert report.kills == {human.entity_id: zombie.entity_id}
        assert report.moves == 0
        assert (human.x, human.y) == (2, 2)
        assert human.weapon_cooldown == 5
        assert human.attacked_this_tick is True
        assert human.pending_action is None

    def test_cooldown_counts_down_once_per_tick(self) -> None:
        world = _world()
        human = world.spawn_human(2, 2, armed=True)
        world.spawn_zombie(2, 3)
        engine = TickEngine(world)
        engine.tick()
        cooldowns = []
        for _ in range(5):
            engine.tick()
            cooldowns.append(human.weapon_cooldown)
        assert cooldowns == [4, 3, 2, 1, 0]
        assert human.attacked_this_tick is False


class TestMovement:
    def test_pickup_arms_human(self) -> None:
        world = _world()
        human = world.spawn_human(2, 2)
        human.last_direction = (1, 0)
        weapon = world.spawn_weapon(3, 2)
        report = TickEngine(world, STEADY).tick()
        assert (human.x, human.y) == (3, 2)
        assert human.armed is True
        assert human.weapon_cooldown == 0
        assert weapon.entity_id not in world.items
        assert report.pickups == [(human.entity_id, weapon.entity_id)]

    def test_pickup_takes_one_of_stacked_weapons(self) -> None:
        world = _world()
        human = world.spawn_human(2, 2)
        human.last_direction = (1, 0)
        world.spawn_weapon(3, 2)
        world.spawn_weapon(3, 2)
        TickEngine(world, STEADY).tick()
        assert human.armed
        assert len(world.weapons_at(3, 2)) == 1

    def test_armed_human_leaves_weapon(self) -> None:
        world = _world()
        human = world.spawn_human(2, 2, armed=True)
        human.last_direction = (1, 0)
        world.spawn_weapon(3, 2)
        report = TickEngine(world, STEADY).tick()
        assert (human.x, human.y) == (3, 2)
        assert report.pickups == []
        assert len(world.weapons_at(3, 2)) == 1

    def test_moves_wrap_on_both_axes(self) -> None:
        world = _world()
        east = world.spawn_human(9, 5)
        east.last_direction = (1, 0)
        south = world.spawn_human(5, 9)
        south.last_direction = (0, 1)
        TickEngine(world, STEADY).tick()
        assert (east.x, east.y) == (0, 5)
        assert (south.x, south.y) == (5, 0)
        assert world.occupant_at(0, 5) is east
        assert world.occupant_at(9, 5) is None

    def test_obstacle_blocks_human(self) -> None:
        world = _world()
        world.spawn_obstacle(4, 4)
        human = world.spawn_human(4, 3)
        human.last_direction = (0, 1)
        TickEngine(world, STEADY).tick()
        assert (human.x, human.y) == (4, 3)

    def test_contested_cell_stops_both_zombies(self) -> None:
        world = _world()
        first = world.spawn_zombie(0, 0)
        second = world.spawn_zombie(2, 0)
        world.spawn_human(1, 5)
        TickEngine(world).tick()
        assert first.pending_action is not None
        assert (first.pending_action.target_x, first.pending_action.target_y) == (1, 1)
        assert (first.x, first.y) == (0, 0)
        assert (second.x, second.y) == (2, 0)


class TestInfection:
    def test_fleeing_victim_turns_where_it_lands(self) -> None:
        world = _world()
        biter = world.spawn_zombie(0, 0)
        victim = world.spawn_human(1, 0)
        victim.last_direction = (1, 0)
        report = TickEngine(world, STEADY).tick()
        assert report.infections == [victim.entity_id]
        assert (biter.x, biter.y) == (1, 0)
        turned = world.entities[victim.entity_id]
        assert isinstance(turned, Zombie)
        assert (turned.x, turned.y) == (2, 0)
        assert world.check_invariants() == []

    def test_stationary_victim_rises_in_vacated_cell(self) -> None:
        world = _world()
        biter = world.spawn_zombie(0, 0)
        victim = world.spawn_human(1, 0)
        victim.last_direction = (-1, 0)
        TickEngine(world, STEADY).tick()
        assert (biter.x, biter.y) == (1, 0)
        turned = world.entities[victim.entity_id]
        assert isinstance(turned, Zombie)
        assert (turned.x, turned.y) == (0, 0)
        assert world.count(EntityKind.HUMAN) == 0
        assert world.count(EntityKind.ZOMBIE) == 2
        assert world.check_invariants() == []


class TestChase:
    @pytest.mark.parametrize("seed", [0, 1, 2])
    def test_zombie_eventually_infects_lone_human(self, seed: int) -> None:
        world = _world(seed=seed)
        world.spawn_zombie(0, 0)
        human = world.spawn_human(5, 5)
        engine = TickEngine(world)
        for _ in range(500):
            engine.tick()
            if isinstance(world.entities[human.entity_id], Zombie):
                break
        turned = world.entities[human.entity_id]
        assert isinstance(turned, Zombie)
        assert world.count(EntityKind.HUMAN) == 0
        assert world.count(EntityKind.ZOMBIE) == 2
        assert world.check_invariants() == []


class TestEngineGuards:
    def test_fault_abandons_tick(
        self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture
    ) -> None:
        world = _world()
        human = world.spawn_human(5, 5)

        def broken(*_args: object, **_kwargs: object) -> None:
            raise RuntimeError("boom")

        monkeypatch.setattr("zombie_outbreak.simulation.engine.resolve_conflicts", broken)
        engine = TickEngine(world)
        with caplog.at_level(logging.ERROR):
            report = engine.tick()
        assert report.ok is False
        assert "abandoned" in caplog.text
        assert engine.tick_count == 1
        assert (human.x, human.y) == (5, 5)
        assert engine.tick().ok is False

    def test_reentrant_tick_is_rejected(self, monkeypatch: pytest.MonkeyPatch) -> None:
        world = _world()
        world.spawn_human(5, 5)
        engine = TickEngine(world)

        def reentrant(*_args: object, **_kwargs: object) -> CombatReport:
            with pytest.raises(TickInProgressError):
                engine.tick()
            return CombatReport()

        monkeypatch.setattr("zombie_outbreak.simulation.engine.resolve_combat", reentrant)
        report = engine.tick()
        assert report.ok
        assert engine.tick_count == 1

    def test_module_level_tick_returns_world(self) -> None:
        world = _world()
        world.spawn_human(1, 1)
        assert tick(world) is world


def test_invariants_hold_over_long_run() -> None:
    config = WorldConfig(
        grid_width=30, grid_height=30, n_zombies=3, n_humans=40, n_weapons=10, n_houses=3
    )
    world = create_world(config, Random(5))
    engine = TickEngine(world)
    for _ in range(100):
        report = engine.tick()
        assert report.ok
        assert world.check_invariants() == []
