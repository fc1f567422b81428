"""Tests for zombie_outbreak.simulation.runner module."""

from __future__ import annotations

from pathlib import Path
from random import Random

import pyarrow.parquet as pq

from zombie_outbreak.config.types import Outcome, RunConfig, WorldConfig
from zombie_outbreak.domain.world import WorldState
from zombie_outbreak.io.schemas import RUNS_SCHEMA, TRACE_COLUMNS
from zombie_outbreak.simulation.runner import classify_outcome, run_simulation

SMALL_WORLD = WorldConfig(grid_width=20, grid_height=20, n_humans=10, n_weapons=3, n_houses=1)


def test_run_simulation_writes_trace_and_runs(tmp_path: Path) -> None:
    config = RunConfig(ticks=5, n_runs=2, sim_seed=3, world=SMALL_WORLD)
    results = run_simulation(config, tmp_path)

    assert [r.run_id for r in results] == ["run_ss3", "run_ss4"]
    trace = pq.read_table(tmp_path / "logs" / "tick_trace.parquet")
    runs = pq.read_table(tmp_path / "logs" / "runs.parquet")

    assert tuple(trace.column_names) == TRACE_COLUMNS
    assert runs.column_names == RUNS_SCHEMA.names
    assert runs.num_rows == 2
    assert 0 in set(trace.column("tick").to_pylist())
    assert set(trace.column("kind").to_pylist()) <= {"human", "zombie", "weapon"}


def test_run_simulation_is_deterministic(tmp_path: Path) -> None:
    config = RunConfig(ticks=20, n_runs=2, sim_seed=11, world=SMALL_WORLD, write_trace=False)
    first = run_simulation(config, tmp_path / "a")
    second = run_simulation(config, tmp_path / "b")
    assert first == second


def test_run_without_trace_skips_trace_file(tmp_path: Path) -> None:
    config = RunConfig(ticks=2, world=SMALL_WORLD, write_trace=False)
    run_simulation(config, tmp_path)
    assert not (tmp_path / "logs" / "tick_trace.parquet").exists()
    assert (tmp_path / "logs" / "runs.parquet").exists()


def test_no_zombies_is_cleared_after_first_tick(tmp_path: Path) -> None:
    world = WorldConfig(grid_width=10, grid_height=10, n_zombies=0, n_humans=3, n_houses=0)
    [result] = run_simulation(RunConfig(ticks=50, world=world), tmp_path)
    assert result.outcome == Outcome.CLEARED.value
    assert result.ticks_run == 1
    assert result.n_humans == 3


def test_no_humans_is_overrun(tmp_path: Path) -> None:
    world = WorldConfig(grid_width=10, grid_height=10, n_zombies=2, n_humans=0, n_houses=0)
    [result] = run_simulation(RunConfig(ticks=50, world=world), tmp_path)
    assert result.outcome == Outcome.OVERRUN.value
    assert result.ticks_run == 1
    assert result.n_zombies == 2


def test_resolved_run_continues_when_asked(tmp_path: Path) -> None:
    world = WorldConfig(grid_width=10, grid_height=10, n_zombies=0, n_humans=2, n_houses=0)
    config = RunConfig(ticks=7, world=world, stop_when_resolved=False, write_trace=False)
    [result] = run_simulation(config, tmp_path)
    assert result.ticks_run == 7
    assert result.outcome == Outcome.CLEARED.value
    assert result.faulted_ticks == 0


def test_classify_outcome_while_both_sides_remain() -> None:
    world = WorldState(width=5, height=5, rng=Random(0))
    world.spawn_human(0, 0)
    world.spawn_zombie(3, 3)
    assert classify_outcome(world) is None
    world.remove_entity(0)
    assert classify_outcome(world) is Outcome.OVERRUN
