"""Batch driver: seeded worlds run tick by tick with Parquet trace output.

Provides ``run_simulation`` which generates each world, advances it through
the tick engine, stops early once one side is gone (if requested), and
persists the tick trace and per-run results.
"""

from __future__ import annotations

import logging
import random
from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from zombie_outbreak.config.constants import FLUSH_THRESHOLD
from zombie_outbreak.config.types import Outcome, RunConfig, SimulationResult
from zombie_outbreak.domain.entities import EntityKind
from zombie_outbreak.domain.generation import create_world
from zombie_outbreak.domain.snapshot import snapshot
from zombie_outbreak.domain.world import WorldState
from zombie_outbreak.io.paths import logs_dir, runs_path, trace_log_path
from zombie_outbreak.io.schemas import RUNS_SCHEMA, TRACE_SCHEMA_VERSION
from zombie_outbreak.simulation.engine import TickEngine
from zombie_outbreak.simulation.persistence import (
    append_snapshot,
    flush_trace_columns,
    new_trace_columns,
)

logger = logging.getLogger(__name__)


def _deterministic_run_id(sim_seed: int) -> str:
    """Build reproducible run ID stable across runs for identical seeds."""
    return f"run_ss{sim_seed}"


def classify_outcome(world: WorldState) -> Outcome | None:
    """Return the finished outcome, or ``None`` while both sides remain."""
    if world.count(EntityKind.HUMAN) == 0:
        return Outcome.OVERRUN
    if world.count(EntityKind.ZOMBIE) == 0:
        return Outcome.CLEARED
    return None


def run_simulation(config: RunConfig, out_dir: Path) -> list[SimulationResult]:
    """Run ``config.n_runs`` seeded worlds and persist trace/result tables."""
    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    trace_path = trace_log_path(out_dir)

    writer: pq.ParquetWriter | None = None
    columns = new_trace_columns()
    results: list[SimulationResult] = []

    try:
        for i in range(config.n_runs):
            sim_seed = config.sim_seed + i
            run_id = _deterministic_run_id(sim_seed)
            world = create_world(config.world, random.Random(sim_seed))
            engine = TickEngine(world, config.rules)

            if config.write_trace:
                append_snapshot(columns, run_id, 0, snapshot(world, include_obstacles=False))

            faulted = 0
            outcome: Outcome | None = None
            for _ in range(config.ticks):
                report = engine.tick()
                if not report.ok:
                    faulted += 1
                if config.write_trace:
                    rows = snapshot(world, include_obstacles=False)
                    append_snapshot(columns, run_id, engine.tick_count, rows)
                    if len(columns["run_id"]) >= FLUSH_THRESHOLD:
                        writer = flush_trace_columns(columns, trace_path, writer)
                outcome = classify_outcome(world)
                if outcome is not None and config.stop_when_resolved:
                    break

            final = outcome or classify_outcome(world) or Outcome.TIMEOUT
            humans = list(world.humans())
            result = SimulationResult(
                run_id=run_id,
                sim_seed=sim_seed,
                ticks_run=engine.tick_count,
                n_humans=len(humans),
                n_armed=sum(1 for human in humans if human.armed),
                n_zombies=world.count(EntityKind.ZOMBIE),
                outcome=final.value,
                faulted_ticks=faulted,
            )
            logger.info(
                "%s finished after %d ticks: %s (%d humans, %d zombies)",
                run_id,
                result.ticks_run,
                result.outcome,
                result.n_humans,
                result.n_zombies,
            )
            results.append(result)

        if config.write_trace:
            writer = flush_trace_columns(columns, trace_path, writer)
    finally:
        if writer is not None:
            writer.close()

    rows = [
        {
            "schema_version": TRACE_SCHEMA_VERSION,
            "run_id": r.run_id,
            "sim_seed": r.sim_seed,
            "ticks_run": r.ticks_run,
            "n_humans": r.n_humans,
            "n_armed": r.n_armed,
            "n_zombies": r.n_zombies,
            "outcome": r.outcome,
            "faulted_ticks": r.faulted_ticks,
        }
        for r in results
    ]
    pq.write_table(pa.Table.from_pylist(rows, schema=RUNS_SCHEMA), runs_path(out_dir))
    return results
