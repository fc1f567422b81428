"""Parquet schema definitions for simulation artifacts.

All Arrow schemas used for persisting tick traces and per-run results are
centralised here so that every module works against the same column
contracts.
"""

from __future__ import annotations

import pyarrow as pa

TRACE_SCHEMA_VERSION = 1

TRACE_SCHEMA = pa.schema(
    [
        ("run_id", pa.string()),
        ("tick", pa.int64()),
        ("entity_id", pa.int64()),
        ("kind", pa.string()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("armed", pa.bool_()),
        ("weapon_cooldown", pa.int64()),
    ]
)

RUNS_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("run_id", pa.string()),
        ("sim_seed", pa.int64()),
        ("ticks_run", pa.int64()),
        ("n_humans", pa.int64()),
        ("n_armed", pa.int64()),
        ("n_zombies", pa.int64()),
        ("outcome", pa.string()),
        ("faulted_ticks", pa.int64()),
    ]
)

TRACE_COLUMNS: tuple[str, ...] = tuple(f.name for f in TRACE_SCHEMA)
