"""Parquet persistence helpers for the tick trace stream."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq

from zombie_outbreak.domain.snapshot import Snapshot
from zombie_outbreak.io.schemas import TRACE_COLUMNS, TRACE_SCHEMA

TraceColumns = dict[str, list[int | str | bool]]


def new_trace_columns() -> TraceColumns:
    return {name: [] for name in TRACE_COLUMNS}


def append_snapshot(columns: TraceColumns, run_id: str, tick: int, rows: Snapshot) -> None:
    """Append one tick's snapshot rows to the in-memory column buffers."""
    for row in rows:
        columns["run_id"].append(run_id)
        columns["tick"].append(tick)
        columns["entity_id"].append(row.entity_id)
        columns["kind"].append(row.kind)
        columns["x"].append(row.x)
        columns["y"].append(row.y)
        columns["armed"].append(row.armed)
        columns["weapon_cooldown"].append(row.weapon_cooldown)


def flush_trace_columns(
    columns: TraceColumns,
    trace_path: Path,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated trace rows to Parquet and clear in-memory buffers."""
    if not columns["run_id"]:
        return writer
    table = pa.Table.from_pydict(columns, schema=TRACE_SCHEMA)
    if writer is None:
        writer = pq.ParquetWriter(trace_path, TRACE_SCHEMA)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer
