"""Path construction helpers for simulation output directories."""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def trace_log_path(out_dir: Path) -> Path:
    """Return path to the per-tick trace Parquet file."""
    return logs_dir(out_dir) / "tick_trace.parquet"


def runs_path(out_dir: Path) -> Path:
    """Return path to the per-run results Parquet file."""
    return logs_dir(out_dir) / "runs.parquet"
