"""Simulation engine: tick orchestration, batch runs, and Parquet persistence."""

from zombie_outbreak.simulation.engine import TickEngine, TickReport, tick
from zombie_outbreak.simulation.persistence import flush_trace_columns
from zombie_outbreak.simulation.runner import classify_outcome, run_simulation

__all__ = [
    "TickEngine",
    "TickReport",
    "classify_outcome",
    "flush_trace_columns",
    "run_simulation",
    "tick",
]
