"""Tick-based zombie outbreak simulation on a toroidal grid."""

from zombie_outbreak.domain.generation import create_world
from zombie_outbreak.domain.world import WorldState
from zombie_outbreak.simulation.engine import TickEngine, tick

__all__ = [
    "TickEngine",
    "WorldState",
    "create_world",
    "tick",
]
