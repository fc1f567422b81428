"""Configuration layer: constants and typed config dataclasses."""

from zombie_outbreak.config.constants import (
    CHANGE_DIRECTION_PROBABILITY,
    DETECTION_RANGE,
    FLUSH_THRESHOLD,
    GRID_HEIGHT,
    GRID_WIDTH,
    NUM_HUMANS,
    NUM_TICKS,
    NUM_WEAPONS,
    NUM_ZOMBIES,
    WEAPON_COOLDOWN,
)
from zombie_outbreak.config.types import (
    Outcome,
    RuleConfig,
    RunConfig,
    SimulationResult,
    WorldConfig,
    ZombieMovement,
)

__all__ = [
    "CHANGE_DIRECTION_PROBABILITY",
    "DETECTION_RANGE",
    "FLUSH_THRESHOLD",
    "GRID_HEIGHT",
    "GRID_WIDTH",
    "NUM_HUMANS",
    "NUM_TICKS",
    "NUM_WEAPONS",
    "NUM_ZOMBIES",
    "Outcome",
    "RuleConfig",
    "RunConfig",
    "SimulationResult",
    "WEAPON_COOLDOWN",
    "WorldConfig",
    "ZombieMovement",
]
