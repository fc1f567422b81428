"""Configuration dataclasses for world generation, tick rules, and batch runs.

All frozen dataclasses that parameterise world creation, per-tick rules and
batch simulation runs live here.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from zombie_outbreak.config.constants import (
    CHANGE_DIRECTION_PROBABILITY,
    DETECTION_RANGE,
    GRID_HEIGHT,
    GRID_WIDTH,
    HOUSE_HEIGHT,
    HOUSE_PLACEMENT_ATTEMPTS,
    HOUSE_WIDTH,
    NUM_HOUSES,
    NUM_HUMANS,
    NUM_TICKS,
    NUM_WEAPONS,
    NUM_ZOMBIES,
    WEAPON_COOLDOWN,
)

__all__ = [
    "Outcome",
    "SimulationResult",
    "ZombieMovement",
    "WorldConfig",
    "RuleConfig",
    "RunConfig",
]

# ---------------------------------------------------------------------------
# Result container
# ---------------------------------------------------------------------------


class Outcome(Enum):
    """How a simulation run ended."""

    OVERRUN = "overrun"
    CLEARED = "cleared"
    TIMEOUT = "timeout"


@dataclass(frozen=True)
class SimulationResult:
    """Top-level result for one simulated world."""

    run_id: str
    sim_seed: int
    ticks_run: int
    n_humans: int
    n_armed: int
    n_zombies: int
    outcome: str
    faulted_ticks: int = 0


# ---------------------------------------------------------------------------
# Config dataclasses
# ---------------------------------------------------------------------------


class ZombieMovement(Enum):
    """Neighbourhood used by zombie pursuit and zombie random walks."""

    DIAGONAL = "diagonal"
    CARDINAL = "cardinal"


@dataclass(frozen=True)
class WorldConfig:
    """Initial layout and population of a freshly generated world."""

    grid_width: int = GRID_WIDTH
    grid_height: int = GRID_HEIGHT
    n_zombies: int = NUM_ZOMBIES
    n_humans: int = NUM_HUMANS
    n_weapons: int = NUM_WEAPONS
    n_houses: int = NUM_HOUSES
    house_width: int = HOUSE_WIDTH
    house_height: int = HOUSE_HEIGHT
    house_attempts: int = HOUSE_PLACEMENT_ATTEMPTS

    def __post_init__(self) -> None:
        if self.grid_width < 1 or self.grid_height < 1:
            raise ValueError("grid dimensions must be >= 1")
        if self.n_zombies < 0 or self.n_humans < 0 or self.n_weapons < 0:
            raise ValueError("entity counts must be >= 0")
        if self.n_houses < 0:
            raise ValueError("n_houses must be >= 0")
        if self.n_houses > 0:
            if self.house_width < 3 or self.house_height < 3:
                raise ValueError("houses must be at least 3x3")
            if self.house_width > self.grid_width or self.house_height > self.grid_height:
                raise ValueError("house footprint must fit inside the grid")
        if self.house_attempts < 1:
            raise ValueError("house_attempts must be >= 1")


@dataclass(frozen=True)
class RuleConfig:
    """Per-tick behaviour knobs shared by every entity."""

    weapon_cooldown: int = WEAPON_COOLDOWN
    detection_range: int = DETECTION_RANGE
    change_direction_probability: float = CHANGE_DIRECTION_PROBABILITY
    zombie_movement: ZombieMovement = ZombieMovement.DIAGONAL
    diagonal_combat: bool = False

    def __post_init__(self) -> None:
        if self.weapon_cooldown < 0:
            raise ValueError("weapon_cooldown must be >= 0")
        if self.detection_range < 0:
            raise ValueError("detection_range must be >= 0")
        if not 0.0 <= self.change_direction_probability <= 1.0:
            raise ValueError("change_direction_probability must be in [0.0, 1.0]")


@dataclass(frozen=True)
class RunConfig:
    """Batch-run parameters: world layout, rules, and driver settings."""

    ticks: int = NUM_TICKS
    n_runs: int = 1
    sim_seed: int = 0
    write_trace: bool = True
    stop_when_resolved: bool = True
    world: WorldConfig = WorldConfig()
    rules: RuleConfig = RuleConfig()

    def __post_init__(self) -> None:
        if self.ticks < 1:
            raise ValueError("ticks must be >= 1")
        if self.n_runs < 1:
            raise ValueError("n_runs must be >= 1")

    @classmethod
    def from_components(
        cls,
        world: WorldConfig | None = None,
        rules: RuleConfig | None = None,
        *,
        ticks: int = NUM_TICKS,
        n_runs: int = 1,
        sim_seed: int = 0,
        write_trace: bool = True,
        stop_when_resolved: bool = True,
    ) -> "RunConfig":
        """Compose RunConfig from reusable sub-config components."""
        return cls(
            ticks=ticks,
            n_runs=n_runs,
            sim_seed=sim_seed,
            write_trace=write_trace,
            stop_when_resolved=stop_when_resolved,
            world=world or WorldConfig(),
            rules=rules or RuleConfig(),
        )

    def to_components(self) -> tuple[WorldConfig, RuleConfig]:
        """Decompose RunConfig into its world and rule components."""
        return self.world, self.rules
