"""Domain layer: world model, spatial index, and per-tick decision logic."""

from zombie_outbreak.domain.combat import CombatReport, resolve_combat
from zombie_outbreak.domain.conflicts import ConflictResolution, Move, resolve_conflicts
from zombie_outbreak.domain.entities import (
    EntityKind,
    Human,
    Obstacle,
    PendingAction,
    Weapon,
    Zombie,
)
from zombie_outbreak.domain.generation import create_world
from zombie_outbreak.domain.grid import SpatialIndex, toroidal_delta, toroidal_manhattan
from zombie_outbreak.domain.intents import IntentResolver, Intention
from zombie_outbreak.domain.pathfinding import shortest_first_step
from zombie_outbreak.domain.snapshot import EntityState, Snapshot, occupancy_array, snapshot
from zombie_outbreak.domain.world import WorldState

__all__ = [
    "CombatReport",
    "ConflictResolution",
    "EntityKind",
    "EntityState",
    "Human",
    "IntentResolver",
    "Intention",
    "Move",
    "Obstacle",
    "PendingAction",
    "Snapshot",
    "SpatialIndex",
    "Weapon",
    "WorldState",
    "Zombie",
    "create_world",
    "occupancy_array",
    "resolve_combat",
    "resolve_conflicts",
    "shortest_first_step",
    "snapshot",
    "toroidal_delta",
    "toroidal_manhattan",
]
