"""Centralized domain constants for the outbreak simulation.

All magic numbers that appear across multiple modules are defined here.
Consuming modules should import from this module rather than defining
their own inline literals.
"""

from __future__ import annotations

GRID_WIDTH = 50
"""Default grid width in cells."""

GRID_HEIGHT = 50
"""Default grid height in cells."""

NUM_ZOMBIES = 1
"""Default number of zombies spawned at world creation."""

NUM_HUMANS = 100
"""Default number of humans spawned at world creation."""

NUM_WEAPONS = 15
"""Default number of weapon pickups scattered at world creation."""

NUM_HOUSES = 8
"""Default number of walled houses placed before any agent spawns."""

HOUSE_WIDTH = 8
"""Outer width of a house footprint, walls included."""

HOUSE_HEIGHT = 6
"""Outer height of a house footprint, walls included."""

HOUSE_PLACEMENT_ATTEMPTS = 50
"""Random placement tries per house before it is skipped."""

WEAPON_PLACEMENT_ATTEMPTS = 100
"""Random placement tries per weapon before it is skipped."""

WEAPON_COOLDOWN = 5
"""Ticks an armed human must wait after a successful attack."""

DETECTION_RANGE = 10
"""Manhattan radius within which armed humans notice zombies and allies."""

CHANGE_DIRECTION_PROBABILITY = 0.2
"""Chance that a random-walking human abandons its last direction."""

NUM_TICKS = 500
"""Default number of ticks per simulation run."""

FLUSH_THRESHOLD = 8_192
"""Flush trace rows to Parquet once this in-memory row count is reached."""

CARDINAL_DIRECTIONS: tuple[tuple[int, int], ...] = ((0, -1), (0, 1), (-1, 0), (1, 0))
"""Unit steps up, down, left, right."""

DIAGONAL_DIRECTIONS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
"""Unit steps along the four diagonals."""
