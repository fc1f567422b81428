"""Exception hierarchy for the simulation core."""

from __future__ import annotations


class SimulationError(Exception):
    """Base class for errors raised by the simulation core."""


class CellOccupiedError(SimulationError):
    """A blocking entity was placed on a cell that already holds one."""

    def __init__(self, x: int, y: int, occupant_id: int) -> None:
        super().__init__(f"cell ({x}, {y}) already holds entity {occupant_id}")
        self.x = x
        self.y = y
        self.occupant_id = occupant_id


class PlacementExhaustedError(SimulationError):
    """No suitable cell was found within the attempt bound."""


class TickInProgressError(SimulationError):
    """A tick was requested while another tick is still running."""
