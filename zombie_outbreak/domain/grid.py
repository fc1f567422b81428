"""Toroidal spatial index and coordinate helpers.

The index maps each cell to at most one blocking occupant (human, zombie or
obstacle). Every lookup wraps its coordinates first, so callers may pass
raw ``x + dx`` values.
"""

from __future__ import annotations

from zombie_outbreak.config.constants import CARDINAL_DIRECTIONS, DIAGONAL_DIRECTIONS
from zombie_outbreak.domain.entities import BlockingEntity
from zombie_outbreak.errors import CellOccupiedError

Cell = tuple[int, int]


def wrap(x: int, y: int, width: int, height: int) -> Cell:
    """Wrap a coordinate pair onto the torus."""
    return x % width, y % height


def toroidal_delta(x1: int, y1: int, x2: int, y2: int, width: int, height: int) -> Cell:
    """Signed shortest displacement from ``(x1, y1)`` to ``(x2, y2)``.

    Each axis is wrapped independently when the raw difference exceeds half
    the grid extent.
    """
    dx = x2 - x1
    dy = y2 - y1
    if abs(dx) > width / 2:
        dx = dx - width if dx > 0 else dx + width
    if abs(dy) > height / 2:
        dy = dy - height if dy > 0 else dy + height
    return dx, dy


def toroidal_manhattan(x1: int, y1: int, x2: int, y2: int, width: int, height: int) -> int:
    """Manhattan distance with wrap-around on both axes."""
    dx = abs(x1 - x2)
    dy = abs(y1 - y2)
    return min(dx, width - dx) + min(dy, height - dy)


def adjacent_cells(
    x: int, y: int, width: int, height: int, include_diagonals: bool = False
) -> list[Cell]:
    """Return neighbouring cells (cardinal first, then optional diagonals)."""
    deltas = CARDINAL_DIRECTIONS + DIAGONAL_DIRECTIONS if include_diagonals else CARDINAL_DIRECTIONS
    return [((x + dx) % width, (y + dy) % height) for dx, dy in deltas]


class SpatialIndex:
    """Cell -> blocking occupant map on a ``width x height`` torus."""

    def __init__(self, width: int, height: int) -> None:
        if width < 1 or height < 1:
            raise ValueError("grid dimensions must be >= 1")
        self.width = width
        self.height = height
        self._cells: dict[Cell, BlockingEntity] = {}

    def __len__(self) -> int:
        return len(self._cells)

    def __contains__(self, cell: object) -> bool:
        return cell in self._cells

    def items(self) -> list[tuple[Cell, BlockingEntity]]:
        return list(self._cells.items())

    def wrap(self, x: int, y: int) -> Cell:
        return wrap(x, y, self.width, self.height)

    def occupant_at(self, x: int, y: int) -> BlockingEntity | None:
        return self._cells.get(self.wrap(x, y))

    def is_free(self, x: int, y: int) -> bool:
        return self.wrap(x, y) not in self._cells

    def place(self, entity: BlockingEntity) -> None:
        """Index ``entity`` at its own position.

        Raises :exc:`CellOccupiedError` if the cell already has an occupant.
        """
        cell = self.wrap(entity.x, entity.y)
        occupant = self._cells.get(cell)
        if occupant is not None:
            raise CellOccupiedError(cell[0], cell[1], occupant.entity_id)
        self._cells[cell] = entity

    def put(self, entity: BlockingEntity) -> None:
        """Index ``entity`` at its position, replacing any current occupant."""
        self._cells[self.wrap(entity.x, entity.y)] = entity

    def clear(self, x: int, y: int, expected: BlockingEntity) -> bool:
        """Remove the entry at ``(x, y)`` only if it points to ``expected``."""
        cell = self.wrap(x, y)
        if self._cells.get(cell) is expected:
            del self._cells[cell]
            return True
        return False
