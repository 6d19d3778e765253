"""
Occupancy grid — tracks which unit cells of the truck volume are filled.

The grid is a dense ``width × height × length`` boolean numpy array indexed
as ``cells[x, y, z]``.  One grid belongs to exactly one planning run; it is
only ever written by :meth:`OccupancyGrid.occupy` and cells never go back
to free.

Queries:
    .is_free(x, y, z, w, h, l)        — whole box unoccupied?
    .supported_cells(x, y, z, w, l)   — occupied cells directly below a footprint
    .occupied_count()                 — number of filled cells
    .fill_rate()                      — filled / total cells
"""

from __future__ import annotations

import numpy as np

from truckload.core.models import Truck


class OccupancyGrid:
    """3D boolean occupancy model of a truck cargo volume."""

    __slots__ = ("width", "height", "length", "cells")

    def __init__(self, width: int, height: int, length: int) -> None:
        self.width = width
        self.height = height
        self.length = length
        self.cells: np.ndarray = np.zeros((width, height, length), dtype=bool)

    @classmethod
    def for_truck(cls, truck: Truck) -> "OccupancyGrid":
        return cls(truck.width, truck.height, truck.length)

    # ── Queries ──────────────────────────────────────────────────────────

    def contains(self, x: int, y: int, z: int, w: int, h: int, l: int) -> bool:
        """True if the box [x, x+w) × [y, y+h) × [z, z+l) lies inside the grid."""
        return (
            x >= 0 and y >= 0 and z >= 0
            and x + w <= self.width
            and y + h <= self.height
            and z + l <= self.length
        )

    def is_free(self, x: int, y: int, z: int, w: int, h: int, l: int) -> bool:
        """True if no cell of the box is occupied."""
        return not self.cells[x:x + w, y:y + h, z:z + l].any()

    def supported_cells(self, x: int, y: int, z: int, w: int, l: int) -> int:
        """
        Number of occupied cells in layer ``y - 1`` under the footprint
        [x, x+w) × [z, z+l).

        Returns the full footprint for floor placements (y == 0).
        """
        if y == 0:
            return w * l
        return int(np.count_nonzero(self.cells[x:x + w, y - 1, z:z + l]))

    def occupied_count(self) -> int:
        return int(np.count_nonzero(self.cells))

    def fill_rate(self) -> float:
        """Fraction of cells that are occupied."""
        if self.cells.size == 0:
            return 0.0
        return self.occupied_count() / self.cells.size

    # ── Mutation ─────────────────────────────────────────────────────────

    def occupy(self, x: int, y: int, z: int, w: int, h: int, l: int) -> None:
        """Mark every cell of the box as occupied."""
        self.cells[x:x + w, y:y + h, z:z + l] = True

    def __repr__(self) -> str:
        return (
            f"OccupancyGrid({self.width}×{self.height}×{self.length}, "
            f"fill={self.fill_rate():.1%})"
        )
