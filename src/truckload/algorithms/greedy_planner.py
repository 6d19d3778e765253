"""
Greedy largest-first placement planner.

Algorithm:
  1. Reject the run up front if the crates' total volume exceeds the truck.
  2. Sort crates by volume, largest first (ties keep input order).
  3. For each crate, for each rotation (NONE, HORIZONTAL, VERTICAL):
  4.   Scan minimum-corner positions x ascending, then y, then z
  5.   Commit the first position that is free and supported
  6. A crate with no feasible position fails the whole run.

Placements are never reconsidered once committed.
"""

from __future__ import annotations

import logging
import math
from typing import Iterable, Optional

from truckload.core.config import DEFAULT_SUPPORT_RATIO, PlannerConfig
from truckload.core.grid import OccupancyGrid
from truckload.core.models import (
    Crate,
    LoadingInstruction,
    Placement,
    Rotation,
    Truck,
)
from truckload.core.result import CapacityExceeded, PlacementFailed, PlanResult

logger = logging.getLogger(__name__)


def required_support(width: int, length: int, support_ratio: float) -> int:
    """Occupied cells needed below a ``width × length`` footprint."""
    return math.ceil(width * length * support_ratio)


def can_place(
    grid: OccupancyGrid,
    x: int,
    y: int,
    z: int,
    width: int,
    height: int,
    length: int,
    support_ratio: float = DEFAULT_SUPPORT_RATIO,
) -> bool:
    """
    Feasibility check for a candidate box.

    A crate above the floor needs at least ``ceil(support_ratio × footprint)``
    occupied cells directly beneath it, and every cell of its box must be
    free.
    """
    if y > 0:
        supported = grid.supported_cells(x, y, z, width, length)
        if supported < required_support(width, length, support_ratio):
            return False
    return grid.is_free(x, y, z, width, height, length)


def sort_by_volume(crates: Iterable[Crate]) -> list[Crate]:
    """Largest volume first; ``sorted`` is stable so equal volumes keep input order."""
    return sorted(crates, key=lambda c: c.volume, reverse=True)


class LoadingPlanner:
    """
    Plans the loading sequence for one truck.

    Each call to :meth:`plan` builds a fresh occupancy grid, so a planner
    can be run repeatedly and always yields the same result for the same
    input.
    """

    def __init__(
        self,
        truck: Truck,
        crates: Iterable[Crate],
        config: Optional[PlannerConfig] = None,
    ) -> None:
        self.truck = truck
        self.crates: list[Crate] = list(crates)
        self.config = config or PlannerConfig()

    def plan(self) -> PlanResult:
        crate_volume = sum(c.volume for c in self.crates)
        truck_volume = self.truck.volume
        if crate_volume > truck_volume:
            logger.warning(
                "Crate volume %d exceeds truck volume %d, nothing placed",
                crate_volume, truck_volume,
            )
            return PlanResult.failed(CapacityExceeded(crate_volume, truck_volume))

        grid = OccupancyGrid.for_truck(self.truck)
        instructions: dict[int, LoadingInstruction] = {}
        placements: list[Placement] = []

        for crate in sort_by_volume(self.crates):
            step = len(placements) + 1
            placement = self.find_placement(grid, crate, step)
            if placement is None:
                logger.warning(
                    "No feasible position for crate %d after %d placements",
                    crate.id, len(placements),
                )
                return PlanResult.failed(PlacementFailed(crate.id))

            grid.occupy(
                placement.x, placement.y, placement.z,
                placement.width, placement.height, placement.length,
            )
            placements.append(placement)
            instructions[crate.id] = LoadingInstruction.from_placement(placement)
            logger.debug(
                "Step %d: crate %d at (%d, %d, %d) rotation=%s",
                step, crate.id, placement.x, placement.y, placement.z,
                placement.rotation.name,
            )

        logger.info(
            "Planned %d crates, fill %.1f%%",
            len(placements), 100.0 * grid.fill_rate(),
        )
        return PlanResult(instructions=instructions, placements=placements)

    def find_placement(
        self,
        grid: OccupancyGrid,
        crate: Crate,
        step: int,
    ) -> Optional[Placement]:
        """
        First feasible placement for *crate* on *grid*, or None.

        Search order is rotation first, then x, y, z ascending.  The grid
        is only read here.
        """
        truck = self.truck
        ratio = self.config.support_ratio

        for rotation, (w, h, l) in Rotation.candidates(crate):
            for x in range(truck.width - w + 1):
                for y in range(truck.height - h + 1):
                    for z in range(truck.length - l + 1):
                        if can_place(grid, x, y, z, w, h, l, ratio):
                            return Placement(
                                crate_id=crate.id,
                                x=x, y=y, z=z,
                                width=w, height=h, length=l,
                                rotation=rotation,
                                step=step,
                            )
        return None


def plan_loading(
    truck: Truck,
    crates: Iterable[Crate],
    config: Optional[PlannerConfig] = None,
) -> PlanResult:
    """Plan a loading sequence for *crates* in *truck*."""
    return LoadingPlanner(truck, crates, config).plan()
