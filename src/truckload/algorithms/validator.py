"""
Plan validator — re-checks a finished loading plan from scratch.

The placements are replayed in step order on a fresh occupancy grid and
every one is checked before it is committed.  Each check returns nothing
or raises a :class:`PlacementError`.

Checks:
  1. Bounds   — box must lie inside the truck on all axes
  2. Overlap  — box must not share a cell with an earlier box
  3. Support  — crates above the floor need ceil(ratio × footprint) cells below
  4. Rotation — extents and instruction flags must match one modeled rotation
  5. Sequence — steps run 1..n in order, one instruction per crate
"""

from __future__ import annotations

from typing import Iterable, Mapping

from truckload.algorithms.greedy_planner import required_support
from truckload.core.config import DEFAULT_SUPPORT_RATIO
from truckload.core.grid import OccupancyGrid
from truckload.core.models import Crate, LoadingInstruction, Placement, Rotation, Truck
from truckload.core.result import PlanResult


# ─────────────────────────────────────────────────────────────────────────────
# Errors
# ─────────────────────────────────────────────────────────────────────────────

class PlacementError(Exception):
    """Base class for plan validation errors."""


class OutOfBoundsError(PlacementError):
    """Crate extends outside the truck."""


class OverlapError(PlacementError):
    """Crate shares a cell with an already-loaded crate."""


class UnsupportedPlacementError(PlacementError):
    """Crate does not rest on enough occupied cells."""


class RotationMismatchError(PlacementError):
    """Placed extents or instruction flags do not match a modeled rotation."""


class SequenceError(PlacementError):
    """Steps or crate ids in the plan are inconsistent."""


# ─────────────────────────────────────────────────────────────────────────────
# Single-placement checks
# ─────────────────────────────────────────────────────────────────────────────

def check_bounds(grid: OccupancyGrid, p: Placement) -> None:
    if not grid.contains(p.x, p.y, p.z, p.width, p.height, p.length):
        raise OutOfBoundsError(
            f"Crate {p.crate_id} at ({p.x}, {p.y}, {p.z}) size "
            f"{p.width}×{p.height}×{p.length} exceeds truck "
            f"{grid.width}×{grid.height}×{grid.length}"
        )


def check_overlap(grid: OccupancyGrid, p: Placement) -> None:
    if not grid.is_free(p.x, p.y, p.z, p.width, p.height, p.length):
        raise OverlapError(
            f"Crate {p.crate_id} at ({p.x}, {p.y}, {p.z}) overlaps a loaded crate"
        )


def check_support(grid: OccupancyGrid, p: Placement, support_ratio: float) -> None:
    if p.y == 0:
        return
    needed = required_support(p.width, p.length, support_ratio)
    supported = grid.supported_cells(p.x, p.y, p.z, p.width, p.length)
    if supported < needed:
        raise UnsupportedPlacementError(
            f"Crate {p.crate_id} at ({p.x}, {p.y}, {p.z}) has {supported} "
            f"supported cells, needs {needed}"
        )


def check_rotation(crate: Crate, p: Placement, instruction: LoadingInstruction) -> None:
    expected = p.rotation.apply(*crate.extents)
    if expected != (p.width, p.height, p.length):
        raise RotationMismatchError(
            f"Crate {crate.id}: extents {p.width}×{p.height}×{p.length} do not "
            f"match rotation {p.rotation.name} of {crate!r}"
        )
    if instruction.turn_horizontal and instruction.turn_vertical:
        raise RotationMismatchError(
            f"Crate {crate.id}: both turn flags set"
        )
    if (instruction.turn_horizontal != (p.rotation is Rotation.HORIZONTAL)
            or instruction.turn_vertical != (p.rotation is Rotation.VERTICAL)):
        raise RotationMismatchError(
            f"Crate {crate.id}: flags do not match rotation {p.rotation.name}"
        )
    if p.rotation is not Rotation.NONE and expected == crate.extents:
        raise RotationMismatchError(
            f"Crate {crate.id}: unchanged extents reported as {p.rotation.name}"
        )


# ─────────────────────────────────────────────────────────────────────────────
# Whole-plan validation
# ─────────────────────────────────────────────────────────────────────────────

def verify_plan(
    truck: Truck,
    crates: Iterable[Crate],
    result: PlanResult,
    support_ratio: float = DEFAULT_SUPPORT_RATIO,
) -> bool:
    """
    Validate every placement of a successful plan.

    Args:
        truck:         Truck the plan was made for.
        crates:        Input crates (original extents).
        result:        Planner output.
        support_ratio: Ratio the plan was made with.

    Returns:
        True if all checks pass.  Failed results carry no placements and
        are trivially valid.

    Raises:
        OutOfBoundsError, OverlapError, UnsupportedPlacementError,
        RotationMismatchError, SequenceError.
    """
    by_id: Mapping[int, Crate] = {c.id: c for c in crates}
    grid = OccupancyGrid.for_truck(truck)

    if len(result.instructions) != len(result.placements):
        raise SequenceError(
            f"{len(result.instructions)} instructions for "
            f"{len(result.placements)} placements"
        )

    for expected_step, p in enumerate(result.placements, start=1):
        if p.step != expected_step:
            raise SequenceError(f"Crate {p.crate_id} has step {p.step}, expected {expected_step}")
        crate = by_id.get(p.crate_id)
        if crate is None:
            raise SequenceError(f"Unknown crate id {p.crate_id}")
        instruction = result.instructions.get(p.crate_id)
        if instruction is None or instruction.step != p.step:
            raise SequenceError(f"Instruction for crate {p.crate_id} missing or out of step")

        check_bounds(grid, p)
        check_support(grid, p, support_ratio)
        check_overlap(grid, p)
        check_rotation(crate, p, instruction)
        grid.occupy(p.x, p.y, p.z, p.width, p.height, p.length)

    if result.ok and len(result.placements) != len(by_id):
        raise SequenceError(
            f"Plan marked complete but placed {len(result.placements)} "
            f"of {len(by_id)} crates"
        )
    return True
