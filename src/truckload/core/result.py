"""
Planning result — success with a full plan, or a typed failure.

A failed run never carries instructions: the plan is either complete or
absent.  Callers that prefer exceptions can use
:meth:`PlanResult.raise_for_failure`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

from truckload.core.errors import (
    CapacityExceededError,
    PlacementFailedError,
    PlanningError,
)
from truckload.core.models import LoadingInstruction, Placement


@dataclass(frozen=True)
class CapacityExceeded:
    """Aggregate crate volume is larger than the truck volume."""
    crate_volume: int
    truck_volume: int

    kind = "capacity_exceeded"

    @property
    def message(self) -> str:
        return str(self.to_exception())

    def to_exception(self) -> PlanningError:
        return CapacityExceededError(self.crate_volume, self.truck_volume)


@dataclass(frozen=True)
class PlacementFailed:
    """A crate exhausted every rotation and position."""
    crate_id: int

    kind = "placement_failed"

    @property
    def message(self) -> str:
        return str(self.to_exception())

    def to_exception(self) -> PlanningError:
        return PlacementFailedError(self.crate_id)


Failure = Union[CapacityExceeded, PlacementFailed]


@dataclass(frozen=True)
class PlanResult:
    """
    Outcome of one planning run.

    Attributes:
        instructions: crate id → instruction, in step order.
        placements:   committed boxes in step order.
        failure:      None on success.
    """
    instructions: dict[int, LoadingInstruction] = field(default_factory=dict)
    placements: list[Placement] = field(default_factory=list)
    failure: Failure | None = None

    @classmethod
    def failed(cls, failure: Failure) -> "PlanResult":
        return cls(failure=failure)

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def status(self) -> str:
        return "complete" if self.failure is None else self.failure.kind

    def ordered_instructions(self) -> list[LoadingInstruction]:
        return sorted(self.instructions.values(), key=lambda i: i.step)

    def raise_for_failure(self) -> None:
        """Raise the matching :class:`PlanningError` if the run failed."""
        if self.failure is not None:
            raise self.failure.to_exception()
