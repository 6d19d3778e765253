"""Metrics, formatting and export for loading plans.

Provides a dataclass describing one planning run and utilities for
printing the loading sequence and exporting results to JSON and CSV.
"""

from __future__ import annotations

import csv
import json
from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from truckload.core.models import Crate, LoadingInstruction, Truck
from truckload.core.result import PlanResult

INSTRUCTION_FIELDS = [
    "step", "crate_id", "x", "y", "z", "turn_horizontal", "turn_vertical",
]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class PlanMetrics:
    """Metrics for a single planning run.

    Attributes:
        status: "complete", "capacity_exceeded" or "placement_failed".
        crates_total: Number of crates in the input.
        crates_placed: Number of crates with an instruction.
        crate_volume: Total volume of all input crates.
        truck_volume: Volume of the truck.
        volume_placed: Volume of the placed crates.
        utilization_pct: volume_placed / truck_volume in percent (0-100).
        runtime_seconds: Wall-clock planning time.
        failure_message: Human-readable failure, empty on success.
        failed_crate_id: Crate that could not be placed, if any.
        started_at: Run start timestamp.
        completed_at: Run end timestamp (None if running).
    """

    status: str = "running"
    crates_total: int = 0
    crates_placed: int = 0
    crate_volume: int = 0
    truck_volume: int = 0
    volume_placed: int = 0
    utilization_pct: float = 0.0
    runtime_seconds: float = 0.0
    failure_message: str = ""
    failed_crate_id: int | None = None
    started_at: datetime = field(default_factory=_utcnow)
    completed_at: datetime | None = None

    @classmethod
    def start(cls, truck: Truck, crates: list[Crate]) -> "PlanMetrics":
        return cls(
            crates_total=len(crates),
            crate_volume=sum(c.volume for c in crates),
            truck_volume=truck.volume,
        )

    def record_result(self, result: PlanResult) -> None:
        """Fill in outcome fields from *result* and stop the clock.

        Example:
            >>> from truckload.core.models import Crate, Truck
            >>> from truckload.core.result import PlanResult
            >>> m = PlanMetrics.start(Truck(2, 2, 2), [Crate(1, 1, 1, 1)])
            >>> m.record_result(PlanResult())
            >>> m.status
            'complete'
        """
        self.status = result.status
        self.crates_placed = len(result.placements)
        self.volume_placed = sum(p.volume for p in result.placements)
        if self.truck_volume:
            self.utilization_pct = 100.0 * self.volume_placed / self.truck_volume
        if result.failure is not None:
            self.failure_message = result.failure.message
            self.failed_crate_id = getattr(result.failure, "crate_id", None)
        self.completed_at = _utcnow()
        self.runtime_seconds = (self.completed_at - self.started_at).total_seconds()

    def to_dict(self) -> dict[str, Any]:
        d = asdict(self)
        d["started_at"] = self.started_at.isoformat()
        d["completed_at"] = self.completed_at.isoformat() if self.completed_at else None
        return d


def format_instruction(instruction: LoadingInstruction) -> str:
    """One-line crew instruction.

    Example:
        >>> format_instruction(LoadingInstruction(1, 7, 0, 0, 2, turn_horizontal=True))
        'Step 1: Crate 7 at (0, 0, 2) turned horizontally'
    """
    text = (
        f"Step {instruction.step}: Crate {instruction.crate_id} "
        f"at ({instruction.x}, {instruction.y}, {instruction.z})"
    )
    if instruction.turn_horizontal:
        text += " turned horizontally"
    if instruction.turn_vertical:
        text += " turned vertically"
    return text


def format_instructions(result: PlanResult) -> str:
    return "\n".join(format_instruction(i) for i in result.ordered_instructions())


def export_to_json(
    metrics: PlanMetrics,
    result: PlanResult,
    output_path: Path | str,
    truck: Truck | None = None,
) -> None:
    """Export run metrics, instructions and placements to a JSON file."""
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    data: dict[str, Any] = {
        "metrics": metrics.to_dict(),
        "instructions": [i.to_dict() for i in result.ordered_instructions()],
        "placements": [p.to_dict() for p in result.placements],
    }
    if truck is not None:
        data["truck"] = truck.to_dict()

    with output_path.open("w") as f:
        json.dump(data, f, indent=2)


def export_to_csv(result: PlanResult, output_path: Path | str) -> None:
    """Export the loading sequence, one instruction per row.

    A failed plan produces a header-only file.
    """
    output_path = Path(output_path)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with output_path.open("w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=INSTRUCTION_FIELDS)
        writer.writeheader()
        for instruction in result.ordered_instructions():
            writer.writerow(instruction.to_dict())


def print_summary(metrics: PlanMetrics) -> str:
    """Generate a human-readable summary of a planning run.

    Example:
        >>> m = PlanMetrics(status="complete", crates_total=2, crates_placed=2)
        >>> "Status: complete" in print_summary(m)
        True
    """
    lines = [
        "=" * 60,
        f"Status: {metrics.status}",
        "=" * 60,
        f"Crates Placed: {metrics.crates_placed}/{metrics.crates_total}",
        f"Crate Volume:  {metrics.crate_volume}",
        f"Truck Volume:  {metrics.truck_volume}",
        f"Utilization:   {metrics.utilization_pct:.2f}%",
        f"Runtime: {metrics.runtime_seconds:.3f} seconds",
    ]
    if metrics.failure_message:
        lines.append(f"Error: {metrics.failure_message}")
    lines.append("=" * 60)
    return "\n".join(lines)
