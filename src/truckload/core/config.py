"""Planner configuration."""

from dataclasses import dataclass

# Fraction of a crate's footprint that must rest on occupied cells.
DEFAULT_SUPPORT_RATIO = 0.75


@dataclass(frozen=True)
class PlannerConfig:
    """
    Tuneable parameters of the placement engine.

    Attributes:
        support_ratio: Minimum supported fraction of the footprint for any
                       crate not standing on the truck floor.  The required
                       cell count is rounded up.
    """
    support_ratio: float = DEFAULT_SUPPORT_RATIO

    def __post_init__(self) -> None:
        if not 0.0 < self.support_ratio <= 1.0:
            raise ValueError(
                f"support_ratio must be in (0, 1], got {self.support_ratio}"
            )
