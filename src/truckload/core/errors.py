"""Exception types raised for failed loading plans."""


class PlanningError(Exception):
    """Base class for planning failures."""


class CapacityExceededError(PlanningError):
    """Total crate volume is larger than the truck volume."""

    def __init__(self, crate_volume: int, truck_volume: int) -> None:
        self.crate_volume = crate_volume
        self.truck_volume = truck_volume
        super().__init__(
            f"The total volume of the crates ({crate_volume}) exceeds "
            f"the truck's cargo capacity ({truck_volume})."
        )


class PlacementFailedError(PlanningError):
    """A crate could not be placed under any rotation or position."""

    def __init__(self, crate_id: int) -> None:
        self.crate_id = crate_id
        super().__init__(f"Failed to place crate {crate_id}")
