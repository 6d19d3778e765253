"""
truckload — greedy 3D crate placement planner for loading a single truck.

Public API:
    from truckload import Crate, Truck, plan_loading
    result = plan_loading(Truck(4, 4, 4), [Crate(1, 4, 4, 2), Crate(2, 2, 2, 2)])
    if result.ok:
        for instruction in result.ordered_instructions(): ...
"""

from .algorithms.greedy_planner import LoadingPlanner, can_place, plan_loading
from .algorithms.validator import PlacementError, verify_plan
from .core.config import PlannerConfig
from .core.errors import CapacityExceededError, PlacementFailedError, PlanningError
from .core.grid import OccupancyGrid
from .core.models import Crate, LoadingInstruction, Placement, Rotation, Truck
from .core.result import CapacityExceeded, PlacementFailed, PlanResult

__all__ = [
    "Crate",
    "Truck",
    "Rotation",
    "Placement",
    "LoadingInstruction",
    "OccupancyGrid",
    "PlannerConfig",
    "LoadingPlanner",
    "plan_loading",
    "can_place",
    "verify_plan",
    "PlanResult",
    "CapacityExceeded",
    "PlacementFailed",
    "PlanningError",
    "CapacityExceededError",
    "PlacementFailedError",
    "PlacementError",
]
