"""
Core data models for truck loading plans.

Axis convention used everywhere in the package:

    x — truck width
    y — truck height (vertical, y = 0 is the truck floor)
    z — truck length

Classes:
    Crate              — input crate with integer extents
    Truck              — cargo volume the crates are loaded into
    Rotation           — the three rotations the planner explores
    Placement          — a committed crate box inside the truck
    LoadingInstruction — per-crate instruction handed to the loading crew
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


# ─────────────────────────────────────────────────────────────────────────────
# Crate & Truck
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Crate:
    """
    A crate to be loaded.

    Attributes:
        id:     Unique identifier.
        width:  X-axis extent (grid units).
        height: Y-axis extent.
        length: Z-axis extent.
    """
    id: int
    width: int
    height: int
    length: int

    @property
    def volume(self) -> int:
        """Total volume of the crate in grid cells."""
        return self.width * self.height * self.length

    @property
    def extents(self) -> tuple[int, int, int]:
        return (self.width, self.height, self.length)

    def to_dict(self) -> dict:
        return {"id": self.id, "width": self.width, "height": self.height,
                "length": self.length}

    def __repr__(self) -> str:
        return f"Crate(id={self.id}, {self.width}×{self.height}×{self.length})"


@dataclass(frozen=True)
class Truck:
    """Interior dimensions of the truck cargo area (grid units)."""
    width: int
    height: int
    length: int

    @property
    def volume(self) -> int:
        return self.width * self.height * self.length

    @property
    def extents(self) -> tuple[int, int, int]:
        return (self.width, self.height, self.length)

    def to_dict(self) -> dict:
        return {"width": self.width, "height": self.height, "length": self.length}


# ─────────────────────────────────────────────────────────────────────────────
# Rotation
# ─────────────────────────────────────────────────────────────────────────────

class Rotation(Enum):
    """
    The three crate rotations the planner explores, in search order.

    NONE       — original (width, height, length)
    HORIZONTAL — turned about the vertical axis: width and length swapped
    VERTICAL   — stood on another face: height and length swapped
    """
    NONE = 0
    HORIZONTAL = 1
    VERTICAL = 2

    def apply(self, width: int, height: int, length: int) -> tuple[int, int, int]:
        """Return the (width, height, length) extents after this rotation."""
        if self is Rotation.HORIZONTAL:
            return (length, height, width)
        if self is Rotation.VERTICAL:
            return (width, length, height)
        return (width, height, length)

    @staticmethod
    def candidates(crate: Crate) -> list[tuple["Rotation", tuple[int, int, int]]]:
        """
        Rotations to try for *crate*, in search order.

        A rotation whose extents equal an earlier one is dropped: it would
        scan exactly the same positions again.
        """
        seen: set = set()
        rotations: list[tuple[Rotation, tuple[int, int, int]]] = []
        for rotation in Rotation:
            dims = rotation.apply(*crate.extents)
            if dims not in seen:
                seen.add(dims)
                rotations.append((rotation, dims))
        return rotations


# ─────────────────────────────────────────────────────────────────────────────
# Placement (committed box inside the truck)
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Placement:
    """
    A committed crate placement.

    Attributes:
        crate_id:  ID of the placed crate.
        x, y, z:   Minimum corner of the crate box.
        width, height, length: Extents after rotation.
        rotation:  Rotation that was applied.
        step:      1-based commit order.
    """
    crate_id: int
    x: int
    y: int
    z: int
    width: int
    height: int
    length: int
    rotation: Rotation
    step: int

    @property
    def volume(self) -> int:
        return self.width * self.height * self.length

    @property
    def x_max(self) -> int:
        return self.x + self.width

    @property
    def y_max(self) -> int:
        return self.y + self.height

    @property
    def z_max(self) -> int:
        return self.z + self.length

    def overlaps(self, other: "Placement") -> bool:
        """True if the two boxes share at least one grid cell."""
        return (
            self.x < other.x_max and other.x < self.x_max
            and self.y < other.y_max and other.y < self.y_max
            and self.z < other.z_max and other.z < self.z_max
        )

    def to_dict(self) -> dict:
        return {
            "step": self.step,
            "crate_id": self.crate_id,
            "dims": [self.width, self.height, self.length],
            "position": [self.x, self.y, self.z],
            "rotation": self.rotation.name,
        }


# ─────────────────────────────────────────────────────────────────────────────
# LoadingInstruction (planner output)
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LoadingInstruction:
    """
    One step of the loading sequence.

    ``turn_horizontal`` means the crate is turned about the vertical axis
    (width and length swapped); ``turn_vertical`` means it is stood on
    another face (height and length swapped).
    """
    step: int
    crate_id: int
    x: int
    y: int
    z: int
    turn_horizontal: bool = False
    turn_vertical: bool = False

    @classmethod
    def from_placement(cls, placement: Placement) -> "LoadingInstruction":
        return cls(
            step=placement.step,
            crate_id=placement.crate_id,
            x=placement.x,
            y=placement.y,
            z=placement.z,
            turn_horizontal=placement.rotation is Rotation.HORIZONTAL,
            turn_vertical=placement.rotation is Rotation.VERTICAL,
        )

    def to_dict(self) -> dict:
        return {
            "step": self.step,
            "crate_id": self.crate_id,
            "x": self.x,
            "y": self.y,
            "z": self.z,
            "turn_horizontal": self.turn_horizontal,
            "turn_vertical": self.turn_vertical,
        }
