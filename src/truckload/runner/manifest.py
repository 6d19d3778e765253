"""
Load manifest — truck, crates and planner settings from a YAML or JSON file.

Example manifest::

    truck: {width: 4, height: 4, length: 4}
    crates:
      - {id: 1, width: 4, height: 4, length: 2}
      - {id: 2, width: 2, height: 2, length: 2}
    planner:
      support_ratio: 0.75

The planner itself trusts its input; all value checks happen here.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from truckload.core.config import DEFAULT_SUPPORT_RATIO, PlannerConfig
from truckload.core.models import Crate, Truck


class ManifestError(Exception):
    """The manifest could not be read or is invalid."""


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────

class TruckSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    width: int = Field(gt=0)
    height: int = Field(gt=0)
    length: int = Field(gt=0)

    def to_truck(self) -> Truck:
        return Truck(width=self.width, height=self.height, length=self.length)


class CrateSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    id: int = Field(gt=0)
    width: int = Field(gt=0)
    height: int = Field(gt=0)
    length: int = Field(gt=0)

    def to_crate(self) -> Crate:
        return Crate(id=self.id, width=self.width, height=self.height, length=self.length)


class PlannerSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    support_ratio: float = Field(default=DEFAULT_SUPPORT_RATIO, gt=0.0, le=1.0)

    def to_config(self) -> PlannerConfig:
        return PlannerConfig(support_ratio=self.support_ratio)


class ManifestSpec(BaseModel):
    model_config = ConfigDict(extra="forbid")

    truck: TruckSpec
    crates: list[CrateSpec]
    planner: PlannerSpec = Field(default_factory=PlannerSpec)

    @field_validator("crates")
    @classmethod
    def _unique_ids(cls, crates: list[CrateSpec]) -> list[CrateSpec]:
        seen: set[int] = set()
        for crate in crates:
            if crate.id in seen:
                raise ValueError(f"duplicate crate id {crate.id}")
            seen.add(crate.id)
        return crates


# ─────────────────────────────────────────────────────────────────────────────
# Loaded manifest
# ─────────────────────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class Manifest:
    truck: Truck
    crates: list[Crate]
    config: PlannerConfig

    def to_dict(self) -> dict:
        return {
            "truck": self.truck.to_dict(),
            "crates": [c.to_dict() for c in self.crates],
            "planner": {"support_ratio": self.config.support_ratio},
        }


def parse_manifest(data: Any) -> Manifest:
    """
    Validate already-parsed manifest data.

    Raises:
        ManifestError: on any schema violation.
    """
    try:
        spec = ManifestSpec.model_validate(data)
    except ValidationError as e:
        raise ManifestError(f"Invalid manifest: {e}") from e
    return Manifest(
        truck=spec.truck.to_truck(),
        crates=[c.to_crate() for c in spec.crates],
        config=spec.planner.to_config(),
    )


def load_manifest(path: Path | str) -> Manifest:
    """
    Read and validate a manifest file.

    YAML is a superset of JSON, so both formats go through ``yaml.safe_load``.

    Raises:
        ManifestError: file missing, unparsable or invalid.
    """
    path = Path(path)
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ManifestError(f"Cannot read manifest {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ManifestError(f"Cannot parse manifest {path}: {e}") from e
    return parse_manifest(data)


def save_manifest(manifest: Manifest, path: Path | str) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w") as f:
        yaml.safe_dump(manifest.to_dict(), f, sort_keys=False)
