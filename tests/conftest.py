"""Shared fixtures for the truckload test suite."""

import os
import sys

import pytest

# Make the src/ layout importable without an install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from truckload.core.models import Crate, Truck


@pytest.fixture
def cube_truck():
    """4 × 4 × 4 truck."""
    return Truck(width=4, height=4, length=4)


@pytest.fixture
def example_crates():
    """Full-height crate filling half the truck, plus a small cube."""
    return [
        Crate(id=1, width=4, height=4, length=2),
        Crate(id=2, width=2, height=2, length=2),
    ]
