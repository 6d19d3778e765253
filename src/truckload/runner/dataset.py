"""Random crate generation for planner trials."""

import random

from truckload.core.models import Crate


def generate_crates(
    count: int = 20,
    min_extent: int = 1,
    max_extent: int = 4,
    seed: int | None = None,
) -> list[Crate]:
    """
    Generate crates with integer extents drawn uniformly from
    [min_extent, max_extent].

    Args:
        count: Number of crates to generate
        min_extent: Smallest extent on any axis
        max_extent: Largest extent on any axis
        seed: Random seed for reproducibility (default: None)

    Returns:
        List of Crate objects with ids 1..count
    """
    if min_extent < 1 or max_extent < min_extent:
        raise ValueError(
            f"Invalid extent range [{min_extent}, {max_extent}]"
        )

    rng = random.Random(seed)
    return [
        Crate(
            id=i,
            width=rng.randint(min_extent, max_extent),
            height=rng.randint(min_extent, max_extent),
            length=rng.randint(min_extent, max_extent),
        )
        for i in range(1, count + 1)
    ]
