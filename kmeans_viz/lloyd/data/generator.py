"""
Synthetic rental-store customers drawn from fixed segments.

Each segment contributes `count` customers placed at the segment center plus
independent uniform noise on both features.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from kmeans_viz.config import (
    CUSTOMER_SEGMENTS,
    FIRST_CUSTOMER_ID,
    RENTALS_NOISE,
    SPENDING_NOISE,
)
from kmeans_viz.lloyd.core.initializer import RandomLike, make_rng
from kmeans_viz.lloyd.core.models import Point


def generate_customers(
    rng: RandomLike = None,
    segments: Optional[Sequence[dict]] = None,
    rentals_noise: float = RENTALS_NOISE,
    spending_noise: float = SPENDING_NOISE,
) -> Tuple[Point, ...]:
    """
    Generate the demo customer dataset.

    Args:
        rng: Seed or numpy Generator.
        segments: Dicts with 'rentals', 'spending' and 'count' keys
            (default: CUSTOMER_SEGMENTS).
        rentals_noise: Half-width of the uniform noise on rentals.
        spending_noise: Half-width of the uniform noise on spending.

    Returns:
        Unassigned points with consecutive ids starting at FIRST_CUSTOMER_ID.
    """
    generator = make_rng(rng)
    segments = CUSTOMER_SEGMENTS if segments is None else segments

    points = []
    customer_id = FIRST_CUSTOMER_ID
    for seg in segments:
        for _ in range(int(seg["count"])):
            rentals = seg["rentals"] + generator.uniform(-rentals_noise, rentals_noise)
            spending = seg["spending"] + generator.uniform(-spending_noise, spending_noise)
            points.append(
                Point(id=customer_id, feature1=float(rentals), feature2=float(spending))
            )
            customer_id += 1

    return tuple(points)


__all__ = ["generate_customers"]
