"""Distance and proximity scoring between normalized points."""

from __future__ import annotations

import math
from typing import Optional, Tuple

from contracts import PitchRecord

Point2D = Tuple[float, float]

# Distance at which the score has decayed to 1/e (~0.37).
DECAY_DISTANCE = 0.15
DECAY_RATE = 1.0 / DECAY_DISTANCE


def distance(a: Point2D, b: Point2D) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def proximity_score(dist: float, decay_rate: float = DECAY_RATE) -> float:
    """Exponential similarity: 1.0 at zero distance, approaching 0."""
    return math.exp(-decay_rate * dist)


def record_distance(record: PitchRecord) -> Optional[float]:
    """Target-to-actual distance, or None when any coordinate is missing."""
    if not record.has_coordinates:
        return None
    return distance(record.target_point, record.actual_point)


def record_proximity(record: PitchRecord, decay_rate: float = DECAY_RATE) -> Optional[float]:
    dist = record_distance(record)
    if dist is None:
        return None
    return proximity_score(dist, decay_rate)


__all__ = [
    "DECAY_DISTANCE",
    "DECAY_RATE",
    "distance",
    "proximity_score",
    "record_distance",
    "record_proximity",
]
