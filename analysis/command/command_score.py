"""Composite 0-100 command score."""

from __future__ import annotations

from analysis.command.utils import clamp, round_half_up

STRIKE_WEIGHT = 40.0
PROXIMITY_WEIGHT = 40.0
MISS_WEIGHT = 20.0
# Typical misses fall within 0-0.5 normalized units.
MISS_DISTANCE_NORMALIZATION = 0.5


def compute_command_score(
    strike_pct: float,
    accuracy_proximity_avg: float,
    avg_miss_distance: float,
    miss_normalization: float = MISS_DISTANCE_NORMALIZATION
) -> int:
    """Weighted blend of strike rate, proximity and miss distance.

    Args:
        strike_pct: Strike percentage (0-100)
        accuracy_proximity_avg: Mean proximity score (0-1)
        avg_miss_distance: Mean miss distance in normalized units
        miss_normalization: Miss distance that earns no miss credit

    Returns:
        Integer score clamped to [0, 100]
    """
    strike_component = STRIKE_WEIGHT * (strike_pct / 100.0)
    proximity_component = PROXIMITY_WEIGHT * accuracy_proximity_avg
    miss_normalized = min(1.0, max(0.0, avg_miss_distance) / miss_normalization)
    miss_component = MISS_WEIGHT * (1.0 - miss_normalized)

    score = strike_component + proximity_component + miss_component
    return int(clamp(round_half_up(score), 0, 100))


__all__ = [
    "STRIKE_WEIGHT",
    "PROXIMITY_WEIGHT",
    "MISS_WEIGHT",
    "MISS_DISTANCE_NORMALIZATION",
    "compute_command_score",
]
