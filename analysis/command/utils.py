"""Statistical utility functions for command analytics."""

from __future__ import annotations

import math
from typing import List, Optional, Sequence, Tuple

import numpy as np


def round_half_up(value: float) -> int:
    """Round to the nearest integer with .5 going up (not banker's rounding)."""
    return int(math.floor(value + 0.5))


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


def percent(count: int, total: int) -> int:
    """Integer percentage of count over total, 0 when total is 0."""
    if total <= 0:
        return 0
    return round_half_up(100.0 * count / total)


def mean_or_zero(values: Sequence[float]) -> float:
    """Mean of values, or 0.0 for an empty sequence.

    Args:
        values: Values to average

    Returns:
        Arithmetic mean as a plain float
    """
    if len(values) == 0:
        return 0.0
    return float(np.mean(values))


def compute_median(values: Sequence[float]) -> Optional[float]:
    """Median using the even/odd midpoint rule, None when empty."""
    if len(values) == 0:
        return None
    return float(np.median(values))


def summarize_distances(
    values: List[float],
    decimals: int = 1
) -> Tuple[Optional[float], Optional[float], Optional[float]]:
    """Compute (mean, median, max) of distances, rounded.

    Args:
        values: Distance values (e.g. miss inches)
        decimals: Decimal places to round to

    Returns:
        Tuple of (mean, median, max); all None when values is empty
    """
    if not values:
        return (None, None, None)

    arr = np.asarray(values, dtype=float)
    return (
        round(float(np.mean(arr)), decimals),
        round(float(np.median(arr)), decimals),
        round(float(np.max(arr)), decimals),
    )


__all__ = [
    "round_half_up",
    "clamp",
    "percent",
    "mean_or_zero",
    "compute_median",
    "summarize_distances",
]
