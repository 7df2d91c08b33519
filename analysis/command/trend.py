"""Early-versus-late session accuracy comparison."""

from __future__ import annotations

from typing import Sequence

from analysis.command.aggregator import proximity_average
from contracts import PitchRecord, TrendMetrics
from metrics.proximity import DECAY_RATE

TREND_WINDOW = 10


def compute_trend_metrics(
    records: Sequence[PitchRecord],
    window_size: int = TREND_WINDOW,
    decay_rate: float = DECAY_RATE
) -> TrendMetrics:
    """Compare accuracy of the first and last pitches in capture order.

    Each window holds min(window_size, n) records, so the two windows
    overlap for sessions shorter than 2 * window_size.
    """
    records = list(records)
    size = min(window_size, len(records))
    early = records[:size]
    late = records[len(records) - size:]

    return TrendMetrics(
        early_accuracy=proximity_average(early, decay_rate),
        late_accuracy=proximity_average(late, decay_rate),
    )


__all__ = ["TREND_WINDOW", "compute_trend_metrics"]
