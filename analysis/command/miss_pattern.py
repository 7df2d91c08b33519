"""Miss direction classification and aggregation."""

from __future__ import annotations

from typing import Dict, Optional, Sequence

from analysis.command.utils import mean_or_zero, percent
from contracts import (
    MissDirection,
    MissPattern,
    MissSideConvention,
    PitcherHandedness,
    PitchRecord,
)
from metrics.proximity import record_distance

# Offsets below this on both axes are on target, not a miss.
MISS_THRESHOLD = 0.05


def classify_miss(
    dx: float,
    dy: float,
    pitcher_hand: PitcherHandedness = PitcherHandedness.RIGHT,
    convention: MissSideConvention = MissSideConvention.CATCHER_VIEW,
    threshold: float = MISS_THRESHOLD
) -> Optional[MissDirection]:
    """Classify a target-to-actual offset into a miss direction.

    Args:
        dx: actual_x - target_x (positive = catcher's right)
        dy: actual_y - target_y (positive = up)
        pitcher_hand: Pitcher handedness
        convention: CATCHER_VIEW treats positive dx as arm-side for every
            pitcher; PITCHER_RELATIVE mirrors that for left-handers
        threshold: Per-axis distance below which the pitch is on target

    Returns:
        Miss direction, or None if the pitch is not a miss
    """
    if abs(dx) < threshold and abs(dy) < threshold:
        return None

    if abs(dy) > abs(dx):
        return MissDirection.UP if dy > 0 else MissDirection.DOWN

    positive_is_arm = True
    if convention == MissSideConvention.PITCHER_RELATIVE:
        # A right-hander's arm side is the catcher's left.
        positive_is_arm = pitcher_hand == PitcherHandedness.LEFT

    if (dx > 0) == positive_is_arm:
        return MissDirection.ARM_SIDE
    return MissDirection.GLOVE_SIDE


def record_miss_direction(
    record: PitchRecord,
    pitcher_hand: PitcherHandedness = PitcherHandedness.RIGHT,
    convention: MissSideConvention = MissSideConvention.CATCHER_VIEW,
    threshold: float = MISS_THRESHOLD
) -> Optional[MissDirection]:
    if not record.has_coordinates:
        return None
    dx = record.actual_x_norm - record.target_x_norm
    dy = record.actual_y_norm - record.target_y_norm
    return classify_miss(dx, dy, pitcher_hand, convention, threshold)


def compute_miss_pattern(
    records: Sequence[PitchRecord],
    pitcher_hand: PitcherHandedness = PitcherHandedness.RIGHT,
    convention: MissSideConvention = MissSideConvention.CATCHER_VIEW,
    threshold: float = MISS_THRESHOLD
) -> MissPattern:
    """Aggregate miss directions over a session.

    Percentages are relative to the number of misses, not pitches, and are
    all zero when nothing missed. Records without coordinates are skipped.
    """
    counts: Dict[MissDirection, int] = {direction: 0 for direction in MissDirection}
    miss_distances = []

    for record in records:
        direction = record_miss_direction(record, pitcher_hand, convention, threshold)
        if direction is None:
            continue
        counts[direction] += 1
        miss_distances.append(record_distance(record))

    miss_count = len(miss_distances)
    return MissPattern(
        miss_up_pct=percent(counts[MissDirection.UP], miss_count),
        miss_down_pct=percent(counts[MissDirection.DOWN], miss_count),
        miss_arm_side_pct=percent(counts[MissDirection.ARM_SIDE], miss_count),
        miss_glove_side_pct=percent(counts[MissDirection.GLOVE_SIDE], miss_count),
        avg_miss_distance=round(mean_or_zero(miss_distances), 3),
        miss_count=miss_count,
    )


def dominant_miss_direction(pattern: MissPattern) -> Optional[MissDirection]:
    """Direction with the highest share; ties go up, down, arm, glove."""
    if pattern.miss_count == 0:
        return None
    best_direction, best_pct = pattern.direction_percentages()[0]
    for direction, pct in pattern.direction_percentages()[1:]:
        if pct > best_pct:
            best_direction, best_pct = direction, pct
    return best_direction


__all__ = [
    "MISS_THRESHOLD",
    "classify_miss",
    "record_miss_direction",
    "compute_miss_pattern",
    "dominant_miss_direction",
]
