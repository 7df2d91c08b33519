"""Strike, target-hit and proximity rates per session and per pitch type."""

from __future__ import annotations

from typing import Dict, List, Mapping, Optional, Sequence

from analysis.command.utils import clamp, mean_or_zero, percent, round_half_up, summarize_distances
from contracts import (
    CENTER_ZONE,
    InteriorZone,
    PitchOutcome,
    PitchRecord,
    PitchTypeMetrics,
    SituationalMetrics,
    StrikePolicy,
    ZoneId,
)
from metrics.proximity import DECAY_RATE, record_proximity

STRIKE_OUTCOMES = frozenset({
    PitchOutcome.CALLED_STRIKE,
    PitchOutcome.SWINGING_STRIKE,
    PitchOutcome.FOUL,
})

# Standard pitch type codes and their display names.
PITCH_TYPE_NAMES = {
    "FB": "Fastball",
    "CH": "Changeup",
    "CB": "Curveball",
    "SL": "Slider",
    "SI": "Sinker",
}


def is_strike(
    outcome: PitchOutcome,
    policy: StrikePolicy = StrikePolicy.OUTCOME_ONLY,
    actual_zone: Optional[ZoneId] = None
) -> bool:
    """Decide whether a pitch counts as a strike under the given policy.

    Args:
        outcome: Recorded pitch outcome
        policy: Which outcomes (and zones) count as strikes
        actual_zone: Where the pitch landed; only used by OUTCOME_OR_ZONE

    Returns:
        True if the pitch is a strike
    """
    if outcome in STRIKE_OUTCOMES:
        return True
    if policy == StrikePolicy.IN_PLAY_COUNTS:
        return outcome == PitchOutcome.IN_PLAY
    if policy == StrikePolicy.OUTCOME_OR_ZONE:
        return isinstance(actual_zone, InteriorZone)
    return False


def record_is_strike(record: PitchRecord, policy: StrikePolicy = StrikePolicy.OUTCOME_ONLY) -> bool:
    return is_strike(record.outcome, policy, record.actual_zone)


def pitch_type_display_name(
    pitch_type_id: str,
    pitch_type_names: Optional[Mapping[str, str]] = None
) -> str:
    """Human-readable pitch type name.

    Caller-supplied names win, then standard codes (FB, CH, ...), then
    "Unknown".
    """
    if pitch_type_names and pitch_type_id in pitch_type_names:
        return pitch_type_names[pitch_type_id]
    return PITCH_TYPE_NAMES.get(pitch_type_id.upper(), "Unknown")


def strike_percentage(
    records: Sequence[PitchRecord],
    policy: StrikePolicy = StrikePolicy.OUTCOME_ONLY
) -> int:
    strikes = sum(1 for r in records if record_is_strike(r, policy))
    return percent(strikes, len(records))


def target_hit_rate(records: Sequence[PitchRecord]) -> int:
    hits = sum(1 for r in records if r.actual_zone == r.target_zone)
    return percent(hits, len(records))


def proximity_average(records: Sequence[PitchRecord], decay_rate: float = DECAY_RATE) -> float:
    """Mean proximity over records carrying all four coordinates.

    Records without coordinates are left out of the denominator; 0.0 when
    none qualify.
    """
    scores = [record_proximity(r, decay_rate) for r in records if r.has_coordinates]
    return round(mean_or_zero(scores), 2)


def competitive_strike_percentage(
    records: Sequence[PitchRecord],
    policy: StrikePolicy = StrikePolicy.OUTCOME_ONLY
) -> int:
    """Strikes plus pitches that landed on an edge of the zone."""
    competitive = sum(
        1 for r in records
        if record_is_strike(r, policy) or r.actual_zone.is_edge
    )
    return percent(competitive, len(records))


def middle_middle_percentage(records: Sequence[PitchRecord]) -> float:
    if not records:
        return 0.0
    middle = sum(1 for r in records if r.actual_zone == CENTER_ZONE)
    return 100.0 * middle / len(records)


def compute_command_rating(
    target_hit_pct: float,
    competitive_strike_pct: float,
    strike_pct: float,
    middle_middle_pct: float
) -> int:
    """Weighted command rating (0-100) with a middle-middle penalty."""
    base = 0.4 * target_hit_pct + 0.3 * competitive_strike_pct + 0.2 * strike_pct
    penalty = 0.5 * middle_middle_pct
    return int(clamp(round_half_up(base - penalty), 0, 100))


def compute_pitch_type_metrics(
    records: Sequence[PitchRecord],
    pitch_type_names: Optional[Mapping[str, str]] = None,
    policy: StrikePolicy = StrikePolicy.OUTCOME_ONLY,
    decay_rate: float = DECAY_RATE
) -> List[PitchTypeMetrics]:
    """Group records by pitch type and compute per-type metrics.

    Args:
        records: Pitch records for the session
        pitch_type_names: Optional pitch_type_id -> display name mapping
        policy: Strike counting policy
        decay_rate: Proximity decay rate

    Returns:
        Metrics per pitch type, most-thrown first
    """
    grouped: Dict[str, List[PitchRecord]] = {}
    for record in records:
        grouped.setdefault(record.pitch_type_id, []).append(record)

    result = []
    for pitch_type_id, group in grouped.items():
        strike_pct = strike_percentage(group, policy)
        hit_rate = target_hit_rate(group)
        competitive_pct = competitive_strike_percentage(group, policy)
        middle_pct = middle_middle_percentage(group)

        inches = [r.miss_distance_inches for r in group if r.miss_distance_inches is not None]
        inches_avg, inches_median, inches_max = summarize_distances(inches)

        result.append(PitchTypeMetrics(
            pitch_type_id=pitch_type_id,
            pitch_type_name=pitch_type_display_name(pitch_type_id, pitch_type_names),
            count=len(group),
            strike_pct=strike_pct,
            accuracy_hit_rate=hit_rate,
            accuracy_proximity_avg=proximity_average(group, decay_rate),
            competitive_strike_pct=competitive_pct,
            middle_middle_pct=round(middle_pct, 1),
            command_rating=compute_command_rating(hit_rate, competitive_pct, strike_pct, middle_pct),
            accuracy_inches_avg=inches_avg,
            accuracy_inches_median=inches_median,
            accuracy_inches_max=inches_max,
        ))

    # sorted() is stable, so equal counts keep first-seen order
    return sorted(result, key=lambda m: m.count, reverse=True)


def compute_situational_metrics(
    records: Sequence[PitchRecord],
    policy: StrikePolicy = StrikePolicy.OUTCOME_ONLY
) -> SituationalMetrics:
    first_pitches = [r for r in records if r.is_first_pitch]
    behind = [r for r in records if r.is_behind_in_count]

    return SituationalMetrics(
        first_pitch_strike_pct=strike_percentage(first_pitches, policy),
        behind_in_count_strike_pct=strike_percentage(behind, policy),
        behind_in_count_accuracy=target_hit_rate(behind),
    )


__all__ = [
    "STRIKE_OUTCOMES",
    "PITCH_TYPE_NAMES",
    "is_strike",
    "record_is_strike",
    "pitch_type_display_name",
    "strike_percentage",
    "target_hit_rate",
    "proximity_average",
    "competitive_strike_percentage",
    "middle_middle_percentage",
    "compute_command_rating",
    "compute_pitch_type_metrics",
    "compute_situational_metrics",
]
