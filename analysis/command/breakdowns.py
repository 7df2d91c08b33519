"""Coach-facing breakdowns: zone heatmap, per-target and per-count tables."""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

from analysis.command.aggregator import (
    competitive_strike_percentage,
    proximity_average,
    strike_percentage,
    target_hit_rate,
)
from analysis.command.schemas import CountBreakdown, TargetBreakdown, ZoneHeatmapEntry
from contracts import PitchRecord, StrikePolicy, ZoneId
from metrics.proximity import DECAY_RATE
from metrics.zone_mapper import ALL_ZONES

# The coach tables also count any pitch landing inside the grid as a strike.
BREAKDOWN_STRIKE_POLICY = StrikePolicy.OUTCOME_OR_ZONE


def compute_zone_heatmap(
    records: Sequence[PitchRecord],
    decay_rate: float = DECAY_RATE
) -> List[ZoneHeatmapEntry]:
    """Intended/actual counts and landing proximity for all 13 zones.

    Records whose zones are unrecognized are not attributed to any cell.
    """
    entries = []
    for zone in ALL_ZONES:
        intended = sum(1 for r in records if r.target_zone == zone)
        landed = [r for r in records if r.actual_zone == zone]
        entries.append(ZoneHeatmapEntry(
            zone=zone,
            intended_count=intended,
            actual_count=len(landed),
            proximity_avg=proximity_average(landed, decay_rate),
        ))
    return entries


def group_by_target(
    records: Sequence[PitchRecord],
    policy: StrikePolicy = BREAKDOWN_STRIKE_POLICY
) -> List[TargetBreakdown]:
    """Per-target results in first-seen order, flagging best and worst.

    Best/worst are by target-hit rate and only flagged when more than one
    target was used.
    """
    grouped: Dict[ZoneId, List[PitchRecord]] = {}
    for record in records:
        grouped.setdefault(record.target_zone, []).append(record)

    rows = [
        TargetBreakdown(
            target_zone=zone,
            attempts=len(group),
            strike_pct=strike_percentage(group, policy),
            target_hit_pct=target_hit_rate(group),
        )
        for zone, group in grouped.items()
    ]
    if len(rows) < 2:
        return rows

    ranked = sorted(rows, key=lambda row: row.target_hit_pct, reverse=True)
    best_zone = ranked[0].target_zone
    worst_zone = ranked[-1].target_zone

    return [
        TargetBreakdown(
            target_zone=row.target_zone,
            attempts=row.attempts,
            strike_pct=row.strike_pct,
            target_hit_pct=row.target_hit_pct,
            is_best=row.target_zone == best_zone,
            is_worst=row.target_zone == worst_zone,
        )
        for row in rows
    ]


def group_by_count(
    records: Sequence[PitchRecord],
    policy: StrikePolicy = BREAKDOWN_STRIKE_POLICY
) -> List[CountBreakdown]:
    """Per ball-strike count results, ordered by balls then strikes."""
    grouped: Dict[Tuple[int, int], List[PitchRecord]] = {}
    for record in records:
        grouped.setdefault((record.balls_before, record.strikes_before), []).append(record)

    return [
        CountBreakdown(
            balls=balls,
            strikes=strikes,
            attempts=len(group),
            strike_pct=strike_percentage(group, policy),
            competitive_strike_pct=competitive_strike_percentage(group, policy),
        )
        for (balls, strikes), group in sorted(grouped.items())
    ]


__all__ = [
    "BREAKDOWN_STRIKE_POLICY",
    "compute_zone_heatmap",
    "group_by_target",
    "group_by_count",
]
