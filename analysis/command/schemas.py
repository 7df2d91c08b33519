"""Data schemas for coach-facing command breakdowns."""

from __future__ import annotations

from dataclasses import dataclass

from contracts import ZoneId


@dataclass(frozen=True)
class ZoneHeatmapEntry:
    """Intended vs. actual counts for one zone."""

    zone: ZoneId
    intended_count: int = 0
    actual_count: int = 0
    proximity_avg: float = 0.0


@dataclass(frozen=True)
class TargetBreakdown:
    """Results for all pitches aimed at one target zone."""

    target_zone: ZoneId
    attempts: int
    strike_pct: int
    target_hit_pct: int
    is_best: bool = False
    is_worst: bool = False


@dataclass(frozen=True)
class CountBreakdown:
    """Results for all pitches thrown in one ball-strike count."""

    balls: int
    strikes: int
    attempts: int
    strike_pct: int
    competitive_strike_pct: int

    @property
    def count_label(self) -> str:
        return f"{self.balls}-{self.strikes}"


@dataclass(frozen=True)
class SessionPerformancePoint:
    """One session's stored analytics, for charting over time."""

    session_id: str
    label: str  # e.g. "3/14"
    strike_pct: int
    target_hit_pct: int
    miss_index: float  # 100 - proximity*100, lower is better


__all__ = [
    "ZoneHeatmapEntry",
    "TargetBreakdown",
    "CountBreakdown",
    "SessionPerformancePoint",
]
