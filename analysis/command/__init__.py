"""Pitch command analytics.

Turns a session's logged pitches into strike/target-hit rates, miss
direction diagnostics, early-vs-late trends, a composite command score,
and coaching insights.
"""

from .analyzer import CommandAnalyzer, calculate_pitch_session_analytics
from .insights import InsightContext, InsightRule, InsightThresholds, generate_insights
from .schemas import (
    CountBreakdown,
    SessionPerformancePoint,
    TargetBreakdown,
    ZoneHeatmapEntry,
)

__all__ = [
    "CommandAnalyzer",
    "calculate_pitch_session_analytics",
    "InsightContext",
    "InsightRule",
    "InsightThresholds",
    "generate_insights",
    "CountBreakdown",
    "SessionPerformancePoint",
    "TargetBreakdown",
    "ZoneHeatmapEntry",
]
