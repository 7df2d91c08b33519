"""Shared data contracts for pitch command analytics."""

from .types import (
    CENTER_ZONE,
    BaseRunner,
    BatterSide,
    EdgeDirection,
    EdgeZone,
    InteriorZone,
    MissDirection,
    MissPattern,
    MissSideConvention,
    PitchOutcome,
    PitchRecord,
    PitchSession,
    PitchSessionAnalytics,
    PitchTypeMetrics,
    PitcherHandedness,
    RestStatus,
    RestStatusColor,
    SessionStatus,
    SituationalMetrics,
    StrikePolicy,
    TrendMetrics,
    UnknownZone,
    ZoneId,
    parse_zone_id,
)

__all__ = [
    "CENTER_ZONE",
    "BaseRunner",
    "BatterSide",
    "EdgeDirection",
    "EdgeZone",
    "InteriorZone",
    "MissDirection",
    "MissPattern",
    "MissSideConvention",
    "PitchOutcome",
    "PitchRecord",
    "PitchSession",
    "PitchSessionAnalytics",
    "PitchTypeMetrics",
    "PitcherHandedness",
    "RestStatus",
    "RestStatusColor",
    "SessionStatus",
    "SituationalMetrics",
    "StrikePolicy",
    "TrendMetrics",
    "UnknownZone",
    "ZoneId",
    "parse_zone_id",
]
