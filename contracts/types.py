"""Core data contracts for pitch records, sessions, and derived analytics."""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Tuple, Union

Point2D = Tuple[float, float]


class PitcherHandedness(str, Enum):
    RIGHT = "R"
    LEFT = "L"


class BatterSide(str, Enum):
    RIGHT = "R"
    LEFT = "L"


class BaseRunner(str, Enum):
    FIRST = "1B"
    SECOND = "2B"
    THIRD = "3B"


class PitchOutcome(str, Enum):
    BALL = "ball"
    CALLED_STRIKE = "called_strike"
    SWINGING_STRIKE = "swinging_strike"
    FOUL = "foul"
    IN_PLAY = "in_play"


class SessionStatus(str, Enum):
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"
    DISCARDED = "discarded"


class StrikePolicy(str, Enum):
    """Which pitches count as strikes.

    OUTCOME_ONLY is the session aggregator's rule. IN_PLAY_COUNTS also
    counts balls put in play. OUTCOME_OR_ZONE additionally counts any pitch
    whose actual zone is an interior cell, as the coach breakdowns do.
    """

    OUTCOME_ONLY = "outcome_only"
    IN_PLAY_COUNTS = "in_play_counts"
    OUTCOME_OR_ZONE = "outcome_or_zone"


class MissSideConvention(str, Enum):
    """How horizontal misses are labeled arm-side or glove-side.

    CATCHER_VIEW: positive x (catcher's right) is always arm-side,
    regardless of pitcher handedness. PITCHER_RELATIVE: mirrored for
    left-handers, matching the edge classification of the zone mapper.
    """

    CATCHER_VIEW = "catcher_view"
    PITCHER_RELATIVE = "pitcher_relative"


class MissDirection(str, Enum):
    UP = "up"
    DOWN = "down"
    ARM_SIDE = "arm-side"
    GLOVE_SIDE = "glove-side"


class RestStatusColor(str, Enum):
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"


# ---------------------------------------------------------------------------
# Zones
# ---------------------------------------------------------------------------


class EdgeDirection(str, Enum):
    HIGH = "HIGH"
    LOW = "LOW"
    ARM = "ARM"
    GLOVE = "GLOVE"


@dataclass(frozen=True)
class InteriorZone:
    """One of the 9 strike-zone cells. 1-indexed, row 1 is the top row."""

    row: int
    col: int

    @property
    def code(self) -> str:
        return f"Z{self.row}{self.col}"

    @property
    def is_edge(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class EdgeZone:
    """Out-of-zone (ball) location on one side of the grid."""

    direction: EdgeDirection

    @property
    def code(self) -> str:
        return f"EDGE_{self.direction.value}"

    @property
    def is_edge(self) -> bool:
        return True

    def __str__(self) -> str:
        return self.code


@dataclass(frozen=True)
class UnknownZone:
    """Unrecognized zone identifier passed through without validation."""

    raw: str

    @property
    def code(self) -> str:
        return self.raw

    @property
    def is_edge(self) -> bool:
        return False

    def __str__(self) -> str:
        return self.raw


ZoneId = Union[InteriorZone, EdgeZone, UnknownZone]

CENTER_ZONE = InteriorZone(2, 2)

_INTERIOR_RE = re.compile(r"^Z([1-3])([1-3])$")


def parse_zone_id(value: Any) -> ZoneId:
    """Convert a zone code such as "Z12" or "EDGE_ARM" into a ZoneId.

    Never raises; anything unrecognized becomes an UnknownZone.
    """
    if isinstance(value, (InteriorZone, EdgeZone, UnknownZone)):
        return value

    code = str(value).strip().upper()
    match = _INTERIOR_RE.match(code)
    if match:
        return InteriorZone(int(match.group(1)), int(match.group(2)))

    if code.startswith("EDGE_"):
        try:
            return EdgeZone(EdgeDirection(code[len("EDGE_"):]))
        except ValueError:
            pass

    return UnknownZone(str(value))


# ---------------------------------------------------------------------------
# Input records
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PitchRecord:
    session_id: str
    index: int
    pitch_type_id: str
    target_zone: ZoneId
    actual_zone: ZoneId
    outcome: PitchOutcome
    batter_side: BatterSide = BatterSide.RIGHT
    balls_before: int = 0
    strikes_before: int = 0
    base_runners: FrozenSet[BaseRunner] = frozenset()
    outs: int = 0
    target_x_norm: Optional[float] = None
    target_y_norm: Optional[float] = None
    actual_x_norm: Optional[float] = None
    actual_y_norm: Optional[float] = None
    miss_distance_inches: Optional[float] = None
    velocity_mph: Optional[float] = None

    @property
    def has_coordinates(self) -> bool:
        return (
            self.target_x_norm is not None
            and self.target_y_norm is not None
            and self.actual_x_norm is not None
            and self.actual_y_norm is not None
        )

    @property
    def target_point(self) -> Optional[Point2D]:
        if self.target_x_norm is None or self.target_y_norm is None:
            return None
        return (self.target_x_norm, self.target_y_norm)

    @property
    def actual_point(self) -> Optional[Point2D]:
        if self.actual_x_norm is None or self.actual_y_norm is None:
            return None
        return (self.actual_x_norm, self.actual_y_norm)

    @property
    def is_first_pitch(self) -> bool:
        return self.balls_before == 0 and self.strikes_before == 0

    @property
    def is_behind_in_count(self) -> bool:
        return self.balls_before > self.strikes_before


# ---------------------------------------------------------------------------
# Derived analytics
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PitchTypeMetrics:
    pitch_type_id: str
    pitch_type_name: str
    count: int
    strike_pct: int
    accuracy_hit_rate: int
    accuracy_proximity_avg: float
    competitive_strike_pct: int = 0
    middle_middle_pct: float = 0.0
    command_rating: int = 0
    accuracy_inches_avg: Optional[float] = None
    accuracy_inches_median: Optional[float] = None
    accuracy_inches_max: Optional[float] = None


@dataclass(frozen=True)
class MissPattern:
    miss_up_pct: int = 0
    miss_down_pct: int = 0
    miss_arm_side_pct: int = 0
    miss_glove_side_pct: int = 0
    avg_miss_distance: float = 0.0
    miss_count: int = 0

    def direction_percentages(self) -> List[Tuple[MissDirection, int]]:
        """Direction percentages in tie-break order (up, down, arm, glove)."""
        return [
            (MissDirection.UP, self.miss_up_pct),
            (MissDirection.DOWN, self.miss_down_pct),
            (MissDirection.ARM_SIDE, self.miss_arm_side_pct),
            (MissDirection.GLOVE_SIDE, self.miss_glove_side_pct),
        ]


@dataclass(frozen=True)
class SituationalMetrics:
    first_pitch_strike_pct: int = 0
    behind_in_count_strike_pct: int = 0
    behind_in_count_accuracy: int = 0


@dataclass(frozen=True)
class TrendMetrics:
    early_accuracy: float = 0.0
    late_accuracy: float = 0.0


@dataclass(frozen=True)
class PitchSessionAnalytics:
    strike_pct: int = 0
    accuracy_hit_rate: int = 0
    accuracy_proximity_avg: float = 0.0
    pitch_type_metrics: List[PitchTypeMetrics] = field(default_factory=list)
    miss_pattern: MissPattern = field(default_factory=MissPattern)
    situational: SituationalMetrics = field(default_factory=SituationalMetrics)
    trend: TrendMetrics = field(default_factory=TrendMetrics)
    command_score: int = 0
    insights: List[str] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "PitchSessionAnalytics":
        return cls()

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Sessions and workload
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class PitchSession:
    id: str
    pitcher_id: str
    session_start_time: datetime
    total_pitches: int = 0
    team_id: Optional[str] = None
    session_end_time: Optional[datetime] = None
    status: SessionStatus = SessionStatus.COMPLETED
    analytics: Optional[PitchSessionAnalytics] = None

    @property
    def reference_time(self) -> datetime:
        """End time when the session was closed, else its start time."""
        return self.session_end_time or self.session_start_time


@dataclass(frozen=True)
class RestStatus:
    last_session_date: Optional[datetime]
    total_pitches: Optional[int]
    required_rest_days: Optional[float]
    days_since_last: Optional[float]
    rest_hours_per_pitch: float
    status: RestStatusColor
    status_label: str
    status_message: str

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        result = asdict(self)
        result["status"] = self.status.value
        if self.last_session_date is not None:
            result["last_session_date"] = self.last_session_date.isoformat()
        return result
