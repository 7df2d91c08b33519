"""Rule-based coaching insights for a pitch session.

Each rule is an independent (predicate, render) pair. Rules are evaluated
in a fixed order and every rule whose predicate holds contributes one
string; no rule suppresses another. An empty result is returned as is,
the UI decides what to show when there is nothing to say.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from analysis.command.miss_pattern import dominant_miss_direction
from contracts import (
    MissDirection,
    MissPattern,
    PitchTypeMetrics,
    SituationalMetrics,
    TrendMetrics,
)


@dataclass(frozen=True)
class InsightThresholds:
    best_pitch_min_strike_pct: float = 60
    dominant_miss_pct: float = 40
    trend_min_pitches: int = 20
    trend_window: int = 10
    trend_change: float = 0.1
    strike_rate_high: float = 70
    strike_rate_low: float = 50
    hit_rate_high: float = 50
    hit_rate_low: float = 30


@dataclass(frozen=True)
class InsightContext:
    """Everything the rules may look at."""

    total_pitches: int
    strike_pct: int
    accuracy_hit_rate: int
    pitch_type_metrics: List[PitchTypeMetrics] = field(default_factory=list)
    miss_pattern: MissPattern = field(default_factory=MissPattern)
    situational: SituationalMetrics = field(default_factory=SituationalMetrics)
    trend: TrendMetrics = field(default_factory=TrendMetrics)
    thresholds: InsightThresholds = field(default_factory=InsightThresholds)

    @property
    def best_pitch_type(self) -> Optional[PitchTypeMetrics]:
        # max() keeps the first of equal values, i.e. the most-thrown type
        if not self.pitch_type_metrics:
            return None
        return max(self.pitch_type_metrics, key=lambda m: m.strike_pct)

    @property
    def dominant_miss(self) -> Optional[MissDirection]:
        return dominant_miss_direction(self.miss_pattern)

    @property
    def dominant_miss_pct(self) -> int:
        return max((pct for _, pct in self.miss_pattern.direction_percentages()), default=0)

    @property
    def trend_change(self) -> float:
        return self.trend.late_accuracy - self.trend.early_accuracy


@dataclass(frozen=True)
class InsightRule:
    name: str
    predicate: Callable[[InsightContext], bool]
    render: Callable[[InsightContext], str]

    def evaluate(self, context: InsightContext) -> Optional[str]:
        if self.predicate(context):
            return self.render(context)
        return None


MISS_COACHING = {
    MissDirection.ARM_SIDE: "Indicates early torso rotation or pulling off line.",
    MissDirection.GLOVE_SIDE: "Focus on staying through the pitch and finishing toward target.",
    MissDirection.UP: "Check release point consistency.",
    MissDirection.DOWN: "Focus on lower half engagement and finish.",
}


def _has_consistent_pitch(ctx: InsightContext) -> bool:
    if len(ctx.pitch_type_metrics) < 2:
        return False
    return ctx.best_pitch_type.strike_pct >= ctx.thresholds.best_pitch_min_strike_pct


def _render_consistent_pitch(ctx: InsightContext) -> str:
    best = ctx.best_pitch_type
    return f"{best.pitch_type_name} is your most consistent command pitch ({best.strike_pct}% strikes)."


def _has_dominant_miss(ctx: InsightContext) -> bool:
    return ctx.dominant_miss is not None and ctx.dominant_miss_pct > ctx.thresholds.dominant_miss_pct


def _render_dominant_miss(ctx: InsightContext) -> str:
    direction = ctx.dominant_miss
    return f"Most misses were {direction.value} ({ctx.dominant_miss_pct}%). {MISS_COACHING[direction]}"


def _long_enough_for_trend(ctx: InsightContext) -> bool:
    return ctx.total_pitches >= ctx.thresholds.trend_min_pitches


DEFAULT_RULES: Sequence[InsightRule] = (
    InsightRule(
        name="consistent_pitch_type",
        predicate=_has_consistent_pitch,
        render=_render_consistent_pitch,
    ),
    InsightRule(
        name="dominant_miss_direction",
        predicate=_has_dominant_miss,
        render=_render_dominant_miss,
    ),
    InsightRule(
        name="command_improved",
        predicate=lambda ctx: _long_enough_for_trend(ctx) and ctx.trend_change > ctx.thresholds.trend_change,
        render=lambda ctx: (
            f"Command improved during the session. Last {ctx.thresholds.trend_window} pitches averaged "
            f"{ctx.trend.late_accuracy:.2f} accuracy."
        ),
    ),
    InsightRule(
        name="command_declined",
        predicate=lambda ctx: _long_enough_for_trend(ctx) and ctx.trend_change < -ctx.thresholds.trend_change,
        render=lambda ctx: (
            "Command declined in later pitches. Consider managing fatigue and maintaining mechanics."
        ),
    ),
    InsightRule(
        name="strike_rate_high",
        predicate=lambda ctx: ctx.strike_pct >= ctx.thresholds.strike_rate_high,
        render=lambda ctx: "Excellent strike rate! Consistent command foundation.",
    ),
    InsightRule(
        name="strike_rate_low",
        predicate=lambda ctx: ctx.strike_pct < ctx.thresholds.strike_rate_low,
        render=lambda ctx: "Focus on commanded strike-throwing in next session. Quality over quantity.",
    ),
    InsightRule(
        name="precision_high",
        predicate=lambda ctx: ctx.accuracy_hit_rate >= ctx.thresholds.hit_rate_high,
        render=lambda ctx: "Great precision hitting intended zones!",
    ),
    InsightRule(
        name="precision_low",
        predicate=lambda ctx: ctx.accuracy_hit_rate < ctx.thresholds.hit_rate_low,
        render=lambda ctx: "Work on pinpoint accuracy by practicing specific zone targeting.",
    ),
)


def generate_insights(
    context: InsightContext,
    rules: Sequence[InsightRule] = DEFAULT_RULES
) -> List[str]:
    """Evaluate rules in order and collect the triggered remarks."""
    insights = []
    for rule in rules:
        text = rule.evaluate(context)
        if text is not None:
            insights.append(text)
    return insights


__all__ = [
    "InsightThresholds",
    "InsightContext",
    "InsightRule",
    "MISS_COACHING",
    "DEFAULT_RULES",
    "generate_insights",
]
