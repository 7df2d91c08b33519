"""Main command analytics facade."""

from __future__ import annotations

import time
from typing import Iterable, List, Mapping, Optional

from analysis.command.aggregator import (
    compute_pitch_type_metrics,
    compute_situational_metrics,
    proximity_average,
    strike_percentage,
    target_hit_rate,
)
from analysis.command.breakdowns import compute_zone_heatmap
from analysis.command.command_score import compute_command_score
from analysis.command.insights import InsightContext, InsightThresholds, generate_insights
from analysis.command.miss_pattern import compute_miss_pattern
from analysis.command.schemas import ZoneHeatmapEntry
from analysis.command.trend import compute_trend_metrics
from configs.settings import AnalyticsConfig, default_config
from contracts import PitcherHandedness, PitchRecord, PitchSessionAnalytics, ZoneId
from log_config.logger import get_logger, log_performance
from metrics.zone_mapper import ZoneGrid, coords_to_zone

logger = get_logger(__name__)


class CommandAnalyzer:
    """Runs the full command pipeline over a session's pitch records.

    Stateless apart from its configuration: every call recomputes from the
    records it is given and never merges with an earlier result.
    """

    def __init__(self, config: Optional[AnalyticsConfig] = None):
        """Initialize command analyzer.

        Args:
            config: Analytics configuration (default: built-in values)
        """
        self.config = config or default_config()
        self.thresholds = self._build_thresholds(self.config)
        zone = self.config.zone
        self.grid = ZoneGrid(zone.grid_start, zone.grid_end, zone.margin)

    def analyze(
        self,
        records: Iterable[PitchRecord],
        pitcher_hand: PitcherHandedness = PitcherHandedness.RIGHT,
        pitch_type_names: Optional[Mapping[str, str]] = None
    ) -> PitchSessionAnalytics:
        """Compute analytics for a finalized session.

        Args:
            records: All pitch records of the session, in capture order
            pitcher_hand: Pitcher handedness (used by the miss classifier)
            pitch_type_names: Optional pitch_type_id -> display name mapping

        Returns:
            PitchSessionAnalytics; fully zeroed for an empty record list
        """
        records = list(records)
        if not records:
            logger.debug("No pitch records supplied, returning empty analytics")
            return PitchSessionAnalytics.empty()

        started = time.perf_counter()
        cfg = self.config
        policy = cfg.strikes.policy
        decay_rate = cfg.proximity.decay_rate

        strike_pct = strike_percentage(records, policy)
        hit_rate = target_hit_rate(records)
        proximity_avg = proximity_average(records, decay_rate)

        pitch_type_metrics = compute_pitch_type_metrics(records, pitch_type_names, policy, decay_rate)
        miss_pattern = compute_miss_pattern(
            records,
            pitcher_hand=pitcher_hand,
            convention=cfg.miss.side_convention,
            threshold=cfg.miss.threshold,
        )
        situational = compute_situational_metrics(records, policy)
        trend = compute_trend_metrics(records, cfg.trend.window_size, decay_rate)

        command_score = compute_command_score(
            strike_pct,
            proximity_avg,
            miss_pattern.avg_miss_distance,
            cfg.miss.distance_normalization,
        )

        insights = generate_insights(InsightContext(
            total_pitches=len(records),
            strike_pct=strike_pct,
            accuracy_hit_rate=hit_rate,
            pitch_type_metrics=pitch_type_metrics,
            miss_pattern=miss_pattern,
            situational=situational,
            trend=trend,
            thresholds=self.thresholds,
        ))

        analytics = PitchSessionAnalytics(
            strike_pct=strike_pct,
            accuracy_hit_rate=hit_rate,
            accuracy_proximity_avg=proximity_avg,
            pitch_type_metrics=pitch_type_metrics,
            miss_pattern=miss_pattern,
            situational=situational,
            trend=trend,
            command_score=command_score,
            insights=insights,
        )

        duration_ms = (time.perf_counter() - started) * 1000.0
        log_performance(f"command analytics for {len(records)} pitches", duration_ms)
        logger.debug(
            f"Analyzed {len(records)} pitches: strike {strike_pct}%, hit {hit_rate}%, "
            f"score {command_score}, {len(insights)} insight(s)"
        )
        return analytics

    def locate(
        self,
        x: float,
        y: float,
        pitcher_hand: PitcherHandedness = PitcherHandedness.RIGHT
    ) -> ZoneId:
        """Zone for a normalized click using the configured grid."""
        return coords_to_zone(x, y, pitcher_hand, self.grid)

    def zone_heatmap(self, records: Iterable[PitchRecord]) -> List[ZoneHeatmapEntry]:
        return compute_zone_heatmap(list(records), self.config.proximity.decay_rate)

    @staticmethod
    def _build_thresholds(config: AnalyticsConfig) -> InsightThresholds:
        insights = config.insights
        return InsightThresholds(
            best_pitch_min_strike_pct=insights.best_pitch_min_strike_pct,
            dominant_miss_pct=insights.dominant_miss_pct,
            trend_min_pitches=config.trend.min_pitches,
            trend_window=config.trend.window_size,
            trend_change=config.trend.change_threshold,
            strike_rate_high=insights.strike_rate_high,
            strike_rate_low=insights.strike_rate_low,
            hit_rate_high=insights.hit_rate_high,
            hit_rate_low=insights.hit_rate_low,
        )


def calculate_pitch_session_analytics(
    records: Iterable[PitchRecord],
    pitcher_hand: PitcherHandedness = PitcherHandedness.RIGHT,
    pitch_type_names: Optional[Mapping[str, str]] = None,
    config: Optional[AnalyticsConfig] = None
) -> PitchSessionAnalytics:
    """Functional shortcut for CommandAnalyzer(config).analyze(...)."""
    return CommandAnalyzer(config).analyze(records, pitcher_hand, pitch_type_names)


__all__ = ["CommandAnalyzer", "calculate_pitch_session_analytics"]
