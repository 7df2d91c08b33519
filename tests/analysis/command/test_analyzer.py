"""Tests for the command analytics pipeline."""

from __future__ import annotations

import unittest

from analysis.command import CommandAnalyzer, calculate_pitch_session_analytics
from configs.settings import config_from_dict
from contracts import (
    EdgeDirection,
    EdgeZone,
    InteriorZone,
    PitcherHandedness,
    PitchOutcome,
    PitchSessionAnalytics,
)
from conftest import make_record


class TestCommandAnalyzer(unittest.TestCase):
    """Test the full analytics pipeline."""

    def setUp(self):
        """Set up test fixtures."""
        self.analyzer = CommandAnalyzer()

    def test_empty_session_is_all_zero(self):
        analytics = self.analyzer.analyze([])

        self.assertEqual(analytics, PitchSessionAnalytics.empty())
        self.assertEqual(analytics.command_score, 0)
        self.assertEqual(analytics.insights, [])
        self.assertEqual(analytics.pitch_type_metrics, [])

    def test_perfect_session(self):
        records = [make_record(i) for i in range(20)]
        analytics = self.analyzer.analyze(records)

        self.assertEqual(analytics.strike_pct, 100)
        self.assertEqual(analytics.accuracy_hit_rate, 100)
        self.assertEqual(analytics.accuracy_proximity_avg, 1.0)
        self.assertEqual(analytics.command_score, 100)
        self.assertEqual(analytics.miss_pattern.miss_count, 0)
        self.assertEqual(analytics.trend.early_accuracy, 1.0)
        self.assertEqual(analytics.trend.late_accuracy, 1.0)
        self.assertEqual(analytics.insights, [
            "Excellent strike rate! Consistent command foundation.",
            "Great precision hitting intended zones!",
        ])

    def test_recomputes_from_scratch(self):
        records = [
            make_record(0, "FB"),
            make_record(1, "CB", actual="Z33", outcome=PitchOutcome.BALL, actual_xy=(0.7, 0.3)),
            make_record(2, "FB", outcome=PitchOutcome.FOUL, actual_xy=(0.5, 0.8)),
        ]
        first = self.analyzer.analyze(records)
        second = self.analyzer.analyze(records)
        self.assertEqual(first, second)

    def test_pitch_type_counts_sum_to_total(self):
        records = [make_record(i, pt) for i, pt in enumerate(["FB", "FB", "SL", "CH", "SL", "FB"])]
        analytics = self.analyzer.analyze(records)
        self.assertEqual(sum(m.count for m in analytics.pitch_type_metrics), len(records))
        self.assertEqual(analytics.pitch_type_metrics[0].pitch_type_id, "FB")

    def test_pitch_type_names_pass_through(self):
        analytics = self.analyzer.analyze([make_record(0, "pt-7")], pitch_type_names={"pt-7": "Cutter"})
        self.assertEqual(analytics.pitch_type_metrics[0].pitch_type_name, "Cutter")

    def test_single_arm_side_miss(self):
        record = make_record(0, actual="Z23", target_xy=(0.5, 0.5), actual_xy=(0.8, 0.5))
        analytics = self.analyzer.analyze([record])
        self.assertEqual(analytics.miss_pattern.miss_arm_side_pct, 100)
        self.assertIn("Most misses were arm-side (100%).", analytics.insights[0])

    def test_to_dict(self):
        data = self.analyzer.analyze([make_record(0)]).to_dict()
        self.assertEqual(data["strike_pct"], 100)
        self.assertEqual(data["miss_pattern"]["miss_count"], 0)
        self.assertEqual(data["pitch_type_metrics"][0]["pitch_type_name"], "Fastball")


class TestConfiguredAnalyzer(unittest.TestCase):
    """Test that configuration reaches the pipeline."""

    def test_strike_policy(self):
        records = [make_record(0, outcome=PitchOutcome.IN_PLAY), make_record(1, outcome=PitchOutcome.BALL)]

        default = CommandAnalyzer().analyze(records)
        in_play = CommandAnalyzer(config_from_dict({"strikes": {"policy": "in_play_counts"}})).analyze(records)
        by_zone = CommandAnalyzer(config_from_dict({"strikes": {"policy": "outcome_or_zone"}})).analyze(records)

        self.assertEqual(default.strike_pct, 0)
        self.assertEqual(in_play.strike_pct, 50)
        self.assertEqual(by_zone.strike_pct, 100)

    def test_pitcher_relative_misses(self):
        record = make_record(0, target_xy=(0.5, 0.5), actual_xy=(0.8, 0.5))
        config = config_from_dict({"miss": {"side_convention": "pitcher_relative"}})
        analyzer = CommandAnalyzer(config)

        right = analyzer.analyze([record], pitcher_hand=PitcherHandedness.RIGHT)
        left = analyzer.analyze([record], pitcher_hand=PitcherHandedness.LEFT)
        self.assertEqual(right.miss_pattern.miss_glove_side_pct, 100)
        self.assertEqual(left.miss_pattern.miss_arm_side_pct, 100)

    def test_locate_uses_configured_grid(self):
        self.assertEqual(CommandAnalyzer().locate(0.5, 0.5), InteriorZone(2, 2))
        self.assertEqual(CommandAnalyzer().locate(0.02, 0.5), EdgeZone(EdgeDirection.ARM))

        wide = CommandAnalyzer(config_from_dict({"zone": {"grid_start": 0.0, "grid_end": 1.0, "margin": 0.0}}))
        self.assertEqual(wide.locate(0.02, 0.5), InteriorZone(2, 1))

    def test_zone_heatmap(self):
        entries = CommandAnalyzer().zone_heatmap([make_record(0)])
        self.assertEqual(len(entries), 13)
        self.assertEqual(sum(e.actual_count for e in entries), 1)


def test_functional_shortcut_matches_analyzer():
    records = [make_record(i, actual_xy=(0.5, 0.5 + 0.01 * i)) for i in range(12)]
    assert calculate_pitch_session_analytics(records) == CommandAnalyzer().analyze(records)


def test_scores_stay_in_range():
    records = [
        make_record(i, outcome=PitchOutcome.BALL, actual="EDGE_LOW",
                    target_xy=(0.0, 1.0), actual_xy=(1.0, 0.0))
        for i in range(25)
    ]
    analytics = CommandAnalyzer().analyze(records)
    assert analytics.command_score == 0
    assert analytics.strike_pct == 0
    assert 0.0 <= analytics.accuracy_proximity_avg <= 1.0
