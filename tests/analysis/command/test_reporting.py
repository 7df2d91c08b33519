"""Tests for session selection and performance history."""

from __future__ import annotations

from datetime import timedelta

from analysis.command.reporting import (
    filter_records_by_sessions,
    filter_sessions,
    performance_over_time,
)
from contracts import PitchSessionAnalytics, SessionStatus
from conftest import BASE_TIME, make_record, make_session


def _sessions():
    return [
        make_session("late", hours_after_base=72, pitcher_id="p1"),
        make_session("early", hours_after_base=0, pitcher_id="p1"),
        make_session("other", hours_after_base=24, pitcher_id="p2"),
        make_session("dropped", hours_after_base=48, pitcher_id="p1", status=SessionStatus.DISCARDED),
    ]


def test_filter_sessions_orders_and_drops_discarded():
    assert [s.id for s in filter_sessions(_sessions())] == ["early", "other", "late"]


def test_filter_sessions_by_date_range_inclusive():
    selected = filter_sessions(
        _sessions(),
        start=BASE_TIME + timedelta(hours=24),
        end=BASE_TIME + timedelta(hours=72),
    )
    assert [s.id for s in selected] == ["other", "late"]


def test_filter_sessions_by_pitcher():
    assert [s.id for s in filter_sessions(_sessions(), pitcher_ids=["p2"])] == ["other"]
    assert filter_sessions(_sessions(), pitcher_ids=[]) == []


def test_filter_records_by_sessions_capture_order():
    records = [
        make_record(1, session_id="late"),
        make_record(0, session_id="late"),
        make_record(0, session_id="dropped"),
        make_record(1, session_id="early"),
        make_record(0, session_id="early"),
        make_record(0, session_id="missing"),
    ]
    subset = filter_records_by_sessions(records, _sessions(), pitcher_ids=["p1"])
    assert [(r.session_id, r.index) for r in subset] == [
        ("early", 0), ("early", 1), ("late", 0), ("late", 1),
    ]


def test_performance_over_time():
    analytics = PitchSessionAnalytics(strike_pct=64, accuracy_hit_rate=41, accuracy_proximity_avg=0.58)
    sessions = [
        make_session("a", hours_after_base=0, analytics=analytics),
        make_session("b", hours_after_base=24),
    ]
    points = performance_over_time(sessions)

    assert [p.session_id for p in points] == ["a", "b"]
    assert points[0].label == "3/14"
    assert (points[0].strike_pct, points[0].target_hit_pct) == (64, 41)
    assert points[0].miss_index == 42.0
    assert (points[1].label, points[1].strike_pct, points[1].miss_index) == ("3/15", 0, 100.0)


def test_performance_over_time_keeps_most_recent():
    sessions = [make_session(f"s{i}", hours_after_base=24 * i) for i in range(15)]
    points = performance_over_time(sessions, limit=10)
    assert [p.session_id for p in points] == [f"s{i}" for i in range(5, 15)]
    assert performance_over_time(sessions, limit=0) == []
