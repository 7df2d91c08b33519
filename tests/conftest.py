"""Shared builders for pitch records and sessions."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest

from contracts import PitchOutcome, PitchRecord, PitchSession, SessionStatus, parse_zone_id

BASE_TIME = datetime(2026, 3, 14, 18, 0, tzinfo=timezone.utc)


def make_record(
    index: int = 0,
    pitch_type_id: str = "FB",
    target: str = "Z22",
    actual: str = "Z22",
    outcome: PitchOutcome = PitchOutcome.CALLED_STRIKE,
    target_xy: Optional[tuple] = (0.5, 0.5),
    actual_xy: Optional[tuple] = (0.5, 0.5),
    session_id: str = "s1",
    **kwargs
) -> PitchRecord:
    """Build a PitchRecord; pass target_xy/actual_xy=None to drop coordinates."""
    tx, ty = target_xy if target_xy is not None else (None, None)
    ax, ay = actual_xy if actual_xy is not None else (None, None)
    return PitchRecord(
        session_id=session_id,
        index=index,
        pitch_type_id=pitch_type_id,
        target_zone=parse_zone_id(target),
        actual_zone=parse_zone_id(actual),
        outcome=outcome,
        target_x_norm=tx,
        target_y_norm=ty,
        actual_x_norm=ax,
        actual_y_norm=ay,
        **kwargs
    )


def make_session(
    session_id: str = "s1",
    total_pitches: int = 0,
    hours_after_base: float = 0.0,
    duration_hours: Optional[float] = None,
    pitcher_id: str = "p1",
    status: SessionStatus = SessionStatus.COMPLETED,
    **kwargs
) -> PitchSession:
    """Build a PitchSession starting hours_after_base after BASE_TIME."""
    start = BASE_TIME + timedelta(hours=hours_after_base)
    end = start + timedelta(hours=duration_hours) if duration_hours is not None else None
    return PitchSession(
        id=session_id,
        pitcher_id=pitcher_id,
        session_start_time=start,
        session_end_time=end,
        total_pitches=total_pitches,
        status=status,
        **kwargs
    )


@pytest.fixture
def record_factory():
    return make_record


@pytest.fixture
def session_factory():
    return make_session


@pytest.fixture
def base_time():
    return BASE_TIME
