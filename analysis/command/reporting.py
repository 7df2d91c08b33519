"""Session selection and history for ad-hoc command reports."""

from __future__ import annotations

from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from analysis.command.schemas import SessionPerformancePoint
from contracts import PitchRecord, PitchSession, SessionStatus


def filter_sessions(
    sessions: Iterable[PitchSession],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    pitcher_ids: Optional[Iterable[str]] = None
) -> List[PitchSession]:
    """Sessions started within [start, end] for the given pitchers.

    Discarded sessions are never reported. Results are ordered by start time.
    """
    wanted = set(pitcher_ids) if pitcher_ids is not None else None
    selected = []
    for session in sessions:
        if session.status == SessionStatus.DISCARDED:
            continue
        if start is not None and session.session_start_time < start:
            continue
        if end is not None and session.session_start_time > end:
            continue
        if wanted is not None and session.pitcher_id not in wanted:
            continue
        selected.append(session)
    return sorted(selected, key=lambda s: s.session_start_time)


def filter_records_by_sessions(
    records: Iterable[PitchRecord],
    sessions: Iterable[PitchSession],
    start: Optional[datetime] = None,
    end: Optional[datetime] = None,
    pitcher_ids: Optional[Iterable[str]] = None
) -> List[PitchRecord]:
    """Pitches belonging to the selected sessions.

    Ordered by session start time, then by pitch index within the session,
    so trend windows see pitches in capture order.
    """
    selected = filter_sessions(sessions, start, end, pitcher_ids)
    order = {session.id: position for position, session in enumerate(selected)}
    kept = [r for r in records if r.session_id in order]
    return sorted(kept, key=lambda r: (order[r.session_id], r.index))


def performance_over_time(
    sessions: Sequence[PitchSession],
    limit: int = 10
) -> List[SessionPerformancePoint]:
    """Stored analytics of the most recent sessions, oldest first.

    Sessions without attached analytics chart zero rates and a miss
    index of 100.
    """
    ordered = sorted(
        (s for s in sessions if s.status != SessionStatus.DISCARDED),
        key=lambda s: s.session_start_time,
    )
    recent = ordered[-limit:] if limit > 0 else []

    points = []
    for session in recent:
        analytics = session.analytics
        started = session.session_start_time
        proximity = analytics.accuracy_proximity_avg if analytics else 0.0
        points.append(SessionPerformancePoint(
            session_id=session.id,
            label=f"{started.month}/{started.day}",
            strike_pct=analytics.strike_pct if analytics else 0,
            target_hit_pct=analytics.accuracy_hit_rate if analytics else 0,
            miss_index=round(100.0 - proximity * 100.0, 1),
        ))
    return points


__all__ = [
    "filter_sessions",
    "filter_records_by_sessions",
    "performance_over_time",
]
