"""Pitching rest recommendation from session workload history.

Rest debt behaves like a leaky bucket: every pitch adds
``rest_hours_per_pitch`` hours of debt and each elapsed wall-clock hour
drains one hour, never below zero. The history is folded oldest to newest
with an accumulator of (debt_hours, last_time), then drained up to "now".
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from functools import reduce
from typing import Iterable, Optional, Tuple

from contracts import PitchSession, RestStatus, RestStatusColor

DEFAULT_REST_HOURS_PER_PITCH = 1.0
HOURS_PER_DAY = 24.0


@dataclass(frozen=True)
class RestDebt:
    """Fold accumulator: outstanding debt as of last_time."""

    debt_hours: float = 0.0
    last_time: Optional[datetime] = None


def hours_between(earlier: datetime, later: datetime) -> float:
    return (later - earlier).total_seconds() / 3600.0


def decay_debt(debt: RestDebt, now: datetime) -> float:
    """Debt left after resting from debt.last_time until now, floored at 0.

    A "now" earlier than last_time drains nothing: elapsed time is clamped
    at zero rather than going negative, so evaluating out of order can
    never grow the debt.
    """
    if debt.last_time is None:
        return debt.debt_hours
    elapsed = max(0.0, hours_between(debt.last_time, now))
    return max(0.0, debt.debt_hours - elapsed)


def accumulate_session(
    debt: RestDebt,
    session: PitchSession,
    rest_hours_per_pitch: float = DEFAULT_REST_HOURS_PER_PITCH
) -> RestDebt:
    """One fold step: drain debt up to this session, then add its pitches."""
    session_time = session.reference_time
    remaining = decay_debt(debt, session_time)
    pitches = session.total_pitches or 0
    return RestDebt(
        debt_hours=remaining + pitches * rest_hours_per_pitch,
        last_time=session_time,
    )


def fold_rest_debt(
    sessions: Iterable[PitchSession],
    rest_hours_per_pitch: float = DEFAULT_REST_HOURS_PER_PITCH
) -> RestDebt:
    """Fold sessions in chronological order into a single RestDebt."""
    ordered = sorted(sessions, key=lambda s: s.reference_time)
    return reduce(
        lambda debt, session: accumulate_session(debt, session, rest_hours_per_pitch),
        ordered,
        RestDebt(),
    )


def most_recent_session(sessions: Iterable[PitchSession]) -> Optional[PitchSession]:
    """Latest session by end (or start) time; the first one wins ties."""
    latest = None
    for session in sessions:
        if latest is None or session.reference_time > latest.reference_time:
            latest = session
    return latest


def _no_data_status(rest_hours_per_pitch: float) -> RestStatus:
    return RestStatus(
        last_session_date=None,
        total_pitches=None,
        required_rest_days=None,
        days_since_last=None,
        rest_hours_per_pitch=rest_hours_per_pitch,
        status=RestStatusColor.GREEN,
        status_label="No pitching data yet",
        status_message="Log your first bullpen to start tracking rest.",
    )


def classify_rest(required_rest_days: float) -> Tuple[RestStatusColor, str, str]:
    """Map remaining rest days to (color, label, message)."""
    if required_rest_days <= 0:
        return (
            RestStatusColor.GREEN,
            "Good to go",
            "You've had enough rest based on your recent workload.",
        )
    if required_rest_days <= 1:
        return (
            RestStatusColor.YELLOW,
            "Borderline",
            "You're within 1 day of your required rest. Monitor workload.",
        )
    return (
        RestStatusColor.RED,
        "Not enough rest",
        f"You still need {required_rest_days:.1f} days of rest before a full-intensity outing.",
    )


def compute_pitch_rest_status(
    sessions: Iterable[PitchSession],
    now: datetime,
    rest_hours_per_pitch: float = DEFAULT_REST_HOURS_PER_PITCH
) -> RestStatus:
    """Compute the rest recommendation as of now.

    Args:
        sessions: Pitching sessions in any order
        now: Evaluation time (same timezone awareness as session times)
        rest_hours_per_pitch: Hours of rest owed per pitch thrown

    Returns:
        RestStatus; a green sentinel with None numeric fields when the
        pitcher has no sessions at all
    """
    sessions = list(sessions or [])
    if not sessions:
        return _no_data_status(rest_hours_per_pitch)

    ordered = sorted(sessions, key=lambda s: s.reference_time)
    debt = fold_rest_debt(ordered, rest_hours_per_pitch)
    last = ordered[-1]

    remaining_hours = decay_debt(debt, now)
    required_rest_days = remaining_hours / HOURS_PER_DAY
    days_since_last = hours_between(debt.last_time, now) / HOURS_PER_DAY
    status, label, message = classify_rest(required_rest_days)

    return RestStatus(
        last_session_date=last.reference_time,
        total_pitches=last.total_pitches,
        required_rest_days=required_rest_days,
        days_since_last=days_since_last,
        rest_hours_per_pitch=rest_hours_per_pitch,
        status=status,
        status_label=label,
        status_message=message,
    )


__all__ = [
    "DEFAULT_REST_HOURS_PER_PITCH",
    "RestDebt",
    "hours_between",
    "decay_debt",
    "accumulate_session",
    "fold_rest_debt",
    "most_recent_session",
    "classify_rest",
    "compute_pitch_rest_status",
]
