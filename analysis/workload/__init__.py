"""Workload tracking and rest recommendations."""

from .rest_engine import (
    RestDebt,
    compute_pitch_rest_status,
    fold_rest_debt,
    most_recent_session,
)

__all__ = [
    "RestDebt",
    "compute_pitch_rest_status",
    "fold_rest_debt",
    "most_recent_session",
]
