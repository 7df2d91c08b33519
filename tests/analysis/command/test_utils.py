"""Tests for statistical helpers."""

from __future__ import annotations

from analysis.command.utils import (
    clamp,
    compute_median,
    mean_or_zero,
    percent,
    round_half_up,
    summarize_distances,
)


def test_round_half_up_is_not_bankers_rounding():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(2.49) == 2
    assert round_half_up(-0.5) == 0


def test_percent():
    assert percent(1, 8) == 13
    assert percent(1, 3) == 33
    assert percent(2, 3) == 67
    assert percent(5, 5) == 100
    assert percent(3, 0) == 0


def test_clamp():
    assert clamp(-5, 0, 100) == 0
    assert clamp(150, 0, 100) == 100
    assert clamp(42, 0, 100) == 42


def test_mean_and_median():
    assert mean_or_zero([]) == 0.0
    assert mean_or_zero([1.0, 2.0, 6.0]) == 3.0
    assert compute_median([]) is None
    assert compute_median([3.0, 1.0, 2.0]) == 2.0
    assert compute_median([4.0, 1.0, 3.0, 2.0]) == 2.5


def test_summarize_distances():
    assert summarize_distances([]) == (None, None, None)
    assert summarize_distances([1.04, 2.0, 3.33]) == (2.1, 2.0, 3.3)
    assert summarize_distances([1.234], decimals=2) == (1.23, 1.23, 1.23)
