"""Tests for the composite command score."""

from __future__ import annotations

import pytest

from analysis.command.command_score import compute_command_score


def test_perfect_session_scores_hundred():
    assert compute_command_score(100, 1.0, 0.0) == 100


def test_worst_session_scores_zero():
    assert compute_command_score(0, 0.0, 0.5) == 0


def test_components_are_weighted():
    # 40 * 0.5 + 40 * 0.5 + 20 * (1 - 0.25 / 0.5)
    assert compute_command_score(50, 0.5, 0.25) == 50


def test_rounds_half_up():
    # 40 * 0.25 + 0 + 20 * (1 - 0.4875 / 0.5) = 10.5
    assert compute_command_score(25, 0.0, 0.4875) == 11


@pytest.mark.parametrize("strike_pct, proximity, miss", [
    (100, 1.0, -1.0),
    (0, 0.0, 1000.0),
    (100, 1.0, float("inf")),
    (73, 0.42, 0.13),
])
def test_score_always_in_range(strike_pct, proximity, miss):
    score = compute_command_score(strike_pct, proximity, miss)
    assert isinstance(score, int)
    assert 0 <= score <= 100


def test_custom_normalization():
    assert compute_command_score(0, 0.0, 0.5, miss_normalization=1.0) == 10
