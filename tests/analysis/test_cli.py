"""Tests for the command-line interface."""

from __future__ import annotations

import json

import pytest

from analysis.cli import build_parser, main


def _pitch(index, session_id="s1", target="Z22", actual="Z22", outcome="called_strike"):
    return {
        "session_id": session_id,
        "index": index,
        "pitch_type_id": "FB",
        "target_zone": target,
        "actual_zone": actual,
        "outcome": outcome,
        "target_x_norm": 0.5,
        "target_y_norm": 0.5,
        "actual_x_norm": 0.5,
        "actual_y_norm": 0.5,
    }


@pytest.fixture
def exports(tmp_path):
    pitches = [_pitch(i) for i in range(20)]
    pitches += [_pitch(i, session_id="s2", actual="EDGE_LOW", outcome="ball") for i in range(4)]
    sessions = [
        {"id": "s1", "pitcher_id": "p1", "session_start_time": "2026-03-14T18:00:00Z", "total_pitches": 20},
        {"id": "s2", "pitcher_id": "p1", "session_start_time": "2026-04-02T18:00:00Z", "total_pitches": 60},
    ]
    records_path = tmp_path / "pitches.json"
    sessions_path = tmp_path / "sessions.json"
    records_path.write_text(json.dumps({"pitches": pitches}))
    sessions_path.write_text(json.dumps(sessions))
    return records_path, sessions_path


def _envelope(capsys):
    return json.loads(capsys.readouterr().out)


def test_no_command_prints_help(capsys):
    assert main([]) == 1
    assert "analyze-session" in capsys.readouterr().out


def test_analyze_session_json(exports, capsys):
    records_path, _ = exports
    assert main(["analyze-session", "--records", str(records_path), "--json"]) == 0

    envelope = _envelope(capsys)
    assert envelope["schema_version"] == "1.0.0"
    assert envelope["kind"] == "session_analytics"
    payload = envelope["payload"]
    assert payload["strike_pct"] == 83
    assert payload["accuracy_hit_rate"] == 83


def test_analyze_session_text(exports, capsys):
    records_path, _ = exports
    assert main(["analyze-session", "--records", str(records_path), "--hand", "L"]) == 0
    out = capsys.readouterr().out
    assert "Session analysis complete" in out
    assert "Total pitches: 24" in out


def test_rest_status_json(exports, capsys):
    _, sessions_path = exports
    argv = ["rest-status", "--sessions", str(sessions_path), "--now", "2026-04-03T18:00:00Z", "--json"]
    assert main(argv) == 0

    envelope = _envelope(capsys)
    assert envelope["kind"] == "rest_status"
    payload = envelope["payload"]
    assert payload["status"] == "red"
    assert payload["total_pitches"] == 60
    assert payload["required_rest_days"] == pytest.approx(1.5)


def test_rest_status_override_and_naive_now(exports, capsys):
    _, sessions_path = exports
    argv = [
        "rest-status", "--sessions", str(sessions_path),
        "--now", "2026-04-03T18:00:00", "--rest-hours-per-pitch", "0.5",
    ]
    assert main(argv) == 0
    assert "Borderline [yellow]" in capsys.readouterr().out


def test_report_filters_by_date(exports, capsys):
    records_path, sessions_path = exports
    argv = [
        "report", "--records", str(records_path), "--sessions", str(sessions_path),
        "--start", "2026-04-01", "--json",
    ]
    assert main(argv) == 0

    payload = _envelope(capsys)["payload"]
    assert payload["session_ids"] == ["s2"]
    assert payload["analytics"]["strike_pct"] == 0
    assert payload["analytics"]["pitch_type_metrics"][0]["count"] == 4


def test_report_unknown_pitcher_is_empty(exports, capsys):
    records_path, sessions_path = exports
    argv = [
        "report", "--records", str(records_path), "--sessions", str(sessions_path),
        "--pitcher", "nobody", "--json",
    ]
    assert main(argv) == 0
    payload = _envelope(capsys)["payload"]
    assert payload["session_ids"] == []
    assert payload["analytics"]["command_score"] == 0


def test_missing_file_reports_error(tmp_path, capsys):
    assert main(["analyze-session", "--records", str(tmp_path / "missing.json")]) == 1
    assert "Error:" in capsys.readouterr().err


def test_bad_config_reports_error(exports, tmp_path, capsys):
    records_path, _ = exports
    config_path = tmp_path / "config.yaml"
    config_path.write_text("strikes:\n  policy: whenever\n")
    assert main(["--config", str(config_path), "analyze-session", "--records", str(records_path)]) == 1
    assert "Error:" in capsys.readouterr().err


def test_parser_rejects_bad_hand():
    with pytest.raises(SystemExit):
        build_parser().parse_args(["analyze-session", "--records", "x.json", "--hand", "S"])


def test_bad_now_reports_error(exports, capsys):
    _, sessions_path = exports
    assert main(["rest-status", "--sessions", str(sessions_path), "--now", "tomorrow"]) == 1
    assert "Invalid now: 'tomorrow'" in capsys.readouterr().err
