"""Convert exported pitch/session JSON into contract objects."""

from __future__ import annotations

import json
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, FrozenSet, List, Optional

from contracts import (
    BaseRunner,
    BatterSide,
    PitchOutcome,
    PitchRecord,
    PitchSession,
    SessionStatus,
    parse_zone_id,
)
from exceptions import RecordFileError, RecordParseError
from log_config.logger import get_logger

logger = get_logger(__name__)

_RUNNER_FLAGS = {
    "on1b": BaseRunner.FIRST,
    "on2b": BaseRunner.SECOND,
    "on3b": BaseRunner.THIRD,
}


def _require(data: Dict[str, Any], key: str, index: int) -> Any:
    if key not in data or data[key] is None:
        raise RecordParseError(f"Record {index} is missing required field '{key}'", field=key, index=index)
    return data[key]


def _optional_float(data: Dict[str, Any], key: str, index: int) -> Optional[float]:
    value = data.get(key)
    if value is None:
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        raise RecordParseError(f"Record {index} has non-numeric '{key}': {value!r}", field=key, index=index)


def _enum_value(enum_cls, data: Dict[str, Any], key: str, index: int, default=None):
    value = data.get(key, default)
    if value is None:
        raise RecordParseError(f"Record {index} is missing required field '{key}'", field=key, index=index)
    try:
        return enum_cls(value)
    except ValueError:
        raise RecordParseError(f"Record {index} has invalid '{key}': {value!r}", field=key, index=index)


def _parse_runners(data: Dict[str, Any], index: int) -> FrozenSet[BaseRunner]:
    if "base_runners" in data:
        try:
            return frozenset(BaseRunner(r) for r in data["base_runners"] or [])
        except ValueError:
            raise RecordParseError(
                f"Record {index} has invalid base_runners: {data['base_runners']!r}",
                field="base_runners",
                index=index,
            )
    runners_on = data.get("runners_on") or {}
    return frozenset(base for flag, base in _RUNNER_FLAGS.items() if runners_on.get(flag))


def parse_datetime(value: Any, field: str = "timestamp", index: Optional[int] = None) -> datetime:
    """Parse an ISO-8601 timestamp (a trailing "Z" means UTC)."""
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        where = f"Record {index} has invalid" if index is not None else "Invalid"
        raise RecordParseError(f"{where} {field}: {value!r}", field=field, index=index)


def pitch_record_from_dict(data: Dict[str, Any], index: int = 0) -> PitchRecord:
    """Build a PitchRecord from an exported row.

    Zone codes are not validated; unknown codes become UnknownZone.

    Raises:
        RecordParseError: If a required field is missing or malformed
    """
    try:
        return PitchRecord(
            session_id=str(_require(data, "session_id", index)),
            index=int(data.get("index", index)),
            pitch_type_id=str(_require(data, "pitch_type_id", index)),
            target_zone=parse_zone_id(_require(data, "target_zone", index)),
            actual_zone=parse_zone_id(_require(data, "actual_zone", index)),
            outcome=_enum_value(PitchOutcome, data, "outcome", index),
            batter_side=_enum_value(BatterSide, data, "batter_side", index, default="R"),
            balls_before=int(data.get("balls_before", 0)),
            strikes_before=int(data.get("strikes_before", 0)),
            base_runners=_parse_runners(data, index),
            outs=int(data.get("outs", 0)),
            target_x_norm=_optional_float(data, "target_x_norm", index),
            target_y_norm=_optional_float(data, "target_y_norm", index),
            actual_x_norm=_optional_float(data, "actual_x_norm", index),
            actual_y_norm=_optional_float(data, "actual_y_norm", index),
            miss_distance_inches=_optional_float(data, "miss_distance_inches", index),
            velocity_mph=_optional_float(data, "velocity_mph", index),
        )
    except (TypeError, ValueError) as e:
        raise RecordParseError(f"Record {index} could not be parsed: {e}", index=index)


def pitch_session_from_dict(data: Dict[str, Any], index: int = 0) -> PitchSession:
    """Build a PitchSession from an exported row.

    Raises:
        RecordParseError: If a required field is missing or malformed
    """
    end_time = data.get("session_end_time")
    try:
        total_pitches = int(data.get("total_pitches") or 0)
    except (TypeError, ValueError):
        raise RecordParseError(
            f"Record {index} has invalid total_pitches: {data.get('total_pitches')!r}",
            field="total_pitches",
            index=index,
        )
    return PitchSession(
        id=str(_require(data, "id", index)),
        pitcher_id=str(data.get("pitcher_id", "")),
        team_id=data.get("team_id"),
        session_start_time=parse_datetime(_require(data, "session_start_time", index), "session_start_time", index),
        session_end_time=parse_datetime(end_time, "session_end_time", index) if end_time else None,
        total_pitches=total_pitches,
        status=_enum_value(SessionStatus, data, "status", index, default="completed"),
    )


def _read_rows(path: Path, key: str) -> List[Dict[str, Any]]:
    path = Path(path)
    if not path.exists():
        raise RecordFileError(f"File not found: {path}")

    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as e:
        raise RecordFileError(f"Invalid JSON in {path}: {e}")

    if isinstance(data, dict):
        data = data.get(key, [])
    if not isinstance(data, list):
        raise RecordFileError(f"Expected a list of {key} in {path}")
    return data


def load_pitch_records(path: Path) -> List[PitchRecord]:
    """Load pitch records from a JSON list or a {"pitches": [...]} object."""
    rows = _read_rows(path, "pitches")
    records = [pitch_record_from_dict(row, i) for i, row in enumerate(rows)]
    logger.debug(f"Loaded {len(records)} pitch records from {path}")
    return records


def load_sessions(path: Path) -> List[PitchSession]:
    """Load sessions from a JSON list or a {"sessions": [...]} object."""
    rows = _read_rows(path, "sessions")
    sessions = [pitch_session_from_dict(row, i) for i, row in enumerate(rows)]
    logger.debug(f"Loaded {len(sessions)} sessions from {path}")
    return sessions


__all__ = [
    "parse_datetime",
    "pitch_record_from_dict",
    "pitch_session_from_dict",
    "load_pitch_records",
    "load_sessions",
]
