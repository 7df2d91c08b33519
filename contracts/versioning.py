"""Version metadata wrapped around serialized analytics output."""

from __future__ import annotations

from typing import Any, Dict

SCHEMA_VERSION = "1.0.0"
APP_VERSION = "0.3.0"

# Payload kinds emitted by the CLI.
SESSION_ANALYTICS = "session_analytics"
REST_STATUS = "rest_status"
COMMAND_REPORT = "command_report"


def make_envelope(payload: Dict[str, Any], kind: str = SESSION_ANALYTICS) -> Dict[str, Any]:
    """Tag a JSON payload with its kind and the schema/app versions."""
    return {
        "kind": kind,
        "schema_version": SCHEMA_VERSION,
        "app_version": APP_VERSION,
        "payload": payload,
    }


__all__ = [
    "SCHEMA_VERSION",
    "APP_VERSION",
    "SESSION_ANALYTICS",
    "REST_STATUS",
    "COMMAND_REPORT",
    "make_envelope",
]
