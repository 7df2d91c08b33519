"""Configuration validation using JSON Schema."""

from __future__ import annotations

import copy
from typing import Any, Dict

import jsonschema
from jsonschema import Draft7Validator, validators

from exceptions import ConfigValidationError
from log_config.logger import get_logger

logger = get_logger(__name__)

_UNIT_NUMBER = {"type": "number", "minimum": 0.0, "maximum": 1.0}
_PERCENT = {"type": "number", "minimum": 0, "maximum": 100}

# JSON Schema for default.yaml configuration
CONFIG_SCHEMA = {
    "$schema": "http://json-schema.org/draft-07/schema#",
    "type": "object",
    "properties": {
        "zone": {
            "type": "object",
            "default": {},
            "properties": {
                "grid_start": {**_UNIT_NUMBER, "default": 15.0 / 90.0},
                "grid_end": {**_UNIT_NUMBER, "default": 75.0 / 90.0},
                "margin": {"type": "number", "minimum": 0.0, "maximum": 0.5, "default": 0.05},
            },
        },
        "proximity": {
            "type": "object",
            "default": {},
            "properties": {
                "decay_distance": {"type": "number", "exclusiveMinimum": 0.0, "maximum": 2.0, "default": 0.15},
            },
        },
        "strikes": {
            "type": "object",
            "default": {},
            "properties": {
                "policy": {
                    "type": "string",
                    "enum": ["outcome_only", "in_play_counts", "outcome_or_zone"],
                    "default": "outcome_only",
                },
            },
        },
        "miss": {
            "type": "object",
            "default": {},
            "properties": {
                "threshold": {"type": "number", "minimum": 0.0, "maximum": 0.5, "default": 0.05},
                "side_convention": {
                    "type": "string",
                    "enum": ["catcher_view", "pitcher_relative"],
                    "default": "catcher_view",
                },
                "distance_normalization": {"type": "number", "exclusiveMinimum": 0.0, "default": 0.5},
            },
        },
        "trend": {
            "type": "object",
            "default": {},
            "properties": {
                "window_size": {"type": "integer", "minimum": 1, "maximum": 100, "default": 10},
                "min_pitches": {"type": "integer", "minimum": 1, "default": 20},
                "change_threshold": {**_UNIT_NUMBER, "default": 0.1},
            },
        },
        "insights": {
            "type": "object",
            "default": {},
            "properties": {
                "best_pitch_min_strike_pct": {**_PERCENT, "default": 60},
                "dominant_miss_pct": {**_PERCENT, "default": 40},
                "strike_rate_high": {**_PERCENT, "default": 70},
                "strike_rate_low": {**_PERCENT, "default": 50},
                "hit_rate_high": {**_PERCENT, "default": 50},
                "hit_rate_low": {**_PERCENT, "default": 30},
            },
        },
        "workload": {
            "type": "object",
            "default": {},
            "properties": {
                "rest_hours_per_pitch": {"type": "number", "minimum": 0.0, "maximum": 24.0, "default": 1.0},
            },
        },
    },
}


def extend_with_default(validator_class):
    """Validator class that fills missing properties from schema defaults.

    Defaults are deep-copied so the nested ``{}`` section defaults are
    never shared between configs.
    """
    check_properties = validator_class.VALIDATORS["properties"]

    def fill_then_check(validator, properties, instance, schema):
        if isinstance(instance, dict):
            for name, subschema in properties.items():
                if "default" in subschema:
                    instance.setdefault(name, copy.deepcopy(subschema["default"]))
        yield from check_properties(validator, properties, instance, schema)

    return validators.extend(validator_class, {"properties": fill_then_check})


DefaultValidatingValidator = extend_with_default(Draft7Validator)


def _describe(error: jsonschema.exceptions.ValidationError) -> str:
    location = " -> ".join(str(part) for part in error.path) or "root"
    return f"{location}: {error.message}"


def validate_config(config: Dict[str, Any]) -> None:
    """Validate an analytics config mapping, filling in defaults in place.

    Args:
        config: Raw configuration mapping (e.g. parsed YAML)

    Raises:
        ConfigValidationError: If any value is out of range or mistyped;
            ``validation_errors`` lists every problem as "path: message"
    """
    try:
        validator = DefaultValidatingValidator(CONFIG_SCHEMA)
        problems = [
            _describe(error)
            for error in sorted(validator.iter_errors(config), key=lambda e: [str(p) for p in e.path])
        ]
    except jsonschema.exceptions.SchemaError as e:
        logger.error(f"Analytics config schema is invalid: {e}")
        raise ConfigValidationError(f"Invalid schema definition: {e}")

    if problems:
        for problem in problems:
            logger.error(f"Config error: {problem}")
        raise ConfigValidationError(
            f"Analytics config has {len(problems)} invalid value(s): {'; '.join(problems)}",
            validation_errors=problems,
        )

    logger.debug("Analytics config passed validation")


__all__ = ["CONFIG_SCHEMA", "DefaultValidatingValidator", "validate_config"]
