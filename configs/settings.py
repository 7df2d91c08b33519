"""Configuration loading for pitch command analytics."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from configs.validator import validate_config
from contracts import MissSideConvention, StrikePolicy
from exceptions import ConfigError, InvalidConfigError
from log_config.logger import get_logger

logger = get_logger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).with_name("default.yaml")


@dataclass(frozen=True)
class ZoneConfig:
    grid_start: float = 15.0 / 90.0
    grid_end: float = 75.0 / 90.0
    margin: float = 0.05


@dataclass(frozen=True)
class ProximityConfig:
    decay_distance: float = 0.15

    @property
    def decay_rate(self) -> float:
        return 1.0 / self.decay_distance


@dataclass(frozen=True)
class StrikeConfig:
    policy: StrikePolicy = StrikePolicy.OUTCOME_ONLY


@dataclass(frozen=True)
class MissConfig:
    threshold: float = 0.05
    side_convention: MissSideConvention = MissSideConvention.CATCHER_VIEW
    distance_normalization: float = 0.5


@dataclass(frozen=True)
class TrendConfig:
    window_size: int = 10
    min_pitches: int = 20
    change_threshold: float = 0.1


@dataclass(frozen=True)
class InsightConfig:
    best_pitch_min_strike_pct: float = 60
    dominant_miss_pct: float = 40
    strike_rate_high: float = 70
    strike_rate_low: float = 50
    hit_rate_high: float = 50
    hit_rate_low: float = 30


@dataclass(frozen=True)
class WorkloadConfig:
    rest_hours_per_pitch: float = 1.0


@dataclass(frozen=True)
class AnalyticsConfig:
    zone: ZoneConfig = field(default_factory=ZoneConfig)
    proximity: ProximityConfig = field(default_factory=ProximityConfig)
    strikes: StrikeConfig = field(default_factory=StrikeConfig)
    miss: MissConfig = field(default_factory=MissConfig)
    trend: TrendConfig = field(default_factory=TrendConfig)
    insights: InsightConfig = field(default_factory=InsightConfig)
    workload: WorkloadConfig = field(default_factory=WorkloadConfig)


def default_config() -> AnalyticsConfig:
    """Built-in configuration, identical to configs/default.yaml."""
    return AnalyticsConfig()


def config_from_dict(data: Optional[Dict[str, Any]]) -> AnalyticsConfig:
    """Validate a raw mapping and build an AnalyticsConfig.

    Missing sections and keys take their schema defaults.

    Raises:
        ConfigError: If the mapping is invalid
    """
    data = {} if data is None else dict(data)
    validate_config(data)

    try:
        zone = ZoneConfig(**data["zone"])
        if zone.grid_start >= zone.grid_end:
            raise ValueError(
                f"zone.grid_start ({zone.grid_start}) must be below zone.grid_end ({zone.grid_end})"
            )
        miss_data = data["miss"]
        config = AnalyticsConfig(
            zone=zone,
            proximity=ProximityConfig(**data["proximity"]),
            strikes=StrikeConfig(policy=StrikePolicy(data["strikes"]["policy"])),
            miss=MissConfig(
                threshold=miss_data["threshold"],
                side_convention=MissSideConvention(miss_data["side_convention"]),
                distance_normalization=miss_data["distance_normalization"],
            ),
            trend=TrendConfig(**data["trend"]),
            insights=InsightConfig(**data["insights"]),
            workload=WorkloadConfig(**data["workload"]),
        )
    except (TypeError, ValueError) as e:
        logger.error(f"Failed to construct configuration objects: {e}")
        raise InvalidConfigError(f"Failed to construct configuration: {e}")

    return config


def load_config(path: Path = DEFAULT_CONFIG_PATH) -> AnalyticsConfig:
    """Load and validate configuration from YAML file.

    Args:
        path: Path to configuration file

    Returns:
        Validated AnalyticsConfig instance

    Raises:
        ConfigError: If configuration is invalid or cannot be loaded
    """
    path = Path(path)
    logger.info(f"Loading configuration from {path}")
    if not path.exists():
        raise InvalidConfigError(f"Configuration file not found: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        logger.error(f"Failed to parse YAML configuration: {e}")
        raise InvalidConfigError(f"Failed to parse configuration file: {e}")

    if data is not None and not isinstance(data, dict):
        raise InvalidConfigError(f"Configuration root must be a mapping, got {type(data).__name__}")

    config = config_from_dict(data)
    logger.info(
        f"Configuration loaded successfully: strike policy {config.strikes.policy.value}, "
        f"{config.workload.rest_hours_per_pitch} rest h/pitch"
    )
    return config


__all__ = [
    "ZoneConfig",
    "ProximityConfig",
    "StrikeConfig",
    "MissConfig",
    "TrendConfig",
    "InsightConfig",
    "WorkloadConfig",
    "AnalyticsConfig",
    "ConfigError",
    "DEFAULT_CONFIG_PATH",
    "default_config",
    "config_from_dict",
    "load_config",
]
