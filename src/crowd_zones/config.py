"""
Crowd Zones Configuration
=========================

This module handles configuration loading for the zone monitor.

Configuration Sources (in order of precedence):
    1. Environment variables (highest priority)
    2. config.yaml file
    3. Default values (lowest priority)

Environment Variable Mapping:
    CROWD_ZONES_SNAPSHOT_PATH     -> snapshot.path
    CROWD_ZONES_CRITICAL_DENSITY  -> thresholds.alerts.critical_density
    CROWD_ZONES_PORT              -> server.port
    CROWD_ZONES_LOG_LEVEL         -> logging.level
    PORT                          -> server.port (Cloud Run)

Example:
    from crowd_zones.config import settings

    print(settings.service.name)
    print(settings.snapshot.path)
    print(settings.thresholds.alerts.critical_density)
"""

import os
import logging
from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field


logger = logging.getLogger(__name__)


DEFAULT_SNAPSHOT_PATH = str(Path(__file__).parent / "data" / "sample_snapshot.yaml")


# =============================================================================
# Configuration Models
# =============================================================================

class ServiceConfig(BaseModel):
    """Service identification configuration."""

    name: str = Field(default="crowd-zone-monitor", description="Service name")
    version: str = Field(default="v0.1.0", description="API version")


class SnapshotConfig(BaseModel):
    """Bundled zone snapshot configuration."""

    path: str = Field(
        default=DEFAULT_SNAPSHOT_PATH,
        description="Path to the YAML/JSON zone snapshot served by the API",
    )


class TierConfig(BaseModel):
    """Density thresholds for tier classification (strict comparisons)."""

    high: float = Field(default=80.0, description="Density above this is High")
    medium: float = Field(default=50.0, description="Density above this is Medium")


class AlertRulesConfig(BaseModel):
    """Thresholds for the alert rule table (strict comparisons)."""

    critical_density: float = Field(
        default=90.0,
        description="Density above this raises a critical alert",
    )
    dense: float = Field(
        default=70.0,
        description="Density above this enables the flow-speed warnings",
    )
    stagnation_speed: float = Field(
        default=1.0,
        ge=0,
        description="Speed below this in a dense zone is stagnation (m/s)",
    )
    high_speed: float = Field(
        default=3.0,
        ge=0,
        description="Speed above this in a dense zone is high-speed movement (m/s)",
    )


class ThresholdsConfig(BaseModel):
    """All decision thresholds."""

    tier: TierConfig = Field(default_factory=TierConfig)
    alerts: AlertRulesConfig = Field(default_factory=AlertRulesConfig)


class FlowConfig(BaseModel):
    """Flow indicator geometry constants."""

    meters_per_speed_unit: float = Field(
        default=10.0,
        gt=0,
        description="Arrow length in meters per m/s of flow speed",
    )
    meters_per_degree: float = Field(
        default=111320.0,
        gt=0,
        description="Equirectangular meters per degree of latitude",
    )


class ServerConfig(BaseModel):
    """Server configuration."""

    host: str = Field(default="0.0.0.0", description="Bind host")
    port: int = Field(default=8002, ge=1, le=65535, description="Bind port")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Log level")
    format: str = Field(default="json", description="Log format: json or text")


class Settings(BaseModel):
    """
    Main settings class for the crowd zone monitor.

    Loads configuration from YAML file and environment variables.
    Environment variables take precedence over file values.
    """

    service: ServiceConfig = Field(default_factory=ServiceConfig)
    snapshot: SnapshotConfig = Field(default_factory=SnapshotConfig)
    thresholds: ThresholdsConfig = Field(default_factory=ThresholdsConfig)
    flow: FlowConfig = Field(default_factory=FlowConfig)
    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


# =============================================================================
# Configuration Loading
# =============================================================================

def load_config(config_path: Optional[str] = None) -> Settings:
    """
    Load configuration from YAML file and environment variables.

    Priority (highest to lowest):
        1. Environment variables
        2. YAML config file
        3. Default values

    Args:
        config_path: Path to config.yaml. If None, searches common locations.

    Returns:
        Settings: Loaded configuration
    """
    if config_path is None:
        search_paths = [
            Path("config.yaml"),
            Path("config.yml"),
            Path(__file__).parent.parent.parent / "config.yaml",
        ]
        for path in search_paths:
            if path.exists():
                config_path = str(path)
                break

    config_data = {}
    if config_path and Path(config_path).exists():
        logger.info(f"Loading config from: {config_path}")
        with open(config_path, "r") as f:
            config_data = yaml.safe_load(f) or {}
    else:
        logger.debug("No config file found, using defaults and environment variables")

    _apply_env_overrides(config_data)

    return Settings.model_validate(config_data)


def _apply_env_overrides(config_data: dict) -> None:
    """Apply environment variable overrides to config data."""

    if env_path := os.environ.get("CROWD_ZONES_SNAPSHOT_PATH"):
        config_data.setdefault("snapshot", {})["path"] = env_path

    if env_cd := os.environ.get("CROWD_ZONES_CRITICAL_DENSITY"):
        config_data.setdefault("thresholds", {}).setdefault("alerts", {})["critical_density"] = float(env_cd)

    # Cloud Run uses PORT env var
    if env_port := os.environ.get("PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)
    elif env_port := os.environ.get("CROWD_ZONES_PORT"):
        config_data.setdefault("server", {})["port"] = int(env_port)

    if env_log := os.environ.get("CROWD_ZONES_LOG_LEVEL"):
        config_data.setdefault("logging", {})["level"] = env_log


def setup_logging(settings: Settings) -> None:
    """Configure logging based on settings."""
    log_level = getattr(logging, settings.logging.level.upper(), logging.INFO)

    if settings.logging.format == "json":
        log_format = '{"time": "%(asctime)s", "level": "%(levelname)s", "module": "%(name)s", "message": "%(message)s"}'
    else:
        log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=log_level,
        format=log_format,
        datefmt="%Y-%m-%dT%H:%M:%S",
    )


# =============================================================================
# Global Settings Instance
# =============================================================================

settings = load_config()
setup_logging(settings)
