"""
Dashboard Output Models
=======================

This module defines the complete output contract handed to the
presentation layer for one render cycle.

The output is structured into three parts:
    1. Zones: Per-zone view (tier, color, flow arrow)
    2. Alerts: Rule-based alerts in zone order, then rule order
    3. Metrics: Aggregate snapshot figures for the top bar

Output Contract:
    {
        "timestamp": 1770500938.284,
        "zones": [
            {
                "id": 3,
                "label": "Prayer Hall",
                "center": {"latitude": 21.3902, "longitude": 39.863},
                "radius": 250.0,
                "density": 95.0,
                "tier": "High",
                "color": "red",
                "direction": "E",
                "speed": 0.5,
                "arrow_angle_degrees": 90.0,
                "arrow_endpoint": {"latitude": 21.3902, "longitude": 39.86304}
            }
        ],
        "alerts": [
            {"id": 3, "message": "...", "type": "critical"}
        ],
        "metrics": {
            "total_zones": 4,
            "average_density": 70.0,
            "critical_zones": 1,
            "active_alerts": 2
        }
    }

Design Rules:
    - Everything here is derived; nothing feeds back into evaluation
    - All outputs are deterministic for a given snapshot (except timestamp)
"""

from typing import List, Optional

from pydantic import BaseModel, Field

from crowd_zones.models.alert import Alert
from crowd_zones.models.tier import Tier
from crowd_zones.models.zone import Coordinate


class SnapshotMetrics(BaseModel):
    """
    Aggregate figures for one snapshot.

    Attributes:
        total_zones: Number of zones in the snapshot
        average_density: Mean density, or None for an empty snapshot
        critical_zones: Zones above the critical density threshold
        active_alerts: Number of alerts generated for the snapshot
    """

    total_zones: int = Field(..., ge=0, description="Number of zones")

    average_density: Optional[float] = Field(
        default=None,
        description="Mean density across zones (None when there are no zones)",
    )

    critical_zones: int = Field(
        ...,
        ge=0,
        description="Zones above the critical density threshold",
    )

    active_alerts: int = Field(default=0, ge=0, description="Alerts raised")


class ZoneView(BaseModel):
    """
    Presentation bundle for one zone.

    Attributes:
        id: Zone identifier
        label: Display label (name or fallback)
        center: Zone center
        radius: Zone radius in meters
        density: Zone density
        tier: Density tier
        color: Fill color for the tier
        direction: Raw flow direction label
        speed: Flow speed (m/s)
        arrow_angle_degrees: Rotation of the flow arrow
        arrow_endpoint: Where the flow arrow points to
    """

    id: int
    label: str
    center: Coordinate
    radius: float
    density: float
    tier: Tier
    color: str
    direction: str
    speed: float
    arrow_angle_degrees: float
    arrow_endpoint: Coordinate


class DashboardOutput(BaseModel):
    """
    Complete output for one evaluation of a snapshot.

    Attributes:
        timestamp: UNIX timestamp when the output was generated
        zones: Per-zone views in snapshot order
        alerts: Alerts in zone order, then rule order
        metrics: Aggregate figures
    """

    timestamp: float = Field(..., ge=0, description="UNIX timestamp of evaluation")
    zones: List[ZoneView] = Field(default_factory=list)
    alerts: List[Alert] = Field(default_factory=list)
    metrics: SnapshotMetrics
