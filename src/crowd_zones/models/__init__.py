"""
Data Models
===========

Pydantic models for the crowd zone monitor.

This module re-exports all data models for convenient access.

Models:
    Input:
        - Zone, Flow, Coordinate: Zone observation contract
        - InvalidZone: Raised for malformed zone records

    Classification:
        - Tier: Density tier (High, Medium, Low)

    Alerts:
        - AlertType: critical / warning
        - Alert: A single rule firing

    Output:
        - ZoneView: Per-zone presentation bundle
        - SnapshotMetrics: Aggregate snapshot figures
        - DashboardOutput: Complete output contract
"""

from crowd_zones.models.zone import Coordinate, Flow, InvalidZone, Zone, display_label
from crowd_zones.models.tier import Tier
from crowd_zones.models.alert import Alert, AlertType
from crowd_zones.models.output import DashboardOutput, SnapshotMetrics, ZoneView

__all__ = [
    # Input
    "Coordinate",
    "Flow",
    "Zone",
    "InvalidZone",
    "display_label",
    # Classification
    "Tier",
    # Alerts
    "AlertType",
    "Alert",
    # Output
    "ZoneView",
    "SnapshotMetrics",
    "DashboardOutput",
]
