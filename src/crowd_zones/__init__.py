"""
Crowd Zones
===========

Zone analytics and alerting for crowd-density monitoring.

This package evaluates snapshots of monitored zones (density, flow
direction, flow speed, geometry) and derives what a map dashboard needs
to render them.

Components:
    - analytics: Density tier classification
    - geometry: Flow arrow geometry
    - alerts: Rule-based alert engine
    - snapshot: Snapshot loading and validation
    - observability: Aggregate snapshot metrics
    - dashboard: Per-render-cycle output assembly

Example:
    from crowd_zones.snapshot import load_snapshot
    from crowd_zones.alerts import generate_alerts

    zones = load_snapshot("snapshot.yaml")
    for alert in generate_alerts(zones):
        print(alert.type.value, alert.message)
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
