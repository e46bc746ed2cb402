"""
Observability Module
====================

Aggregate snapshot metrics for the crowd zone monitor.

DESIGN RULES:
    - Metrics are derived from the snapshot and its alerts only
    - Metrics never influence classification or alerting
"""

from crowd_zones.observability.metrics import compute_metrics

__all__ = ["compute_metrics"]
