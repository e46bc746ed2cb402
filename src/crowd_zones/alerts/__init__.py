"""
Alerts Module
=============

Rule-based alert generation over zone snapshots.

The rule table is explicit and ordered; see engine.py for the rules.
"""

from crowd_zones.alerts.engine import (
    DEFAULT_RULES,
    AlertEngine,
    AlertRule,
    AlertThresholds,
    generate_alerts,
)

__all__ = [
    "DEFAULT_RULES",
    "AlertEngine",
    "AlertRule",
    "AlertThresholds",
    "generate_alerts",
]
