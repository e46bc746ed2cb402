"""
Snapshot Metrics
================

Aggregate figures for the dashboard top bar.

Derived from:
    - The zone snapshot (count, mean density, critical count)
    - The alert list (active alert count)

The critical count uses the same threshold as the critical alert rule,
so "critical zones" and critical alerts always agree.

Mean density of an empty snapshot is undefined and reported as None.
"""

import logging
from typing import Optional, Sequence

import numpy as np

from crowd_zones.alerts.engine import AlertThresholds
from crowd_zones.models.alert import Alert
from crowd_zones.models.output import SnapshotMetrics
from crowd_zones.models.zone import Zone


logger = logging.getLogger(__name__)


def compute_metrics(
    zones: Sequence[Zone],
    alerts: Sequence[Alert] = (),
    thresholds: Optional[AlertThresholds] = None,
) -> SnapshotMetrics:
    """
    Compute aggregate metrics for a snapshot.

    Args:
        zones: Zones in the snapshot
        alerts: Alerts already generated for the snapshot
        thresholds: Alert thresholds (critical density threshold is reused)

    Returns:
        SnapshotMetrics
    """
    th = thresholds or AlertThresholds()

    if not zones:
        return SnapshotMetrics(
            total_zones=0,
            average_density=None,
            critical_zones=0,
            active_alerts=len(alerts),
        )

    densities = np.array([zone.density for zone in zones], dtype=float)

    return SnapshotMetrics(
        total_zones=len(zones),
        average_density=float(np.mean(densities)),
        critical_zones=int(np.sum(densities > th.critical_density)),
        active_alerts=len(alerts),
    )
