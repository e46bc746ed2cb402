"""
Snapshot Evaluator
==================

Composes the classifier, flow geometry, and alert engine into one
DashboardOutput per render cycle.

The three components are independent: each reads the same snapshot and
none calls another. The evaluator is the only place they meet.

Example:
    from crowd_zones.dashboard import SnapshotEvaluator
    from crowd_zones.snapshot import load_snapshot

    evaluator = SnapshotEvaluator()
    output = evaluator.evaluate(load_snapshot("snapshot.yaml"))
    print(output.metrics.active_alerts)
"""

import logging
import time
from typing import Optional, Sequence

from crowd_zones.alerts.engine import AlertEngine, AlertThresholds
from crowd_zones.analytics.classifier import TierThresholds, classify, tier_color
from crowd_zones.config import Settings
from crowd_zones.geometry.flow_indicator import (
    METERS_PER_DEGREE,
    METERS_PER_SPEED_UNIT,
    direction_angle_degrees,
    flow_offset,
)
from crowd_zones.models.output import DashboardOutput, ZoneView
from crowd_zones.models.zone import Zone, display_label
from crowd_zones.observability.metrics import compute_metrics


logger = logging.getLogger(__name__)


class SnapshotEvaluator:
    """
    Evaluates zone snapshots into dashboard outputs.

    Holds configuration only; evaluations share no state.

    Attributes:
        tier_thresholds: Bounds for tier classification
        alert_engine: Rule table evaluator
        meters_per_speed_unit: Arrow length scale
        meters_per_degree: Degree conversion factor
    """

    def __init__(
        self,
        tier_thresholds: Optional[TierThresholds] = None,
        alert_thresholds: Optional[AlertThresholds] = None,
        meters_per_speed_unit: float = METERS_PER_SPEED_UNIT,
        meters_per_degree: float = METERS_PER_DEGREE,
    ) -> None:
        self.tier_thresholds = tier_thresholds or TierThresholds()
        self.alert_engine = AlertEngine(thresholds=alert_thresholds)
        self.meters_per_speed_unit = meters_per_speed_unit
        self.meters_per_degree = meters_per_degree
        logger.info(
            f"SnapshotEvaluator initialized: "
            f"tiers={self.tier_thresholds.high}/{self.tier_thresholds.medium}, "
            f"critical={self.alert_engine.thresholds.critical_density}"
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "SnapshotEvaluator":
        """Build an evaluator from loaded settings."""
        tier = settings.thresholds.tier
        alerts = settings.thresholds.alerts
        return cls(
            tier_thresholds=TierThresholds(high=tier.high, medium=tier.medium),
            alert_thresholds=AlertThresholds(
                critical_density=alerts.critical_density,
                dense=alerts.dense,
                stagnation_speed=alerts.stagnation_speed,
                high_speed=alerts.high_speed,
            ),
            meters_per_speed_unit=settings.flow.meters_per_speed_unit,
            meters_per_degree=settings.flow.meters_per_degree,
        )

    def zone_view(self, zone: Zone) -> ZoneView:
        """Presentation bundle for one zone."""
        tier = classify(zone.density, self.tier_thresholds)
        return ZoneView(
            id=zone.id,
            label=display_label(zone),
            center=zone.center,
            radius=zone.radius,
            density=zone.density,
            tier=tier,
            color=tier_color(tier),
            direction=zone.flow.direction,
            speed=zone.flow.speed,
            arrow_angle_degrees=direction_angle_degrees(zone.flow.direction),
            arrow_endpoint=flow_offset(
                zone.center,
                zone.flow.direction,
                zone.flow.speed,
                meters_per_speed_unit=self.meters_per_speed_unit,
                meters_per_degree=self.meters_per_degree,
            ),
        )

    def evaluate(
        self,
        zones: Sequence[Zone],
        current_time: Optional[float] = None,
    ) -> DashboardOutput:
        """
        Evaluate a snapshot.

        Args:
            zones: Zones in snapshot order
            current_time: Output timestamp (defaults to time.time())

        Returns:
            DashboardOutput with zone views, alerts, and metrics
        """
        if current_time is None:
            current_time = time.time()

        alerts = self.alert_engine.generate(zones)
        metrics = compute_metrics(zones, alerts, self.alert_engine.thresholds)

        return DashboardOutput(
            timestamp=current_time,
            zones=[self.zone_view(zone) for zone in zones],
            alerts=alerts,
            metrics=metrics,
        )
