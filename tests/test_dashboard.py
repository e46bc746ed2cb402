"""
Dashboard Tests
===============

Tests for aggregate metrics and full snapshot evaluation.
"""

import pytest

from crowd_zones.alerts import AlertThresholds, generate_alerts
from crowd_zones.config import Settings
from crowd_zones.dashboard import SnapshotEvaluator
from crowd_zones.models.alert import AlertType
from crowd_zones.models.tier import Tier
from crowd_zones.observability import compute_metrics


class TestComputeMetrics:
    """Tests for compute_metrics()."""

    def test_sample_snapshot(self, sample_zones):
        alerts = generate_alerts(sample_zones)

        metrics = compute_metrics(sample_zones, alerts)

        assert metrics.total_zones == 4
        assert metrics.average_density == pytest.approx(70.0)
        assert metrics.critical_zones == 1
        assert metrics.active_alerts == 2

    def test_empty_snapshot_has_no_average(self):
        metrics = compute_metrics([])

        assert metrics.total_zones == 0
        assert metrics.average_density is None
        assert metrics.critical_zones == 0
        assert metrics.active_alerts == 0

    def test_critical_count_is_strict(self, make_zone):
        zones = [make_zone(density=90), make_zone(density=90.5)]
        assert compute_metrics(zones).critical_zones == 1

    def test_critical_count_follows_alert_threshold(self, make_zone):
        zones = [make_zone(density=60), make_zone(density=85)]
        metrics = compute_metrics(zones, thresholds=AlertThresholds(critical_density=50))
        assert metrics.critical_zones == 2


class TestSnapshotEvaluator:
    """Tests for SnapshotEvaluator."""

    def test_sample_snapshot(self, sample_zones):
        output = SnapshotEvaluator().evaluate(sample_zones, current_time=1700000000.0)

        assert output.timestamp == 1700000000.0
        assert [v.tier for v in output.zones] == [Tier.HIGH, Tier.LOW, Tier.HIGH, Tier.MEDIUM]
        assert [v.color for v in output.zones] == ["red", "green", "red", "orange"]
        assert [(a.id, a.type) for a in output.alerts] == [
            (3, AlertType.CRITICAL),
            (3, AlertType.WARNING),
        ]
        assert output.metrics.active_alerts == 2

    def test_zone_view_arrow(self, sample_zones):
        view = SnapshotEvaluator().zone_view(sample_zones[0])

        assert view.label == "Entrance Area"
        assert view.arrow_angle_degrees == 0
        assert view.arrow_endpoint.latitude == pytest.approx(21.3891 + 25 / 111320)
        assert view.arrow_endpoint.longitude == pytest.approx(39.852)

    def test_zone_view_fallback_label(self, make_zone):
        view = SnapshotEvaluator().zone_view(make_zone(id=9, name=None))
        assert view.label == "Zone 9"

    def test_epoch_timestamp(self, sample_zones):
        output = SnapshotEvaluator().evaluate(sample_zones, current_time=0.0)

        assert output.timestamp == 0.0
        assert output.metrics.total_zones == 4

    def test_empty_snapshot(self):
        output = SnapshotEvaluator().evaluate([])

        assert output.zones == []
        assert output.alerts == []
        assert output.metrics.average_density is None

    def test_from_settings(self, make_zone):
        settings = Settings.model_validate({
            "thresholds": {"tier": {"high": 60}, "alerts": {"critical_density": 60}},
            "flow": {"meters_per_speed_unit": 20},
        })
        evaluator = SnapshotEvaluator.from_settings(settings)
        zone = make_zone(density=65, flow={"direction": "N", "speed": 1.0})

        output = evaluator.evaluate([zone])

        assert output.zones[0].tier == Tier.HIGH
        assert output.alerts[0].type == AlertType.CRITICAL
        assert output.zones[0].arrow_endpoint.latitude == pytest.approx(21.3891 + 20 / 111320)

    def test_output_serializes(self, sample_zones):
        data = SnapshotEvaluator().evaluate(sample_zones).model_dump(mode="json")

        assert data["zones"][2]["tier"] == "High"
        assert data["alerts"][0]["type"] == "critical"
        assert data["zones"][0]["center"] == {"latitude": 21.3891, "longitude": 39.852}
