"""
Flow Geometry Tests
===================

Tests for direction bearings and flow arrow endpoints.
"""

import math

import pytest

from crowd_zones.geometry import Direction, direction_angle_degrees, flow_offset
from crowd_zones.models.zone import Coordinate


class TestDirectionAngle:
    """Tests for direction_angle_degrees()."""

    @pytest.mark.parametrize(
        "label, expected",
        [("N", 0), ("E", 90), ("S", 180), ("W", 270)],
    )
    def test_cardinal_directions(self, label, expected):
        assert direction_angle_degrees(label) == expected

    @pytest.mark.parametrize("label", ["", "NE", "n", "north", "UNKNOWN", " N"])
    def test_unknown_labels_fall_back_to_zero(self, label):
        assert direction_angle_degrees(label) == 0

    def test_parse(self):
        assert Direction.parse("W") == Direction.W
        assert Direction.parse("SW") == Direction.UNKNOWN


class TestFlowOffset:
    """Tests for flow_offset()."""

    def test_north_is_pure_latitude_shift(self):
        """speed 2.5 -> 25 m north -> +25/111320 degrees latitude."""
        center = Coordinate(latitude=21.3891, longitude=39.852)

        endpoint = flow_offset(center, "N", 2.5)

        assert endpoint.latitude == pytest.approx(21.3891 + 25 / 111320)
        assert endpoint.longitude == 39.852

    def test_east_is_longitude_shift(self):
        center = Coordinate(latitude=21.3902, longitude=39.863)

        endpoint = flow_offset(center, "E", 0.5)

        assert endpoint.latitude == pytest.approx(21.3902, abs=1e-12)
        assert endpoint.longitude == pytest.approx(39.863 + 5 / 111320)

    def test_south_and_west_point_backwards(self):
        center = Coordinate(latitude=10.0, longitude=20.0)
        step = 10 / 111320

        south = flow_offset(center, "S", 1.0)
        west = flow_offset(center, "W", 1.0)

        assert south.latitude == pytest.approx(10.0 - step)
        assert south.longitude == pytest.approx(20.0, abs=1e-12)
        assert west.latitude == pytest.approx(10.0, abs=1e-12)
        assert west.longitude == pytest.approx(20.0 - step)

    def test_unknown_direction_points_north(self):
        center = Coordinate(latitude=0.0, longitude=0.0)

        endpoint = flow_offset(center, "NE", 1.0)

        assert endpoint.latitude == pytest.approx(10 / 111320)
        assert endpoint.longitude == 0.0

    def test_zero_speed_stays_at_center(self):
        center = Coordinate(latitude=21.0, longitude=39.0)

        endpoint = flow_offset(center, "E", 0.0)

        assert endpoint.as_pair() == pytest.approx((21.0, 39.0))

    def test_distance_scales_with_speed(self):
        center = Coordinate(latitude=0.0, longitude=0.0)

        slow = flow_offset(center, "N", 1.0)
        fast = flow_offset(center, "N", 3.0)

        assert math.isclose(fast.latitude, 3 * slow.latitude)
