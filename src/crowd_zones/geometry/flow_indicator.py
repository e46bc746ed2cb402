"""
Flow Indicator Geometry
=======================

Converts a zone's flow (cardinal direction + speed) into the endpoint of
a directional arrow drawn from the zone center.

Conventions:
    - Angles are compass bearings in degrees: N=0, E=90, S=180, W=270
    - Unrecognized direction labels map to 0 (north)
    - Arrow length in meters = speed * 10
    - Meters are converted to degrees with 1 / 111320 degrees per meter

Formula:
    d_deg = (speed * 10) / 111320
    lat'  = lat + d_deg * cos(angle)
    lon'  = lon + d_deg * sin(angle)

Note:
    This is an equirectangular approximation with no geodesic or
    latitude correction. It is only meaningful for short arrows.
"""

import math
from enum import Enum

from crowd_zones.models.zone import Coordinate


METERS_PER_SPEED_UNIT = 10.0
METERS_PER_DEGREE = 111320.0


class Direction(str, Enum):
    """Cardinal flow directions, plus UNKNOWN for any other label."""

    N = "N"
    E = "E"
    S = "S"
    W = "W"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def parse(cls, label: str) -> "Direction":
        """Map a raw label to a Direction; anything unrecognized is UNKNOWN."""
        if label in _CARDINAL_LABELS:
            return cls(label)
        return cls.UNKNOWN


_CARDINAL_LABELS = frozenset({"N", "E", "S", "W"})

_BEARINGS = {
    Direction.N: 0.0,
    Direction.E: 90.0,
    Direction.S: 180.0,
    Direction.W: 270.0,
    Direction.UNKNOWN: 0.0,
}


def direction_angle_degrees(direction: str) -> float:
    """
    Compass bearing for a direction label.

    Args:
        direction: Raw label, e.g. "N" or "E"

    Returns:
        0, 90, 180 or 270; 0 for unrecognized labels
    """
    return _BEARINGS[Direction.parse(direction)]


def flow_offset(
    center: Coordinate,
    direction: str,
    speed: float,
    meters_per_speed_unit: float = METERS_PER_SPEED_UNIT,
    meters_per_degree: float = METERS_PER_DEGREE,
) -> Coordinate:
    """
    Compute the endpoint of the flow arrow for a zone.

    Args:
        center: Zone center
        direction: Flow direction label
        speed: Flow speed (m/s)
        meters_per_speed_unit: Arrow meters per m/s
        meters_per_degree: Equirectangular conversion factor

    Returns:
        The displaced coordinate
    """
    angle = math.radians(direction_angle_degrees(direction))
    distance_deg = (speed * meters_per_speed_unit) / meters_per_degree

    return Coordinate(
        latitude=center.latitude + distance_deg * math.cos(angle),
        longitude=center.longitude + distance_deg * math.sin(angle),
    )
