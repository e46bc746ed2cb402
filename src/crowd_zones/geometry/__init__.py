"""
Geometry Module
===============

Flow arrow geometry for zone rendering.
"""

from crowd_zones.geometry.flow_indicator import (
    Direction,
    direction_angle_degrees,
    flow_offset,
)

__all__ = [
    "Direction",
    "direction_angle_degrees",
    "flow_offset",
]
