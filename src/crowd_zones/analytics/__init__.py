"""
Analytics Module
================

Density tier classification for zone rendering.
"""

from crowd_zones.analytics.classifier import (
    TIER_COLORS,
    TierThresholds,
    classify,
    tier_color,
)

__all__ = [
    "TIER_COLORS",
    "TierThresholds",
    "classify",
    "tier_color",
]
