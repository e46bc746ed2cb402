"""
Density Classifier
==================

Maps a zone's density to a discrete tier for rendering.

Policy (strict thresholds, first match wins, high to low):
    density > 80  -> High
    density > 50  -> Medium
    otherwise     -> Low

Any number is accepted, including negative values and values above 100.
"""

from dataclasses import dataclass
from typing import Dict, Optional

from crowd_zones.models.tier import Tier


TIER_COLORS: Dict[Tier, str] = {
    Tier.HIGH: "red",
    Tier.MEDIUM: "orange",
    Tier.LOW: "green",
}


@dataclass(frozen=True)
class TierThresholds:
    """Lower bounds (exclusive) for each tier above Low."""

    high: float = 80.0
    medium: float = 50.0


DEFAULT_TIER_THRESHOLDS = TierThresholds()


def classify(density: float, thresholds: Optional[TierThresholds] = None) -> Tier:
    """
    Classify a density value into a tier.

    Args:
        density: Zone density (occupancy percentage)
        thresholds: Tier bounds, defaults to 80/50

    Returns:
        The matching Tier
    """
    th = thresholds or DEFAULT_TIER_THRESHOLDS

    if density > th.high:
        return Tier.HIGH
    if density > th.medium:
        return Tier.MEDIUM
    return Tier.LOW


def tier_color(tier: Tier) -> str:
    """Fill color used to render a tier."""
    return TIER_COLORS[tier]
