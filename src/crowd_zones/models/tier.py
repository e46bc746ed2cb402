"""
Tier Model
==========

Discrete density classification used to drive presentation color.
"""

from enum import Enum


class Tier(str, Enum):
    """
    Density severity tier.

    Attributes:
        HIGH: Density above the high threshold (rendered red)
        MEDIUM: Density above the medium threshold (rendered orange)
        LOW: Everything else (rendered green)
    """

    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"
