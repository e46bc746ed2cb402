"""
Snapshot Module
===============

Loading and boundary validation of zone snapshots.
"""

from crowd_zones.snapshot.loader import load_snapshot, parse_snapshot

__all__ = ["load_snapshot", "parse_snapshot"]
