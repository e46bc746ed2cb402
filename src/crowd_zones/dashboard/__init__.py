"""
Dashboard Module
================

Assembles per-render-cycle outputs for the presentation layer.
"""

from crowd_zones.dashboard.evaluator import SnapshotEvaluator

__all__ = ["SnapshotEvaluator"]
