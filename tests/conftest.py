"""
Test Configuration
==================

Pytest fixtures and test configuration for the crowd zone monitor.
"""

import pytest


def _zone_dict(**overrides):
    data = {
        "id": 1,
        "name": "Test Zone",
        "center": [21.3891, 39.852],
        "density": 40,
        "flow": {"direction": "N", "speed": 2.0},
        "radius": 100,
    }
    data.update(overrides)
    return data


@pytest.fixture
def zone_data():
    """Factory for raw zone mappings with overridable fields."""
    return _zone_dict


@pytest.fixture
def make_zone():
    """Factory for validated Zone models."""
    from crowd_zones.models.zone import Zone

    def _make(**overrides):
        return Zone.model_validate(_zone_dict(**overrides))

    return _make


@pytest.fixture
def sample_snapshot_data():
    """The four-zone sample snapshot as raw mappings."""
    return [
        {
            "id": 1,
            "name": "Entrance Area",
            "center": [21.3891, 39.852],
            "density": 85,
            "flow": {"direction": "N", "speed": 2.5},
            "radius": 200,
        },
        {
            "id": 2,
            "name": "Main Road",
            "center": [21.3885, 39.856],
            "density": 40,
            "flow": {"direction": "E", "speed": 1.5},
            "radius": 150,
        },
        {
            "id": 3,
            "name": "Prayer Hall",
            "center": [21.3902, 39.863],
            "density": 95,
            "flow": {"direction": "E", "speed": 0.5},
            "radius": 250,
        },
        {
            "id": 4,
            "name": "Exit Area",
            "center": [21.392, 39.858],
            "density": 60,
            "flow": {"direction": "E", "speed": 3.0},
            "radius": 180,
        },
    ]


@pytest.fixture
def sample_zones(sample_snapshot_data):
    """The sample snapshot as validated zones."""
    from crowd_zones.snapshot import parse_snapshot

    return parse_snapshot(sample_snapshot_data)
