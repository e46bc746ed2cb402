"""
Snapshot Loading
================

Utilities for turning raw zone data into validated Zone snapshots.

This module handles:
    - Loading snapshots from YAML or JSON files
    - Validating in-memory zone mappings (e.g. request bodies)
    - Translating validation failures into InvalidZone

Accepted shapes:
    - A list of zone mappings
    - A mapping with a "zones" key holding that list

Out-of-range density or speed values are NOT rejected; they are logged
as warnings and evaluated like any other value.

Example:
    from crowd_zones.snapshot import load_snapshot

    zones = load_snapshot("./data/haram_snapshot.yaml")
    for zone in zones:
        print(zone.id, zone.density)
"""

import json
import logging
from pathlib import Path
from typing import Any, List

import yaml
from pydantic import ValidationError

from crowd_zones.models.zone import InvalidZone, Zone, display_label


logger = logging.getLogger(__name__)


DENSITY_RANGE = (0.0, 100.0)


def parse_snapshot(data: Any) -> List[Zone]:
    """
    Validate raw snapshot data into a list of zones.

    Args:
        data: List of zone mappings, or a mapping with a "zones" key

    Returns:
        Zones in input order

    Raises:
        InvalidZone: If the shape is wrong or any record is malformed
    """
    if isinstance(data, dict):
        if "zones" not in data:
            raise InvalidZone("snapshot mapping has no 'zones' key")
        data = data["zones"]

    if not isinstance(data, list):
        raise InvalidZone(f"snapshot must be a list of zones, got {type(data).__name__}")

    zones: List[Zone] = []
    for index, record in enumerate(data):
        if isinstance(record, Zone):
            zone = record
        else:
            try:
                zone = Zone.model_validate(record)
            except ValidationError as e:
                raise InvalidZone(_summarize(e), index=index) from e
        _warn_out_of_range(zone)
        zones.append(zone)

    return zones


def load_snapshot(path: str) -> List[Zone]:
    """
    Load a zone snapshot from a YAML or JSON file.

    Args:
        path: Path to the snapshot file

    Returns:
        Zones in file order

    Raises:
        FileNotFoundError: If the file does not exist
        InvalidZone: If the content cannot be parsed or validated
    """
    file_path = Path(path)

    if not file_path.exists():
        raise FileNotFoundError(f"Snapshot file not found: {path}")

    logger.info(f"Loading snapshot from: {path}")

    with open(file_path, "r", encoding="utf-8") as f:
        try:
            if file_path.suffix.lower() == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
            raise InvalidZone(f"cannot parse snapshot file {path}: {e}") from e

    zones = parse_snapshot(data if data is not None else [])
    logger.info(f"Loaded {len(zones)} zones")
    return zones


def _summarize(error: ValidationError) -> str:
    """One-line summary of a pydantic validation error."""
    parts = []
    for item in error.errors():
        loc = ".".join(str(p) for p in item["loc"]) or "<root>"
        parts.append(f"{loc}: {item['msg']}")
    return "; ".join(parts)


def _warn_out_of_range(zone: Zone) -> None:
    low, high = DENSITY_RANGE
    if not low <= zone.density <= high:
        logger.warning(
            f"{display_label(zone)}: density {zone.density} outside "
            f"{low:g}-{high:g}, evaluating as-is"
        )
    if zone.flow.speed < 0:
        logger.warning(
            f"{display_label(zone)}: negative flow speed {zone.flow.speed}, evaluating as-is"
        )
