"""
Zone Models
===========

This module defines the zone observation contract supplied by the data source.

A snapshot is an ordered list of Zone records. Each zone carries its
geometry (center + radius, used only for presentation), its current
crowd density, and its crowd flow (cardinal direction + speed).

Input Contract (one zone):
    {
        "id": 3,
        "name": "Prayer Hall",
        "center": [21.3902, 39.863],
        "density": 95,
        "flow": {"direction": "E", "speed": 0.5},
        "radius": 250
    }

Tolerance:
    Density is nominally 0-100 and speed nominally non-negative, but
    values outside those ranges are accepted and evaluated by the same
    rules. Only malformed records (missing fields, non-numeric or
    non-finite values) are rejected.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class InvalidZone(ValueError):
    """
    Raised when a zone record is malformed.

    Attributes:
        index: Position of the offending record in the snapshot (if known)
    """

    def __init__(self, message: str, index: Optional[int] = None) -> None:
        self.index = index
        if index is not None:
            message = f"zone[{index}]: {message}"
        super().__init__(message)


def _reject_bool(v: Any) -> Any:
    """Refuse booleans where pydantic would coerce them to 0/1."""
    if isinstance(v, bool):
        raise ValueError("must be a number, not a boolean")
    return v


class Coordinate(BaseModel):
    """
    Geographic coordinate in decimal degrees.

    Accepts either a mapping or a ``[latitude, longitude]`` pair.
    """

    model_config = ConfigDict(frozen=True)

    latitude: float = Field(..., allow_inf_nan=False, description="Latitude (degrees)")
    longitude: float = Field(..., allow_inf_nan=False, description="Longitude (degrees)")

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def reject_bool_degrees(cls, v: Any) -> Any:
        return _reject_bool(v)

    def as_pair(self) -> tuple[float, float]:
        """Return ``(latitude, longitude)``."""
        return (self.latitude, self.longitude)


class Flow(BaseModel):
    """
    Crowd movement within a zone.

    Attributes:
        direction: Cardinal label (N/E/S/W); any other string is kept as-is
        speed: Movement speed in meters/second
    """

    model_config = ConfigDict(frozen=True)

    direction: str = Field(..., description="Cardinal direction label")
    speed: float = Field(..., allow_inf_nan=False, description="Speed (m/s)")

    @field_validator("speed", mode="before")
    @classmethod
    def reject_bool_speed(cls, v: Any) -> Any:
        return _reject_bool(v)


class Zone(BaseModel):
    """
    One monitored zone in a snapshot.

    Zones are immutable; the engine never modifies them.

    Attributes:
        id: Identifier, expected to be unique within a snapshot
        name: Optional display name (see display_label)
        center: Zone center coordinate
        density: Occupancy percentage (0-100 nominal)
        flow: Crowd flow direction and speed
        radius: Zone radius in meters (presentation only)
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Zone identifier")

    name: Optional[str] = Field(
        default=None,
        description="Display name; falls back to 'Zone <id>' when absent",
    )

    center: Coordinate = Field(..., description="Zone center (lat, lon)")

    density: float = Field(
        ...,
        allow_inf_nan=False,
        description="Occupancy percentage (0-100 nominal)",
    )

    flow: Flow = Field(..., description="Crowd flow")

    radius: float = Field(
        default=0.0,
        allow_inf_nan=False,
        description="Zone radius in meters (presentation only)",
    )

    @field_validator("center", mode="before")
    @classmethod
    def coerce_center_pair(cls, v: Any) -> Any:
        """Accept ``[lat, lon]`` pairs as well as mappings."""
        if isinstance(v, (list, tuple)):
            if len(v) != 2:
                raise ValueError("center must be a [latitude, longitude] pair")
            return {"latitude": v[0], "longitude": v[1]}
        return v

    @field_validator("id", "density", "radius", mode="before")
    @classmethod
    def reject_bool_numbers(cls, v: Any) -> Any:
        """JSON true/false is not a number."""
        return _reject_bool(v)


def display_label(zone: Zone) -> str:
    """
    Human-readable label for a zone.

    Uses the zone's name, or ``"Zone <id>"`` when the name is missing
    or empty.
    """
    return zone.name or f"Zone {zone.id}"
