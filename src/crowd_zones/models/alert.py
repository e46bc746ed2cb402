"""
Alert Models
============

Derived alert records produced by the alert engine.

Alerts are transient: they exist for one evaluation and are never stored.
The alert id is copied from the originating zone, so a zone that trips
several rules produces several alerts with the same id.

Output Contract:
    {
        "id": 3,
        "message": "Critical: \"Prayer Hall\" has extremely high density.",
        "type": "critical"
    }
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class AlertType(str, Enum):
    """Alert severity tag."""

    CRITICAL = "critical"
    WARNING = "warning"


class Alert(BaseModel):
    """
    A single rule firing for a zone.

    Attributes:
        id: Id of the zone that triggered the alert
        message: Human-readable message naming the zone
        type: Severity tag
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(..., description="Originating zone id")
    message: str = Field(..., description="Human-readable alert message")
    type: AlertType = Field(..., description="Severity: critical or warning")
