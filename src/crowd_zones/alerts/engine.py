"""
Alert Engine
============

Rule-based alert generation over a zone snapshot.

Rules are an explicit ordered table. For every zone (in snapshot order)
each rule is evaluated independently, top to bottom, and appends at most
one alert. Rules are not mutually exclusive: a zone can raise several
alerts, all carrying the zone's id.

Rule Table (strict comparisons):
    1. density > 90                  -> critical, extremely high density
    2. speed < 1  AND density > 70   -> warning, stagnation
    3. density > 70 AND speed > 3    -> warning, high-speed movement

Rules 2 and 3 never fire together with the default thresholds because
they need disjoint speed ranges. That follows from the numbers, not from
any exclusivity in the engine.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

from crowd_zones.models.alert import Alert, AlertType
from crowd_zones.models.zone import Zone, display_label


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AlertThresholds:
    """
    Thresholds for the alert rule table.

    Loaded from configuration file.
    """

    critical_density: float = 90.0
    dense: float = 70.0
    stagnation_speed: float = 1.0
    high_speed: float = 3.0


@dataclass(frozen=True)
class AlertRule:
    """
    One row of the rule table.

    Attributes:
        name: Short rule identifier (for logging)
        type: Severity of the alert the rule raises
        template: Message template, formatted with ``label``
        condition: Predicate over (zone, thresholds)
    """

    name: str
    type: AlertType
    template: str
    condition: Callable[[Zone, AlertThresholds], bool]

    def matches(self, zone: Zone, thresholds: AlertThresholds) -> bool:
        return self.condition(zone, thresholds)

    def build(self, zone: Zone) -> Alert:
        return Alert(
            id=zone.id,
            message=self.template.format(label=display_label(zone)),
            type=self.type,
        )


DEFAULT_RULES: Tuple[AlertRule, ...] = (
    AlertRule(
        name="extreme_density",
        type=AlertType.CRITICAL,
        template='Critical: "{label}" has extremely high density.',
        condition=lambda z, th: z.density > th.critical_density,
    ),
    AlertRule(
        name="stagnation",
        type=AlertType.WARNING,
        template='Warning: "{label}" is experiencing stagnation.',
        condition=lambda z, th: z.flow.speed < th.stagnation_speed and z.density > th.dense,
    ),
    AlertRule(
        name="high_speed_dense",
        type=AlertType.WARNING,
        template='Warning: High-speed movement in a dense area at "{label}".',
        condition=lambda z, th: z.density > th.dense and z.flow.speed > th.high_speed,
    ),
)


class AlertEngine:
    """
    Evaluates the rule table against zone snapshots.

    The engine holds only its configuration; every call to
    ``generate`` is independent and side-effect free.

    Example:
        engine = AlertEngine()
        alerts = engine.generate(zones)
    """

    def __init__(
        self,
        thresholds: Optional[AlertThresholds] = None,
        rules: Sequence[AlertRule] = DEFAULT_RULES,
    ) -> None:
        """
        Initialize the alert engine.

        Args:
            thresholds: Rule thresholds, defaults to 90/70 and speed 1/3
            rules: Ordered rule table
        """
        self.thresholds = thresholds or AlertThresholds()
        self.rules: Tuple[AlertRule, ...] = tuple(rules)

    def evaluate_zone(self, zone: Zone) -> List[Alert]:
        """Alerts for a single zone, in rule order."""
        return [
            rule.build(zone)
            for rule in self.rules
            if rule.matches(zone, self.thresholds)
        ]

    def generate(self, zones: Iterable[Zone]) -> List[Alert]:
        """
        Generate alerts for a snapshot.

        Args:
            zones: Zones in snapshot order

        Returns:
            Alerts in zone order, then rule order
        """
        alerts: List[Alert] = []
        for zone in zones:
            alerts.extend(self.evaluate_zone(zone))

        logger.debug(f"Generated {len(alerts)} alerts")
        return alerts


_default_engine = AlertEngine()


def generate_alerts(zones: Iterable[Zone]) -> List[Alert]:
    """Generate alerts with the default rule table and thresholds."""
    return _default_engine.generate(zones)
