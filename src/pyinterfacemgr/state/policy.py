"""Broken-bond alert policy and capability matching.

Alert selection walks an ordered rule list and keeps only the *last*
matching rule.  A driver holding several roles therefore reports the
message of the role evaluated last, not the most severe one: a
controller that is also a sensor raises the sensor CAUTION, never the
controller WARNING/FATAL.  Existing alert consumers depend on that
ordering.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

from pyinterfacemgr.models.alert import Alert, AlertSeverity
from pyinterfacemgr.models.driver import DriverCategory, DriverInfo, DriverState


def _level(driver: DriverInfo) -> str:
    return "degraded" if driver.state == DriverState.DEGRADED else "gone"


@dataclass(frozen=True, slots=True)
class AlertRule:
    """One entry of the broken-bond alert table.

    ``template`` is formatted with ``name`` and ``level`` keys.
    """

    applies: Callable[[DriverInfo], bool]
    severity: AlertSeverity
    template: str

    def render(self, driver: DriverInfo) -> Alert:
        return Alert(
            severity=self.severity,
            message=self.template.format(name=driver.name, level=_level(driver)),
        )


ALERT_RULES: tuple[AlertRule, ...] = (
    AlertRule(
        applies=lambda d: d.controller and d.state.is_unavailable,
        severity=AlertSeverity.FATAL,
        template="Controller driver {name} is no longer available.",
    ),
    AlertRule(
        applies=lambda d: d.controller and d.state == DriverState.DEGRADED,
        severity=AlertSeverity.WARNING,
        template="Controller driver {name} is operating on degraded capability.",
    ),
    AlertRule(
        applies=lambda d: d.position,
        severity=AlertSeverity.WARNING,
        template="Position driver {name} is {level}.",
    ),
    AlertRule(
        applies=lambda d: d.comms,
        severity=AlertSeverity.WARNING,
        template="Comms driver {name} is {level}.",
    ),
    AlertRule(
        applies=lambda d: d.sensor or d.can,
        severity=AlertSeverity.CAUTION,
        template="Driver {name} is {level}.",
    ),
)


def should_evict(driver: DriverInfo) -> bool:
    """A broken bond on a FAULT/OFF driver means it is gone for good."""
    return driver.state.is_unavailable


def broken_bond_alert(
    driver: DriverInfo,
    *,
    system_operational: bool,
    rules: Iterable[AlertRule] = ALERT_RULES,
) -> Alert | None:
    """Pick the alert for a broken bond, or ``None`` when nothing should be raised.

    Alerts are only raised once the system is operational and only for
    drivers whose recorded state is not OPERATIONAL.
    """
    if not system_operational or driver.state == DriverState.OPERATIONAL:
        return None

    selected: AlertRule | None = None
    for rule in rules:
        if rule.applies(driver):
            selected = rule
    return selected.render(driver) if selected is not None else None


def matches(driver: DriverInfo, category: DriverCategory, required: frozenset[str]) -> bool:
    """Return ``True`` when *driver* serves *category* and offers every *required* capability."""
    return driver.has_role(category) and driver.provides(required)
