"""Driver registry coordinator.

:class:`InterfaceWorker` owns the driver table, the readiness gate and
the broken-bond policy.  Every read and mutation happens under a single
lock; calls out to the :class:`~pyinterfacemgr.interfaces.InterfaceManager`
always happen after the lock has been released.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable, Iterable, Mapping
from typing import Any

from pyinterfacemgr.config import InterfaceMgrConfig, validate_wait_time
from pyinterfacemgr.exceptions import DriverNotFoundError
from pyinterfacemgr.ingestion.status import parse_driver_status
from pyinterfacemgr.interfaces import InterfaceManager
from pyinterfacemgr.models.alert import Alert
from pyinterfacemgr.models.driver import DriverCategory, DriverInfo, capability_set
from pyinterfacemgr.state.policy import broken_bond_alert, matches, should_evict
from pyinterfacemgr.state.readiness import Readiness, ReadinessGate
from pyinterfacemgr.state.table import DriverTable

_logger = logging.getLogger(__name__)


class InterfaceWorker:
    """Tracks live drivers and decides when the system is operational.

    Usage::

        worker = InterfaceWorker(manager, config=InterfaceMgrConfig.from_env())
        worker.report_status(DriverInfo(name="lidar1", state=DriverState.OPERATIONAL, sensor=True))
        if worker.is_ready():
            names = worker.find_drivers(DriverCategory.SENSOR, {"scan"})
    """

    def __init__(
        self,
        manager: InterfaceManager,
        *,
        config: InterfaceMgrConfig | None = None,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        config = config or InterfaceMgrConfig()
        self._manager = manager
        self._clock = clock
        self._lock = threading.Lock()
        self._drivers = DriverTable()
        self._gate = ReadinessGate(config.wait_time, clock())

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    @property
    def wait_time(self) -> int:
        with self._lock:
            return self._gate.wait_time

    def configure_wait_time(self, seconds: int) -> None:
        """Set the settle duration; meant to be called once at startup."""
        seconds = validate_wait_time(seconds)
        with self._lock:
            self._gate.wait_time = seconds
        _logger.debug("Driver wait time set at %d seconds", seconds)

    # ------------------------------------------------------------------
    # Status reconciliation
    # ------------------------------------------------------------------

    def report_status(self, info: DriverInfo) -> None:
        """Record a status report from the discovery feed.

        Known drivers are replaced only when state, roles or capabilities
        changed.  An unseen driver has its capabilities looked up, is
        inserted, is bound, and restarts the settle timer.

        Capabilities take part in change detection, so a repeated report
        for a known driver must carry its capabilities; a report without
        them replaces the looked-up set with an empty one.
        """
        if self._reconcile_known(info):
            return

        # Discovery: look up capabilities without holding the lock.
        capabilities = self._manager.get_capabilities(info.name)
        record = DriverInfo.model_validate({**info.model_dump(), "capabilities": capabilities})

        with self._lock:
            if info.name in self._drivers:
                # Another report discovered it while we were looking up.
                discovered = False
            else:
                self._drivers.insert(record)
                self._gate.restart(self._clock())
                discovered = True

        if not discovered:
            self._reconcile_known(info)
            return

        _logger.debug(
            "Discovered driver %s with %d capabilities",
            record.name,
            len(record.capabilities),
        )
        self._call_manager("request_bind", self._manager.request_bind, record.name)

    def _reconcile_known(self, info: DriverInfo) -> bool:
        """Update a known driver in place; return ``False`` if it is unknown."""
        with self._lock:
            current = self._drivers.find(info.name)
            if current is None:
                return False
            if info.same_as(current):
                return True
            self._drivers.replace(info)
        _logger.debug("Status changed for %s", info.name)
        return True

    def ingest_status(self, payload: Mapping[str, Any]) -> DriverInfo:
        """Parse a raw status payload and report it."""
        info = parse_driver_status(payload)
        self.report_status(info)
        return info

    # ------------------------------------------------------------------
    # Broken bonds
    # ------------------------------------------------------------------

    def report_broken_bond(self, name: str) -> Alert | None:
        """Handle loss of the bond with *name*.

        The recorded state (not a new one) decides the outcome: FAULT/OFF
        drivers are evicted, and once operational any non-OPERATIONAL
        driver raises an alert chosen by its roles.

        Returns the dispatched alert, if any.

        Raises
        ------
        DriverNotFoundError
            If *name* is not in the driver table.
        """
        with self._lock:
            driver = self._drivers.find(name)
            if driver is None:
                _logger.warning("Broken bond reported for unknown driver %s", name)
                raise DriverNotFoundError(name)
            evicted = should_evict(driver)
            if evicted:
                self._drivers.remove(name)
            alert = broken_bond_alert(driver, system_operational=self._gate.is_open)

        if evicted:
            _logger.warning("Driver %s is no longer available", name)
        if alert is not None:
            self._call_manager("dispatch_alert", self._manager.dispatch_alert, alert.severity, alert.message)
        return alert

    # ------------------------------------------------------------------
    # Readiness
    # ------------------------------------------------------------------

    def poll_readiness(self) -> Readiness:
        """Poll the settle timer, exposing the one-shot transition."""
        with self._lock:
            readiness = self._gate.poll(self._clock())
        if readiness is Readiness.JUST_BECAME_READY:
            _logger.info("Declaring SYSTEM OPERATIONAL")
        return readiness

    def is_ready(self) -> bool:
        """Return ``True`` once the system is operational, on every call thereafter."""
        return self.poll_readiness() is not Readiness.NOT_READY

    @property
    def is_operational(self) -> bool:
        """Current latch value, without polling the timer."""
        with self._lock:
            return self._gate.is_open

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_drivers(self, category: DriverCategory, required_capabilities: Iterable[str] | str) -> list[str]:
        """Names of drivers in *category* offering all *required_capabilities*.

        A bare string counts as a single capability.  Empty until the
        system is operational.  Results follow discovery order.  Cost is a linear scan, O(drivers x capabilities).
        """
        category = DriverCategory(category)
        required = capability_set(required_capabilities)
        with self._lock:
            if not self._gate.is_open:
                return []
            return [driver.name for driver in self._drivers if matches(driver, category, required)]

    def get_driver(self, name: str) -> DriverInfo:
        with self._lock:
            return self._drivers.get(name)

    def driver_names(self) -> list[str]:
        with self._lock:
            return self._drivers.names()

    def snapshot(self) -> list[DriverInfo]:
        with self._lock:
            return list(self._drivers)

    def __len__(self) -> int:
        with self._lock:
            return len(self._drivers)

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._drivers

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    @staticmethod
    def _call_manager(label: str, func: Callable[..., Any], *args: Any) -> None:
        try:
            func(*args)
        except Exception:  # noqa: BLE001
            _logger.warning("InterfaceManager.%s failed", label, exc_info=True)
