"""Collaborator interface consumed by the worker."""

from __future__ import annotations

from typing import Protocol

from pyinterfacemgr.models.alert import AlertSeverity


class InterfaceManager(Protocol):
    """Structural interface to the discovery/binding layer.

    The worker only decides *what* should happen; the manager owns the
    transport.  ``request_bind`` and ``dispatch_alert`` are treated as
    fire-and-forget.
    """

    def get_capabilities(self, driver_name: str) -> set[str]: ...

    def request_bind(self, driver_name: str) -> None: ...

    def dispatch_alert(self, severity: AlertSeverity, message: str) -> None: ...
