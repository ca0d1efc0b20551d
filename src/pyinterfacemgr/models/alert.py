"""Alert model dispatched when a bonded driver degrades or disappears."""

from __future__ import annotations

from pyinterfacemgr.models._base import IfmBaseModel, IfmEnum


class AlertSeverity(IfmEnum):
    """Alert severity, lowest first."""

    UNKNOWN = -1
    CAUTION = 1
    WARNING = 2
    FATAL = 3


class Alert(IfmBaseModel):
    severity: AlertSeverity
    message: str
