"""Data models for the interface manager."""

from pyinterfacemgr.models._base import IfmBaseModel, IfmEnum
from pyinterfacemgr.models.alert import Alert, AlertSeverity
from pyinterfacemgr.models.driver import DriverCategory, DriverInfo, DriverState

__all__ = [
    "Alert",
    "AlertSeverity",
    "DriverCategory",
    "DriverInfo",
    "DriverState",
    "IfmBaseModel",
    "IfmEnum",
]
