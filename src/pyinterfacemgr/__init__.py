"""pyinterfacemgr - Driver registry, readiness gate and bond-loss alerting."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyinterfacemgr")
except PackageNotFoundError:
    __version__ = "0+local"
from pyinterfacemgr.config import InterfaceMgrConfig
from pyinterfacemgr.exceptions import (
    DriverNotFoundError,
    InterfaceMgrConfigError,
    InterfaceMgrError,
    StatusPayloadError,
)
from pyinterfacemgr.ingestion import parse_driver_status
from pyinterfacemgr.interfaces import InterfaceManager
from pyinterfacemgr.models import (
    Alert,
    AlertSeverity,
    DriverCategory,
    DriverInfo,
    DriverState,
)
from pyinterfacemgr.state.readiness import Readiness
from pyinterfacemgr.worker import InterfaceWorker

__all__ = [
    "__version__",
    "Alert",
    "AlertSeverity",
    "DriverCategory",
    "DriverInfo",
    "DriverNotFoundError",
    "DriverState",
    "InterfaceManager",
    "InterfaceMgrConfig",
    "InterfaceMgrConfigError",
    "InterfaceMgrError",
    "InterfaceWorker",
    "Readiness",
    "StatusPayloadError",
    "parse_driver_status",
]
