"""Driver record model and its enums."""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum
from typing import Any

from pydantic import Field, field_validator

from pyinterfacemgr.models._base import IfmBaseModel, IfmEnum


def capability_set(value: Any) -> frozenset[str]:
    """Normalise capability identifiers into a set.

    A bare string is one capability.  Entries are stripped and blanks dropped.
    """
    if isinstance(value, str):
        value = [value]
    if not isinstance(value, Iterable):
        raise ValueError("capabilities must be an iterable of strings")
    # Duplicates and blank entries are not errors; set semantics absorb them.
    return frozenset(item.strip() for item in value if isinstance(item, str) and item.strip())


class DriverState(IfmEnum):
    """Operational state reported by a driver.

    Values follow the driver status message of the discovery feed.
    """

    UNKNOWN = -1
    OFF = 0
    OPERATIONAL = 1
    DEGRADED = 2
    FAULT = 3

    @property
    def is_unavailable(self) -> bool:
        """``True`` when the driver can no longer provide any function."""
        return self in (DriverState.FAULT, DriverState.OFF)


class DriverCategory(StrEnum):
    """Coarse driver role used for alerting and capability queries."""

    CONTROLLER = "controller"
    POSITION = "position"
    COMMS = "comms"
    SENSOR = "sensor"
    CAN = "can"


class DriverInfo(IfmBaseModel):
    """Everything known about one driver."""

    name: str = Field(..., description="Unique driver name")
    state: DriverState = DriverState.OFF
    controller: bool = False
    position: bool = False
    comms: bool = False
    sensor: bool = False
    can: bool = False
    capabilities: frozenset[str] = Field(default_factory=frozenset)

    @field_validator("name")
    @classmethod
    def _normalize_name(cls, value: str) -> str:
        name = value.strip()
        if not name:
            raise ValueError("name must be non-empty")
        return name

    @field_validator("capabilities", mode="before")
    @classmethod
    def _normalize_capabilities(cls, value: Any) -> frozenset[str]:
        return capability_set(value)

    def has_role(self, category: DriverCategory) -> bool:
        return bool(getattr(self, DriverCategory(category).value))

    @property
    def roles(self) -> frozenset[DriverCategory]:
        return frozenset(category for category in DriverCategory if self.has_role(category))

    def provides(self, required: Iterable[str]) -> bool:
        """Return ``True`` when every *required* capability is advertised."""
        return self.capabilities.issuperset(required)

    def same_as(self, other: DriverInfo) -> bool:
        """Compare state, role flags and capability set.

        Capabilities compare as sets, so ordering and duplicates in the
        incoming report never count as a change.
        """
        return (
            self.name == other.name
            and self.state == other.state
            and self.roles == other.roles
            and self.capabilities == other.capabilities
        )
