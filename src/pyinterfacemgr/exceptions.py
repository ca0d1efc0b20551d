"""Custom exception hierarchy for pyinterfacemgr."""

from __future__ import annotations


class InterfaceMgrError(Exception):
    """Base exception for all pyinterfacemgr errors."""


class InterfaceMgrConfigError(InterfaceMgrError):
    """Invalid or missing configuration."""


class DriverNotFoundError(InterfaceMgrError, LookupError):
    """A driver name is not present in the driver table.

    Raised when a broken bond is reported for a driver that was never
    registered (or has already been evicted).  The table is left
    untouched; callers may log and continue.
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Driver {name!r} is not registered")


class StatusPayloadError(InterfaceMgrError):
    """A raw driver status payload could not be parsed."""
