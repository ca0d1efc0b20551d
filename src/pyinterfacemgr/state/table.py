"""Insertion-ordered driver table keyed by driver name."""

from __future__ import annotations

from collections.abc import Iterator

from pyinterfacemgr.exceptions import DriverNotFoundError
from pyinterfacemgr.models.driver import DriverInfo


class DriverTable:
    """Known drivers, one record per unique name.

    Iteration follows insertion order.  Replacing a record keeps its
    first position.
    """

    def __init__(self) -> None:
        self._drivers: dict[str, DriverInfo] = {}

    def __len__(self) -> int:
        return len(self._drivers)

    def __contains__(self, name: object) -> bool:
        return name in self._drivers

    def __iter__(self) -> Iterator[DriverInfo]:
        return iter(self._drivers.values())

    def find(self, name: str) -> DriverInfo | None:
        return self._drivers.get(name)

    def get(self, name: str) -> DriverInfo:
        driver = self._drivers.get(name)
        if driver is None:
            raise DriverNotFoundError(name)
        return driver

    def insert(self, driver: DriverInfo) -> None:
        if driver.name in self._drivers:
            raise ValueError(f"driver {driver.name!r} is already registered")
        self._drivers[driver.name] = driver

    def replace(self, driver: DriverInfo) -> None:
        if driver.name not in self._drivers:
            raise DriverNotFoundError(driver.name)
        self._drivers[driver.name] = driver

    def remove(self, name: str) -> DriverInfo:
        try:
            return self._drivers.pop(name)
        except KeyError:
            raise DriverNotFoundError(name) from None

    def names(self) -> list[str]:
        return list(self._drivers)
