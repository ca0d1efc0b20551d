"""Tests for raw driver status payload parsing."""

from __future__ import annotations

import pytest

from pyinterfacemgr.exceptions import StatusPayloadError
from pyinterfacemgr.ingestion import parse_driver_status
from pyinterfacemgr.ingestion.normalize import safe_bool, string_list, to_enum
from pyinterfacemgr.models import DriverState


def test_parses_flat_status_message() -> None:
    info = parse_driver_status(
        {
            "name": " /pinpoint ",
            "status": 2,
            "position": True,
            "can": 0,
            "sensor": "1",
        }
    )

    assert info.name == "/pinpoint"
    assert info.state == DriverState.DEGRADED
    assert info.position is True
    assert info.sensor is True
    assert info.can is False
    assert info.controller is False
    assert info.capabilities == frozenset()


def test_state_alias_and_enum_names() -> None:
    assert parse_driver_status({"name": "a", "state": "fault"}).state == DriverState.FAULT
    assert parse_driver_status({"name": "a", "driverStatus": "3"}).state == DriverState.FAULT


@pytest.mark.parametrize("status", [None, "", "bogus", 42, "inf", float("inf"), "-inf", "1e999", float("nan")])
def test_unparseable_status_is_unknown(status: object) -> None:
    assert parse_driver_status({"name": "a", "status": status}).state == DriverState.UNKNOWN


def test_capabilities_from_list_or_string() -> None:
    assert parse_driver_status({"name": "a", "capabilities": ["x", "y", "x"]}).capabilities == {"x", "y"}
    assert parse_driver_status({"name": "a", "driverApi": "x, y,,"}).capabilities == {"x", "y"}


@pytest.mark.parametrize("payload", [{}, {"name": ""}, {"name": "  "}, {"name": None}])
def test_missing_name_rejected(payload: dict[str, object]) -> None:
    with pytest.raises(StatusPayloadError):
        parse_driver_status(payload)


def test_non_mapping_rejected() -> None:
    with pytest.raises(StatusPayloadError):
        parse_driver_status(["name", "a"])  # type: ignore[arg-type]


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        (True, True),
        (False, False),
        (1, True),
        (0, False),
        ("yes", True),
        ("OFF", False),
        ("maybe", False),
        (None, False),
        (float("inf"), False),
        ("1e999", False),
    ],
)
def test_safe_bool(value: object, expected: bool) -> None:
    assert safe_bool(value) is expected


def test_to_enum_default() -> None:
    assert to_enum(DriverState, None, DriverState.OFF) == DriverState.OFF
    assert to_enum(DriverState, DriverState.DEGRADED, DriverState.OFF) == DriverState.DEGRADED
    assert to_enum(DriverState, 7, DriverState.OFF) == DriverState.UNKNOWN


def test_string_list_ignores_scalars() -> None:
    assert string_list(5) == []
    assert string_list(None) == []


def test_non_finite_role_flag_falls_back_to_default() -> None:
    info = parse_driver_status({"name": "a", "status": 1, "sensor": float("inf"), "can": "-inf"})

    assert info.state == DriverState.OPERATIONAL
    assert info.sensor is False
    assert info.can is False
