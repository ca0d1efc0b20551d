"""Driver status payload parsing.

The discovery feed reports each driver as a flat mapping with a name,
an integer status and one flag per role.  Key spelling varies between
publishers (``status``/``state``, snake_case/camelCase), so parsing is
lenient about everything except the name.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from pyinterfacemgr.exceptions import StatusPayloadError
from pyinterfacemgr.ingestion.normalize import safe_bool, safe_str, string_list, to_enum
from pyinterfacemgr.models.driver import DriverCategory, DriverInfo, DriverState

_STATE_KEYS = ("status", "state", "driverStatus", "driver_status")
_CAPABILITY_KEYS = ("capabilities", "api", "driverApi", "driver_api")


def _first(payload: Mapping[str, Any], keys: tuple[str, ...]) -> Any:
    for key in keys:
        if key in payload and payload[key] is not None:
            return payload[key]
    return None


def parse_driver_status(payload: Mapping[str, Any]) -> DriverInfo:
    """Build a :class:`DriverInfo` from a raw status payload.

    Raises
    ------
    StatusPayloadError
        If *payload* is not a mapping or carries no usable name.
    """
    if not isinstance(payload, Mapping):
        raise StatusPayloadError(f"status payload must be a mapping, got {type(payload).__name__}")

    name = safe_str(payload.get("name"))
    if name is None:
        raise StatusPayloadError("status payload has no driver name")

    fields: dict[str, Any] = {
        "name": name,
        "state": to_enum(DriverState, _first(payload, _STATE_KEYS), DriverState.UNKNOWN),
        "capabilities": string_list(_first(payload, _CAPABILITY_KEYS)),
    }
    for category in DriverCategory:
        fields[category.value] = safe_bool(payload.get(category.value))

    try:
        return DriverInfo(**fields)
    except ValidationError as exc:
        raise StatusPayloadError(f"invalid status payload for driver {name!r}") from exc
