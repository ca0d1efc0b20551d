"""Normalization helpers.

Centralizes defensive parsing of discovery feed values.
"""

from __future__ import annotations

import math
from collections.abc import Iterable
from enum import IntEnum
from typing import Any, TypeVar

TEnum = TypeVar("TEnum", bound=IntEnum)

_TRUE_STRINGS = frozenset({"1", "true", "yes", "y", "on"})
_FALSE_STRINGS = frozenset({"0", "false", "no", "n", "off"})


def safe_float(value: Any) -> float | None:
    if value is None or value == "" or value == "--":
        return None
    if isinstance(value, bool):
        return float(value)
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def safe_str(value: Any) -> str | None:
    if value is None:
        return None
    text = str(value).strip()
    return text if text else None


def safe_bool(value: Any, default: bool = False) -> bool:
    """Interpret role flags sent as bools, ints or strings."""
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in _TRUE_STRINGS:
            return True
        if normalized in _FALSE_STRINGS:
            return False
        return default
    parsed = safe_int(value)
    if parsed is None:
        return default
    return parsed != 0


def to_enum(enum_cls: type[TEnum], value: Any, default: TEnum) -> TEnum:
    if isinstance(value, enum_cls):
        return value
    if isinstance(value, str):
        member = enum_cls.__members__.get(value.strip().upper())
        if member is not None:
            return member
    parsed = safe_int(value)
    if parsed is None:
        return default
    try:
        return enum_cls(parsed)
    except ValueError:
        return default


def string_list(value: Any) -> list[str]:
    """Flatten a capability field into a list of strings.

    Accepts a single string (comma separated), or any iterable of values.
    """
    if value is None:
        return []
    if isinstance(value, str):
        return [part for part in (p.strip() for p in value.split(",")) if part]
    if isinstance(value, Iterable):
        return [text for text in (safe_str(item) for item in value) if text is not None]
    return []
