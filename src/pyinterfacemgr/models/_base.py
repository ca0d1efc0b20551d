"""Base model and enum for interface manager data.

Every model inherits from :class:`IfmBaseModel` which provides:

* ``alias_generator=to_camel`` so camelCase keys from the discovery
  feed map automatically to snake_case fields.
* A ``model_validator(mode="before")`` that drops placeholder values
  (``None``, ``""``, ``"--"``) so the field default is used.
* Immutability, so records can be shared outside the worker lock.

Enums inherit from :class:`IfmEnum` which adds an ``UNKNOWN``
member at ``-1`` and a ``_missing_`` hook that returns ``UNKNOWN``
for any value without a mapped member.
"""

from __future__ import annotations

import enum
from typing import Any

from pydantic import BaseModel, ConfigDict, model_validator
from pydantic.alias_generators import to_camel

# Placeholder strings that mean "not reported".
_PLACEHOLDERS = frozenset({"", "--"})


class IfmEnum(enum.IntEnum):
    """Base for collaborator-defined integer enums.

    Every subclass **must** define ``UNKNOWN = -1``.
    """

    @classmethod
    def _missing_(cls, value: object) -> IfmEnum:
        # pylint: disable=no-member
        if hasattr(cls, "UNKNOWN"):
            unknown: IfmEnum = cls.UNKNOWN  # type: ignore[attr-defined]
            return unknown
        return next(iter(cls))


class IfmBaseModel(BaseModel):
    """Base for immutable interface manager models."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        populate_by_name=True,
        alias_generator=to_camel,
    )

    @model_validator(mode="before")
    @classmethod
    def _drop_placeholders(cls, values: Any) -> Any:
        if not isinstance(values, dict):
            return values
        cleaned: dict[str, Any] = {}
        for key, value in values.items():
            if value is None:
                continue
            if isinstance(value, str) and value.strip() in _PLACEHOLDERS:
                continue
            cleaned[key] = value
        return cleaned
