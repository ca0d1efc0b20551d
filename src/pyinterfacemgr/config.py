"""Interface manager configuration."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pyinterfacemgr.exceptions import InterfaceMgrConfigError

DEFAULT_WAIT_TIME = 10


def validate_wait_time(value: Any) -> int:
    """Coerce *value* to a non-negative whole number of seconds.

    Strings are accepted so values can come straight from the environment.
    Booleans are rejected even though they are ints.
    """
    if isinstance(value, bool):
        raise InterfaceMgrConfigError(f"wait_time must be an integer, got {value!r}")
    if isinstance(value, str):
        try:
            value = int(value.strip())
        except ValueError as exc:
            raise InterfaceMgrConfigError(f"wait_time must be an integer, got {value!r}") from exc
    if not isinstance(value, int):
        raise InterfaceMgrConfigError(f"wait_time must be an integer, got {value!r}")
    if value < 0:
        raise InterfaceMgrConfigError(f"wait_time must be non-negative, got {value}")
    return value


@dataclasses.dataclass(frozen=True)
class InterfaceMgrConfig:
    """Interface manager configuration.

    Parameters
    ----------
    wait_time : int
        Settle duration in seconds.  The system is declared operational
        once no new driver has been discovered for longer than this.
    """

    wait_time: int = DEFAULT_WAIT_TIME

    def __post_init__(self) -> None:
        object.__setattr__(self, "wait_time", validate_wait_time(self.wait_time))

    @classmethod
    def from_env(cls, **overrides: Any) -> InterfaceMgrConfig:
        """Create configuration from environment variables.

        Reads ``IFMGR_WAIT_TIME``.  Explicit keyword arguments override
        environment values.

        Parameters
        ----------
        **overrides
            Explicit field values that take precedence over env vars.

        Returns
        -------
        InterfaceMgrConfig
            Populated configuration.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        wait_env = env.get("IFMGR_WAIT_TIME")
        if wait_env is not None and "wait_time" not in overrides:
            config_kwargs["wait_time"] = wait_env

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
