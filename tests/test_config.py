from __future__ import annotations

import pytest

from pyinterfacemgr.config import DEFAULT_WAIT_TIME, InterfaceMgrConfig, validate_wait_time
from pyinterfacemgr.exceptions import InterfaceMgrConfigError


def test_default_wait_time() -> None:
    assert InterfaceMgrConfig().wait_time == DEFAULT_WAIT_TIME == 10


def test_from_env_reads_wait_time(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IFMGR_WAIT_TIME", " 3 ")
    assert InterfaceMgrConfig.from_env().wait_time == 3


def test_from_env_override_wins(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IFMGR_WAIT_TIME", "3")
    assert InterfaceMgrConfig.from_env(wait_time=7).wait_time == 7


def test_from_env_without_variable(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("IFMGR_WAIT_TIME", raising=False)
    assert InterfaceMgrConfig.from_env().wait_time == DEFAULT_WAIT_TIME


@pytest.mark.parametrize("value", [-1, "soon", 1.5, True, None])
def test_invalid_wait_time_rejected(value: object) -> None:
    with pytest.raises(InterfaceMgrConfigError):
        validate_wait_time(value)


def test_invalid_env_value_rejected(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("IFMGR_WAIT_TIME", "ten")
    with pytest.raises(InterfaceMgrConfigError):
        InterfaceMgrConfig.from_env()
