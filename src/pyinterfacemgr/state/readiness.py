"""One-shot readiness latch gated by a settle timer."""

from __future__ import annotations

from enum import StrEnum


class Readiness(StrEnum):
    NOT_READY = "not_ready"
    JUST_BECAME_READY = "just_became_ready"
    READY = "ready"


class ReadinessGate:
    """Opens once no new driver has been seen for longer than ``wait_time``.

    Time values are seconds from any monotonic source; the gate never
    reads a clock itself.  Once open it stays open for its lifetime.
    """

    def __init__(self, wait_time: int, started_waiting: float) -> None:
        self.wait_time = wait_time
        self._started_waiting = started_waiting
        self._open = False

    @property
    def is_open(self) -> bool:
        return self._open

    @property
    def started_waiting(self) -> float:
        return self._started_waiting

    def restart(self, now: float) -> None:
        """Reset the settle timer (a new driver was discovered)."""
        self._started_waiting = now

    def poll(self, now: float) -> Readiness:
        """Check the timer and latch the gate if it has expired.

        ``JUST_BECAME_READY`` is returned by exactly one poll; every poll
        after that returns ``READY``.
        """
        if self._open:
            return Readiness.READY
        # Whole seconds only, and the threshold itself is not enough.
        elapsed = int(now - self._started_waiting)
        if elapsed > self.wait_time:
            self._open = True
            return Readiness.JUST_BECAME_READY
        return Readiness.NOT_READY
