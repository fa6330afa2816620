"""Clock sources for chronokit timers."""

import math
import time
from typing import Protocol, runtime_checkable


@runtime_checkable
class Clock(Protocol):
    """Monotonic instant source.

    Only the difference between two ``now()`` readings is meaningful.
    """

    def now(self) -> float: ...


class SystemClock:
    """Production clock backed by ``time.perf_counter()``"""

    def now(self) -> float:
        return time.perf_counter()


class ManualClock:
    """
    Clock that only moves when told to.

    Usage:
        clock = ManualClock()
        timer = CountdownTimer.start(5, clock=clock)
        clock.advance(5)
        assert timer.is_expired()
    """

    def __init__(self, start: float = 0.0):
        self._now = float(start)

    def now(self) -> float:
        return self._now

    def advance(self, seconds: float) -> float:
        """
        Move the clock forward.

        Args:
            seconds: Step size, finite and not negative

        Returns:
            The new reading
        """
        if not math.isfinite(seconds):
            raise ValueError(f"ManualClock step must be finite (step={seconds})")
        if seconds < 0:
            raise ValueError(f"ManualClock cannot move backwards (step={seconds})")
        self._now += float(seconds)
        return self._now


def default_clock(clock: Clock | None = None) -> Clock:
    """Return ``clock`` or a fresh SystemClock"""
    return clock if clock is not None else SystemClock()
