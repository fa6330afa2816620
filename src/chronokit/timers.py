from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

from .clock import Clock, SystemClock, default_clock
from .config import get_config, handle_misuse
from .durations import Duration, seconds_to_duration, to_seconds
from .reporting import format_duration


@dataclass(frozen=True)
class Elapsed:
    """
    Count-up timer that knows how long since it started.

    Usage:
        timer = Elapsed.start()
        work()
        print(timer.seconds())
    """

    started_at: float
    clock: Clock = field(default_factory=SystemClock, compare=False, repr=False)

    @classmethod
    def start(cls, clock: Clock | None = None) -> "Elapsed":
        """Start counting from now"""
        clock = default_clock(clock)
        return cls(started_at=clock.now(), clock=clock)

    def seconds(self) -> float:
        """Elapsed time in seconds"""
        return max(0.0, self.clock.now() - self.started_at)

    def elapsed(self) -> timedelta:
        return seconds_to_duration(self.seconds())

    def __str__(self) -> str:
        return format_duration(self.seconds())


@dataclass(frozen=True)
class CountdownTimer:
    """
    Timer that counts down from a fixed total and stops at zero.

    The timer never changes after construction; to restart, start a new one.
    """

    started_at: float
    total: float
    clock: Clock = field(default_factory=SystemClock, compare=False, repr=False)

    @classmethod
    def start(cls, total: Duration, clock: Clock | None = None) -> "CountdownTimer":
        """
        Start a countdown.

        Args:
            total: Seconds or timedelta to count down from. Zero gives an
                already expired timer; negative values follow the
                on_negative_duration policy.
            clock: Clock source, defaults to a new SystemClock
        """
        seconds = to_seconds(total, what="countdown total")
        clock = default_clock(clock)
        return cls(started_at=clock.now(), total=seconds, clock=clock)

    def remaining_seconds(self) -> float:
        """Time left in seconds, never negative"""
        return max(0.0, self.total - (self.clock.now() - self.started_at))

    def remaining(self) -> timedelta:
        return seconds_to_duration(self.remaining_seconds())

    def is_expired(self) -> bool:
        return self.clock.now() - self.started_at >= self.total

    def __str__(self) -> str:
        return f"{format_duration(self.remaining_seconds())} of {format_duration(self.total)}"


class Stopwatch:
    """
    Count-up timer that can be paused and resumed.

    Redundant transitions (pause while paused, resume while running) are
    no-ops by default; see ``configure(on_redundant_transition=...)``.

    Usage:
        sw = Stopwatch.start()
        step_one()
        sw.pause()
        not_measured()
        sw.resume()
        step_two()
        sw.seconds()

        # As context manager: resume on enter, pause on exit
        sw = Stopwatch.start(); sw.pause()
        for item in items:
            with sw:
                process(item)
    """

    def __init__(self, clock: Clock | None = None):
        self._clock = default_clock(clock)
        self._accumulated = 0.0
        self._run_start: float | None = self._clock.now()

    @classmethod
    def start(cls, clock: Clock | None = None) -> "Stopwatch":
        """Create a running stopwatch"""
        return cls(clock)

    @property
    def is_running(self) -> bool:
        return self._run_start is not None

    @property
    def is_paused(self) -> bool:
        return self._run_start is None

    def pause(self) -> None:
        """Stop accumulating time. Does nothing when already paused."""
        if self._run_start is None:
            handle_misuse(
                get_config().on_redundant_transition,
                "Stopwatch.pause() called but the stopwatch is already paused.",
            )
            return
        self._accumulated += max(0.0, self._clock.now() - self._run_start)
        self._run_start = None

    def resume(self) -> None:
        """Start accumulating time again. Does nothing when already running."""
        if self._run_start is not None:
            handle_misuse(
                get_config().on_redundant_transition,
                "Stopwatch.resume() called but the stopwatch is already running.",
            )
            return
        self._run_start = self._clock.now()

    def seconds(self) -> float:
        """Total active time in seconds"""
        if self._run_start is None:
            return self._accumulated
        return self._accumulated + max(0.0, self._clock.now() - self._run_start)

    def elapsed(self) -> timedelta:
        return seconds_to_duration(self.seconds())

    def __enter__(self) -> "Stopwatch":
        if self.is_paused:
            self.resume()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        if self.is_running:
            self.pause()
        return False

    async def __aenter__(self) -> "Stopwatch":
        return self.__enter__()

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> bool:
        return self.__exit__(exc_type, exc_val, exc_tb)

    def __repr__(self) -> str:
        state = "running" if self.is_running else "paused"
        return f"Stopwatch({state}, {format_duration(self.seconds())})"
