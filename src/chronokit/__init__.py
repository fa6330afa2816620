from .clock import Clock, ManualClock, SystemClock
from .config import (
    ChronoConfig,
    ErrorHandling,
    configure,
    get_config,
    get_logger,
)
from .durations import Duration, duration_to_seconds, seconds_to_duration
from .reporting import (
    DefaultTimeConverter,
    TimeConverter,
    TimeUnit,
    format_duration,
)
from .timed_list import TimedList
from .timers import CountdownTimer, Elapsed, Stopwatch

__all__ = [
    "Elapsed",
    "CountdownTimer",
    "Stopwatch",
    "TimedList",
    "Clock",
    "SystemClock",
    "ManualClock",
    "ChronoConfig",
    "ErrorHandling",
    "Duration",
    "TimeUnit",
    "TimeConverter",
    "DefaultTimeConverter",
    "configure",
    "get_config",
    "get_logger",
    "format_duration",
    "seconds_to_duration",
    "duration_to_seconds",
]
