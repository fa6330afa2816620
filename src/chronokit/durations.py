"""Conversions between float seconds and ``datetime.timedelta``."""

import math
from datetime import timedelta
from numbers import Real

from .config import get_config, handle_misuse

Duration = float | timedelta


_MAX_SECONDS = timedelta.max.total_seconds()


def seconds_to_duration(seconds: float) -> timedelta:
    """
    Convert a floating-point time value in seconds to a timedelta.

    Values past the range of timedelta saturate at ``timedelta.max``.
    """
    if seconds >= _MAX_SECONDS:
        return timedelta.max
    return timedelta(seconds=seconds)


def duration_to_seconds(duration: timedelta) -> float:
    """Convert a timedelta to floating-point seconds"""
    return duration.total_seconds()


def to_seconds(value: Duration, *, what: str = "duration") -> float:
    """
    Normalize a caller-supplied duration to non-negative float seconds.

    Args:
        value: Seconds as a real number, or a timedelta
        what: Name used in warning and error messages

    Returns:
        The duration in seconds, clamped at zero

    Raises:
        TypeError: If value is neither a real number nor a timedelta
        ValueError: If value is negative and the config says RAISE,
            or if value is NaN or infinite
    """
    if isinstance(value, timedelta):
        seconds = duration_to_seconds(value)
    elif isinstance(value, Real) and not isinstance(value, bool):
        seconds = float(value)
    else:
        raise TypeError(f"{what} must be a number of seconds or a timedelta, got {value!r}")

    if not math.isfinite(seconds):
        raise ValueError(f"{what} must be finite, got {seconds}")

    if seconds < 0:
        handle_misuse(
            get_config().on_negative_duration,
            f"Negative {what} ({seconds}s), treating it as zero.",
        )
        return 0.0
    return seconds
