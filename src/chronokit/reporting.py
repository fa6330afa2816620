"""Human-readable duration formatting for chronokit."""

from enum import Enum
from typing import Protocol

from .config import get_config


class TimeUnit(Enum):
    """Supported time units for reporting"""

    SECONDS = "seconds"
    MILLISECONDS = "milliseconds"
    MICROSECONDS = "microseconds"
    NANOSECONDS = "nanoseconds"


class TimeConverter(Protocol):
    """Protocol for time unit conversion"""

    def convert(self, duration: float, unit: TimeUnit) -> float: ...
    def get_unit_suffix(self, unit: TimeUnit) -> str: ...


class DefaultTimeConverter:
    """Default implementation of time unit conversion"""

    _FACTORS = {
        TimeUnit.SECONDS: 1,
        TimeUnit.MILLISECONDS: 1_000,
        TimeUnit.MICROSECONDS: 1_000_000,
        TimeUnit.NANOSECONDS: 1_000_000_000,
    }
    _SUFFIXES = {
        TimeUnit.SECONDS: "s",
        TimeUnit.MILLISECONDS: "ms",
        TimeUnit.MICROSECONDS: "μs",
        TimeUnit.NANOSECONDS: "ns",
    }

    def convert(self, duration: float, unit: TimeUnit) -> float:
        """Convert duration in seconds to the specified time unit"""
        return duration * self._FACTORS.get(unit, 1_000)  # default to milliseconds

    def get_unit_suffix(self, unit: TimeUnit) -> str:
        """Get the suffix string for the time unit"""
        return self._SUFFIXES.get(unit, "ms")


def format_duration(
    seconds: float,
    unit: TimeUnit | str | None = None,
    precision: int | None = None,
    converter: TimeConverter | None = None,
) -> str:
    """
    Format a duration for display.

    Args:
        seconds: Duration in seconds
        unit: Target unit. Defaults to the configured time_unit.
        precision: Decimal places. Defaults to the configured precision.
        converter: Unit converter. Defaults to DefaultTimeConverter.

    Returns:
        e.g. "12.50ms"
    """
    config = get_config()
    time_unit = TimeUnit(unit if unit is not None else config.time_unit)
    places = config.precision if precision is None else precision
    converter = converter or DefaultTimeConverter()

    value = converter.convert(seconds, time_unit)
    return f"{value:.{places}f}{converter.get_unit_suffix(time_unit)}"
