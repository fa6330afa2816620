import logging
import threading
from dataclasses import dataclass, fields
from enum import Enum


class ErrorHandling(Enum):
    WARN = "warn"
    IGNORE = "ignore"
    RAISE = "raise"


@dataclass
class ChronoConfig:
    """Global settings shared by every timer and timed list"""

    on_negative_duration: ErrorHandling = ErrorHandling.WARN
    on_redundant_transition: ErrorHandling = ErrorHandling.IGNORE
    warn_zero_ttl: bool = True
    time_unit: str = "milliseconds"
    precision: int = 2
    logger_name: str = "chronokit"


_config: ChronoConfig | None = None
_config_lock = threading.RLock()


def get_config() -> ChronoConfig:
    """
    Get the global chronokit configuration.

    Returns:
        ChronoConfig: The current global configuration
    """
    global _config
    if _config is None:
        with _config_lock:
            if _config is None:
                _config = ChronoConfig()
    return _config


def configure(**kwargs) -> None:
    """
    Configure the global chronokit settings.

    Args:
        **kwargs: Configuration options to update. Valid keys are:
            - on_negative_duration: ErrorHandling for negative totals and ttls
            - on_redundant_transition: ErrorHandling for pause-when-paused
              and resume-when-running
            - warn_zero_ttl: bool
            - time_unit: str ("seconds", "milliseconds", "microseconds", "nanoseconds")
            - precision: int
            - logger_name: str

    Raises:
        TypeError: If an unknown option is passed
    """
    global _config
    valid = {f.name for f in fields(ChronoConfig)}
    unknown = sorted(set(kwargs) - valid)
    if unknown:
        raise TypeError(f"Unknown configuration option(s): {', '.join(unknown)}")

    with _config_lock:
        current_config = get_config()
        _config = ChronoConfig(
            on_negative_duration=kwargs.get(
                "on_negative_duration", current_config.on_negative_duration
            ),
            on_redundant_transition=kwargs.get(
                "on_redundant_transition", current_config.on_redundant_transition
            ),
            warn_zero_ttl=kwargs.get("warn_zero_ttl", current_config.warn_zero_ttl),
            time_unit=kwargs.get("time_unit", current_config.time_unit),
            precision=kwargs.get("precision", current_config.precision),
            logger_name=kwargs.get("logger_name", current_config.logger_name),
        )


def get_logger() -> logging.Logger:
    """Logger named by the current configuration"""
    return logging.getLogger(get_config().logger_name)


def handle_misuse(policy: ErrorHandling, message: str) -> None:
    """Apply an ErrorHandling policy to a misuse message"""
    if policy == ErrorHandling.WARN:
        get_logger().warning(message)
    elif policy == ErrorHandling.RAISE:
        raise ValueError(message)
    # else: pass
