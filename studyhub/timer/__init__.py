"""Timer package."""

from .session import (
    TimerSession,
    Phase,
    PRESETS,
    WORK_MINUTES_RANGE,
    BREAK_MINUTES_RANGE,
    DEFAULT_WORK_MINUTES,
    DEFAULT_BREAK_MINUTES,
    clamp_minutes,
    format_time,
)
from .engine import TimerEngine

__all__ = [
    "TimerSession",
    "TimerEngine",
    "Phase",
    "PRESETS",
    "WORK_MINUTES_RANGE",
    "BREAK_MINUTES_RANGE",
    "DEFAULT_WORK_MINUTES",
    "DEFAULT_BREAK_MINUTES",
    "clamp_minutes",
    "format_time",
]
