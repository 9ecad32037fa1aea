"""
Domain layer - clock time values and the rules for comparing them.
"""

from .exceptions import ClockTimeError, InvalidTimeFormatError, UnreadableSourceError
from .models import END_OF_DAY, START_OF_DAY, ClockTime, DailyWindow, duration_between
from .zones import DEFAULT_RESOLVER, ClockSource, FixedClock, SystemClock, ZoneResolver

__all__ = [
    "ClockTime",
    "DailyWindow",
    "START_OF_DAY",
    "END_OF_DAY",
    "duration_between",
    "ClockTimeError",
    "InvalidTimeFormatError",
    "UnreadableSourceError",
    "ZoneResolver",
    "DEFAULT_RESOLVER",
    "ClockSource",
    "SystemClock",
    "FixedClock",
]
