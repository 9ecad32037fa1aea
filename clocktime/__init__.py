"""
clocktime - time-of-day values without dates or timezones.
"""

from .domain import (
    END_OF_DAY,
    START_OF_DAY,
    ClockTime,
    DailyWindow,
    InvalidTimeFormatError,
    UnreadableSourceError,
    ZoneResolver,
    duration_between,
)

__version__ = "0.1.0"

__all__ = [
    "ClockTime",
    "DailyWindow",
    "START_OF_DAY",
    "END_OF_DAY",
    "duration_between",
    "InvalidTimeFormatError",
    "UnreadableSourceError",
    "ZoneResolver",
    "__version__",
]
