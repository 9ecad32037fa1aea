"""
Domain models for clock times and daily windows.

A ``ClockTime`` only knows hours, minutes and seconds. It has no date and no
timezone; those are supplied when a clock time is anchored to a day via
``ClockTime.today`` or ``ClockTime.on_date``.
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Any

import pendulum
from pendulum import DateTime, Duration
from pydantic import GetCoreSchemaHandler
from pydantic_core import core_schema

from .exceptions import InvalidTimeFormatError, UnreadableSourceError
from .zones import DEFAULT_RESOLVER, SYSTEM_CLOCK, ClockSource, Zone, ZoneResolver


_FIELD_NAMES = ("hours", "minutes", "seconds")
_INTEGER = re.compile(r"[+-]?[0-9]+")

# Arbitrary fixed date used to borrow date-time arithmetic for add/subtract.
_ANCHOR = pendulum.datetime(2000, 1, 1, tz="UTC")
_SECONDS_PER_DAY = 86400
_ONE_DAY = timedelta(days=1)


def _to_int(field: str) -> int:
    # int() alone would also accept whitespace, underscores and non-ASCII digits.
    if not _INTEGER.fullmatch(field):
        raise ValueError(f"invalid literal for int() with base 10: {field!r}")
    return int(field)


def _parse_field(name: str, field: str, source: str) -> int:
    try:
        return _to_int(field)
    except ValueError as exc:
        raise InvalidTimeFormatError(f"invalid {name} in {source!r}: {exc}") from exc


def _digit_string(n: int) -> str:
    # Only 0-9 are padded; anything else is rendered as a plain integer.
    if 0 <= n <= 9:
        return f"0{n}"
    return str(n)


@dataclass(frozen=True)
class ClockTime:
    """
    A time of day made of hours, minutes and seconds.

    The fields are stored exactly as given. Nothing is clamped or validated,
    so ``ClockTime(25, 61, 99)`` is a legal value; ordering is defined by
    ``total_seconds`` which treats the triple as ``h*3600 + m*60 + s``.
    ``add`` and ``subtract`` always return canonical values.
    """
    hours: int
    minutes: int
    seconds: int

    # ------------------------------------------------------------------
    # Construction and formatting
    # ------------------------------------------------------------------

    @classmethod
    def parse(cls, value: str) -> "ClockTime":
        """
        Parse a string of the form ``hh:mm:ss``.

        Each field must be a base-10 integer, optionally signed. Ranges are
        not checked.

        Raises:
            InvalidTimeFormatError: If the string does not have exactly three
                colon-separated integer fields.
        """
        fields = value.split(":")
        if len(fields) != 3:
            raise InvalidTimeFormatError(f"string not in form hh:mm:ss: {value!r}")

        hours, minutes, seconds = (
            _parse_field(name, field, value)
            for name, field in zip(_FIELD_NAMES, fields)
        )
        return cls(hours, minutes, seconds)

    def format(self) -> str:
        """Return the ``HH:MM:SS`` representation."""
        return ":".join(
            _digit_string(n) for n in (self.hours, self.minutes, self.seconds)
        )

    def __str__(self) -> str:
        return self.format()

    def hours_minutes_seconds(self) -> tuple[int, int, int]:
        return self.hours, self.minutes, self.seconds

    # ------------------------------------------------------------------
    # Serialization hooks
    # ------------------------------------------------------------------

    def to_json(self) -> str:
        """Return the JSON encoding: the formatted string in quotes."""
        return json.dumps(self.format())

    @classmethod
    def from_json(cls, data: str | bytes) -> "ClockTime":
        """Parse a JSON string value such as ``'"10:11:12"'``."""
        if isinstance(data, (bytes, bytearray)):
            data = bytes(data).decode("utf-8", errors="replace")
        return cls.parse(data.strip().strip('"'))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        from_str_schema = core_schema.no_info_after_validator_function(
            cls.parse, core_schema.str_schema()
        )
        return core_schema.json_or_python_schema(
            json_schema=from_str_schema,
            python_schema=core_schema.union_schema(
                [core_schema.is_instance_schema(cls), from_str_schema]
            ),
            serialization=core_schema.plain_serializer_function_ser_schema(
                cls.format, when_used="json"
            ),
        )

    # ------------------------------------------------------------------
    # Persistence hooks
    # ------------------------------------------------------------------

    def to_db_value(self) -> str:
        """Value written to storage."""
        return self.format()

    @classmethod
    def from_db_value(cls, src: Any) -> "ClockTime | None":
        """
        Read a stored value.

        Storage hands back the text form as bytes. ``None`` (SQL NULL) reads
        as ``None``.

        Raises:
            UnreadableSourceError: If ``src`` is neither ``None`` nor bytes.
            InvalidTimeFormatError: If the bytes are not ``hh:mm:ss``.
        """
        if src is None:
            return None
        if not isinstance(src, (bytes, bytearray, memoryview)):
            raise UnreadableSourceError(
                f"failed to read a clock time from {type(src).__name__} value"
            )
        return cls.parse(bytes(src).decode("utf-8", errors="replace"))

    def scan(self, src: Any) -> "ClockTime":
        """
        Parse-and-replace entry point for storage reads.

        Returns the value read from ``src``, or ``self`` unchanged when
        ``src`` is ``None``.
        """
        value = ClockTime.from_db_value(src)
        return self if value is None else value

    # ------------------------------------------------------------------
    # Sampling the clock
    # ------------------------------------------------------------------

    @classmethod
    def now(
        cls,
        timezone: str,
        *,
        resolver: ZoneResolver | None = None,
        clock: ClockSource | None = None,
    ) -> "ClockTime":
        """
        Current clock time in ``timezone``.

        Unknown zone names fall back to the resolver's fallback zone (UTC
        for the default resolver) instead of raising.
        """
        zone = (resolver or DEFAULT_RESOLVER).resolve(timezone)
        moment = (clock or SYSTEM_CLOCK).now(zone)
        return cls(moment.hour, moment.minute, moment.second)

    def today(
        self,
        timezone: str,
        *,
        resolver: ZoneResolver | None = None,
        clock: ClockSource | None = None,
    ) -> DateTime:
        """
        Anchor this clock time to the current date in ``timezone``.

        Uses the same fallback rule as ``now``.
        """
        zone = (resolver or DEFAULT_RESOLVER).resolve(timezone)
        current = (clock or SYSTEM_CLOCK).now(zone)
        return self.on_date(current.date(), zone)

    def on_date(self, day: date, tz: Zone) -> DateTime:
        """
        Combine this clock time with ``day`` in zone ``tz``.

        Out-of-range fields roll over on the wall clock, so
        ``ClockTime(25, 0, 0)`` lands at 01:00 on the following day.
        """
        wall = pendulum.naive(day.year, day.month, day.day).add(
            seconds=self.total_seconds()
        )
        return pendulum.datetime(
            wall.year, wall.month, wall.day,
            wall.hour, wall.minute, wall.second,
            tz=tz,
        )

    # ------------------------------------------------------------------
    # Arithmetic and comparison
    # ------------------------------------------------------------------

    def _date_time(self) -> DateTime:
        # Whole days are dropped so huge fields stay inside the date range.
        return _ANCHOR.add(seconds=self.total_seconds() % _SECONDS_PER_DAY)

    def add(self, duration: timedelta) -> "ClockTime":
        """Move forward by ``duration``, wrapping around midnight."""
        # Plain timedelta floor-mod; keeps sub-second truncation identical.
        offset = timedelta(
            days=duration.days,
            seconds=duration.seconds,
            microseconds=duration.microseconds,
        ) % _ONE_DAY
        moment = self._date_time() + offset
        return ClockTime(moment.hour, moment.minute, moment.second)

    def subtract(self, duration: timedelta) -> "ClockTime":
        """Move backward by ``duration``, wrapping around midnight."""
        return self.add(-duration)

    def __add__(self, other: Any) -> "ClockTime":
        if isinstance(other, timedelta):
            return self.add(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Any) -> "ClockTime":
        if isinstance(other, timedelta):
            return self.subtract(other)
        return NotImplemented

    def total_seconds(self) -> int:
        """Seconds into the day: ``hours*3600 + minutes*60 + seconds``."""
        return self.hours * 3600 + self.minutes * 60 + self.seconds

    def after(self, other: "ClockTime") -> bool:
        return self.total_seconds() > other.total_seconds()

    def before(self, other: "ClockTime") -> bool:
        """
        Negation of ``after``.

        Equal times count as before each other: ``t.before(t)`` is True.
        """
        return not self.after(other)

    def within(self, start: "ClockTime", end: "ClockTime") -> bool:
        """
        Check whether this time falls between ``start`` and ``end``.

        If ``start`` is after ``end`` the range wraps past midnight and
        ``end`` refers to the following day.
        """
        if start.after(end):
            return (self.after(START_OF_DAY) and self.before(end)) or (
                self.after(start) and self.before(END_OF_DAY)
            )

        return self.after(start) and self.before(end)


START_OF_DAY = ClockTime(0, 0, 0)
END_OF_DAY = ClockTime(23, 59, 59)


def duration_between(start: ClockTime, end: ClockTime) -> Duration:
    """
    Duration from ``start`` to ``end``.

    If ``start`` is after ``end``, ``end`` is taken to be on the following
    day. The wrapped case counts up to END_OF_DAY (23:59:59), so it comes out
    one second shorter than a true rollover at midnight.
    """
    if start.after(end):
        return pendulum.duration(
            seconds=END_OF_DAY.total_seconds() - start.total_seconds() + end.total_seconds()
        )

    return pendulum.duration(seconds=end.total_seconds() - start.total_seconds())


@dataclass(frozen=True)
class DailyWindow:
    """
    A recurring daily window such as business hours.

    The window may wrap past midnight (e.g. 22:00:00 - 06:00:00).
    """
    start: ClockTime
    end: ClockTime
    name: str = ""

    def wraps(self) -> bool:
        """True if the window runs past midnight."""
        return self.start.after(self.end)

    def contains(self, t: ClockTime) -> bool:
        return t.within(self.start, self.end)

    def length(self) -> Duration:
        return duration_between(self.start, self.end)

    def on_date(self, day: date, tz: Zone) -> tuple[DateTime, DateTime]:
        """
        Anchor the window to ``day``.

        For a wrapping window the end falls on the following day.
        """
        end_day = day + timedelta(days=1) if self.wraps() else day
        return self.start.on_date(day, tz), self.end.on_date(end_day, tz)

    def __str__(self) -> str:
        label = f"{self.name}: " if self.name else ""
        return f"{label}{self.start} - {self.end}"
