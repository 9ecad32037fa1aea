"""
Application service for evaluating a daily window against the current time.

The service resolves its timezone once and reads "now" from an injected
``ClockSource``, so the same window can be checked against the system clock
or against a fixed instant in tests.
"""

from __future__ import annotations

from pendulum import DateTime, Duration

from ..domain.models import ClockTime, DailyWindow, duration_between
from ..domain.zones import DEFAULT_RESOLVER, SYSTEM_CLOCK, ClockSource, ZoneResolver


class ScheduleService:
    """
    Answers "is it open now" style questions for a DailyWindow.
    """

    def __init__(
        self,
        window: DailyWindow,
        *,
        timezone: str = "UTC",
        resolver: ZoneResolver | None = None,
        clock: ClockSource | None = None,
    ) -> None:
        self._window = window
        self._resolver = resolver or DEFAULT_RESOLVER
        self._clock = clock or SYSTEM_CLOCK
        self._zone = self._resolver.resolve(timezone)

    @property
    def window(self) -> DailyWindow:
        return self._window

    @property
    def zone_name(self) -> str:
        """Name of the zone actually in use, after any fallback."""
        return self._zone.name

    def current_time(self) -> ClockTime:
        return ClockTime.now(self._zone.name, resolver=self._resolver, clock=self._clock)

    def is_open(self, at: ClockTime | None = None) -> bool:
        return self._window.contains(at if at is not None else self.current_time())

    def time_until_close(self, at: ClockTime | None = None) -> Duration | None:
        """
        Time left in the window, or None when it is closed.

        ``at`` evaluates an already sampled time instead of reading the clock.
        """
        now = at if at is not None else self.current_time()
        if not self._window.contains(now):
            return None
        return duration_between(now, self._window.end)

    def time_until_open(self, at: ClockTime | None = None) -> Duration | None:
        """Time until the window next opens, or None when it is open."""
        now = at if at is not None else self.current_time()
        if self._window.contains(now):
            return None
        return duration_between(now, self._window.start)

    def todays_bounds(self) -> tuple[DateTime, DateTime]:
        """Today's start and end of the window as full timestamps."""
        today = self._clock.now(self._zone).date()
        return self._window.on_date(today, self._zone)
