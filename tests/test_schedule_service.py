"""
Tests for the ScheduleService orchestration layer.
"""

from datetime import timedelta

import pendulum

from clocktime.domain.models import ClockTime, DailyWindow
from clocktime.domain.zones import FixedClock, ZoneResolver
from clocktime.services.schedule import ScheduleService


OFFICE = DailyWindow(ClockTime(9, 0, 0), ClockTime(17, 0, 0), name="office")
NIGHT = DailyWindow(ClockTime(22, 0, 0), ClockTime(6, 0, 0), name="night")


def _build_service(window: DailyWindow, *, hour: int, minute: int = 0, timezone: str = "Europe/Berlin") -> ScheduleService:
    clock = FixedClock(pendulum.datetime(2024, 11, 25, hour, minute, tz="Europe/Berlin"))
    return ScheduleService(window, timezone=timezone, clock=clock)


def test_open_during_window():
    """Inside the window the service reports open and the time left."""
    service = _build_service(OFFICE, hour=10, minute=30)

    assert service.current_time() == ClockTime(10, 30, 0)
    assert service.is_open()
    assert service.time_until_close() == timedelta(hours=6, minutes=30)
    assert service.time_until_open() is None


def test_closed_after_window():
    """After closing time the next opening is the following morning."""
    service = _build_service(OFFICE, hour=18)

    assert not service.is_open()
    assert service.time_until_close() is None
    assert service.time_until_open() == timedelta(hours=14, minutes=59, seconds=59)


def test_night_window_open_after_midnight():
    """A wrapping window is open in the early morning."""
    service = _build_service(NIGHT, hour=2)

    assert service.is_open()
    assert service.time_until_close() == timedelta(hours=4)


def test_todays_bounds_for_night_window():
    """Today's bounds end on the following day for a wrapping window."""
    service = _build_service(NIGHT, hour=12)

    start, end = service.todays_bounds()

    assert start == pendulum.datetime(2024, 11, 25, 22, 0, 0, tz="Europe/Berlin")
    assert end == pendulum.datetime(2024, 11, 26, 6, 0, 0, tz="Europe/Berlin")


def test_unknown_zone_uses_fallback():
    """The resolver's fallback zone is used for unknown names."""
    clock = FixedClock(pendulum.datetime(2024, 11, 25, 10, 0, tz="UTC"))
    service = ScheduleService(
        OFFICE,
        timezone="Mars/Olympus",
        resolver=ZoneResolver(fallback="Asia/Tokyo"),
        clock=clock,
    )

    assert service.zone_name == "Asia/Tokyo"
    assert service.current_time() == ClockTime(19, 0, 0)
    assert not service.is_open()


def test_sampled_time_is_used_instead_of_clock():
    """A time sampled once drives status and durations consistently."""
    service = _build_service(OFFICE, hour=16, minute=59)
    sampled = ClockTime(17, 0, 1)

    assert service.is_open()
    assert not service.is_open(sampled)
    assert service.time_until_close(sampled) is None
    assert service.time_until_open(sampled) == timedelta(hours=15, minutes=59, seconds=58)
    assert service.time_until_close(ClockTime(16, 0, 0)) == timedelta(hours=1)
